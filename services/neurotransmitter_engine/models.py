from pydantic import BaseModel, Field
from typing import List, Dict, Any, Literal, Optional

PassId = Literal["dominance", "deficiency"]
DominanceLevel = Literal["none", "mild", "moderate", "high"]
DeficiencyLevel = Literal["mild", "moderate", "high"]
GapLevel = Literal["very high", "high", "moderate", "balanced", "slightly low", "low", "very low"]

class DominanceThresholds(BaseModel):
    high: int = 35
    moderate: int = 25
    mild: int = 15

class DeficiencyThresholds(BaseModel):
    high: int = 20
    moderate: int = 15
    mild: int = 10

class GapThresholds(BaseModel):
    very_high: int = 30
    high: int = 15
    moderate: int = 5
    secondary_margin: int = 10 # Max dominance distance for a mixed profile
    pattern_significance: int = 15 # |gap| at which pattern analysis calls out an imbalance

class InterpretationThresholds(BaseModel):
    dominance: DominanceThresholds = Field(default_factory=DominanceThresholds)
    deficiency: DeficiencyThresholds = Field(default_factory=DeficiencyThresholds)
    gap: GapThresholds = Field(default_factory=GapThresholds)

class NeurotransmitterProfile(BaseModel):
    name: str
    function: str
    dominant_traits: List[str]
    deficiency_traits: List[str]
    clinical_considerations: List[str]
    prescribing_implications: List[str]

class ScoreTable(BaseModel):
    dominance: Dict[str, int]
    deficiency: Dict[str, int]
    max_scores: Dict[str, Dict[str, int]] # {pass_id: {category: max}}

    def get(self, pass_id: str, category: str) -> int:
        return getattr(self, pass_id)[category]

class DominanceResult(BaseModel):
    category: Optional[str] = None # None when every dominance score is zero
    score: int = 0
    level: DominanceLevel = "none"
    secondary_category: Optional[str] = None
    secondary_score: Optional[int] = None
    tied_categories: List[str] = Field(default_factory=list)

    @property
    def is_reportable(self) -> bool:
        return self.category is not None and self.level != "none"

class DeficiencyEntry(BaseModel):
    category: str
    score: int
    level: DeficiencyLevel

class GapEntry(BaseModel):
    category: str
    dominance_score: int
    deficiency_score: int
    gap_percentage: int
    level: GapLevel

class Classification(BaseModel):
    dominance: DominanceResult
    deficiencies: List[DeficiencyEntry]
    gaps: List[GapEntry]

    @property
    def primary_deficiency(self) -> Optional[DeficiencyEntry]:
        return self.deficiencies[0] if self.deficiencies else None

    @property
    def most_significant_gap(self) -> Optional[GapEntry]:
        return self.gaps[0] if self.gaps else None

class PassCompleteness(BaseModel):
    answered: int
    total: int

class Completeness(BaseModel):
    is_complete: bool
    passes: Dict[str, PassCompleteness]

class Statement(BaseModel):
    kind: Literal["text", "label", "item"] = "text"
    text: str
    group: Optional[str] = None # Groups related statements, e.g. "dominant" or "system-interaction"
    data: Dict[str, Any] = Field(default_factory=dict)

class InterpretationSection(BaseModel):
    id: str
    heading: str
    statements: List[Statement]

class InteractionNote(BaseModel):
    dominant_category: str
    deficient_category: str

class InterpretationResult(BaseModel):
    sections: List[InterpretationSection]
    classification: Classification
    interaction: Optional[InteractionNote] = None
    completeness: Optional[Completeness] = None

    def get_section(self, section_id: str) -> InterpretationSection:
        for section in self.sections:
            if section.id == section_id:
                return section
        raise KeyError(section_id)

class ChartRow(BaseModel):
    category: str
    label: str
    dominance_score: int
    deficiency_score: int
    gap_percentage: int
    dominance_band: DominanceLevel
    deficiency_band: Literal["none", "mild", "moderate", "high"]
    gap_band: GapLevel
    dominance_tooltip: str
    deficiency_tooltip: str
    gap_tooltip: str

class AssessmentResults(BaseModel):
    scores: ScoreTable
    classification: Classification
    interpretation: InterpretationResult
    completeness: Completeness
    chart: List[ChartRow]

# Custom Error Classes
class InvalidItemReference(ValueError):
    """Raised when a response addresses an item outside the content table."""
    pass

class MalformedSnapshot(ValueError):
    """Raised when a persisted response snapshot does not match the expected shape."""
    pass

class ProfileTableError(ValueError):
    """Raised when the profile table does not cover every category."""
    pass
