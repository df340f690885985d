# services/neurotransmitter_engine/results_generator.py
# Composes the structured interpretation (ordered sections of plain statements)
# from the classification results and the static profile table.

import logging
from typing import Dict, List, Optional

from .definitions import CATEGORIES
from .models import (
    InterpretationThresholds,
    NeurotransmitterProfile,
    DominanceResult,
    DeficiencyEntry,
    GapEntry,
    Classification,
    Completeness,
    Statement,
    InterpretationSection,
    InteractionNote,
    InterpretationResult,
)
from .profiles import (
    BALANCED_PROFILE_TEXT,
    NO_DEFICIENCY_TEXT,
    STABLE_PATTERN_TEXT,
    GENERAL_PRESCRIBING_CONSIDERATIONS,
    CLINICAL_DISCLAIMER,
)

logger = logging.getLogger(__name__)

SECTION_HEADINGS = {
    "summary": "Clinical Summary",
    "dominant-nature": "Dominant Neurotransmitter Nature",
    "deficiency-patterns": "Neurotransmitter Deficiency Patterns",
    "pattern-analysis": "Pattern Analysis",
    "clinical-considerations": "Clinical Considerations",
    "prescribing-implications": "Prescribing Implications",
    "disclaimer": "Clinical Disclaimer",
}

SECTION_ORDER = list(SECTION_HEADINGS.keys())

DOMINANCE_WORDING = {
    "high": "classically dominant",
    "moderate": "moderately dominant",
    "mild": "mildly dominant",
}

DEFICIENCY_WORDING = {
    "high": "significant",
    "moderate": "moderate",
    "mild": "mild",
}

# --- Helper Functions ---

def _text(text: str, group: Optional[str] = None, **data) -> Statement:
    return Statement(kind="text", text=text, group=group, data=data)

def _label(text: str, group: Optional[str] = None, **data) -> Statement:
    return Statement(kind="label", text=text, group=group, data=data)

def _items(lines: List[str], group: Optional[str] = None) -> List[Statement]:
    return [Statement(kind="item", text=line, group=group) for line in lines]

def _name(profile_table: Dict[str, NeurotransmitterProfile], category: str) -> str:
    return profile_table[category].name

# --- Section Builders ---

def _summary_section(
    classification: Classification,
    profile_table: Dict[str, NeurotransmitterProfile],
    completeness: Optional[Completeness],
) -> List[Statement]:
    statements = [_text(
        "This assessment provides correlational data regarding neurotransmitter patterns that may inform "
        "clinical decision-making. The results suggest the following neurochemical profile:"
    )]

    dominance = classification.dominance
    if dominance.is_reportable:
        wording = DOMINANCE_WORDING[dominance.level]
        statements.append(Statement(
            kind="item",
            text=f"Dominant nature: {wording} {_name(profile_table, dominance.category)} (score: {dominance.score})",
            data={"category": dominance.category, "score": dominance.score, "level": dominance.level},
        ))
    else:
        statements.append(Statement(kind="item", text="Dominant nature: no clearly dominant pattern identified"))

    primary = classification.primary_deficiency
    if primary:
        wording = DEFICIENCY_WORDING[primary.level]
        statements.append(Statement(
            kind="item",
            text=f"Primary deficiency: {wording} {_name(profile_table, primary.category)} deficiency (score: {primary.score})",
            data={"category": primary.category, "score": primary.score, "level": primary.level},
        ))
    else:
        statements.append(Statement(kind="item", text="Primary deficiency: no significant deficiency identified"))

    gap = classification.most_significant_gap
    if gap:
        statements.append(Statement(
            kind="item",
            text=f"Most significant pattern: {_name(profile_table, gap.category)} gap of "
                 f"{gap.gap_percentage:+d}% ({gap.level})",
            data={"category": gap.category, "gap_percentage": gap.gap_percentage, "level": gap.level},
        ))

    if completeness and not completeness.is_complete:
        answered = sum(p.answered for p in completeness.passes.values())
        total = sum(p.total for p in completeness.passes.values())
        statements.append(_text(
            f"Note: only {answered} of {total} items were answered. Unanswered items count as not "
            "endorsed, so scores may understate the actual pattern.",
            group="incomplete",
            answered=answered,
            total=total,
        ))
    return statements


def _dominant_nature_section(
    dominance: DominanceResult,
    profile_table: Dict[str, NeurotransmitterProfile],
    thresholds: InterpretationThresholds,
) -> List[Statement]:
    if dominance.category is None:
        return [_text(BALANCED_PROFILE_TEXT)]

    if not dominance.is_reportable:
        return [
            _text(BALANCED_PROFILE_TEXT),
            _text(
                f"The highest dominance score was {dominance.score} "
                f"({_name(profile_table, dominance.category)}), below the reporting threshold of "
                f"{thresholds.dominance.mild}.",
                category=dominance.category,
                score=dominance.score,
            ),
        ]

    profile = profile_table[dominance.category]
    statements = [_text(
        f"The results indicate a {DOMINANCE_WORDING[dominance.level]} {profile.name} nature "
        f"(score: {dominance.score}). {profile.name} is {profile.function.lower()}.",
        category=dominance.category,
        score=dominance.score,
        level=dominance.level,
    )]

    if dominance.tied_categories:
        tied_names = ", ".join(_name(profile_table, c) for c in dominance.tied_categories)
        statements.append(_text(
            f"{tied_names} scored equally ({dominance.score}); {profile.name} is reported first "
            "by assessment order.",
            tied_categories=list(dominance.tied_categories),
        ))

    if dominance.secondary_category:
        secondary = profile_table[dominance.secondary_category]
        statements.append(_text(
            f"There is also a notable {secondary.name} influence (score: {dominance.secondary_score}), "
            f"suggesting a mixed {profile.name}-{secondary.name} profile.",
            category=dominance.secondary_category,
            score=dominance.secondary_score,
        ))

    statements.append(_text(f"Individuals with dominant {profile.name} patterns often exhibit these characteristics:"))
    statements.extend(_items(profile.dominant_traits))
    return statements


def _deficiency_section(
    deficiencies: List[DeficiencyEntry],
    profile_table: Dict[str, NeurotransmitterProfile],
) -> List[Statement]:
    if not deficiencies:
        return [_text(NO_DEFICIENCY_TEXT)]

    primary = deficiencies[0]
    profile = profile_table[primary.category]
    statements = [_text(
        f"The results indicate a {DEFICIENCY_WORDING[primary.level]} {profile.name} deficiency pattern "
        f"(score: {primary.score}). This may manifest as:",
        category=primary.category,
        score=primary.score,
        level=primary.level,
    )]
    statements.extend(_items(profile.deficiency_traits, group="primary"))

    if len(deficiencies) > 1:
        statements.append(_text("Additional deficiency patterns were identified:"))
        for entry in deficiencies[1:]:
            statements.append(Statement(
                kind="item",
                text=f"{DEFICIENCY_WORDING[entry.level].capitalize()} {_name(profile_table, entry.category)} "
                     f"deficiency (score: {entry.score})",
                group="secondary",
                data={"category": entry.category, "score": entry.score, "level": entry.level},
            ))
        statements.append(_text(
            "Multiple deficiency patterns may suggest more complex neurochemical interactions that could "
            "influence clinical presentation and treatment response."
        ))
    return statements


def _pattern_analysis_section(
    gaps: List[GapEntry],
    profile_table: Dict[str, NeurotransmitterProfile],
    thresholds: InterpretationThresholds,
) -> List[Statement]:
    statements = []
    significant = gaps[0] if gaps else None

    if significant and abs(significant.gap_percentage) >= thresholds.gap.pattern_significance:
        name = _name(profile_table, significant.category)
        data = {
            "category": significant.category,
            "gap_percentage": significant.gap_percentage,
            "level": significant.level,
        }
        if significant.gap_percentage > 0:
            statements.append(_text(
                f"The most notable pattern is a significant imbalance in the {name} system, where the "
                f"deficiency score ({significant.deficiency_score}) is proportionally much higher than the "
                f"dominance score ({significant.dominance_score}). This suggests a potential acquired or "
                "situational deficiency rather than a lifelong pattern.",
                **data,
            ))
            statements.append(_text(
                "This type of imbalance often indicates a neurochemical system under stress or depletion, "
                "which may be more responsive to targeted interventions."
            ))
        else:
            statements.append(_text(
                f"The most notable pattern is a significant strength in the {name} system, where the "
                f"dominance score ({significant.dominance_score}) is proportionally much higher than the "
                f"deficiency score ({significant.deficiency_score}). This suggests a robust and stable "
                f"{name} system that likely represents a lifelong pattern.",
                **data,
            ))
            statements.append(_text(
                "This type of balance often indicates a neurochemical strength that can be leveraged in "
                "treatment planning and may provide resilience against certain types of dysfunction."
            ))
    else:
        statements.append(_text(STABLE_PATTERN_TEXT))

    statements.append(_text("The overall pattern suggests a neurochemical profile with the following characteristics:"))
    by_category = {gap.category: gap for gap in gaps}
    for category in CATEGORIES:
        gap = by_category[category]
        statements.append(Statement(
            kind="item",
            text=f"{_name(profile_table, category)} system: Dominance score {gap.dominance_score}, "
                 f"Deficiency score {gap.deficiency_score}",
            data={
                "category": category,
                "dominance_score": gap.dominance_score,
                "deficiency_score": gap.deficiency_score,
                "gap_percentage": gap.gap_percentage,
            },
        ))
    return statements


def _interaction(dominance: DominanceResult, deficiencies: List[DeficiencyEntry]) -> Optional[InteractionNote]:
    if not dominance.is_reportable or not deficiencies:
        return None
    if dominance.category == deficiencies[0].category:
        return None
    return InteractionNote(dominant_category=dominance.category, deficient_category=deficiencies[0].category)


def _clinical_considerations_section(
    dominance: DominanceResult,
    deficiencies: List[DeficiencyEntry],
    interaction: Optional[InteractionNote],
    profile_table: Dict[str, NeurotransmitterProfile],
) -> List[Statement]:
    statements = []
    if dominance.is_reportable:
        profile = profile_table[dominance.category]
        statements.append(_label(f"Dominant {profile.name} Nature:", group="dominant", category=dominance.category))
        statements.extend(_items(profile.clinical_considerations, group="dominant"))

    if deficiencies:
        profile = profile_table[deficiencies[0].category]
        statements.append(_label(f"{profile.name} Deficiency Pattern:", group="deficiency", category=deficiencies[0].category))
        statements.extend(_items(profile.clinical_considerations, group="deficiency"))

    if interaction:
        dominant_name = _name(profile_table, interaction.dominant_category)
        deficient_name = _name(profile_table, interaction.deficient_category)
        group = "system-interaction"
        statements.append(_label("System Interaction Considerations:", group=group))
        statements.append(_text(
            f"The combination of dominant {dominant_name} nature with {deficient_name} deficiency suggests "
            "potential interactions between these systems that may influence clinical presentation and "
            "treatment response.",
            group=group,
            dominant_category=interaction.dominant_category,
            deficient_category=interaction.deficient_category,
        ))
        statements.extend(_items([
            f"Consider how {dominant_name}-{deficient_name} interactions may affect cognitive function, "
            "mood regulation, and behavioral patterns",
            "Assess for compensatory mechanisms that may mask or exacerbate symptoms",
            "Monitor for potential shifts in symptom presentation as treatment progresses",
        ], group=group))

    if not statements:
        statements.append(_text(
            "No system-specific clinical considerations apply: neither a dominant nature nor a deficiency "
            "pattern reached its reporting threshold."
        ))
    return statements


def _prescribing_section(
    dominance: DominanceResult,
    deficiencies: List[DeficiencyEntry],
    profile_table: Dict[str, NeurotransmitterProfile],
) -> List[Statement]:
    statements = [_text(
        "The following considerations may inform prescribing decisions, though they should be integrated "
        "with comprehensive clinical assessment:"
    )]
    if dominance.is_reportable:
        profile = profile_table[dominance.category]
        statements.append(_label(f"Dominant {profile.name} Nature:", group="dominant", category=dominance.category))
        statements.extend(_items(profile.prescribing_implications, group="dominant"))

    if deficiencies:
        profile = profile_table[deficiencies[0].category]
        statements.append(_label(f"{profile.name} Deficiency Pattern:", group="deficiency", category=deficiencies[0].category))
        statements.extend(_items(profile.prescribing_implications, group="deficiency"))

    statements.append(_label("General Considerations:", group="general"))
    statements.extend(_items(GENERAL_PRESCRIBING_CONSIDERATIONS, group="general"))
    return statements

# --- Main Composition Function ---

def compose_interpretation(
    dominance: DominanceResult,
    deficiencies: List[DeficiencyEntry],
    gaps: List[GapEntry],
    profile_table: Dict[str, NeurotransmitterProfile],
    thresholds: Optional[InterpretationThresholds] = None,
    completeness: Optional[Completeness] = None,
) -> InterpretationResult:
    """
    Assembles the seven interpretation sections.

    Args:
        dominance: Output of classifier.classify_dominance.
        deficiencies: Output of classifier.classify_deficiencies (highest score first).
        gaps: Output of classifier.classify_gaps (largest absolute gap first).
        profile_table: Validated profile text keyed by category.
        thresholds: Thresholds used for the pattern-analysis cut-off.
        completeness: Optional answered/total metadata surfaced to the renderer.

    Returns:
        An InterpretationResult with every section present and non-empty.
    """
    thresholds = thresholds or InterpretationThresholds()
    classification = Classification(dominance=dominance, deficiencies=deficiencies, gaps=gaps)
    interaction = _interaction(dominance, deficiencies)

    statements_by_section = {
        "summary": _summary_section(classification, profile_table, completeness),
        "dominant-nature": _dominant_nature_section(dominance, profile_table, thresholds),
        "deficiency-patterns": _deficiency_section(deficiencies, profile_table),
        "pattern-analysis": _pattern_analysis_section(gaps, profile_table, thresholds),
        "clinical-considerations": _clinical_considerations_section(dominance, deficiencies, interaction, profile_table),
        "prescribing-implications": _prescribing_section(dominance, deficiencies, profile_table),
        "disclaimer": [_text(CLINICAL_DISCLAIMER)],
    }

    sections = [
        InterpretationSection(id=section_id, heading=SECTION_HEADINGS[section_id], statements=statements_by_section[section_id])
        for section_id in SECTION_ORDER
    ]
    logger.debug(f"Composed interpretation with {sum(len(s.statements) for s in sections)} statements.")
    return InterpretationResult(
        sections=sections,
        classification=classification,
        interaction=interaction,
        completeness=completeness,
    )
