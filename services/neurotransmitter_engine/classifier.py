# services/neurotransmitter_engine/classifier.py
# Applies the interpretation thresholds to category scores: dominance,
# ranked deficiencies and normalized dominance/deficiency gaps.

import logging
import math
from fractions import Fraction
from typing import Dict, List, Optional

from .definitions import CATEGORIES
from .models import (
    InterpretationThresholds,
    DominanceThresholds,
    DeficiencyThresholds,
    GapThresholds,
    ScoreTable,
    DominanceResult,
    DeficiencyEntry,
    GapEntry,
    Classification,
)

logger = logging.getLogger(__name__)


def _check_range(scores: Dict[str, int], maxima: Dict[str, int], pass_id: str) -> None:
    for category in CATEGORIES:
        score = scores[category]
        if not 0 <= score <= maxima[category]:
            raise ValueError(
                f"{pass_id} score {score} for '{category}' is outside 0..{maxima[category]}."
            )


# --- Level Functions ---

def dominance_level(score: int, thresholds: DominanceThresholds) -> str:
    if score >= thresholds.high:
        return "high"
    if score >= thresholds.moderate:
        return "moderate"
    if score >= thresholds.mild:
        return "mild"
    return "none"


def deficiency_level(score: int, thresholds: DeficiencyThresholds) -> str:
    if score >= thresholds.high:
        return "high"
    if score >= thresholds.moderate:
        return "moderate"
    if score >= thresholds.mild:
        return "mild"
    return "none"


def gap_level(gap_percentage: int, thresholds: GapThresholds) -> str:
    """Seven signed bands; positive means deficiency outweighs dominance."""
    if gap_percentage >= thresholds.very_high:
        return "very high"
    if gap_percentage >= thresholds.high:
        return "high"
    if gap_percentage >= thresholds.moderate:
        return "moderate"
    if gap_percentage <= -thresholds.very_high:
        return "very low"
    if gap_percentage <= -thresholds.high:
        return "low"
    if gap_percentage <= -thresholds.moderate:
        return "slightly low"
    return "balanced"


def gap_percentage(dominance_score: int, deficiency_score: int, max_dominance: int, max_deficiency: int) -> int:
    """
    Signed percentage of deficiency fraction minus dominance fraction.

    Uses exact fractions and rounds half up (toward +infinity), so results do not
    depend on float representation.
    """
    normalized_gap = Fraction(deficiency_score, max_deficiency) - Fraction(dominance_score, max_dominance)
    return math.floor(normalized_gap * 100 + Fraction(1, 2))


# --- Classification Functions ---

def classify_dominance(dominance_scores: Dict[str, int], thresholds: InterpretationThresholds) -> DominanceResult:
    """
    Finds the dominant category of the dominance pass.

    The first category in enumeration order with a strictly greater score wins,
    so ties resolve to the earlier category. All-zero scores yield no dominant category.
    """
    highest_score = 0
    dominant: Optional[str] = None
    for category in CATEGORIES:
        score = dominance_scores[category]
        if score > highest_score:
            highest_score = score
            dominant = category

    if dominant is None:
        return DominanceResult()

    tied = [c for c in CATEGORIES if c != dominant and dominance_scores[c] == highest_score]

    # Secondary nature: best of the rest (stable on enumeration order)
    others = sorted(
        (c for c in CATEGORIES if c != dominant),
        key=lambda c: -dominance_scores[c],
    )
    secondary_category = None
    secondary_score = None
    if others:
        candidate = others[0]
        candidate_score = dominance_scores[candidate]
        if (candidate_score >= thresholds.dominance.moderate
                and highest_score - candidate_score < thresholds.gap.secondary_margin):
            secondary_category = candidate
            secondary_score = candidate_score

    return DominanceResult(
        category=dominant,
        score=highest_score,
        level=dominance_level(highest_score, thresholds.dominance),
        secondary_category=secondary_category,
        secondary_score=secondary_score,
        tied_categories=tied,
    )


def classify_deficiencies(deficiency_scores: Dict[str, int], thresholds: InterpretationThresholds) -> List[DeficiencyEntry]:
    """Every category at or above the mild deficiency threshold, highest score first."""
    entries = []
    for category in CATEGORIES:
        score = deficiency_scores[category]
        level = deficiency_level(score, thresholds.deficiency)
        if level != "none":
            entries.append(DeficiencyEntry(category=category, score=score, level=level))
    # sorted() is stable, so equal scores keep enumeration order
    return sorted(entries, key=lambda entry: -entry.score)


def classify_gaps(
    dominance_scores: Dict[str, int],
    deficiency_scores: Dict[str, int],
    max_scores: Dict[str, Dict[str, int]],
    thresholds: InterpretationThresholds,
) -> List[GapEntry]:
    """Gap record for every category, largest absolute gap first."""
    entries = []
    for category in CATEGORIES:
        percentage = gap_percentage(
            dominance_scores[category],
            deficiency_scores[category],
            max_scores["dominance"][category],
            max_scores["deficiency"][category],
        )
        entries.append(GapEntry(
            category=category,
            dominance_score=dominance_scores[category],
            deficiency_score=deficiency_scores[category],
            gap_percentage=percentage,
            level=gap_level(percentage, thresholds.gap),
        ))
    return sorted(entries, key=lambda entry: -abs(entry.gap_percentage))


def classify(scores: ScoreTable, thresholds: Optional[InterpretationThresholds] = None) -> Classification:
    """Runs the three classifications over a score table."""
    thresholds = thresholds or InterpretationThresholds()
    _check_range(scores.dominance, scores.max_scores["dominance"], "dominance")
    _check_range(scores.deficiency, scores.max_scores["deficiency"], "deficiency")

    classification = Classification(
        dominance=classify_dominance(scores.dominance, thresholds),
        deficiencies=classify_deficiencies(scores.deficiency, thresholds),
        gaps=classify_gaps(scores.dominance, scores.deficiency, scores.max_scores, thresholds),
    )
    logger.debug(
        f"Classified: dominant={classification.dominance.category} ({classification.dominance.level}), "
        f"deficiencies={[d.category for d in classification.deficiencies]}"
    )
    return classification
