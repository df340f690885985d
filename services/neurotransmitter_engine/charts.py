# services/neurotransmitter_engine/charts.py
# Flat numeric table for chart and heatmap consumers: raw scores, gap
# percentages, band labels and the legend tooltips for each cell.

from typing import List, Optional

from .classifier import dominance_level, deficiency_level
from .definitions import CATEGORIES, CATEGORY_LABELS
from .models import InterpretationThresholds, ScoreTable, GapEntry, ChartRow


def dominance_tooltip(score: int, thresholds: InterpretationThresholds) -> str:
    t = thresholds.dominance
    if score >= t.high:
        return f"Classically dominant nature ({t.high}+)"
    if score >= t.moderate:
        return f"Moderately dominant nature ({t.moderate}-{t.high - 1})"
    if score >= t.mild:
        return f"Mildly dominant nature ({t.mild}-{t.moderate - 1})"
    return f"Not dominant (<{t.mild})"


def deficiency_tooltip(score: int, thresholds: InterpretationThresholds) -> str:
    t = thresholds.deficiency
    if score >= t.high:
        return f"Significant deficiency ({t.high}+)"
    if score >= t.moderate:
        return f"Moderate deficiency ({t.moderate}-{t.high - 1})"
    if score >= t.mild:
        return f"Mild deficiency ({t.mild}-{t.moderate - 1})"
    return f"No significant deficiency (<{t.mild})"


def gap_tooltip(gap_percentage: int, thresholds: InterpretationThresholds) -> str:
    t = thresholds.gap
    if gap_percentage >= t.very_high:
        return "Significant imbalance - deficiency much higher than dominance"
    if gap_percentage >= t.high:
        return "Moderate imbalance - deficiency higher than dominance"
    if gap_percentage >= t.moderate:
        return "Mild imbalance - slight deficiency relative to dominance"
    if gap_percentage <= -t.very_high:
        return "Significant strength - dominance much higher than deficiency"
    if gap_percentage <= -t.high:
        return "Moderate strength - dominance higher than deficiency"
    if gap_percentage <= -t.moderate:
        return "Mild strength - slight dominance relative to deficiency"
    return "Balanced - similar levels of dominance and deficiency"


def build_chart_table(
    scores: ScoreTable,
    gaps: List[GapEntry],
    thresholds: Optional[InterpretationThresholds] = None,
) -> List[ChartRow]:
    """One row per category, in assessment order."""
    thresholds = thresholds or InterpretationThresholds()
    gaps_by_category = {gap.category: gap for gap in gaps}
    rows = []
    for category in CATEGORIES:
        dominance_score = scores.get("dominance", category)
        deficiency_score = scores.get("deficiency", category)
        gap = gaps_by_category[category]
        rows.append(ChartRow(
            category=category,
            label=CATEGORY_LABELS[category],
            dominance_score=dominance_score,
            deficiency_score=deficiency_score,
            gap_percentage=gap.gap_percentage,
            dominance_band=dominance_level(dominance_score, thresholds.dominance),
            deficiency_band=deficiency_level(deficiency_score, thresholds.deficiency),
            gap_band=gap.level,
            dominance_tooltip=dominance_tooltip(dominance_score, thresholds),
            deficiency_tooltip=deficiency_tooltip(deficiency_score, thresholds),
            gap_tooltip=gap_tooltip(gap.gap_percentage, thresholds),
        ))
    return rows
