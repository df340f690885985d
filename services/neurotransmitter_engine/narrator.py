# services/neurotransmitter_engine/narrator.py
# Formats assessment results into a Markdown report for export consumers.

import logging
from datetime import date
from typing import List, Optional

from .definitions import CATEGORY_LABELS
from .models import AssessmentResults, InterpretationSection

logger = logging.getLogger(__name__)


def _format_section(section: InterpretationSection) -> List[str]:
    lines = [f"## {section.heading}", ""]
    previous_kind = None
    for statement in section.statements:
        if statement.kind == "item":
            lines.append(f"- {statement.text}")
        else:
            if previous_kind == "item":
                lines.append("")
            if statement.kind == "label":
                lines.append(f"**{statement.text}**")
            else:
                lines.append(statement.text)
            lines.append("")
        previous_kind = statement.kind
    if lines[-1] != "":
        lines.append("")
    return lines


def format_results_markdown(
    results: AssessmentResults,
    user_name: Optional[str] = None,
    generated_on: Optional[date] = None,
) -> str:
    """
    Renders results as Markdown: header, score table, interpretation sections.

    Args:
        results: Output of NeurotransmitterEngine.generate_results.
        user_name: Name shown in the header; "Client" when omitted.
        generated_on: Report date; today when omitted.
    """
    generated_on = generated_on or date.today()
    lines = [
        "# Neurotransmitter Assessment Results",
        "",
        f"**Client:** {user_name or 'Client'}  ",
        f"**Date:** {generated_on.strftime('%B')} {generated_on.day}, {generated_on.year}",
        "",
    ]

    if not results.completeness.is_complete:
        answered = sum(p.answered for p in results.completeness.passes.values())
        total = sum(p.total for p in results.completeness.passes.values())
        lines.extend([f"> **Incomplete assessment:** {answered} of {total} items answered.", ""])

    lines.extend([
        "## Scores",
        "",
        "| System | Dominance | Deficiency | Relative Gap |",
        "| --- | --- | --- | --- |",
    ])
    for row in results.chart:
        lines.append(
            f"| {CATEGORY_LABELS[row.category]} | {row.dominance_score} | {row.deficiency_score} "
            f"| {row.gap_percentage}% ({row.gap_band}) |"
        )
    lines.append("")

    for section in results.interpretation.sections:
        lines.extend(_format_section(section))

    logger.debug(f"Formatted Markdown report with {len(results.interpretation.sections)} sections")
    return "\n".join(lines).rstrip() + "\n"
