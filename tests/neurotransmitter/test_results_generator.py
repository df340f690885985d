import pytest

from services.neurotransmitter_engine.classifier import classify
from services.neurotransmitter_engine.loader import load_profile_table
from services.neurotransmitter_engine.models import Completeness, PassCompleteness
from services.neurotransmitter_engine.profiles import (
    BALANCED_PROFILE_TEXT,
    NO_DEFICIENCY_TEXT,
    STABLE_PATTERN_TEXT,
    CLINICAL_DISCLAIMER,
    GENERAL_PRESCRIBING_CONSIDERATIONS,
)
from services.neurotransmitter_engine.results_generator import SECTION_ORDER, compose_interpretation

PROFILES = load_profile_table()


def compose(scores, completeness=None):
    """Classifies a score table and composes its interpretation."""
    classification = classify(scores)
    return compose_interpretation(
        classification.dominance,
        classification.deficiencies,
        classification.gaps,
        PROFILES,
        completeness=completeness,
    )


def texts(result, section_id, group=None):
    return [
        s.text for s in result.get_section(section_id).statements
        if group is None or s.group == group
    ]


SCENARIOS = [
    {},
    {"dominance": {"dopamine": 40}, "deficiency": {"gaba": 28}},
    {"dominance": {"gaba": 36}, "deficiency": {"gaba": 21}},
    {"dominance": {"serotonin": 3}},
    {"deficiency": {"acetylcholine": 12, "serotonin": 16}},
    {"dominance": {c: 40 for c in ["dopamine", "acetylcholine", "gaba", "serotonin"]},
     "deficiency": {c: 28 for c in ["dopamine", "acetylcholine", "gaba", "serotonin"]}},
]


@pytest.mark.parametrize("scenario", SCENARIOS)
def test_seven_non_empty_sections_in_order(make_scores, scenario):
    result = compose(make_scores(**scenario))
    assert [s.id for s in result.sections] == SECTION_ORDER
    assert len(result.sections) == 7
    for section in result.sections:
        assert section.heading
        assert section.statements, f"Section '{section.id}' is empty"


def test_all_zero_uses_balanced_and_no_deficiency_narratives(make_scores):
    result = compose(make_scores())
    assert texts(result, "dominant-nature") == [BALANCED_PROFILE_TEXT]
    assert texts(result, "deficiency-patterns") == [NO_DEFICIENCY_TEXT]
    assert texts(result, "pattern-analysis")[0] == STABLE_PATTERN_TEXT
    assert result.interaction is None
    assert len(texts(result, "clinical-considerations")) == 1
    assert texts(result, "disclaimer") == [CLINICAL_DISCLAIMER]


def test_summary_headlines(make_scores):
    result = compose(make_scores(dominance={"dopamine": 40}, deficiency={"gaba": 28}))
    summary = texts(result, "summary")
    assert "Dominant nature: classically dominant Dopamine (score: 40)" in summary
    assert "Primary deficiency: significant GABA deficiency (score: 28)" in summary
    assert "Most significant pattern: Dopamine gap of -100% (very low)" in summary


def test_dominant_nature_lists_profile_traits(make_scores):
    result = compose(make_scores(dominance={"acetylcholine": 27}))
    statements = result.get_section("dominant-nature").statements
    assert statements[0].text.startswith("The results indicate a moderately dominant Acetylcholine nature (score: 27)")
    assert statements[0].data == {"category": "acetylcholine", "score": 27, "level": "moderate"}
    items = [s.text for s in statements if s.kind == "item"]
    assert items == PROFILES["acetylcholine"].dominant_traits


def test_sub_threshold_argmax_reports_balanced_with_highest_score(make_scores):
    result = compose(make_scores(dominance={"serotonin": 3}))
    statements = texts(result, "dominant-nature")
    assert statements[0] == BALANCED_PROFILE_TEXT
    assert "highest dominance score was 3 (Serotonin)" in statements[1]


def test_tie_is_noted(make_scores):
    result = compose(make_scores(dominance={"dopamine": 20, "acetylcholine": 20, "gaba": 10, "serotonin": 5}))
    statements = texts(result, "dominant-nature")
    assert "mildly dominant Dopamine" in statements[0]
    assert any("Acetylcholine scored equally (20)" in text for text in statements)


def test_secondary_nature_is_mentioned(make_scores):
    result = compose(make_scores(dominance={"dopamine": 30, "acetylcholine": 26}))
    assert any("mixed Dopamine-Acetylcholine profile" in text for text in texts(result, "dominant-nature"))


def test_multiple_deficiencies(make_scores):
    result = compose(make_scores(deficiency={"acetylcholine": 12, "serotonin": 16}))
    section = result.get_section("deficiency-patterns")
    assert "moderate Serotonin deficiency pattern (score: 16)" in section.statements[0].text
    assert texts(result, "deficiency-patterns", group="primary") == PROFILES["serotonin"].deficiency_traits
    assert texts(result, "deficiency-patterns", group="secondary") == ["Mild Acetylcholine deficiency (score: 12)"]


def test_pattern_analysis_significant_imbalance(make_scores):
    result = compose(make_scores(deficiency={"gaba": 14}))
    statements = result.get_section("pattern-analysis").statements
    assert "significant imbalance in the GABA system" in statements[0].text
    assert statements[0].data["gap_percentage"] == 50


def test_pattern_analysis_significant_strength(make_scores):
    result = compose(make_scores(dominance={"serotonin": 20}))
    assert "significant strength in the Serotonin system" in texts(result, "pattern-analysis")[0]


def test_pattern_analysis_below_significance_is_stable(make_scores):
    # 10/28 - 20/40 = -14%, below the 15% cut-off
    result = compose(make_scores(dominance={"dopamine": 20}, deficiency={"dopamine": 10}))
    statements = texts(result, "pattern-analysis")
    assert statements[0] == STABLE_PATTERN_TEXT
    assert statements[-4:] == [
        "Dopamine system: Dominance score 20, Deficiency score 10",
        "Acetylcholine system: Dominance score 0, Deficiency score 0",
        "GABA system: Dominance score 0, Deficiency score 0",
        "Serotonin system: Dominance score 0, Deficiency score 0",
    ]


def test_system_interaction_for_different_categories(make_scores):
    result = compose(make_scores(dominance={"dopamine": 40}, deficiency={"gaba": 28}))
    assert result.interaction.dominant_category == "dopamine"
    assert result.interaction.deficient_category == "gaba"
    interaction = texts(result, "clinical-considerations", group="system-interaction")
    assert interaction[0] == "System Interaction Considerations:"
    assert "dominant Dopamine nature with GABA deficiency" in interaction[1]
    assert len(interaction) == 5


def test_no_interaction_for_same_category(make_scores):
    result = compose(make_scores(dominance={"gaba": 36}, deficiency={"gaba": 21}))
    assert result.interaction is None
    assert texts(result, "clinical-considerations", group="system-interaction") == []
    assert texts(result, "clinical-considerations", group="dominant")[0] == "Dominant GABA Nature:"
    assert texts(result, "clinical-considerations", group="deficiency")[0] == "GABA Deficiency Pattern:"


def test_prescribing_always_lists_general_considerations(make_scores):
    result = compose(make_scores())
    general = texts(result, "prescribing-implications", group="general")
    assert general == ["General Considerations:"] + GENERAL_PRESCRIBING_CONSIDERATIONS


def test_incomplete_assessment_note(make_scores):
    completeness = Completeness(
        is_complete=False,
        passes={
            "dominance": PassCompleteness(answered=160, total=160),
            "deficiency": PassCompleteness(answered=20, total=112),
        },
    )
    result = compose(make_scores(), completeness=completeness)
    note = result.get_section("summary").statements[-1]
    assert note.group == "incomplete"
    assert note.data == {"answered": 180, "total": 272}
    assert result.completeness == completeness


def test_unknown_section_raises_key_error(make_scores):
    with pytest.raises(KeyError):
        compose(make_scores()).get_section("appendix")
