import pytest
import yaml

from services.neurotransmitter_engine.core.config import EngineSettings
from services.neurotransmitter_engine.definitions import CATEGORIES
from services.neurotransmitter_engine.engine import NeurotransmitterEngine
from services.neurotransmitter_engine.models import AssessmentResults, ProfileTableError
from services.neurotransmitter_engine.profiles import NEUROTRANSMITTER_PROFILES


def test_get_questions_lists_every_item(engine):
    questions = engine.get_questions()
    assert len(questions) == 272
    assert len({q["id"] for q in questions}) == 272
    first = questions[0]
    assert first["id"] == "dominance-dopamine-memory_attention-0"
    assert first["number"] == 1
    assert first["pass_label"] == "Part 1: Determining Your Dominant Nature"
    assert first["category_label"] == "Dopamine"
    assert first["subcategory_label"] == "Memory & Attention"
    assert first["text"] == "I find it easy to process my thoughts."
    assert questions[-1]["id"] == "deficiency-serotonin-character-6"


def test_generate_results_full_pipeline(engine, store, answer_scores):
    answer_scores(
        store,
        dominance={"dopamine": 36, "acetylcholine": 12, "gaba": 8, "serotonin": 20},
        deficiency={"dopamine": 2, "acetylcholine": 5, "gaba": 22, "serotonin": 11},
    )
    results = engine.generate_results(store)

    assert isinstance(results, AssessmentResults)
    assert results.completeness.is_complete
    assert results.scores.dominance["dopamine"] == 36
    assert results.classification.dominance.category == "dopamine"
    assert results.classification.dominance.level == "high"
    assert [d.category for d in results.classification.deficiencies] == ["gaba", "serotonin"]
    assert results.interpretation.interaction.deficient_category == "gaba"
    assert [row.category for row in results.chart] == CATEGORIES


def test_generate_results_is_idempotent(engine, store, answer_scores):
    answer_scores(store, dominance={"gaba": 30}, deficiency={"dopamine": 18})
    first = engine.generate_results(store)
    second = engine.generate_results(store)
    assert first.model_dump() == second.model_dump()


def test_results_follow_store_changes(engine, store):
    store.set_response("deficiency", "gaba", "physical", 0, True)
    assert engine.generate_results(store).scores.deficiency["gaba"] == 1
    store.set_response("deficiency", "gaba", "physical", 0, False)
    assert engine.generate_results(store).scores.deficiency["gaba"] == 0


def test_incomplete_assessment_still_scores(engine, store):
    store.set_response("dominance", "serotonin", "physical", 0, True)
    results = engine.generate_results(store)
    assert not results.completeness.is_complete
    assert results.completeness.passes["dominance"].answered == 1
    assert results.completeness.passes["deficiency"].total == 112
    assert results.scores.dominance["serotonin"] == 1
    assert results.interpretation.get_section("summary").statements[-1].group == "incomplete"


def test_empty_store_yields_balanced_results(engine, store):
    results = engine.generate_results(store)
    assert results.classification.dominance.category is None
    assert results.classification.deficiencies == []
    assert all(gap.level == "balanced" for gap in results.classification.gaps)
    assert len(results.interpretation.sections) == 7


def test_custom_thresholds_file(tmp_path, answer_scores):
    path = tmp_path / "thresholds.yml"
    with open(path, 'w') as f:
        yaml.dump({"dominance": {"high": 20, "moderate": 10, "mild": 5}}, f)
    engine = NeurotransmitterEngine(thresholds_path=str(path))
    store = answer_scores(engine.new_store(), dominance={"acetylcholine": 21})
    assert engine.generate_results(store).classification.dominance.level == "high"


def test_from_settings_uses_thresholds_path(tmp_path):
    path = tmp_path / "thresholds.yml"
    with open(path, 'w') as f:
        yaml.dump({"gap": {"very_high": 40, "high": 20, "moderate": 10}}, f)
    engine = NeurotransmitterEngine.from_settings(EngineSettings(thresholds_path=str(path)))
    assert engine.thresholds.gap.very_high == 40


def test_incomplete_profile_table_rejected():
    partial = {k: v for k, v in NEUROTRANSMITTER_PROFILES.items() if k != "gaba"}
    with pytest.raises(ProfileTableError, match="gaba"):
        NeurotransmitterEngine(profiles=partial)
