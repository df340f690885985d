import pytest

from services.neurotransmitter_engine.definitions import PASSES, CATEGORIES, SUBCATEGORIES
from services.neurotransmitter_engine.engine import NeurotransmitterEngine
from services.neurotransmitter_engine.models import ScoreTable
from services.neurotransmitter_engine.scorer import max_score


def _answer_category(store, pass_id, category, true_count):
    """Answers every item of a category: the first true_count True, the rest False."""
    remaining = true_count
    for subcategory in SUBCATEGORIES:
        for index in range(len(store.question_database[pass_id][category][subcategory])):
            store.set_response(pass_id, category, subcategory, index, remaining > 0)
            remaining -= 1


# --- Fixtures ---

@pytest.fixture(scope="module")
def engine():
    """Provides a NeurotransmitterEngine loaded with the packaged configuration."""
    try:
        return NeurotransmitterEngine()
    except Exception as e:
        pytest.fail(f"Failed to initialize NeurotransmitterEngine: {e}")


@pytest.fixture
def store(engine):
    return engine.new_store()


@pytest.fixture
def answer_scores():
    """Returns a helper that fully answers a store so each category reaches the given score."""
    def _answer(store, dominance=None, deficiency=None):
        for pass_id, scores in (("dominance", dominance), ("deficiency", deficiency)):
            if scores is None:
                continue
            for category in CATEGORIES:
                _answer_category(store, pass_id, category, scores.get(category, 0))
        return store
    return _answer


@pytest.fixture
def make_scores():
    """Returns a helper building a ScoreTable directly, missing categories scoring zero."""
    def _make(dominance=None, deficiency=None):
        dominance = dominance or {}
        deficiency = deficiency or {}
        return ScoreTable(
            dominance={c: dominance.get(c, 0) for c in CATEGORIES},
            deficiency={c: deficiency.get(c, 0) for c in CATEGORIES},
            max_scores={p: {c: max_score(p, c) for c in CATEGORIES} for p in PASSES},
        )
    return _make
