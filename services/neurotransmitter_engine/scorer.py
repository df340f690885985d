# services/neurotransmitter_engine/scorer.py
# Reduces the response store to per-category scores for each pass.

import logging
from typing import Dict, Any, Optional

from .definitions import PASSES, CATEGORIES, QUESTION_DATABASE
from .models import ScoreTable
from .responses import ResponseStore

logger = logging.getLogger(__name__)


def max_score(pass_id: str, category: str, question_database: Optional[Dict[str, Any]] = None) -> int:
    """Highest score a category can reach in a pass: the number of items it carries."""
    database = question_database or QUESTION_DATABASE
    return sum(len(items) for items in database[pass_id][category].values())


def compute_score(store: ResponseStore, pass_id: str, category: str) -> int:
    """
    Counts the items answered True for a category in a pass.

    False and unanswered items both contribute zero. Always read fresh from the store.
    """
    responses = store.get_all_responses(pass_id)
    return sum(
        1
        for answers in responses[category].values()
        for value in answers.values()
        if value is True
    )


def compute_scores(store: ResponseStore) -> ScoreTable:
    """Scores for every category of both passes, plus the per-pass maxima used for normalization."""
    scores = {
        pass_id: {category: compute_score(store, pass_id, category) for category in CATEGORIES}
        for pass_id in PASSES
    }
    max_scores = {
        pass_id: {category: max_score(pass_id, category, store.question_database) for category in CATEGORIES}
        for pass_id in PASSES
    }
    logger.debug(f"Computed scores: dominance={scores['dominance']}, deficiency={scores['deficiency']}")
    return ScoreTable(
        dominance=scores["dominance"],
        deficiency=scores["deficiency"],
        max_scores=max_scores,
    )
