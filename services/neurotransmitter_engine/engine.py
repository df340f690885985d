import logging
from typing import Dict, List, Any, Optional

from .classifier import classify
from .charts import build_chart_table
from .definitions import PASSES, CATEGORIES, SUBCATEGORIES, QUESTION_DATABASE, PASS_LABELS, CATEGORY_LABELS, SUBCATEGORY_LABELS
from .core.config import EngineSettings, get_settings
from .loader import load_thresholds_from_file, load_profile_table
from .models import (
    AssessmentResults,
    Classification,
    Completeness,
    PassCompleteness,
    ScoreTable,
)
from .responses import ResponseStore
from .results_generator import compose_interpretation
from .scorer import compute_scores

logger = logging.getLogger(__name__)

class NeurotransmitterEngine:
    """
    Loads the interpretation configuration once and runs the
    scoring -> classification -> interpretation pipeline on a response store.
    """
    def __init__(self, thresholds_path: Optional[str] = None, profiles: Optional[Dict[str, Any]] = None):
        """
        Initializes the engine by loading thresholds and the profile table.

        Args:
            thresholds_path: Path to a thresholds YAML file. The packaged file is used when omitted.
            profiles: Raw profile table keyed by category. The packaged table is used when omitted.
        """
        self.thresholds = load_thresholds_from_file(thresholds_path)
        self.profile_table = load_profile_table(profiles)
        self.question_database = QUESTION_DATABASE
        logger.info(f"Neurotransmitter engine initialized (thresholds: {thresholds_path or 'packaged'})")

    @classmethod
    def from_settings(cls, settings: Optional[EngineSettings] = None) -> "NeurotransmitterEngine":
        settings = settings or get_settings()
        return cls(thresholds_path=settings.thresholds_path)

    def new_store(self) -> ResponseStore:
        return ResponseStore(self.question_database)

    def get_questions(self) -> List[Dict[str, Any]]:
        """
        Returns a flat list of items for presentation.
        """
        return [
            {
                "id": f"{pass_id}-{category}-{subcategory}-{index}",
                "pass_id": pass_id,
                "pass_label": PASS_LABELS[pass_id],
                "category": category,
                "category_label": CATEGORY_LABELS[category],
                "subcategory": subcategory,
                "subcategory_label": SUBCATEGORY_LABELS[subcategory],
                "index": index,
                "number": index + 1,
                "text": text,
            }
            for pass_id in PASSES
            for category in CATEGORIES
            for subcategory in SUBCATEGORIES
            for index, text in enumerate(self.question_database[pass_id][category][subcategory])
        ]

    def calculate_scores(self, store: ResponseStore) -> ScoreTable:
        return compute_scores(store)

    def classify(self, scores: ScoreTable) -> Classification:
        return classify(scores, self.thresholds)

    def completeness(self, store: ResponseStore) -> Completeness:
        passes = {
            pass_id: PassCompleteness(answered=store.answered_count(pass_id), total=store.total_items(pass_id))
            for pass_id in PASSES
        }
        return Completeness(
            is_complete=all(p.answered == p.total for p in passes.values()),
            passes=passes,
        )

    def generate_results(self, store: ResponseStore) -> AssessmentResults:
        """
        Runs the full pipeline on the current answers.

        Incomplete assessments are scored as they stand; completeness is reported
        alongside the results so a UI can warn before showing them.
        """
        scores = self.calculate_scores(store)
        classification = self.classify(scores)
        completeness = self.completeness(store)
        if not completeness.is_complete:
            logger.info(
                f"Generating results for an incomplete assessment "
                f"({store.answered_count()}/{store.total_items()} items answered)"
            )
        interpretation = compose_interpretation(
            classification.dominance,
            classification.deficiencies,
            classification.gaps,
            self.profile_table,
            thresholds=self.thresholds,
            completeness=completeness,
        )
        return AssessmentResults(
            scores=scores,
            classification=classification,
            interpretation=interpretation,
            completeness=completeness,
            chart=build_chart_table(scores, classification.gaps, self.thresholds),
        )


# Example Usage (for testing purposes)
if __name__ == "__main__":
    from .core.logging_config import setup_logging
    settings = get_settings()
    setup_logging(settings.log_level)

    engine = NeurotransmitterEngine.from_settings(settings)
    store = engine.new_store()

    # Simulate a dopamine-dominant respondent with a GABA deficiency
    for question in engine.get_questions():
        if question["pass_id"] == "dominance":
            store.set_response("dominance", question["category"], question["subcategory"], question["index"],
                               question["category"] == "dopamine" or question["index"] < 3)
        else:
            store.set_response("deficiency", question["category"], question["subcategory"], question["index"],
                               question["category"] == "gaba" and question["index"] < 6)

    results = engine.generate_results(store)
    print(results.model_dump_json(indent=2))
