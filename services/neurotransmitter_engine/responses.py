# services/neurotransmitter_engine/responses.py
# Per-session store of true/false answers, keyed by (pass, category, subcategory, index).

import logging
from typing import Dict, Any, Optional

from .definitions import PASSES, CATEGORIES, SUBCATEGORIES, QUESTION_DATABASE
from .models import InvalidItemReference, MalformedSnapshot

logger = logging.getLogger(__name__)


class ResponseStore:
    """
    Holds the answer for every item of both passes.

    An item is unanswered until set_response is called for it; re-answering
    overwrites the previous value. Only reset() clears answers.
    """

    def __init__(self, question_database: Optional[Dict[str, Any]] = None):
        self.question_database = question_database or QUESTION_DATABASE
        self._responses: Dict[str, Dict[str, Dict[str, Dict[int, bool]]]] = self._empty_responses()

    def _empty_responses(self) -> Dict[str, Dict[str, Dict[str, Dict[int, bool]]]]:
        return {
            pass_id: {
                category: {subcategory: {} for subcategory in SUBCATEGORIES}
                for category in CATEGORIES
            }
            for pass_id in PASSES
        }

    def _validate_reference(self, pass_id: str, category: str, subcategory: str, index: Any) -> None:
        if pass_id not in PASSES:
            raise InvalidItemReference(f"Unknown pass '{pass_id}'. Expected one of {PASSES}.")
        if category not in CATEGORIES:
            raise InvalidItemReference(f"Unknown category '{category}'. Expected one of {CATEGORIES}.")
        if subcategory not in SUBCATEGORIES:
            raise InvalidItemReference(f"Unknown subcategory '{subcategory}'. Expected one of {SUBCATEGORIES}.")
        # bool is an int subclass; True must not address item 1
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidItemReference(f"Item index must be an integer, got {index!r}.")
        item_total = len(self.question_database[pass_id][category][subcategory])
        if not 0 <= index < item_total:
            raise InvalidItemReference(
                f"Item index {index} out of range for {pass_id}/{category}/{subcategory} "
                f"({item_total} items)."
            )

    def set_response(self, pass_id: str, category: str, subcategory: str, index: int, value: bool) -> None:
        """Records (or overwrites) the answer for one item."""
        self._validate_reference(pass_id, category, subcategory, index)
        if not isinstance(value, bool):
            raise InvalidItemReference(
                f"Answer for {pass_id}/{category}/{subcategory}/{index} must be True or False, got {value!r}."
            )
        self._responses[pass_id][category][subcategory][index] = value

    def get_response(self, pass_id: str, category: str, subcategory: str, index: int) -> Optional[bool]:
        """Returns True/False for an answered item and None while it is unanswered."""
        self._validate_reference(pass_id, category, subcategory, index)
        return self._responses[pass_id][category][subcategory].get(index)

    def get_all_responses(self, pass_id: str) -> Dict[str, Dict[str, Dict[int, bool]]]:
        """Answered items of one pass as category -> subcategory -> index -> value (a copy)."""
        if pass_id not in PASSES:
            raise InvalidItemReference(f"Unknown pass '{pass_id}'. Expected one of {PASSES}.")
        return {
            category: {
                subcategory: dict(answers)
                for subcategory, answers in subcategories.items()
            }
            for category, subcategories in self._responses[pass_id].items()
        }

    def answered_count(self, pass_id: Optional[str] = None) -> int:
        pass_ids = [pass_id] if pass_id else PASSES
        return sum(
            len(answers)
            for pid in pass_ids
            for subcategories in self._responses[pid].values()
            for answers in subcategories.values()
        )

    def total_items(self, pass_id: Optional[str] = None) -> int:
        pass_ids = [pass_id] if pass_id else PASSES
        return sum(
            len(items)
            for pid in pass_ids
            for subcategories in self.question_database[pid].values()
            for items in subcategories.values()
        )

    def is_complete(self) -> bool:
        return self.answered_count() == self.total_items()

    def reset(self) -> None:
        self._responses = self._empty_responses()

    # --- Snapshot (persistence contract) ---

    def to_snapshot(self) -> Dict[str, Dict[str, Dict[str, Dict[str, bool]]]]:
        """
        Serializable copy of every answer: pass -> category -> subcategory -> "index" -> bool.

        Index keys are strings so the snapshot survives a JSON round trip unchanged.
        Every pass, category and subcategory is present, even when nothing is answered.
        """
        return {
            pass_id: {
                category: {
                    subcategory: {str(index): value for index, value in sorted(answers.items())}
                    for subcategory, answers in subcategories.items()
                }
                for category, subcategories in categories.items()
            }
            for pass_id, categories in self._responses.items()
        }

    def restore(self, snapshot: Any) -> None:
        """
        Replaces every answer with the contents of a snapshot.

        The snapshot is validated in full before anything is applied. On any shape
        mismatch the store is left all-unanswered and MalformedSnapshot is raised.
        """
        try:
            parsed = self._parse_snapshot(snapshot)
        except MalformedSnapshot:
            self.reset()
            raise
        self._responses = parsed
        logger.debug(f"Restored snapshot with {self.answered_count()} answered items.")

    def _parse_snapshot(self, snapshot: Any) -> Dict[str, Dict[str, Dict[str, Dict[int, bool]]]]:
        if not isinstance(snapshot, dict):
            raise MalformedSnapshot(f"Snapshot must be a mapping, got {type(snapshot).__name__}.")
        if set(snapshot.keys()) != set(PASSES):
            raise MalformedSnapshot(f"Snapshot passes {list(snapshot.keys())} do not match {PASSES}.")

        parsed = self._empty_responses()
        for pass_id in PASSES:
            categories = snapshot[pass_id]
            if not isinstance(categories, dict) or set(categories.keys()) != set(CATEGORIES):
                raise MalformedSnapshot(f"Pass '{pass_id}' must contain exactly the categories {CATEGORIES}.")
            for category in CATEGORIES:
                subcategories = categories[category]
                if not isinstance(subcategories, dict) or set(subcategories.keys()) != set(SUBCATEGORIES):
                    raise MalformedSnapshot(
                        f"Category '{pass_id}/{category}' must contain exactly the subcategories {SUBCATEGORIES}."
                    )
                for subcategory in SUBCATEGORIES:
                    answers = subcategories[subcategory]
                    if not isinstance(answers, dict):
                        raise MalformedSnapshot(f"Answers for '{pass_id}/{category}/{subcategory}' must be a mapping.")
                    item_total = len(self.question_database[pass_id][category][subcategory])
                    for raw_index, value in answers.items():
                        index = self._parse_index(raw_index)
                        if index is None or not 0 <= index < item_total:
                            raise MalformedSnapshot(
                                f"Invalid item index {raw_index!r} in '{pass_id}/{category}/{subcategory}'."
                            )
                        if not isinstance(value, bool):
                            raise MalformedSnapshot(
                                f"Non-boolean answer {value!r} at '{pass_id}/{category}/{subcategory}/{raw_index}'."
                            )
                        parsed[pass_id][category][subcategory][index] = value
        return parsed

    @staticmethod
    def _parse_index(raw_index: Any) -> Optional[int]:
        if isinstance(raw_index, bool):
            return None
        if isinstance(raw_index, int):
            return raw_index
        if isinstance(raw_index, str) and raw_index.isascii() and raw_index.isdigit():
            return int(raw_index)
        return None
