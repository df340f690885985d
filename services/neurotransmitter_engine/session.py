# services/neurotransmitter_engine/session.py
# One respondent's questionnaire: answers, section progress, persistence and
# change notifications for whatever UI layer sits on top.

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .core.config import EngineSettings, get_settings
from .definitions import CATEGORIES
from .engine import NeurotransmitterEngine
from .models import AssessmentResults, MalformedSnapshot
from .narrator import format_results_markdown
from .storage import LocalStorage, SESSION_KEY

logger = logging.getLogger(__name__)

SECTIONS = (
    ["welcome", "part1-intro"]
    + [f"part1-{category}" for category in CATEGORIES]
    + ["part1-break", "part2-intro"]
    + [f"part2-{category}" for category in CATEGORIES]
    + ["results"]
)

Listener = Callable[[Dict[str, Any]], None]


class QuestionnaireSession:
    """
    Questionnaire state owned by a single respondent.

    Each session holds its own ResponseStore; nothing is shared between sessions.
    """

    def __init__(self, engine: NeurotransmitterEngine, storage: Optional[LocalStorage] = None):
        self.engine = engine
        self.storage = storage
        self.store = engine.new_store()
        self.user_name = ""
        self.current_section = "welcome"
        self.section_progress = self._initial_progress()
        self.results: Optional[AssessmentResults] = None
        self._listeners: Dict[str, List[Listener]] = {}

    @staticmethod
    def _initial_progress() -> Dict[str, bool]:
        return {section: section == "welcome" for section in SECTIONS}

    # --- Events ---

    def add_listener(self, event: str, callback: Listener) -> None:
        self._listeners.setdefault(event, []).append(callback)

    def remove_listener(self, event: str, callback: Listener) -> None:
        if event in self._listeners:
            self._listeners[event] = [cb for cb in self._listeners[event] if cb != callback]

    def dispatch(self, event: str, data: Dict[str, Any]) -> None:
        for callback in list(self._listeners.get(event, [])):
            callback(data)

    # --- Answers and navigation ---

    def set_user_name(self, name: str) -> None:
        self.user_name = name.strip()
        self._auto_save()

    def set_response(self, pass_id: str, category: str, subcategory: str, index: int, value: bool) -> None:
        self.store.set_response(pass_id, category, subcategory, index, value)
        self.results = None
        self._auto_save()
        self.dispatch("response_updated", {
            "pass_id": pass_id,
            "category": category,
            "subcategory": subcategory,
            "index": index,
            "value": value,
        })

    def navigate_to(self, section: str) -> None:
        if section not in self.section_progress:
            raise ValueError(f"Unknown section '{section}'. Expected one of {SECTIONS}.")
        self.current_section = section
        self.section_progress[section] = True
        if section == "results":
            self.results = self.engine.generate_results(self.store)
            self.dispatch("results_ready", {"user_name": self.user_name, "results": self.results})
        self._auto_save()
        self.dispatch("navigated", {"section": section})

    def progress_percentage(self) -> float:
        visited = sum(1 for done in self.section_progress.values() if done)
        return visited / len(self.section_progress) * 100

    def last_visited_section(self) -> str:
        visited = [section for section in SECTIONS if self.section_progress[section]]
        return visited[-1] if visited else "welcome"

    def get_results(self) -> AssessmentResults:
        """Fresh results for the current answers."""
        return self.engine.generate_results(self.store)

    # --- Persistence ---

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_name": self.user_name,
            "responses": self.store.to_snapshot(),
            "section_progress": dict(self.section_progress),
            "last_updated": datetime.now(timezone.utc).isoformat(),
        }

    def _auto_save(self) -> None:
        if self.storage and self.storage.is_auto_save_enabled():
            self.save()

    def save(self) -> bool:
        if not self.storage:
            return False
        saved = self.storage.save_data(SESSION_KEY, self.to_dict())
        if saved:
            self.dispatch("data_saved", {"section": self.current_section})
        return saved

    def load(self) -> bool:
        """
        Restores a saved session.

        A missing or malformed record leaves the session fresh and returns False.
        """
        if not self.storage:
            return False
        data = self.storage.load_data(SESSION_KEY)
        if data is None:
            return False
        if not isinstance(data, dict):
            logger.warning("Discarding saved session: record is not a mapping")
            self._reset_state()
            return False

        try:
            self.store.restore(data.get("responses"))
            self.results = None
        except MalformedSnapshot as e:
            logger.warning(f"Discarding saved session: {e}")
            self._reset_state()
            return False

        user_name = data.get("user_name")
        self.user_name = user_name if isinstance(user_name, str) else ""
        progress = data.get("section_progress")
        if isinstance(progress, dict):
            self.section_progress = {
                section: bool(progress.get(section, section == "welcome")) for section in SECTIONS
            }
        self.current_section = self.last_visited_section()
        logger.info(f"Restored session at section '{self.current_section}'")
        self.dispatch("data_loaded", {"section": self.current_section})
        return True

    def _reset_state(self) -> None:
        self.store.reset()
        self.user_name = ""
        self.current_section = "welcome"
        self.section_progress = self._initial_progress()
        self.results = None

    def reset(self) -> None:
        """Clears every answer and any stored session data."""
        self._reset_state()
        if self.storage:
            self.storage.clear_all_data()
        logger.info("Questionnaire session reset")
        self.dispatch("reset", {})

    # --- Export ---

    def export_markdown(self) -> Optional[str]:
        """Markdown report of the current results, or None when export is not permitted."""
        if self.storage and not self.storage.can_export_results():
            logger.warning("Export refused: not permitted by privacy settings")
            return None
        return format_results_markdown(self.get_results(), user_name=self.user_name or None)


def create_session(settings: Optional[EngineSettings] = None) -> QuestionnaireSession:
    """Builds an engine and file-backed storage from settings and restores any saved session."""
    settings = settings or get_settings()
    engine = NeurotransmitterEngine.from_settings(settings)
    session = QuestionnaireSession(engine, storage=LocalStorage(settings.storage_dir))
    if session.storage.load_consent():
        session.load()
    return session
