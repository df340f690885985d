# services/neurotransmitter_engine/storage.py
# Privacy-gated key/value persistence for questionnaire sessions, one JSON file per key.

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

SESSION_KEY = "neurotransmitter_session"
CONSENT_KEY = "neurotransmitter_consent"


class PrivacySettings(BaseModel):
    allow_local_storage: bool = True
    auto_save: bool = True
    allow_export: bool = True


class LocalStorage:
    """
    Stores JSON documents under a directory, honouring the user's privacy settings.

    Every operation is refused (returning False or None) while storage is not
    permitted. Read and write failures are logged and reported the same way.
    """

    def __init__(self, directory: str, settings: Optional[PrivacySettings] = None):
        self.directory = Path(directory)
        self.settings = settings or PrivacySettings()
        self.consent_given = False

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def can_use_storage(self) -> bool:
        return self.settings.allow_local_storage

    def is_auto_save_enabled(self) -> bool:
        return self.can_use_storage() and self.settings.auto_save

    def can_export_results(self) -> bool:
        return self.settings.allow_export

    def save_data(self, key: str, data: Any) -> bool:
        if not self.can_use_storage():
            logger.warning(f"Cannot save '{key}': storage not allowed")
            return False
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(key).write_text(json.dumps(data), encoding="utf-8")
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving '{key}': {e}", exc_info=True)
            return False

    def load_data(self, key: str) -> Optional[Any]:
        if not self.can_use_storage():
            logger.warning(f"Cannot load '{key}': storage not allowed")
            return None
        path = self._path(key)
        if not path.is_file():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading '{key}': {e}", exc_info=True)
            return None

    def clear_data(self, key: str) -> bool:
        if not self.can_use_storage():
            logger.warning(f"Cannot clear '{key}': storage not allowed")
            return False
        try:
            self._path(key).unlink(missing_ok=True)
            return True
        except OSError as e:
            logger.error(f"Error clearing '{key}': {e}", exc_info=True)
            return False

    def clear_all_data(self) -> bool:
        """Removes every stored document except the consent record."""
        if not self.can_use_storage():
            logger.warning("Cannot clear data: storage not allowed")
            return False
        if not self.directory.is_dir():
            return True
        try:
            for path in self.directory.glob("*.json"):
                if path.stem != CONSENT_KEY:
                    path.unlink()
            return True
        except OSError as e:
            logger.error(f"Error clearing all data: {e}", exc_info=True)
            return False

    # --- Consent ---

    def save_consent(self) -> bool:
        self.consent_given = True
        return self.save_data(CONSENT_KEY, {
            "consent_given": True,
            "settings": self.settings.model_dump(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    def load_consent(self) -> bool:
        """Restores consent and privacy settings from a previous run, if any were saved."""
        data = self.load_data(CONSENT_KEY)
        if not isinstance(data, dict) or not data.get("consent_given"):
            return False
        try:
            self.settings = PrivacySettings.model_validate(data.get("settings", {}))
        except ValueError as e:
            logger.warning(f"Ignoring stored consent with invalid settings: {e}")
            return False
        self.consent_given = True
        return True
