# This file makes the 'neurotransmitter_engine' directory a Python package.

from .engine import NeurotransmitterEngine
from .responses import ResponseStore
from .session import QuestionnaireSession, create_session
from .storage import LocalStorage, PrivacySettings
from .narrator import format_results_markdown
from .models import InvalidItemReference, MalformedSnapshot, ProfileTableError
from .loader import ThresholdConfigError

__all__ = [
    "NeurotransmitterEngine",
    "ResponseStore",
    "QuestionnaireSession",
    "create_session",
    "LocalStorage",
    "PrivacySettings",
    "format_results_markdown",
    "InvalidItemReference",
    "MalformedSnapshot",
    "ProfileTableError",
    "ThresholdConfigError",
]
