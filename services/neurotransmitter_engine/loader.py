import yaml
from pathlib import Path
from pydantic import ValidationError
from typing import Dict, Any, Optional

from .definitions import CATEGORIES
from .models import InterpretationThresholds, NeurotransmitterProfile, ProfileTableError
from .profiles import NEUROTRANSMITTER_PROFILES

DEFAULT_THRESHOLDS_PATH = Path(__file__).parent / "assets" / "interpretation_thresholds.yml"

class ThresholdConfigError(ValueError):
    """Custom exception for threshold configuration errors not covered by Pydantic."""
    pass

def load_thresholds_data(data: Dict[str, Any]) -> InterpretationThresholds:
    """
    Validates the raw dictionary data against the InterpretationThresholds model
    and checks that every level ladder is ordered.
    """
    data = {key: value for key, value in data.items() if key != "version"}
    try:
        thresholds = InterpretationThresholds.model_validate(data)
    except ValidationError as e:
        # Re-raise Pydantic's validation error for schema issues
        raise e

    for name, ladder in (("dominance", thresholds.dominance), ("deficiency", thresholds.deficiency)):
        if not ladder.high >= ladder.moderate >= ladder.mild >= 0:
            raise ThresholdConfigError(
                f"{name} thresholds must satisfy high >= moderate >= mild >= 0, "
                f"got {ladder.high}/{ladder.moderate}/{ladder.mild}"
            )

    gap = thresholds.gap
    if not gap.very_high >= gap.high >= gap.moderate > 0:
        raise ThresholdConfigError(
            f"gap thresholds must satisfy very_high >= high >= moderate > 0, "
            f"got {gap.very_high}/{gap.high}/{gap.moderate}"
        )
    for name in ("secondary_margin", "pattern_significance"):
        if getattr(gap, name) <= 0:
            raise ThresholdConfigError(f"gap {name} must be > 0, got {getattr(gap, name)}")

    return thresholds

def load_thresholds_from_file(file_path: Optional[str] = None) -> InterpretationThresholds:
    """
    Loads interpretation thresholds from a YAML file, validates them,
    and returns an InterpretationThresholds object. Uses the packaged file when no path is given.
    """
    path = Path(file_path) if file_path else DEFAULT_THRESHOLDS_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ThresholdConfigError(f"File not found: {path}")
    except yaml.YAMLError as e:
        raise ThresholdConfigError(f"Error parsing YAML file {path}: {e}")

    if not isinstance(data, dict):
        raise ThresholdConfigError(f"YAML file is empty or invalid: {path}")

    return load_thresholds_data(data)

def load_profile_table(raw_profiles: Optional[Dict[str, Any]] = None) -> Dict[str, NeurotransmitterProfile]:
    """Validates the profile table and checks that every category has an entry."""
    raw_profiles = raw_profiles if raw_profiles is not None else NEUROTRANSMITTER_PROFILES
    missing = [category for category in CATEGORIES if category not in raw_profiles]
    if missing:
        raise ProfileTableError(f"Profile table is missing categories: {missing}")
    return {
        category: NeurotransmitterProfile.model_validate(raw_profiles[category])
        for category in CATEGORIES
    }
