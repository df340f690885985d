import pytest
import yaml
from pathlib import Path
from pydantic import ValidationError

from services.neurotransmitter_engine.loader import (
    DEFAULT_THRESHOLDS_PATH,
    ThresholdConfigError,
    load_thresholds_data,
    load_thresholds_from_file,
    load_profile_table,
)
from services.neurotransmitter_engine.models import ProfileTableError
from services.neurotransmitter_engine.profiles import NEUROTRANSMITTER_PROFILES


# Helper function to create temporary YAML files for testing
def create_temp_yaml(tmp_path: Path, filename: str, content) -> str:
    filepath = tmp_path / filename
    with open(filepath, 'w') as f:
        yaml.dump(content, f)
    return str(filepath)


def test_packaged_thresholds_load():
    assert DEFAULT_THRESHOLDS_PATH.is_file()
    thresholds = load_thresholds_from_file()
    assert (thresholds.dominance.high, thresholds.dominance.moderate, thresholds.dominance.mild) == (35, 25, 15)
    assert (thresholds.deficiency.high, thresholds.deficiency.moderate, thresholds.deficiency.mild) == (20, 15, 10)
    assert thresholds.gap.very_high == 30
    assert thresholds.gap.secondary_margin == 10
    assert thresholds.gap.pattern_significance == 15


def test_partial_file_falls_back_to_defaults(tmp_path):
    path = create_temp_yaml(tmp_path, "partial.yml", {"version": "2.0.0", "deficiency": {"high": 22, "moderate": 16, "mild": 11}})
    thresholds = load_thresholds_from_file(path)
    assert thresholds.deficiency.high == 22
    assert thresholds.dominance.high == 35


def test_invalid_value_type_raises_validation_error():
    with pytest.raises(ValidationError):
        load_thresholds_data({"dominance": {"high": "very"}})


@pytest.mark.parametrize("data, match", [
    ({"dominance": {"high": 20, "moderate": 25, "mild": 15}}, "dominance thresholds"),
    ({"deficiency": {"high": 20, "moderate": 15, "mild": -1}}, "deficiency thresholds"),
    ({"gap": {"very_high": 10, "high": 15, "moderate": 5}}, "gap thresholds"),
    ({"gap": {"very_high": 30, "high": 15, "moderate": 0}}, "gap thresholds"),
    ({"gap": {"secondary_margin": -1}}, "secondary_margin must be > 0"),
    ({"gap": {"pattern_significance": 0}}, "pattern_significance must be > 0"),
])
def test_unordered_thresholds_raise(data, match):
    with pytest.raises(ThresholdConfigError, match=match):
        load_thresholds_data(data)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ThresholdConfigError, match="File not found"):
        load_thresholds_from_file(str(tmp_path / "missing.yml"))


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("dominance: [high: 35\n")
    with pytest.raises(ThresholdConfigError, match="Error parsing YAML"):
        load_thresholds_from_file(str(path))


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    with pytest.raises(ThresholdConfigError, match="empty or invalid"):
        load_thresholds_from_file(str(path))


def test_profile_table_covers_every_category():
    profiles = load_profile_table()
    assert list(profiles) == ["dopamine", "acetylcholine", "gaba", "serotonin"]
    assert profiles["gaba"].name == "GABA"
    assert profiles["serotonin"].dominant_traits


def test_profile_table_missing_category_raises():
    partial = {k: v for k, v in NEUROTRANSMITTER_PROFILES.items() if k != "serotonin"}
    with pytest.raises(ProfileTableError, match="serotonin"):
        load_profile_table(partial)


def test_profile_table_missing_field_raises():
    broken = dict(NEUROTRANSMITTER_PROFILES)
    broken["dopamine"] = {"name": "Dopamine"}
    with pytest.raises(ValidationError):
        load_profile_table(broken)
