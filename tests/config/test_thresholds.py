"""Tests for loading user threshold overrides."""

from pathlib import Path

import pytest

from liftlog.config.settings import Settings
from liftlog.config.thresholds import load_threshold_overrides, parse_threshold_overrides, thresholds_from_settings
from liftlog.errors import ThresholdConfigError
from liftlog.muscles.catalog import DEFAULT_THRESHOLDS, Muscle


class TestParseThresholdOverrides:
    """Tests for validating raw override mappings."""

    def test_valid_entries(self) -> None:
        overrides = parse_threshold_overrides({"Chest": {"mev": 8, "mrv": 20}, "side delts": {"mev": 10, "mrv": 24}})
        assert overrides == {Muscle.CHEST: (8.0, 20.0), Muscle.SIDE_DELTS: (10.0, 24.0)}

    def test_untracked_muscle_is_dropped(self) -> None:
        assert parse_threshold_overrides({"Neck": {"mev": 1, "mrv": 2}}) == {}

    def test_mrv_below_mev_is_rejected(self) -> None:
        with pytest.raises(ThresholdConfigError) as exc_info:
            parse_threshold_overrides({"Chest": {"mev": 10, "mrv": 5}}, source="overrides.yaml")
        assert exc_info.value.path == "overrides.yaml"
        assert len(exc_info.value.details) == 1
        assert exc_info.value.details[0].startswith("Chest")

    def test_negative_and_missing_values_are_rejected(self) -> None:
        with pytest.raises(ThresholdConfigError) as exc_info:
            parse_threshold_overrides({"Chest": {"mev": -1, "mrv": 5}, "Lats": {"mev": 4}})
        assert len(exc_info.value.details) == 2


class TestLoadThresholdOverrides:
    """Tests for reading override files."""

    def test_load_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "thresholds.yaml"
        path.write_text("Chest:\n  mev: 8\n  mrv: 20\nabs: {mev: 2, mrv: 10}\n", encoding="utf-8")
        assert load_threshold_overrides(path) == {Muscle.CHEST: (8.0, 20.0), Muscle.ABS: (2.0, 10.0)}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "thresholds.yaml"
        path.write_text("", encoding="utf-8")
        assert load_threshold_overrides(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ThresholdConfigError, match="cannot read file"):
            load_threshold_overrides(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "thresholds.yaml"
        path.write_text("Chest: [mev: 8\n", encoding="utf-8")
        with pytest.raises(ThresholdConfigError, match="invalid YAML"):
            load_threshold_overrides(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "thresholds.yaml"
        path.write_text("- Chest\n- Lats\n", encoding="utf-8")
        with pytest.raises(ThresholdConfigError, match="must be a YAML mapping"):
            load_threshold_overrides(path)


def test_thresholds_from_settings_without_file() -> None:
    assert thresholds_from_settings(Settings(LIFTLOG_THRESHOLDS_FILE="")) == dict(DEFAULT_THRESHOLDS)


def test_thresholds_from_settings_with_file(tmp_path: Path) -> None:
    path = tmp_path / "thresholds.yaml"
    path.write_text("Biceps: {mev: 4, mrv: 12}\n", encoding="utf-8")

    merged = thresholds_from_settings(Settings(LIFTLOG_THRESHOLDS_FILE=str(path)))

    assert merged[Muscle.BICEPS] == (4.0, 12.0)
    assert merged[Muscle.CHEST] == DEFAULT_THRESHOLDS[Muscle.CHEST]
