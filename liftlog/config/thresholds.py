"""User threshold overrides.

Overrides are read from a YAML mapping of muscle name to landmarks:

    Chest:
      mev: 8
      mrv: 20
    side delts: {mev: 10, mrv: 24}

Muscle names are matched the same way custom exercise muscles are (trimmed,
case-insensitive). An override replaces the whole (MEV, MRV) pair.

This is configuration-time I/O only; analyzers receive the merged table and
never read files.
"""

from collections.abc import Mapping
from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, model_validator

from liftlog.config.settings import Settings
from liftlog.errors import ThresholdConfigError
from liftlog.muscles.catalog import Muscle, VolumeThreshold, lookup_muscle, merge_thresholds


class ThresholdOverride(BaseModel):
    """One user-supplied (MEV, MRV) pair."""

    mev: float = Field(..., ge=0)
    mrv: float = Field(..., ge=0)

    @model_validator(mode="after")
    def check_order(self) -> "ThresholdOverride":
        if self.mrv < self.mev:
            raise ValueError(f"mrv ({self.mrv}) must be >= mev ({self.mev})")
        return self

    def as_threshold(self) -> VolumeThreshold:
        return VolumeThreshold(mev=self.mev, mrv=self.mrv)


def parse_threshold_overrides(raw: Mapping[str, object], source: str = "<overrides>") -> dict[Muscle, VolumeThreshold]:
    """Validate a raw {muscle name: {mev, mrv}} mapping.

    Entries naming untracked muscles are dropped with a warning.

    Raises:
        ThresholdConfigError: If any tracked muscle's entry is invalid
    """
    overrides: dict[Muscle, VolumeThreshold] = {}
    errors: list[str] = []
    for name, entry in raw.items():
        muscle = lookup_muscle(str(name))
        if muscle is None:
            logger.warning(f"Ignoring threshold override for untracked muscle '{name}' in {source}")
            continue
        try:
            override = ThresholdOverride.model_validate(entry)
        except ValidationError as e:
            errors.append(f"{muscle}: {e.errors()[0]['msg']}")
            continue
        overrides[muscle] = override.as_threshold()

    if errors:
        raise ThresholdConfigError(source, errors)
    return overrides


def load_threshold_overrides(path: str | Path) -> dict[Muscle, VolumeThreshold]:
    """Load and validate a YAML threshold override file.

    Args:
        path: Path to the YAML file

    Returns:
        Muscle -> override pair (only muscles present in the file)

    Raises:
        ThresholdConfigError: If the file is missing, not valid YAML, not a
            mapping, or holds an invalid entry
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ThresholdConfigError(str(file_path), [f"cannot read file: {e}"]) from e

    try:
        raw = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ThresholdConfigError(str(file_path), [f"invalid YAML: {e}"]) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ThresholdConfigError(str(file_path), ["threshold overrides must be a YAML mapping"])

    overrides = parse_threshold_overrides(raw, source=str(file_path))
    logger.info(f"Loaded {len(overrides)} threshold override(s) from {file_path}")
    return overrides


def thresholds_from_settings(config: Settings) -> dict[Muscle, VolumeThreshold]:
    """Merged threshold table for the configured override file, if any."""
    if not config.thresholds_file:
        return merge_thresholds()
    return merge_thresholds(load_threshold_overrides(config.thresholds_file))
