"""Default configuration values for firstmillion."""

from __future__ import annotations

from typing import Any

from firstmillion.config.schema import PeriodType, ProjectionInputs, RateType
from firstmillion.io.yaml_loader import load_package_yaml
from firstmillion.utils.exceptions import ConfigError

# Balance the projection is measured against.
MILESTONE_AMOUNT: float = 1_000_000.0

PRESETS_FILE = "config/presets.yaml"


def default_inputs() -> ProjectionInputs:
    """Starting form state: R$ 500/month at 10% a year for 30 years."""
    return ProjectionInputs(
        initial=0.0,
        monthly=500.0,
        rate=10.0,
        rate_type=RateType.YEARLY,
        period=30,
        period_type=PeriodType.YEARS,
    )


def _load_presets() -> dict[str, dict[str, Any]]:
    data = load_package_yaml(PRESETS_FILE)
    if not isinstance(data, dict):
        raise ConfigError(f"{PRESETS_FILE} must contain a mapping of presets")
    return data


def preset_names() -> list[str]:
    """Return the available preset keys, in file order."""
    return list(_load_presets())


def preset_label(name: str) -> str:
    """Return the display label of a preset."""
    presets = _load_presets()
    if name not in presets:
        raise ConfigError(f"Unknown preset '{name}'. Available: {', '.join(presets)}")
    return str(presets[name].get("label", name))


def preset_inputs(name: str) -> ProjectionInputs:
    """Build validated inputs for a named preset."""
    presets = _load_presets()
    if name not in presets:
        raise ConfigError(f"Unknown preset '{name}'. Available: {', '.join(presets)}")
    values = {k: v for k, v in presets[name].items() if k != "label"}
    return ProjectionInputs.model_validate(values)
