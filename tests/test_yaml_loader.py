"""Tests for input files and packaged presets."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from firstmillion.config.defaults import (
    default_inputs,
    preset_inputs,
    preset_label,
    preset_names,
)
from firstmillion.config.schema import PeriodType, RateType
from firstmillion.io.yaml_loader import load_inputs_file, load_package_yaml
from firstmillion.utils.exceptions import ConfigError


class TestLoadInputsFile:
    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({"initial": 1000, "monthly": 200, "rate": 8}))
        inputs = load_inputs_file(path)
        assert inputs.initial == 1000
        assert inputs.rate_type is RateType.YEARLY

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "inputs.yml"
        path.write_text("monthly: 750\nrate: 1\nrate_type: mensal\nperiod: 48\nperiod_type: meses\n")
        inputs = load_inputs_file(path)
        assert inputs.monthly == 750
        assert inputs.rate_type is RateType.MONTHLY
        assert inputs.period_type is PeriodType.MONTHS

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "inputs.toml"
        path.write_text("rate = 1\n")
        with pytest.raises(ConfigError, match="Unsupported"):
            load_inputs_file(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "inputs.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_inputs_file(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({"rate": -3}))
        with pytest.raises(ValidationError):
            load_inputs_file(path)


class TestPresets:
    def test_package_file_loads(self) -> None:
        data = load_package_yaml("config/presets.yaml")
        assert isinstance(data, dict)

    def test_names(self) -> None:
        names = preset_names()
        assert names[0] == "comecando_do_zero"
        assert len(names) == 3

    def test_every_preset_validates(self) -> None:
        for name in preset_names():
            inputs = preset_inputs(name)
            assert inputs.total_months > 0

    def test_first_preset_matches_defaults(self) -> None:
        assert preset_inputs("comecando_do_zero") == default_inputs()

    def test_label(self) -> None:
        assert preset_label("renda_fixa") == "Renda Fixa"

    def test_unknown(self) -> None:
        with pytest.raises(ConfigError, match="Unknown preset"):
            preset_inputs("loteria")
        with pytest.raises(ConfigError):
            preset_label("loteria")
