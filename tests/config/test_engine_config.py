from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from payroll_model.config.loaders import ConfigLoadError, load_engine_config, load_yaml_config
from payroll_model.config.models import DEFAULT_CONFIG, EngineConfig, RevenueBase

DEFAULT_YAML = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


def test_packaged_default_matches_builtin():
    assert load_engine_config(DEFAULT_YAML) == DEFAULT_CONFIG


def test_defaults():
    assert DEFAULT_CONFIG.bruto_factor == 1.63
    assert DEFAULT_CONFIG.default_tuition_increase_pct == 6.0
    assert DEFAULT_CONFIG.revenue_base.annual_amount == 120 * 300.0 * 12


def test_partial_file_keeps_defaults(tmp_path):
    f = tmp_path / "partial.yaml"
    f.write_text(yaml.safe_dump({"revenue_base": {"enrolled_children": 80}}))
    config = load_engine_config(f)

    assert config.bruto_factor == DEFAULT_CONFIG.bruto_factor
    assert config.revenue_base.enrolled_children == 80
    assert config.revenue_base.monthly_tuition == 300.0


def test_empty_file_gives_defaults(tmp_path):
    f = tmp_path / "empty.yaml"
    f.write_text("")
    assert load_engine_config(f) == DEFAULT_CONFIG


def test_missing_file(tmp_path):
    with pytest.raises(ConfigLoadError):
        load_yaml_config(tmp_path / "nope.yaml")


def test_non_mapping_file(tmp_path):
    f = tmp_path / "list.yaml"
    f.write_text(yaml.safe_dump([1, 2, 3]))
    with pytest.raises(ConfigLoadError):
        load_yaml_config(f)


def test_invalid_yaml(tmp_path):
    f = tmp_path / "broken.yaml"
    f.write_text("bruto_factor: [1.63\n")
    with pytest.raises(ConfigLoadError):
        load_yaml_config(f)


@pytest.mark.parametrize(
    "raw",
    [
        {"bruto_factor": "high"},
        {"unknown_key": 1},
        {"revenue_base": {"enrolled_children": 1.5}},
    ],
)
def test_schema_violations(tmp_path, raw):
    f = tmp_path / "bad.yaml"
    f.write_text(yaml.safe_dump(raw))
    with pytest.raises(ConfigLoadError, match="validation failed"):
        load_engine_config(f)


@pytest.mark.parametrize(
    "raw",
    [
        {"bruto_factor": 0},
        {"bruto_factor": -1.2},
        {"revenue_base": {"monthly_tuition": -10.0}},
        {"revenue_base": {"billing_months": 13}},
    ],
)
def test_value_violations(tmp_path, raw):
    f = tmp_path / "bad.yaml"
    f.write_text(yaml.safe_dump(raw))
    with pytest.raises(ConfigLoadError):
        load_engine_config(f)


def test_config_is_frozen_and_hashable():
    config = EngineConfig(revenue_base=RevenueBase(enrolled_children=10))
    with pytest.raises(ValidationError):
        config.bruto_factor = 2.0
    assert hash(config) == hash(EngineConfig(revenue_base=RevenueBase(enrolled_children=10)))


def test_zero_revenue_base_warns(caplog):
    with caplog.at_level("WARNING"):
        EngineConfig(revenue_base=RevenueBase(enrolled_children=0))
    assert "Revenue base is zero" in caplog.text
