"""
Tests for JSON/YAML neuron definitions.
"""

import json

import pytest

from neofuzzy.fuzzy.core.types import ConstructionError
from neofuzzy.fuzzy.io.config import ConfigError, load_config, neuron_from_config, parse_variables
from neofuzzy.fuzzy.model.builder import NeuronBuilder


@pytest.fixture
def expected():
    return NeuronBuilder().with_range("Sand", 0, 100).with_range("Water", 0, 1000, count=5).build()


def test_yaml(tmp_path, expected):
    path = tmp_path / "neuron.yaml"
    path.write_text(
        "neuron:\n"
        "  variables:\n"
        "    - {name: Sand, range: [0, 100]}\n"
        "    - name: Water\n"
        "      range: [0, 1000]\n"
        "      rules: 5\n",
        encoding="utf-8",
    )
    assert neuron_from_config(str(path)) == expected


def test_json_without_neuron_key(tmp_path, expected):
    path = tmp_path / "neuron.json"
    path.write_text(json.dumps({"variables": [
        {"name": "Sand", "range": [0, 100], "rules": 10},
        {"name": "Water", "range": [0, 1000], "rules": 5},
    ]}), encoding="utf-8")
    nfn = neuron_from_config(str(path))
    assert nfn == expected
    assert set(nfn.synapses) == {"sand", "water"}


def test_unparsable_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc:
        load_config(str(tmp_path / "missing.yaml"))
    assert "missing.yaml" in str(exc.value)


def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path))


@pytest.mark.parametrize("cfg", [
    {},
    {"neuron": []},
    {"variables": []},
    {"variables": ["Sand"]},
    {"variables": [{"range": [0, 1]}]},
    {"variables": [{"name": "Sand"}]},
    {"variables": [{"name": "Sand", "range": [0, 1, 2]}]},
    {"variables": [{"name": "Sand", "range": ["a", 1]}]},
    {"variables": [{"name": "Sand", "range": [0, 1], "rules": "many"}]},
])
def test_malformed_definitions(cfg):
    with pytest.raises(ConfigError):
        parse_variables(cfg)


def test_invalid_range_is_construction_error(tmp_path):
    path = tmp_path / "neuron.json"
    path.write_text(json.dumps({"variables": [{"name": "Sand", "range": [10, 0]}]}), encoding="utf-8")
    with pytest.raises(ConstructionError):
        neuron_from_config(str(path))


def test_duplicate_names(tmp_path):
    path = tmp_path / "neuron.json"
    path.write_text(json.dumps({"variables": [
        {"name": "Sand", "range": [0, 1]},
        {"name": "sand", "range": [0, 2]},
    ]}), encoding="utf-8")
    with pytest.raises(ConstructionError):
        neuron_from_config(str(path))
