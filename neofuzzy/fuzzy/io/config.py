"""
Definicja neuronu (JSON lub YAML):

  neuron:
    variables:
      - name: Sand
        range: [0, 100]
        rules: 10          # opcjonalnie, domyślnie 10
      - {name: Water, range: [0, 1000]}

Uwagi:
- Klucz 'neuron' na najwyższym poziomie jest opcjonalny.
- Nazwy zmiennych porównywane bez względu na wielkość liter (duplikaty => błąd).
- Plik opisuje wyłącznie strukturę; wagi reguł zawsze startują od 0.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List

import yaml

from ..core.types import FuzzyError
from ..model.builder import NeuronBuilder
from ..model.neuron import NeoFuzzyNeuron
from ..model.variable import DEFAULT_RULES, InputVariable

logger = logging.getLogger(__name__)


class ConfigError(FuzzyError, ValueError):
    def __init__(self, msg: str, source: str = "<config>"):
        super().__init__(f"[{source}] {msg}")


def load_config(path: str) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            src = f.read()
    except OSError as e:
        raise ConfigError(f"nie można odczytać pliku: {e}", path) from e
    try:
        if path.lower().endswith((".yml", ".yaml")):
            raw = yaml.safe_load(src)
        else:
            raw = json.loads(src)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"nie można sparsować pliku: {e}", path) from e
    if not isinstance(raw, dict):
        raise ConfigError("oczekiwano mapy na najwyższym poziomie", path)
    return raw


def parse_variables(cfg: Dict[str, Any], source: str = "<config>") -> List[InputVariable]:
    section = cfg.get("neuron", cfg)
    if not isinstance(section, dict):
        raise ConfigError("sekcja 'neuron' musi być mapą", source)
    entries = section.get("variables")
    if not isinstance(entries, list) or not entries:
        raise ConfigError("brak listy 'variables'", source)

    out: List[InputVariable] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ConfigError(f"variables[{i}]: oczekiwano mapy", source)
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"variables[{i}]: brak 'name'", source)
        rng = entry.get("range")
        if not isinstance(rng, (list, tuple)) or len(rng) != 2:
            raise ConfigError(f"{name}: 'range' musi mieć postać [vmin, vmax]", source)
        try:
            vmin, vmax = float(rng[0]), float(rng[1])
            terms = int(entry.get("rules", DEFAULT_RULES))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{name}: niepoprawna wartość liczbowa ({e})", source) from e
        out.append(InputVariable(name, vmin, vmax, terms))
    return out


def build_neuron(variables: List[InputVariable]) -> NeoFuzzyNeuron:
    builder = NeuronBuilder()
    for var in variables:
        builder.with_range(var.name, var.vmin, var.vmax, var.terms)
    logger.debug("neuron built from %d variables", len(variables))
    return builder.build()


def neuron_from_config(path: str) -> NeoFuzzyNeuron:
    return build_neuron(parse_variables(load_config(path), path))
