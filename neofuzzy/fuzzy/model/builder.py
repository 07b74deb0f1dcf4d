from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Mapping, Tuple, Union
from ..core.types import ConstructionError, Float, require
from .neuron import Input, NeoFuzzyNeuron, normalize_name
from .synapse import Synapse
from .variable import DEFAULT_RULES, InputVariable

logger = logging.getLogger(__name__)


class NeuronBuilder:
    """
    Składanie neuronu ze zmiennych:

        NeuronBuilder().with_range("Sand", 0, 100).with_range("Water", 0, 1000, count=10).build()
    """

    def __init__(self) -> None:
        self.synapses: Dict[str, Synapse] = {}

    def with_variable(self, synapse: Synapse) -> "NeuronBuilder":
        """Gotowa synapsa; ta sama nazwa (bez względu na wielkość liter) nadpisuje poprzednią."""
        require(synapse, "Synapse instance must not be None")
        self.synapses[normalize_name(synapse.name)] = synapse
        return self

    def with_range(self, name: str, lower: Float, upper: Float,
                   count: int = DEFAULT_RULES) -> "NeuronBuilder":
        require(name, "Synapse name must not be None")
        if normalize_name(name) in self.synapses:
            raise ConstructionError(f"Synapse with name [{name}] is already defined")
        logger.debug("synapse %s: range [%s, %s], %d rules", name, lower, upper, count)
        return self.with_variable(InputVariable(name, lower, upper, count).build())

    def build(self) -> NeoFuzzyNeuron:
        if not self.synapses:
            raise ConstructionError("You have to specify at least one Synapse. "
                                    "See NeuronBuilder.with_variable() method")
        return NeoFuzzyNeuron(dict(self.synapses))


def input_vector(values: Union[Mapping[str, Float], Iterable[Tuple[str, Float]]]) -> List[Input]:
    """{'Sand': 25.34, 'Water': 76.5} lub [('Sand', 25.34), ...] -> [Input, ...]"""
    require(values, "Input values must not be None")
    pairs = values.items() if isinstance(values, Mapping) else values
    out: List[Input] = []
    seen = set()
    for name, value in pairs:
        require(name, "Synapse name must not be None")
        if normalize_name(name) in seen:
            raise ConstructionError(f"Duplicated Input for synapse [{name}]")
        seen.add(normalize_name(name))
        out.append(Input(name, value))
    if not out:
        raise ConstructionError("You have to specify at least one Input value")
    return out
