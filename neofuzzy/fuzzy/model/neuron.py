from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence
from ..core.types import ConstructionError, Float, FuzzyError, require
from .learner import optimal_rate, stepwise_learning
from .synapse import Synapse

logger = logging.getLogger(__name__)


class NeuronInputDimensionError(FuzzyError, ValueError):
    def __init__(self, input_dimension: int, synapse_count: int) -> None:
        super().__init__(f"Current Input dimension [{input_dimension}] does not correspond "
                         f"to synapse number [{synapse_count}]")
        self.input_dimension = input_dimension
        self.synapse_count = synapse_count


class SynapseNameNotFoundError(FuzzyError, LookupError):
    def __init__(self, synapse_name: str) -> None:
        super().__init__(f"Synapse with name [{synapse_name}] was not found")
        self.synapse_name = synapse_name


def normalize_name(name: str) -> str:
    """Normalizacja nazw synaps: stosowana przy wstawianiu i przy wyszukiwaniu."""
    return name.lower()


@dataclass(frozen=True, eq=False)
class Input:
    synapse_name: str
    value: Float

    def __post_init__(self) -> None:
        require(self.synapse_name, "Synapse name must not be None")
        object.__setattr__(self, "value", float(self.value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return normalize_name(self.synapse_name) == normalize_name(other.synapse_name) and self.value == other.value

    def __hash__(self) -> int:
        return hash((normalize_name(self.synapse_name), self.value))

    def __str__(self) -> str:
        return f"({self.synapse_name}: {self.value})"


class NeoFuzzyNeuron:
    """
    Neo-Fuzzy-Neuron: y = Σ_i synapse_i(x_i).

    Zbiór synaps ustalony przy budowie (klucze case-insensitive, ostatni wygrywa);
    w trakcie życia zmieniają się tylko wagi reguł. Brak blokad – równoległe
    wywołania `learn` na jednym neuronie trzeba serializować po stronie wołającego.
    """

    def __init__(self, synapses: Dict[str, Synapse]) -> None:
        require(synapses, "Synapses must not be None")
        if not synapses:
            raise ConstructionError("Neuron needs at least one Synapse")
        self.synapses: Dict[str, Synapse] = {}
        for name, syn in synapses.items():
            self.synapses[normalize_name(name)] = require(syn, "Synapse must not be None")

    # ---------- API ----------

    def calculate(self, inputs: Sequence[Input]) -> Float:
        self.check_input_dimension(inputs)
        output = 0.0
        for inp in inputs:
            output += self.synapse_for(inp).apply(inp.value)
        return output

    def learn(self, inputs: Sequence[Input], training_data: Float,
              output: Optional[Float] = None, learning_rate: Optional[Float] = None) -> None:
        """
        Jeden krok uczenia.
          - bez `output`: y liczone przez calculate(inputs),
          - bez `learning_rate`: α = optimal_learning_rate(inputs).
        Walidacja wymiaru i nazw odbywa się przed jakąkolwiek zmianą wag.
        """
        if output is None:
            output = self.calculate(inputs)
        if learning_rate is None:
            learning_rate = self.optimal_learning_rate(inputs)
        self.check_input_dimension(inputs)
        targets = [(self.synapse_for(inp), inp.value) for inp in inputs]
        logger.debug("learn: output=%r target=%r rate=%r", output, training_data, learning_rate)
        for syn, value in targets:
            syn.learn_with(stepwise_learning(value, output, training_data, learning_rate))

    def optimal_learning_rate(self, inputs: Sequence[Input]) -> Float:
        self.check_input_dimension(inputs)
        return optimal_rate(self.synapse_for(inp).fuzzy_segment(inp.value) for inp in inputs)

    # ---------- helpers ----------

    def synapse_for(self, inp: Input) -> Synapse:
        require(inp, "Input must not be None")
        name = normalize_name(inp.synapse_name)
        if name not in self.synapses:
            raise SynapseNameNotFoundError(name)
        return self.synapses[name]

    def check_input_dimension(self, inputs: Sequence[Input]) -> Sequence[Input]:
        require(inputs, "Inputs must not be None")
        if len(inputs) != len(self.synapses):
            raise NeuronInputDimensionError(len(inputs), len(self.synapses))
        return inputs

    # ---------- diagnostyka ----------

    def __eq__(self, other) -> bool:
        if not isinstance(other, NeoFuzzyNeuron):
            return NotImplemented
        return self.synapses == other.synapses

    def __hash__(self) -> int:
        return hash(frozenset(self.synapses.items()))

    def __str__(self) -> str:
        return "Neo-Fuzzy-Neuron:\n" + "".join(str(s) for s in self.synapses.values())


def neuron(*synapses: Synapse) -> NeoFuzzyNeuron:
    mapping: Dict[str, Synapse] = {}
    for syn in synapses:
        require(syn, "Synapse must not be None")
        mapping[normalize_name(syn.name)] = syn
    return NeoFuzzyNeuron(mapping)
