from __future__ import annotations
from typing import Iterable, List, Tuple
from ..core.rule import ImplicationRule
from ..core.types import Float, LearningFunction, require


class Synapse:
    """
    Synapsa = uporządkowany zbiór reguł implikacji dla jednej zmiennej wejściowej.

    Reguły trzymane w kolejności wstawienia, bez duplikatów (równość reguł po MF).
    Sumowanie zawsze w tej samej kolejności – wyniki float są powtarzalne.
    """

    def __init__(self, name: str, rules: Iterable[ImplicationRule]) -> None:
        require(name, "Synapse name must not be None")
        require(rules, "Implication Rules must not be None")
        self.name = name
        self.rules: Tuple[ImplicationRule, ...] = tuple(dict.fromkeys(rules))

    def apply(self, x: Float) -> Float:
        output = 0.0
        for rule in self.rules:
            output += rule.evaluate(x)
        return output

    def fuzzy_segment(self, x: Float) -> List[Float]:
        """
        Aktywny segment: maks. dwa niezerowe μ w kolejności reguł.
        Przy podziale jedności (sąsiednie trójkąty) aktywne są co najwyżej dwie reguły;
        kolejne aktywacje są pomijane.
        """
        segment = [0.0, 0.0]
        index = 0
        for rule in self.rules:
            if index == len(segment):
                break
            mf = require(rule.membership_function, "Membership Function must not be None")
            mu = mf.mu(x)
            if mu > 0:
                segment[index] = mu
                index += 1
        return segment

    def learn_with(self, learning_function: LearningFunction) -> None:
        require(learning_function, "Learning Function must not be None")
        for rule in self.rules:
            rule.adjust(learning_function)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Synapse):
            return NotImplemented
        return set(self.rules) == set(other.rules)

    def __hash__(self) -> int:
        return hash(frozenset(self.rules))

    def __str__(self) -> str:
        lines = [f"Synapse: {self.name}\n"]
        lines.extend(f"\t{rule}\n" for rule in self.rules)
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Synapse({self.name!r}, rules={len(self.rules)})"


def synapse(name: str, *rules: ImplicationRule) -> Synapse:
    require(name, "Synapse name must not be None")
    return Synapse(name, rules)
