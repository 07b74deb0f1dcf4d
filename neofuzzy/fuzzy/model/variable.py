# InputVariable: zakres + liczba reguł -> Synapse (siatka trójkątów)

from __future__ import annotations
from dataclasses import dataclass
from typing import List
from ..core.mfs import Triangular
from ..core.rule import SingletonConsequentRule
from ..core.types import ConstructionError, Float, require
from .synapse import Synapse

DEFAULT_RULES = 10


def grid_partition(lower: Float, upper: Float, count: int = DEFAULT_RULES) -> List[Triangular]:
    """
    `count` trójkątów o wierzchołkach równo rozłożonych na [lower, upper];
    stopy każdego trójkąta leżą na wierzchołkach sąsiadów (na krańcach – na granicy zakresu),
    więc dla dowolnego x z zakresu suma μ = 1 i aktywne są najwyżej dwa trójkąty.
    """
    if count < 1:
        raise ConstructionError("Number of Rules must be at least 1")
    if lower >= upper:
        raise ConstructionError(f"Input signal range [{lower}, {upper}] is incorrectly specified.")
    if count == 1:
        return [Triangular(lower, (lower + upper) / 2.0, upper)]
    step = (upper - lower) / (count - 1)
    out = []
    for i in range(count):
        b = min(upper, lower + step * i)
        a = max(lower, b - step)
        c = min(upper, b + step)
        out.append(Triangular(a, b, c))
    return out


@dataclass
class InputVariable:
    name: str
    vmin: Float
    vmax: Float
    terms: int = DEFAULT_RULES

    def build(self) -> Synapse:
        require(self.name, "Synapse name must not be None")
        mfs = grid_partition(self.vmin, self.vmax, self.terms)
        return Synapse(self.name, [SingletonConsequentRule(mf) for mf in mfs])
