from __future__ import annotations
from dataclasses import dataclass
from .types import Float, ConstructionError


class MembershipFunction:
    def mu(self, x: Float) -> Float:
        raise NotImplementedError
    def support(self) -> tuple[Float, Float]:
        raise NotImplementedError


@dataclass(frozen=True)
class Triangular(MembershipFunction):
    """
    Znormalizowany trójkąt (a, b, c): a – lewa stopa, b – wierzchołek, c – prawa stopa.
    Zdegenerowane boki (a == b lub b == c) są dozwolone: μ(b) = 1, poza nimi 0.
    """
    a: Float; b: Float; c: Float

    def __post_init__(self) -> None:
        a, b, c = float(self.a), float(self.b), float(self.c)
        if not (a <= b <= c):
            raise ConstructionError(f"tri: wymagane a <= b <= c (dostałem {a}, {b}, {c})")
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "c", c)

    def mu(self, x: Float) -> Float:
        if x < self.a or x > self.c: return 0.0
        if x == self.b: return 1.0
        if self.a < self.b and x < self.b: return (x - self.a) / (self.b - self.a)
        if self.b < self.c and x > self.b: return (self.c - x) / (self.c - self.b)
        # NaN albo zdegenerowany bok
        return 0.0

    def support(self) -> tuple[Float, Float]:
        return (self.a, self.c)

    def __str__(self) -> str:
        return f"({self.a}, {self.b}, {self.c})"
