from __future__ import annotations
from typing import Optional
from .mfs import MembershipFunction
from .types import Float, LearningFunction, require


class ImplicationRule:
    """Reguła implikacji w synapsie: antecedent (MF) + regulowany konsekwent."""

    @property
    def membership_function(self) -> Optional[MembershipFunction]:
        raise NotImplementedError

    def evaluate(self, x: Float) -> Float:
        raise NotImplementedError

    def adjust(self, learning_function: LearningFunction) -> None:
        raise NotImplementedError


class SingletonConsequentRule(ImplicationRule):
    """
    IF x is A THEN y is w, gdzie w to singleton (waga) startujący od 0.

    Równość i hash liczone wyłącznie po MF – dwie reguły o tym samym
    antecedencie są równe niezależnie od wyuczonej wagi.
    """

    def __init__(self, function: Optional[MembershipFunction]) -> None:
        self._function = function
        self._weight: Float = 0.0

    @property
    def membership_function(self) -> Optional[MembershipFunction]:
        return self._function

    @property
    def weight(self) -> Float:
        return self._weight

    def evaluate(self, x: Float) -> Float:
        require(self._function, "Membership Function must not be None")
        return self._function.mu(x) * self._weight

    def adjust(self, learning_function: LearningFunction) -> None:
        require(learning_function, "Learning Function must not be None")
        require(self._function, "Membership Function must not be None")
        self._weight += learning_function(self._function)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SingletonConsequentRule):
            return NotImplemented
        return self._function == other._function

    def __hash__(self) -> int:
        return hash(self._function)

    def __str__(self) -> str:
        return f"Rule: If 'x' is {self._function} then 'y' is {self._weight}"

    __repr__ = __str__
