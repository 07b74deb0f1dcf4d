from typing import Any, Callable

Float = float

# (MembershipFunction) -> delta wagi; patrz model/learner.py
LearningFunction = Callable[[Any], Float]


class FuzzyError(Exception):
    """Domain error for fuzzy framework."""


class MissingValueError(FuzzyError, TypeError):
    """Brak wymaganego argumentu (None)."""


class ConstructionError(FuzzyError, ValueError):
    """Niepoprawne parametry przy budowie MF / synapsy / neuronu."""


def require(value, message: str):
    if value is None:
        raise MissingValueError(message)
    return value
