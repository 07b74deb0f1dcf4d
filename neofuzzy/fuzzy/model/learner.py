# Uczenie krokowe (stepwise) Neo-Fuzzy-Neuronu
#
# T. Yamakawa, "A New Effective Learning Algorithm for a Neo Fuzzy Neuron Model", 1992:
#   w_ij += -α · (y - y_d) · μ_ij(x_i)
#   α_opt = 1 / Σ_i Σ_j μ_ij(x_i)²   (po aktywnym segmencie każdej synapsy)

from __future__ import annotations
import math
from typing import Iterable
from ..core.mfs import MembershipFunction
from ..core.types import Float, LearningFunction


def stepwise_learning(value: Float, output: Float, training_data: Float,
                      learning_rate: Float) -> LearningFunction:
    """Funkcja ucząca dla jednego wejścia: jeden krok gradientu (y - y_d)² po wadze reguły."""
    def delta(mf: MembershipFunction) -> Float:
        return -learning_rate * (output - training_data) * mf.mu(value)
    return delta


def optimal_rate(segments: Iterable[Iterable[Float]]) -> Float:
    total = 0.0
    for segment in segments:
        for degree in segment:
            total += degree * degree
    # brak aktywnych reguł => krok nieskończony
    return 1 / total if total != 0.0 else math.inf
