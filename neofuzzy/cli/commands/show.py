import sys

from ...fuzzy.model.builder import input_vector
from .common import neuron_from_args

_RESET = "\x1b[0m"

def _use_ansi() -> bool:
    try:
        return sys.stdout.isatty()
    except Exception:
        return False

def _ansi_color(mu: float) -> str:
    """
    Kolor wg przynależności (μ):
      ≥ 0.50 → zielony
      > 0    → żółty
      = 0    → szary
    """
    if not _use_ansi():
        return ""
    if mu >= 0.50:
        return "\x1b[32m"
    if mu > 0.0:
        return "\x1b[33m"
    return "\x1b[90m"

def _fmt_mu(mu: float) -> str:
    col = _ansi_color(mu)
    return f"{col}{mu:.4f}{_RESET if col else ''}"


def cmd_show(args):
    neuron = neuron_from_args(args)
    print(neuron, end="")
    if not args.at:
        return

    inputs = input_vector(args.at)
    print("\nFuzzy segments:")
    for inp in inputs:
        syn = neuron.synapse_for(inp)
        seg = ", ".join(_fmt_mu(mu) for mu in syn.fuzzy_segment(inp.value))
        print(f"  {syn.name} = {inp.value:.6g}: [{seg}]  out={syn.apply(inp.value):.6g}")
    print(f"Output: {neuron.calculate(inputs):.6g}")
    print(f"Optimal learning rate: {neuron.optimal_learning_rate(inputs):.6g}")
