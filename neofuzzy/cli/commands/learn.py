import logging

from ...fuzzy.model.builder import input_vector
from .common import neuron_from_args

logger = logging.getLogger(__name__)


def cmd_learn(args):
    """Jeden krok uczenia (bez zapisu wag) – podgląd, jak reguła odnowienia zmienia wyjście."""
    neuron = neuron_from_args(args)
    inputs = input_vector(args.kv)

    before = neuron.calculate(inputs)
    output = args.output if args.output is not None else before
    rate = args.rate if args.rate is not None else neuron.optimal_learning_rate(inputs)
    logger.info("learning step: target=%s output=%s rate=%s", args.target, output, rate)

    neuron.learn(inputs, args.target, output=output, learning_rate=rate)
    after = neuron.calculate(inputs)

    print(f"learning rate: {rate!r}")
    print(f"output before: {before!r}")
    print(f"output after:  {after!r}")
    print(f"target:        {args.target!r}")
    if args.show:
        print(neuron, end="")
