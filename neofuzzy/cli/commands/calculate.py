from ...fuzzy.model.builder import input_vector
from .common import neuron_from_args


def cmd_calculate(args):
    neuron = neuron_from_args(args)
    inputs = input_vector(args.kv)
    print(f"output: {neuron.calculate(inputs)!r}")
