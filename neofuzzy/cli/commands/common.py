from ...fuzzy.io.config import ConfigError, build_neuron, neuron_from_config
from ...fuzzy.model.neuron import NeoFuzzyNeuron


def neuron_from_args(args) -> NeoFuzzyNeuron:
    """Neuron z --config (JSON/YAML) albo z listy --var."""
    cfg_path = getattr(args, "config", None)
    variables = getattr(args, "var", None) or []
    if cfg_path and variables:
        raise ConfigError("użyj --config albo --var, nie obu naraz", "cli")
    if cfg_path:
        return neuron_from_config(cfg_path)
    if not variables:
        raise ConfigError("podaj --config lub co najmniej jedno --var", "cli")
    return build_neuron(variables)
