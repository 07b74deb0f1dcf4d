import argparse
from ..argtypes import parse_keyval, parse_var
# importy komend:
from .calculate import cmd_calculate
from .learn import cmd_learn
from .show import cmd_show


def _add_model_args(sp):
    g = sp.add_argument_group("Model")
    g.add_argument("--config", help="definicja neuronu: plik JSON lub YAML")
    g.add_argument("--var", action="append", type=parse_var, metavar="NAME=VMIN:VMAX[:RULES]",
                   help="zmienna wejściowa (synapsa); można podać wiele razy")


def build_parser():
    fmt = argparse.ArgumentDefaultsHelpFormatter
    ap = argparse.ArgumentParser(
        prog="neofuzzy",
        description="Neo-Fuzzy-Neuron CLI – podgląd, obliczenie wyjścia i pojedynczy krok uczenia",
        formatter_class=fmt,
        epilog=(
            "Przykłady:\n"
            "  neofuzzy show --var Sand=0:100 --var Water=0:1000 --at Sand=25.34 Water=76.5\n"
            "  neofuzzy calculate --config neuron.yaml Sand=25.34 Water=76.5\n"
            "  neofuzzy learn --config neuron.yaml --target 178.56 Sand=25.34 Water=76.5\n"
        )
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="logowanie DEBUG")

    sub = ap.add_subparsers(dest="cmd", required=True)

    # show
    sp_s = sub.add_parser("show", help="Pokaż synapsy i reguły; opcj. segmenty w punkcie", formatter_class=fmt)
    _add_model_args(sp_s)
    sp_s.add_argument("--at", nargs="*", type=parse_keyval, metavar="NAME=VALUE")
    sp_s.set_defaults(func=cmd_show)

    # calculate
    sp_c = sub.add_parser("calculate", help="Wyjście neuronu dla próbki", formatter_class=fmt)
    _add_model_args(sp_c)
    sp_c.add_argument("kv", nargs="+", type=parse_keyval, help="NAME=VALUE")
    sp_c.set_defaults(func=cmd_calculate)

    # learn
    sp_l = sub.add_parser("learn", help="Pojedynczy krok uczenia (wagi nie są zapisywane)", formatter_class=fmt)
    _add_model_args(sp_l)
    sp_l.add_argument("kv", nargs="+", type=parse_keyval, help="NAME=VALUE")
    sp_l.add_argument("--target", type=float, required=True, help="pożądane wyjście")
    sp_l.add_argument("--output", type=float, default=None, help="wyjście neuronu (domyślnie: obliczone)")
    sp_l.add_argument("--rate", type=float, default=None, help="współczynnik uczenia (domyślnie: optymalny)")
    sp_l.add_argument("--show", action="store_true", help="wypisz neuron po kroku uczenia")
    sp_l.set_defaults(func=cmd_learn)

    return ap
