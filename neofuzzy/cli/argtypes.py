import argparse

from ..fuzzy.model.variable import DEFAULT_RULES, InputVariable


def parse_var(s: str) -> InputVariable:
    """'Sand=0:100' lub 'Sand=0:100:10' -> InputVariable (nazwa, zakres, liczba reguł)."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"Niepoprawna zmienna: '{s}' (oczekiwano 'nazwa=vmin:vmax[:reguły]').")
    name, spec = (t.strip() for t in s.split("=", 1))
    parts = spec.split(":")
    if not name or len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Niepoprawna zmienna: '{s}' (oczekiwano 'nazwa=vmin:vmax[:reguły]').")
    try:
        vmin, vmax = float(parts[0]), float(parts[1])
        terms = int(parts[2]) if len(parts) == 3 else DEFAULT_RULES
    except ValueError:
        raise argparse.ArgumentTypeError(f"Niepoprawne liczby w: '{s}'.")
    return InputVariable(name, vmin, vmax, terms)


def parse_keyval(s: str):
    """'Sand=25.34' -> ('Sand', 25.34)"""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"Niepoprawny element: '{s}' (oczekiwano 'nazwa=wartość').")
    k, v = (t.strip() for t in s.split("=", 1))
    if not k:
        raise argparse.ArgumentTypeError(f"Pusty klucz w: '{s}'.")
    try:
        return k, float(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Niepoprawna wartość w: '{s}'.")
