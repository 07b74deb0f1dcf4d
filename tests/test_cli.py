"""
Tests for the argparse CLI (show / calculate / learn).
"""

import argparse

import pytest

from neofuzzy.cli.argtypes import parse_keyval, parse_var
from neofuzzy.cli.main import main

VARS = ["--var", "Sand=0:100", "--var", "Water=0:1000:10"]


# ============================================================
# Argument types
# ============================================================

def test_parse_var():
    var = parse_var("Sand=0:100:5")
    assert (var.name, var.vmin, var.vmax, var.terms) == ("Sand", 0.0, 100.0, 5)
    assert parse_var("Water=0:1000").terms == 10


@pytest.mark.parametrize("raw", ["Sand", "Sand=0", "Sand=a:b", "=0:1", "Sand=0:1:2:3"])
def test_parse_var_rejects(raw):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_var(raw)


def test_parse_keyval():
    assert parse_keyval("Sand=25.34") == ("Sand", 25.34)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_keyval("Sand")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_keyval("Sand=abc")


# ============================================================
# Commands
# ============================================================

def test_show(capsys):
    assert main(["show"] + VARS) is None
    out = capsys.readouterr().out
    assert out.startswith("Neo-Fuzzy-Neuron:\n")
    assert "Synapse: Sand\n" in out
    assert "Synapse: Water\n" in out
    assert out.count("Rule: If 'x' is") == 20


def test_show_at(capsys):
    main(["show"] + VARS + ["--at", "Sand=4.8", "Water=343.67"])
    out = capsys.readouterr().out
    assert "Fuzzy segments:" in out
    assert "Output: 0" in out
    assert "Optimal learning rate: 0.745992" in out


def test_calculate(capsys):
    main(["calculate"] + VARS + ["Sand=25.34", "Water=76.5"])
    assert capsys.readouterr().out == "output: 0.0\n"


def test_learn(capsys):
    main(["learn"] + VARS + ["--target", "178.56", "Sand=25.34", "Water=76.5"])
    out = capsys.readouterr().out
    assert "output before: 0.0\n" in out
    assert "output after:  178.55999999999997\n" in out


def test_learn_with_rate_and_show(capsys):
    main(["learn"] + VARS + ["--target", "10", "--rate", "0.5", "--show", "Sand=0", "Water=0"])
    out = capsys.readouterr().out
    assert "learning rate: 0.5\n" in out
    assert "output after:  10.0\n" in out
    assert "Neo-Fuzzy-Neuron:\n" in out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "neuron.yaml"
    path.write_text("variables:\n  - {name: Sand, range: [0, 100]}\n", encoding="utf-8")
    main(["calculate", "--config", str(path), "Sand=25.34"])
    assert capsys.readouterr().out == "output: 0.0\n"


def test_unknown_synapse_reports_error(capsys):
    assert main(["calculate"] + VARS + ["Rocks=1", "Water=2"]) == 2
    assert "rocks" in capsys.readouterr().err


def test_dimension_error(capsys):
    assert main(["calculate"] + VARS + ["Sand=1"]) == 2
    assert "does not correspond" in capsys.readouterr().err


def test_missing_model(capsys):
    assert main(["calculate", "Sand=1"]) == 2
    assert "--config" in capsys.readouterr().err


def test_missing_config_file(tmp_path, capsys):
    path = tmp_path / "nonexistent.yaml"
    assert main(["calculate", "--config", str(path), "Sand=1"]) == 2
    assert "nonexistent.yaml" in capsys.readouterr().err
