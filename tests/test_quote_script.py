"""Command-line quote script."""
import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "quote.py"


@pytest.fixture(scope="module")
def quote():
    spec = importlib.util.spec_from_file_location("quote_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_quote_prints_itemized_total(quote, capsys):
    assert quote.main(["amnh", "--adult", "2", "--child", "1"]) == 0
    out = capsys.readouterr().out
    assert "American Museum of Natural History" in out
    assert "2 adults" in out and "$56.00" in out
    assert "1 child" in out and "$16.50" in out
    assert "$72.50" in out


def test_quote_clamps_bad_counts(quote, capsys):
    assert quote.main(["met", "--adult", "-3", "--senior", "abc"]) == 0
    assert "No visitors entered." in capsys.readouterr().out


def test_quote_unknown_museum(quote, capsys):
    assert quote.main(["louvre", "--adult", "1"]) == 1
    assert "Unknown museum" in capsys.readouterr().out


def test_quote_lists_catalog(quote, capsys):
    assert quote.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "whitney" in out and "Free" in out
