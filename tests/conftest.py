"""
Shared fixtures for the valuation splitter tests.
"""

import io
import json

import pytest
from rich.console import Console

from valuation_splitter.selection import Selector


@pytest.fixture
def sample_records():
    """Three valuation records from the basic scenario."""
    return [
        {"Valuation_ID": 1, "X": "a"},
        {"Valuation_ID": 2, "X": "b"},
        {"Valuation_ID": 3, "X": "c"},
    ]


@pytest.fixture
def nested_records():
    """Records with nesting, mixed scalar types and non-ASCII text."""
    return [
        {
            "Valuation_ID": "V-100",
            "Address": {"Street": "12 Rue de l'Église", "Unit": None},
            "Valuation_Amount": 425000.5,
            "Occupied": True,
            "History": [{"Year": 2020, "Amount": 400000}, {"Year": 2021, "Amount": 410000}],
            "Deep": {"a": {"b": {"c": {"d": {"e": {"f": {"g": {"h": {"i": {"j": {"k": "bottom"}}}}}}}}}}},
        },
        {"Valuation_ID": "V-101", "Address": {"Street": "1 Main St"}, "Valuation_Amount": 0, "Occupied": False},
        {"Valuation_ID": "V-102", "Zip": "01234", "Tags": []},
    ]


@pytest.fixture
def write_json(tmp_path):
    """Write `data` as JSON to tmp_path/name and return the path as a string."""
    def _write(data, name="export.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


def output_files(directory):
    """Names of the split outputs present in a directory."""
    return sorted(
        p.name for p in directory.iterdir()
        if p.name.endswith("_PropertiesIncluded.json") or p.name.endswith("_PropertiesExcluded.json")
    )


@pytest.fixture
def list_outputs():
    return output_files


class StaticSelector(Selector):
    """Answers every selection with a fixed result and remembers what it was shown."""

    def __init__(self, result):
        self.result = result
        self.seen = []

    def select(self, records):
        self.seen.append(records)
        return self.result


@pytest.fixture
def static_selector():
    return StaticSelector


@pytest.fixture
def make_console():
    """Console writing into a buffer; read it back with `console.file.getvalue()`."""
    def _make():
        return Console(file=io.StringIO(), width=300, color_system=None)
    return _make
