"""Tests for sorting modules into the resolved order."""

from dataclasses import dataclass
from pathlib import Path

from scriptorder.order_modules import order_modules
from scriptorder.source_module import SourceModule


@dataclass
class MockModule:
    """Mock module exposing only a key."""

    key: str


def keys(modules: list[MockModule]) -> list[str]:
    """Return the keys of the given modules."""
    return [m.key for m in modules]


def test_unresolved_modules_move_to_end() -> None:
    """Verify modules missing from the order are placed last."""
    modules = [MockModule("X"), MockModule("Y"), MockModule("Z")]
    assert keys(order_modules(modules, ["Z", "X"])) == ["Z", "X", "Y"]


def test_unresolved_keep_input_order() -> None:
    """Verify the sort is stable among modules absent from the order."""
    modules = [MockModule(k) for k in ["c", "a", "known", "b"]]
    assert keys(order_modules(modules, ["known"])) == ["known", "c", "a", "b"]


def test_empty_order_keeps_input() -> None:
    """Verify an empty order leaves the input untouched."""
    modules = [MockModule("b"), MockModule("a")]
    assert keys(order_modules(modules, [])) == ["b", "a"]


def test_backslash_keys_normalized() -> None:
    """Verify Windows-style separators match forward-slash order keys."""
    modules = [MockModule("lib\\b.js"), MockModule("lib\\a.js")]
    ordered = order_modules(modules, ["lib/a.js", "lib/b.js"])
    assert keys(ordered) == ["lib\\a.js", "lib\\b.js"]


def test_custom_key_function() -> None:
    """Verify arbitrary module objects can be sorted with a key function."""
    ordered = order_modules(["b.js", "a.js", "x.js"], ["a.js", "b.js"], key=str)
    assert ordered == ["a.js", "b.js", "x.js"]


def test_source_modules() -> None:
    """Verify SourceModule records are sorted by their key attribute."""
    modules = [
        SourceModule("foobar/bar.js", Path("/s/foobar/bar.js"), ""),
        SourceModule("foobar.js", Path("/s/foobar.js"), ""),
    ]
    ordered = order_modules(modules, ["foobar.js", "foobar/bar.js"])
    assert [m.key for m in ordered] == ["foobar.js", "foobar/bar.js"]
