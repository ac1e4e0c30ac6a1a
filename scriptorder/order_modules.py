"""Logic for sorting modules into a resolved build order."""

from collections.abc import Callable, Iterable, Sequence
from operator import attrgetter
from typing import TypeVar

T = TypeVar("T")


def order_modules(
    modules: Iterable[T],
    order: Sequence[str],
    key: Callable[[T], str] = attrgetter("key"),
) -> list[T]:
    """Stably sort modules by their position in ``order``.

    Modules whose key is not in ``order`` go last, in their input order.
    Backslashes in keys are treated as forward slashes.
    """
    positions: dict[str, int] = {}
    for i, k in enumerate(order):
        positions.setdefault(k, i)
    unresolved = len(order)

    def position(module: T) -> int:
        return positions.get(key(module).replace("\\", "/"), unresolved)

    return sorted(modules, key=position)
