"""Kissing sets: four tangent objects with one of them selected."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

from . import settings
from .circle import is_tangent
from .descartes import other

T = TypeVar("T")


@dataclass(frozen=True)
class KissingSet(Generic[T]):
    """A distinguished ``selected`` item and the ``others`` around it.

    Nothing here requires the items to be circles, so bends work too.
    """

    selected: T
    others: Tuple[T, ...]

    def items(self) -> Tuple[T, ...]:
        return (self.selected,) + self.others


def select(items: Sequence[T]) -> Iterator[Tuple[T, Tuple[T, ...]]]:
    """Yield each item paired with the rest, keeping their order."""
    items = tuple(items)
    for i, item in enumerate(items):
        yield item, items[:i] + items[i + 1:]


def kissing_sets(items: Sequence[T]) -> List[KissingSet[T]]:
    """One kissing set per item, selecting each item in turn."""
    return [KissingSet(c, cs) for c, cs in select(items)]


def flip_selected(ks: KissingSet[T]) -> KissingSet[T]:
    """Replace the selected item with its dual; it stays selected."""
    return KissingSet(other(ks.others, ks.selected), ks.others)


def select_others(ks: KissingSet[T]) -> List[KissingSet[T]]:
    """Unselect the current item and select each of the others in turn."""
    return [KissingSet(c, (ks.selected,) + cs) for c, cs in select(ks.others)]


def is_kissing(ks: KissingSet, tol: float = settings.TANGENCY_TOL) -> bool:
    """True if the selected circle touches every one of the others."""
    return all(is_tangent(ks.selected, c, tol) for c in ks.others)
