"""Apollonian gasket generation.

Every circle of the gasket is reached exactly once by the four trees
returned from :func:`apollonian_trees`.  Each node is a kissing set whose
selected circle has just been flipped; its three children select each of
the other three circles and flip them.  The circle just flipped away from
ends up among the fixed ``others`` of all three children, so no circle is
regenerated as its own parent, and the four seed circles never show up as
a selected circle.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ProcessPoolExecutor
from typing import Iterator, List, Sequence

from . import settings
from .circle import Circle
from .descartes import initial_config
from .errors import InvalidArity
from .kissing import KissingSet, flip_selected, kissing_sets, select_others
from .tree import Tree, iter_pruned, unfold_tree

log = logging.getLogger("apollonian.gasket")


def _children(ks: KissingSet[Circle]) -> List[KissingSet[Circle]]:
    return [flip_selected(k) for k in select_others(ks)]


def apollonian_tree(root: KissingSet[Circle]) -> Tree[KissingSet[Circle]]:
    """Grow the infinite Apollonian tree below an already flipped root."""
    return unfold_tree(root, _children)


def apollonian_trees(circles: Sequence[Circle]) -> List[Tree[KissingSet[Circle]]]:
    """The four infinite trees rooted at four mutually tangent circles.

    Each root selects one starting circle and flips it.
    """
    return [apollonian_tree(flip_selected(ks)) for ks in kissing_sets(circles)]


def _check_args(threshold: float, circles: Sequence[Circle]) -> List[Circle]:
    if not (threshold > 0 and math.isfinite(threshold)):
        raise ValueError(f"threshold must be a positive number, got {threshold!r}")
    circles = list(circles)
    if len(circles) != 4:
        raise InvalidArity(f"a gasket needs 4 starting circles, got {len(circles)}")
    return circles


def _large_enough(threshold: float):
    return lambda ks: ks.selected.radius >= threshold


def _walk(tree: Tree[KissingSet[Circle]], threshold: float) -> List[Circle]:
    return [ks.selected for ks in iter_pruned(tree, _large_enough(threshold))]


def surviving_nodes(threshold: float, circles: Sequence[Circle]) -> Iterator[KissingSet[Circle]]:
    """Yield the kissing set of every node kept by :func:`apollonian`, in order."""
    circles = _check_args(threshold, circles)
    for tree in apollonian_trees(circles):
        yield from iter_pruned(tree, _large_enough(threshold))


def _walk_root(root: KissingSet[Circle], threshold: float) -> List[Circle]:
    # Module level so that worker processes can unpickle it.
    return _walk(apollonian_tree(root), threshold)


def apollonian(
    threshold: float,
    circles: Sequence[Circle],
    parallel: bool = False,
) -> List[Circle]:
    """Generate the gasket containing four mutually tangent ``circles``.

    Recursion stops at the first circle on each branch whose (unsigned)
    radius is below ``threshold``; that circle and everything below it
    are dropped.  The result is the four starting circles followed by
    the surviving circles of each tree in depth-first order.

    With ``parallel`` the four trees are walked in worker processes; the
    output is the same as the serial run.
    """
    circles = _check_args(threshold, circles)

    if parallel:
        roots = [flip_selected(ks) for ks in kissing_sets(circles)]
        with ProcessPoolExecutor(max_workers=settings.PARALLEL_WORKERS) as pool:
            per_tree = list(pool.map(_walk_root, roots, [threshold] * len(roots)))
    else:
        per_tree = [_walk(tree, threshold) for tree in apollonian_trees(circles)]

    gasket = list(circles)
    for i, found in enumerate(per_tree):
        log.debug("tree %d: %d circles", i, len(found))
        gasket.extend(found)
    log.debug("gasket at threshold %g: %d circles", threshold, len(gasket))
    return gasket


def apollonian_gasket(
    threshold: float,
    b1: float,
    b2: float,
    b3: float,
    parallel: bool = False,
) -> List[Circle]:
    """Gasket grown from three signed bends, see :func:`initial_config`."""
    return apollonian(threshold, initial_config(b1, b2, b3), parallel=parallel)
