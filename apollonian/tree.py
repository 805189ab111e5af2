"""Lazily expanded rose trees.

An Apollonian tree has no leaves, so children are only built when
something asks for them.  Walk it with :func:`iter_pruned` (or cut it
with :func:`prune`) before flattening.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Tree(Generic[T]):
    """A node holding ``value`` whose children come from ``expand``.

    ``expand(value)`` returns the child values.  A node can also be built
    with an explicit ``children`` list, which is how pruned trees are
    represented.
    """

    __slots__ = ("value", "_expand", "_children")

    def __init__(
        self,
        value: T,
        expand: Optional[Callable[[T], Iterable[T]]] = None,
        children: Optional[List["Tree[T]"]] = None,
    ) -> None:
        if expand is None and children is None:
            children = []
        self.value = value
        self._expand = expand
        self._children = children

    @property
    def expanded(self) -> bool:
        return self._children is not None

    @property
    def children(self) -> List["Tree[T]"]:
        if self._children is None:
            self._children = [Tree(v, self._expand) for v in self._expand(self.value)]
        return self._children

    def _fresh_children(self) -> List["Tree[T]"]:
        # Built children are not kept, so a walk can drop nodes it has left.
        if self._children is not None:
            return self._children
        return [Tree(v, self._expand) for v in self._expand(self.value)]

    def __repr__(self) -> str:
        return f"Tree({self.value!r})"


def unfold_tree(seed: T, expand: Callable[[T], Iterable[T]]) -> Tree[T]:
    """Build the (possibly infinite) tree grown from ``seed``."""
    return Tree(seed, expand)


def prune(tree: Tree[T], predicate: Callable[[T], bool]) -> Optional[Tree[T]]:
    """Cut ``tree`` at the shallowest nodes failing ``predicate``.

    Returns a fully built finite tree, or ``None`` when the root fails.
    This recurses once per level; prefer :func:`iter_pruned` for deep trees.
    """
    if not predicate(tree.value):
        return None
    kept = [p for p in (prune(t, predicate) for t in tree._fresh_children()) if p is not None]
    return Tree(tree.value, children=kept)


def iter_pruned(tree: Tree[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Pre-order values of ``prune(tree, predicate)`` without building it.

    Children are not cached on the nodes, so visited subtrees can be freed.
    """
    stack = [tree]
    while stack:
        node = stack.pop()
        if not predicate(node.value):
            continue
        yield node.value
        stack.extend(reversed(node._fresh_children()))


def flatten(tree: Optional[Tree[T]]) -> List[T]:
    """Pre-order list of the values of a finite tree."""
    if tree is None:
        return []
    return list(iter_pruned(tree, lambda _: True))
