"""Apollonian gasket generation via Descartes' circle theorem."""

__all__ = [
    # Circles
    "Circle",
    "mk_circle",
    "tangency_error",
    "is_tangent",
    # Descartes' theorem
    "descartes",
    "other",
    "initial_config",
    # Kissing sets
    "KissingSet",
    "kissing_sets",
    "flip_selected",
    "select_others",
    "is_kissing",
    # Trees and gasket generation
    "Tree",
    "apollonian_tree",
    "apollonian_trees",
    "apollonian",
    "apollonian_gasket",
    "surviving_nodes",
    # Errors
    "GasketError",
    "InvalidArity",
    "NumericDomainError",
]

from .circle import Circle, is_tangent, mk_circle, tangency_error
from .descartes import descartes, initial_config, other
from .errors import GasketError, InvalidArity, NumericDomainError
from .gasket import (
    apollonian,
    apollonian_gasket,
    apollonian_tree,
    apollonian_trees,
    surviving_nodes,
)
from .kissing import KissingSet, flip_selected, is_kissing, kissing_sets, select_others
from .tree import Tree
