"""Draw a gasket with matplotlib.

Circles are drawn as outlines with a transparent fill.  The stroke is
``settings.LINE_WIDTH_SCALE`` times the radius of the largest circle.
Figures are built without pyplot so no GUI backend is needed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import matplotlib.patches as patches
from matplotlib.figure import Figure

from . import settings
from .circle import Circle

log = logging.getLogger("apollonian.render")


def draw_circle(ax, circle: Circle, linewidth: float = 0.5, color: str = "black"):
    """Add one circle outline to ``ax`` and return the patch."""
    patch = patches.Circle(
        circle.center, circle.radius, fill=False, linewidth=linewidth, edgecolor=color
    )
    ax.add_patch(patch)
    return patch


def _points_per_unit(ax, span: float) -> float:
    width_in = ax.figure.get_figwidth() * ax.get_position().width
    return width_in * 72.0 / span


def draw_gasket(circles: Sequence[Circle], ax=None, color: str = "black"):
    """Overlay every circle on ``ax`` (a new figure if omitted)."""
    if ax is None:
        ax = Figure(figsize=(8, 8)).add_subplot(1, 1, 1)
    ax.set_aspect("equal")
    ax.set_axis_off()
    if not circles:
        return ax

    largest = max(circles, key=lambda c: c.radius)
    cx, cy = largest.center
    r = largest.radius
    margin = r * 0.05
    ax.set_xlim(cx - r - margin, cx + r + margin)
    ax.set_ylim(cy - r - margin, cy + r + margin)

    linewidth = settings.LINE_WIDTH_SCALE * r * _points_per_unit(ax, 2 * (r + margin))
    for c in circles:
        draw_circle(ax, c, linewidth=linewidth, color=color)
    return ax


def save_figure(
    circles: Sequence[Circle],
    path: Union[str, Path],
    dpi: int = 300,
    title: Optional[str] = None,
) -> Path:
    path = Path(path)
    fig = Figure(figsize=(8, 8))
    ax = draw_gasket(circles, ax=fig.add_subplot(1, 1, 1))
    if title:
        ax.set_title(title)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    log.info("Saved visualization to %s", path)
    return path
