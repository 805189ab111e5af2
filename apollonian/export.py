"""Serialize a gasket for other tools.

Circles are written as a point cloud (center, radius, bend) that
Blender Geometry Nodes or numpy code can pick up directly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Union

import numpy as np

from .circle import Circle

log = logging.getLogger("apollonian.export")

POINT_CLOUD_FORMAT = "apollonian_gasket_v1"


def gasket_array(circles: Sequence[Circle]) -> np.ndarray:
    """Return an ``(N, 4)`` array of ``x, y, radius, bend`` rows."""
    data = np.empty((len(circles), 4), dtype=np.float64)
    for i, c in enumerate(circles):
        x, y = c.center
        data[i] = (x, y, c.radius, c.bend)
    return data


def to_point_cloud(circles: Sequence[Circle]) -> Dict[str, Any]:
    data = gasket_array(circles)
    points = np.column_stack([data[:, 0], data[:, 1], np.zeros(len(data))])
    return {
        "points": points.tolist(),
        "attributes": {
            "radius": data[:, 2].tolist(),
            "bend": data[:, 3].tolist(),
            "outer_circle": (data[:, 3] < 0).tolist(),
        },
        "metadata": {
            "count": len(circles),
            "format": POINT_CLOUD_FORMAT,
            "description": "Point cloud data for Apollonian gasket",
        },
    }


def save_json(circles: Sequence[Circle], path: Union[str, Path]) -> Path:
    path = Path(path)
    with open(path, "w") as f:
        json.dump(to_point_cloud(circles), f, indent=2)
    log.info("Exported %d circles to %s", len(circles), path)
    return path


def save_npy(circles: Sequence[Circle], path: Union[str, Path]) -> Path:
    path = Path(path)
    np.save(path, gasket_array(circles))
    log.info("Exported %d circles to %s", len(circles), path)
    return path
