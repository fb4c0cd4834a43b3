"""Decoded mesh result handed back to callers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DecodedMesh:
    """Flat, renderer-ready mesh arrays with no native ownership.

    - positions: (num_points * 3,) float32, x,y,z per vertex
    - indices:   (num_faces * 3,) uint32, triangle vertex ids in face order
    - colors:    (num_points * 4,) uint8 RGBA per vertex, or None
    """

    positions: np.ndarray
    indices: np.ndarray
    colors: np.ndarray | None = None
    normalize_colors: bool = True

    @property
    def num_points(self) -> int:
        return self.positions.size // 3

    @property
    def num_faces(self) -> int:
        return self.indices.size // 3

    @property
    def has_colors(self) -> bool:
        return self.colors is not None

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Axis-aligned (min, max) corners of the positions."""
        xyz = self.positions.reshape(-1, 3)
        return xyz.min(axis=0), xyz.max(axis=0)

    def normalized_colors(self) -> np.ndarray | None:
        """Colors as float32 in [0, 1] for presentation layers."""
        if self.colors is None:
            return None
        return self.colors.astype(np.float32) / 255.0
