"""Tests for the DecodedMesh result type."""

import numpy as np
import pytest

from drcmesh.core.mesh import DecodedMesh


@pytest.fixture
def mesh() -> DecodedMesh:
    return DecodedMesh(
        positions=np.array([0, 0, 0, 2, -1, 0, 1, 3, 5], dtype=np.float32),
        indices=np.array([0, 1, 2], dtype=np.uint32),
        colors=np.array([0, 255, 51, 255] * 3, dtype=np.uint8),
    )


class TestDecodedMesh:
    def test_counts(self, mesh):
        assert mesh.num_points == 3
        assert mesh.num_faces == 1
        assert mesh.has_colors

    def test_bounds(self, mesh):
        lo, hi = mesh.bounds()
        np.testing.assert_array_equal(lo, [0, -1, 0])
        np.testing.assert_array_equal(hi, [2, 3, 5])

    def test_normalized_colors(self, mesh):
        norm = mesh.normalized_colors()
        assert norm.dtype == np.float32
        np.testing.assert_allclose(norm[:4], [0.0, 1.0, 0.2, 1.0])
        assert mesh.colors.dtype == np.uint8

    def test_normalized_colors_absent(self, mesh):
        plain = DecodedMesh(positions=mesh.positions, indices=mesh.indices)
        assert plain.normalized_colors() is None
        assert not plain.has_colors
