"""Shared pytest fixtures for drcmesh tests."""

import numpy as np
import pytest

from drcmesh.core.contracts import DecoderConfig
from drcmesh.core.resources import DecoderSession, ResourceLedger
from tests.fake_codec import RGB_COLORS, FakeCodec, FakeMesh, cube_corner_mesh


def _has_dracopy() -> bool:
    try:
        import DracoPy  # noqa: F401
        return True
    except ImportError:
        return False


needs_dracopy = pytest.mark.skipif(not _has_dracopy(), reason="DracoPy not installed")


@pytest.fixture
def fake_codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture
def ledger() -> ResourceLedger:
    return ResourceLedger()


@pytest.fixture
def session(fake_codec: FakeCodec, ledger: ResourceLedger):
    """Open session over the fake codec; closed after the test."""
    s = DecoderSession(fake_codec, ledger)
    yield s
    s.close()


@pytest.fixture
def config() -> DecoderConfig:
    return DecoderConfig(codec="fake")


@pytest.fixture
def cube_corner() -> FakeMesh:
    return cube_corner_mesh(colors=RGB_COLORS)


@pytest.fixture
def cube_corner_payload(fake_codec: FakeCodec, cube_corner: FakeMesh) -> bytes:
    return fake_codec.register(cube_corner)


@pytest.fixture
def grid_mesh() -> FakeMesh:
    """Triangulated 8x8 vertex grid with RGBA colors."""
    n = 8
    xs, ys = np.meshgrid(np.arange(n, dtype=np.float32), np.arange(n, dtype=np.float32))
    points = np.column_stack([xs.ravel(), ys.ravel(), np.zeros(n * n, dtype=np.float32)])
    faces = []
    for r in range(n - 1):
        for c in range(n - 1):
            a = r * n + c
            faces.append([a, a + 1, a + n])
            faces.append([a + 1, a + n + 1, a + n])
    rng = np.random.default_rng(7)
    colors = rng.integers(0, 256, (n * n, 4), dtype=np.uint8)
    return FakeMesh(points=points, faces=np.array(faces, dtype=np.int64), colors=colors)
