"""Tests for S03: Mesh reconstruction."""

import numpy as np
import pytest

from drcmesh.core.errors import DecodeFailure, EmptyMesh
from drcmesh.core.resources import DecoderSession
from drcmesh.stages.s03_reconstruct.config import ReconstructConfig
from drcmesh.stages.s03_reconstruct.contracts import ReconstructInput
from drcmesh.stages.s03_reconstruct.stage import ReconstructStage
from tests.fake_codec import FakeCodec, FakeMesh, cube_corner_mesh


def _run(session, payload: bytes):
    buffer = session.create_buffer(payload)
    stage = ReconstructStage(config=ReconstructConfig(), session=session)
    return stage.execute(ReconstructInput(buffer=buffer))


class TestReconstructStage:
    def test_counts_and_attributes(self, session, cube_corner_payload):
        out = _run(session, cube_corner_payload)
        assert out.num_points == 4
        assert out.num_faces == 2
        assert out.attributes == {"POSITION": 3, "COLOR": 3}
        assert not out.mesh.released

    def test_failed_status(self, cube_corner):
        codec = FakeCodec(fail_status=True)
        payload = codec.register(cube_corner)
        with DecoderSession(codec) as session:
            with pytest.raises(DecodeFailure, match="corrupt payload"):
                _run(session, payload)
        assert codec.outstanding == {}

    def test_failed_status_with_mesh_releases_mesh(self, cube_corner):
        codec = FakeCodec(fail_status=True, status_with_mesh=True)
        payload = codec.register(cube_corner)
        with DecoderSession(codec) as session:
            with pytest.raises(DecodeFailure):
                _run(session, payload)
        assert codec.created["mesh"] == 1
        assert codec.destroyed["mesh"] == 1

    def test_ok_status_with_null_mesh_fails(self, cube_corner):
        codec = FakeCodec(null_mesh=True)
        payload = codec.register(cube_corner)
        with DecoderSession(codec) as session:
            with pytest.raises(DecodeFailure, match="no mesh"):
                _run(session, payload)

    def test_unknown_payload_fails(self, session):
        with pytest.raises(DecodeFailure):
            _run(session, b"DRACO\x02\x02\x01\x01\x00\x00unregistered")

    def test_zero_faces_is_empty(self, session, fake_codec):
        mesh = cube_corner_mesh()
        mesh.faces = np.zeros((0, 3), dtype=np.int64)
        with pytest.raises(EmptyMesh) as excinfo:
            _run(session, fake_codec.register(mesh))
        assert excinfo.value.num_points == 4
        assert excinfo.value.num_faces == 0

    def test_zero_points_is_empty(self, session, fake_codec):
        mesh = FakeMesh(points=np.zeros((0, 3), np.float32), faces=np.array([[0, 1, 2]]))
        with pytest.raises(EmptyMesh):
            _run(session, fake_codec.register(mesh))
