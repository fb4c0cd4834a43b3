"""Tests for S02: Geometry validation."""

import pytest

from drcmesh.codec.types import GeometryKind
from drcmesh.core.errors import DecodeErrorKind, UnsupportedGeometry
from drcmesh.stages.s02_validate.config import ValidateConfig
from drcmesh.stages.s02_validate.contracts import ValidateInput
from drcmesh.stages.s02_validate.stage import ValidateStage


def _run(session, data: bytes, config: ValidateConfig | None = None):
    buffer = session.create_buffer(data)
    stage = ValidateStage(config=config or ValidateConfig(), session=session)
    return stage.execute(ValidateInput(buffer=buffer))


class TestValidateStage:
    def test_accepts_mesh(self, session, fake_codec, cube_corner):
        out = _run(session, fake_codec.register(cube_corner))
        assert out.geometry == GeometryKind.TRIANGULAR_MESH
        assert out.header.version == "2.2"

    def test_rejects_point_cloud(self, session, fake_codec, cube_corner):
        payload = fake_codec.register(cube_corner, geometry=GeometryKind.POINT_CLOUD)
        with pytest.raises(UnsupportedGeometry) as excinfo:
            _run(session, payload)
        assert excinfo.value.geometry == GeometryKind.POINT_CLOUD
        assert excinfo.value.kind == DecodeErrorKind.UNSUPPORTED_GEOMETRY

    def test_no_decode_work_on_reject(self, session, fake_codec, cube_corner):
        payload = fake_codec.register(cube_corner, geometry=GeometryKind.POINT_CLOUD)
        with pytest.raises(UnsupportedGeometry):
            _run(session, payload)
        assert fake_codec.calls["decode_mesh"] == 0

    @pytest.mark.parametrize("data", [b"", b"DRA", b"garbage bytes here"])
    def test_rejects_unreadable(self, session, data):
        with pytest.raises(UnsupportedGeometry) as excinfo:
            _run(session, data)
        assert excinfo.value.geometry == GeometryKind.INVALID

    def test_rejects_unsupported_version(self, session, fake_codec, cube_corner):
        payload = fake_codec.register(cube_corner, version=(3, 0))
        with pytest.raises(UnsupportedGeometry):
            _run(session, payload)

    def test_version_list_is_configurable(self, session, fake_codec, cube_corner):
        payload = fake_codec.register(cube_corner, version=(3, 0))
        out = _run(session, payload, ValidateConfig(supported_major_versions=[3]))
        assert out.geometry == GeometryKind.TRIANGULAR_MESH

    def test_codec_probe_applies_version_gate(self, fake_codec, cube_corner):
        buffer = fake_codec.create_buffer(fake_codec.register(cube_corner, version=(9, 0)))
        assert fake_codec.probe_geometry_type(buffer) == GeometryKind.TRIANGULAR_MESH
        assert fake_codec.probe_geometry_type(buffer, [1, 2]) == GeometryKind.INVALID
        fake_codec.destroy(buffer)

    def test_released_buffer_fails_validation(self, session):
        buffer = session.create_buffer(b"x")
        buffer.release()
        stage = ValidateStage(config=ValidateConfig(), session=session)
        with pytest.raises(ValueError):
            stage.execute(ValidateInput(buffer=buffer))
