"""Tests for Draco header parsing and geometry probing."""

import struct

import pytest

from drcmesh.codec.header import (
    HEADER_SIZE,
    DracoHeader,
    encode_header,
    parse_header,
    probe_geometry_kind,
)
from drcmesh.codec.types import GeometryKind


def _raw_header(major=2, minor=2, encoder_type=1, method=1, flags=0, magic=b"DRACO") -> bytes:
    return struct.pack("<5sBBBBH", magic, major, minor, encoder_type, method, flags)


class TestParseHeader:
    def test_header_size(self):
        assert HEADER_SIZE == 11

    def test_parses_mesh_header(self):
        header = parse_header(_raw_header() + b"\x00" * 16)
        assert header is not None
        assert header.version == "2.2"
        assert header.geometry_kind == GeometryKind.TRIANGULAR_MESH
        assert header.method_name == "edgebreaker"
        assert header.has_metadata is False

    def test_point_cloud_header(self):
        header = parse_header(_raw_header(encoder_type=0, method=0))
        assert header.geometry_kind == GeometryKind.POINT_CLOUD
        assert header.method_name == "sequential"

    def test_metadata_flag(self):
        header = parse_header(_raw_header(flags=0x8000))
        assert header.has_metadata is True

    def test_unknown_encoder_type_is_invalid(self):
        header = parse_header(_raw_header(encoder_type=5, method=9))
        assert header.geometry_kind == GeometryKind.INVALID
        assert header.method_name == "unknown(9)"

    @pytest.mark.parametrize("data", [b"", b"DRACO", _raw_header()[:-1]])
    def test_short_buffer_returns_none(self, data):
        assert parse_header(data) is None

    def test_bad_magic_returns_none(self):
        assert parse_header(_raw_header(magic=b"PLYXX")) is None

    def test_accepts_memoryview(self):
        assert parse_header(memoryview(_raw_header())) is not None

    def test_encode_header_matches_layout(self):
        header = DracoHeader(version_major=1, version_minor=3, encoder_type=1, encoder_method=0, flags=0x8000)
        assert encode_header(header) == _raw_header(1, 3, 1, 0, 0x8000)


class TestProbeGeometryKind:
    def test_mesh(self):
        assert probe_geometry_kind(_raw_header()) == GeometryKind.TRIANGULAR_MESH

    def test_point_cloud(self):
        assert probe_geometry_kind(_raw_header(encoder_type=0)) == GeometryKind.POINT_CLOUD

    def test_garbage_is_invalid(self):
        assert probe_geometry_kind(b"not a draco file at all") == GeometryKind.INVALID

    def test_unsupported_version_is_invalid(self):
        data = _raw_header(major=3)
        assert probe_geometry_kind(data) == GeometryKind.TRIANGULAR_MESH
        assert probe_geometry_kind(data, supported_major_versions=[1, 2]) == GeometryKind.INVALID
