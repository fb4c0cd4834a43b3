"""Draco bitstream header parser.

Layout (little-endian, 11 bytes):
    magic           5s   b"DRACO"
    version_major   B
    version_minor   B
    encoder_type    B    0 = point cloud, 1 = triangular mesh
    encoder_method  B    0 = sequential, 1 = edgebreaker
    flags           H
"""

from __future__ import annotations

import struct

from pydantic import BaseModel, Field

from .types import GeometryKind

DRACO_MAGIC = b"DRACO"
HEADER_FORMAT = "<5sBBBBH"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
METADATA_FLAG_MASK = 0x8000

_ENCODER_TYPES = {
    0: GeometryKind.POINT_CLOUD,
    1: GeometryKind.TRIANGULAR_MESH,
}
_ENCODER_METHODS = {0: "sequential", 1: "edgebreaker"}


class DracoHeader(BaseModel):
    """Parsed Draco header."""

    version_major: int
    version_minor: int
    encoder_type: int
    encoder_method: int
    flags: int = Field(0, description="Raw uint16 header flags")

    @property
    def version(self) -> str:
        return f"{self.version_major}.{self.version_minor}"

    @property
    def has_metadata(self) -> bool:
        return bool(self.flags & METADATA_FLAG_MASK)

    @property
    def method_name(self) -> str:
        return _ENCODER_METHODS.get(self.encoder_method, f"unknown({self.encoder_method})")

    @property
    def geometry_kind(self) -> GeometryKind:
        return _ENCODER_TYPES.get(self.encoder_type, GeometryKind.INVALID)


def parse_header(data: bytes | bytearray | memoryview) -> DracoHeader | None:
    """Parse the header at the start of ``data``.

    Returns None when the buffer is too short or the magic does not match.
    """
    if len(data) < HEADER_SIZE:
        return None
    magic, major, minor, encoder_type, method, flags = struct.unpack_from(HEADER_FORMAT, data, 0)
    if magic != DRACO_MAGIC:
        return None
    return DracoHeader(
        version_major=major,
        version_minor=minor,
        encoder_type=encoder_type,
        encoder_method=method,
        flags=flags,
    )


def encode_header(header: DracoHeader) -> bytes:
    """Serialize a header back to its 11-byte form."""
    return struct.pack(
        HEADER_FORMAT,
        DRACO_MAGIC,
        header.version_major,
        header.version_minor,
        header.encoder_type,
        header.encoder_method,
        header.flags,
    )


def probe_geometry_kind(
    data: bytes | bytearray | memoryview,
    supported_major_versions: list[int] | None = None,
) -> GeometryKind:
    """Map the header at the start of ``data`` to a geometry kind."""
    header = parse_header(data)
    if header is None:
        return GeometryKind.INVALID
    if supported_major_versions is not None and header.version_major not in supported_major_versions:
        return GeometryKind.INVALID
    return header.geometry_kind
