"""Decode error taxonomy.

Every failure of a decode call is one of the ``DracoDecodeError`` subclasses
below. Color absence is deliberately not represented here.
"""

from __future__ import annotations

from enum import Enum

from drcmesh.codec.types import GeometryKind


class DecodeErrorKind(str, Enum):
    UNSUPPORTED_GEOMETRY = "unsupported_geometry"
    DECODE_FAILURE = "decode_failure"
    EMPTY_MESH = "empty_mesh"
    MISSING_ATTRIBUTE = "missing_attribute"


class DracoDecodeError(Exception):
    """Base class for fatal decode errors."""

    kind: DecodeErrorKind


class UnsupportedGeometry(DracoDecodeError):
    """Encoded payload is not a triangular mesh."""

    kind = DecodeErrorKind.UNSUPPORTED_GEOMETRY

    def __init__(self, geometry: GeometryKind):
        self.geometry = geometry
        super().__init__(f"Unsupported Draco geometry type: {geometry.value}")


class DecodeFailure(DracoDecodeError):
    """Codec reported failure, returned no mesh, or produced inconsistent data."""

    kind = DecodeErrorKind.DECODE_FAILURE


class EmptyMesh(DracoDecodeError):
    """Decode succeeded but produced no points or no faces."""

    kind = DecodeErrorKind.EMPTY_MESH

    def __init__(self, num_points: int, num_faces: int):
        self.num_points = num_points
        self.num_faces = num_faces
        super().__init__(
            f"Decoded mesh has no valid geometry ({num_points} points, {num_faces} faces)"
        )


class MissingAttribute(DracoDecodeError):
    """A mandatory attribute is absent from the decoded mesh."""

    kind = DecodeErrorKind.MISSING_ATTRIBUTE

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Draco {name} attribute not found")
