"""Value types shared by codec backends and decode stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GeometryKind(str, Enum):
    """Geometry type recorded in the encoded header."""

    POINT_CLOUD = "point_cloud"
    TRIANGULAR_MESH = "triangular_mesh"
    INVALID = "invalid"


class AttributeKind(str, Enum):
    """Semantic attribute identifiers understood by the decoder."""

    POSITION = "POSITION"
    NORMAL = "NORMAL"
    COLOR = "COLOR"
    TEX_COORD = "TEX_COORD"
    GENERIC = "GENERIC"


@dataclass(frozen=True)
class AttributeInfo:
    """Descriptor of one attribute present on a native mesh."""

    kind: AttributeKind
    num_components: int


@dataclass(frozen=True)
class DecodeStatus:
    """Status returned by the codec for a decode call."""

    ok: bool
    message: str = ""
