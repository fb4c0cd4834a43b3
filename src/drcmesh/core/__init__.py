"""drcmesh core: stage base, session resources, shared contracts, errors."""

from .stage_base import BaseStage
from .contracts import DecoderConfig, StageMeta
from .errors import (
    DecodeErrorKind,
    DecodeFailure,
    DracoDecodeError,
    EmptyMesh,
    MissingAttribute,
    UnsupportedGeometry,
)
from .mesh import DecodedMesh
from .resources import DecoderSession, NativeHandle, ResourceLedger
from .logging import setup_logging

__all__ = [
    "BaseStage",
    "DecoderConfig",
    "StageMeta",
    "DecodeErrorKind",
    "DecodeFailure",
    "DracoDecodeError",
    "EmptyMesh",
    "MissingAttribute",
    "UnsupportedGeometry",
    "DecodedMesh",
    "DecoderSession",
    "NativeHandle",
    "ResourceLedger",
    "setup_logging",
]
