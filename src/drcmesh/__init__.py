"""drcmesh: decode Draco-compressed triangle meshes into renderer-ready arrays."""

from .core import (
    DecodedMesh,
    DecodeErrorKind,
    DecodeFailure,
    DecoderConfig,
    DracoDecodeError,
    EmptyMesh,
    MissingAttribute,
    ResourceLedger,
    UnsupportedGeometry,
)
from .core.pipeline import (
    DecodeOutcome,
    DecodePipeline,
    decode,
    decode_async,
    load_decoder_config,
    try_decode,
)

__all__ = [
    "decode",
    "decode_async",
    "try_decode",
    "load_decoder_config",
    "DecodePipeline",
    "DecodeOutcome",
    "DecodedMesh",
    "DecoderConfig",
    "ResourceLedger",
    "DecodeErrorKind",
    "DracoDecodeError",
    "UnsupportedGeometry",
    "DecodeFailure",
    "EmptyMesh",
    "MissingAttribute",
]

__version__ = "0.1.0"
