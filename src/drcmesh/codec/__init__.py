"""Draco codec backends and header probing."""

from __future__ import annotations

from .base import DracoCodec
from .header import DracoHeader, parse_header, probe_geometry_kind
from .types import AttributeInfo, AttributeKind, DecodeStatus, GeometryKind

_BACKENDS = {
    "dracopy": "drcmesh.codec.dracopy_backend:DracoPyCodec",
}


def available_codecs() -> list[str]:
    return sorted(_BACKENDS)


def get_codec(name: str = "dracopy") -> DracoCodec:
    """Instantiate a codec backend by name."""
    import importlib

    target = _BACKENDS.get(name)
    if target is None:
        raise KeyError(f"Unknown codec backend '{name}'. Available: {available_codecs()}")
    module_path, class_name = target.split(":")
    module = importlib.import_module(module_path)
    return getattr(module, class_name)()


__all__ = [
    "DracoCodec",
    "DracoHeader",
    "AttributeInfo",
    "AttributeKind",
    "DecodeStatus",
    "GeometryKind",
    "parse_header",
    "probe_geometry_kind",
    "available_codecs",
    "get_codec",
]
