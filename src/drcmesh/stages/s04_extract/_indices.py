"""Index extraction: triangle vertex ids -> flat uint32 array."""

from __future__ import annotations

import logging

import numpy as np

from drcmesh.core.errors import DecodeFailure
from drcmesh.core.resources import DecoderSession, NativeHandle

logger = logging.getLogger(__name__)


def _extract_bulk(session: DecoderSession, mesh: NativeHandle, num_points: int, num_faces: int) -> np.ndarray:
    with session.int_array(num_faces * 3) as native:
        raw = native.value
        if not session.codec.get_all_faces(mesh.value, raw):
            raise DecodeFailure("Bulk face extraction failed")
        if raw.size and (raw.min() < 0 or raw.max() >= num_points):
            raise DecodeFailure(f"Face index out of range [0, {num_points})")
        return raw.astype(np.uint32)


def _extract_per_face(session: DecoderSession, mesh: NativeHandle, num_points: int, num_faces: int) -> np.ndarray:
    indices = np.empty(num_faces * 3, dtype=np.uint32)
    with session.int_array(3) as native:
        face = native.value
        for f in range(num_faces):
            if not session.codec.get_face(mesh.value, f, face):
                raise DecodeFailure(f"Failed to read face {f}")
            v0, v1, v2 = int(face[0]), int(face[1]), int(face[2])
            if not (0 <= v0 < num_points and 0 <= v1 < num_points and 0 <= v2 < num_points):
                raise DecodeFailure(f"Face {f} index out of range [0, {num_points})")
            indices[f * 3] = v0
            indices[f * 3 + 1] = v1
            indices[f * 3 + 2] = v2
    return indices


def extract_indices(
    session: DecoderSession,
    mesh: NativeHandle,
    num_points: int,
    num_faces: int,
    bulk: bool = True,
) -> np.ndarray:
    """Read every triangle in face order, preserving the decoder's winding.

    Uses one bulk call when allowed and supported by the codec, otherwise
    one call per face through a single reused receive array.
    """
    if bulk and session.codec.supports_bulk_faces:
        indices = _extract_bulk(session, mesh, num_points, num_faces)
        mode = "bulk"
    else:
        indices = _extract_per_face(session, mesh, num_points, num_faces)
        mode = "per-face"
    logger.debug(f"Extracted {num_faces} faces ({mode})")
    return indices
