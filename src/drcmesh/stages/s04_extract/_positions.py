"""Position extraction: native float values -> flat float32 array."""

from __future__ import annotations

import logging

import numpy as np

from drcmesh.codec.types import AttributeKind
from drcmesh.core.errors import DecodeFailure, MissingAttribute
from drcmesh.core.resources import DecoderSession, NativeHandle

logger = logging.getLogger(__name__)


def extract_positions(session: DecoderSession, mesh: NativeHandle, num_points: int) -> np.ndarray:
    """Copy xyz of every point, in vertex order, into a new float32 array.

    The native float array is released as soon as the copy is done.
    """
    attribute = session.codec.get_attribute(mesh.value, AttributeKind.POSITION)
    if attribute is None:
        raise MissingAttribute(AttributeKind.POSITION.value)

    positions = np.empty(num_points * 3, dtype=np.float32)
    with session.attribute_floats(mesh, attribute) as native:
        values = native.value
        if values.size != positions.size:
            raise DecodeFailure(
                f"POSITION has {values.size} values, expected {positions.size} "
                f"({attribute.num_components} components)"
            )
        positions[:] = values
    logger.debug(f"Extracted {num_points} positions")
    return positions
