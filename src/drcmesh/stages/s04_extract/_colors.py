"""Color extraction: RGB/RGBA bytes -> flat RGBA uint8 array."""

from __future__ import annotations

import logging

import numpy as np

from drcmesh.codec.types import AttributeKind
from drcmesh.core.resources import DecoderSession, NativeHandle

logger = logging.getLogger(__name__)

OPAQUE_ALPHA = 255


def _rgb_to_rgba(src: np.ndarray) -> np.ndarray:
    out = np.empty((src.shape[0], 4), dtype=np.uint8)
    out[:, :3] = src
    out[:, 3] = OPAQUE_ALPHA
    return out.reshape(-1)


def _copy_rgba(src: np.ndarray) -> np.ndarray:
    out = np.empty((src.shape[0], 4), dtype=np.uint8)
    out[:] = src
    return out.reshape(-1)


# Component count -> RGBA conversion. Any other layout yields no colors.
COLOR_LAYOUTS = {
    3: _rgb_to_rgba,
    4: _copy_rgba,
}


def extract_colors(
    session: DecoderSession, mesh: NativeHandle, num_points: int
) -> tuple[np.ndarray | None, int | None]:
    """Return (RGBA colors, source component count).

    Colors are None when the mesh has no color attribute or an unsupported
    component count; neither is an error.
    """
    attribute = session.codec.get_attribute(mesh.value, AttributeKind.COLOR)
    if attribute is None:
        logger.debug("No COLOR attribute")
        return None, None

    components = attribute.num_components
    to_rgba = COLOR_LAYOUTS.get(components)
    if to_rgba is None:
        logger.info(f"Ignoring COLOR attribute with {components} components")
        return None, components

    with session.attribute_uint8(mesh, attribute) as native:
        values = native.value
        if values.size != num_points * components:
            logger.warning(
                f"COLOR has {values.size} values, expected {num_points * components}; ignoring"
            )
            return None, components
        colors = to_rgba(values.reshape(num_points, components))
    logger.debug(f"Extracted {num_points} colors from {components}-component attribute")
    return colors, components
