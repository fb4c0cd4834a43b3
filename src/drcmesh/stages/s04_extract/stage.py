"""Stage 04: Pull positions, indices and colors out of the native mesh."""

from __future__ import annotations

import logging
from typing import ClassVar

from drcmesh.core.stage_base import BaseStage
from ._colors import extract_colors
from ._indices import extract_indices
from ._positions import extract_positions
from .config import ExtractConfig
from .contracts import ExtractInput, ExtractOutput

logger = logging.getLogger(__name__)


class ExtractStage(BaseStage[ExtractInput, ExtractOutput, ExtractConfig]):
    """Materialize the flat output arrays.

    Positions and indices are mandatory; colors are best-effort.
    """

    name: ClassVar[str] = "extract"
    input_type: ClassVar = ExtractInput
    output_type: ClassVar = ExtractOutput
    config_type: ClassVar = ExtractConfig

    def validate_inputs(self, inputs: ExtractInput) -> bool:
        if inputs.mesh.released:
            logger.error("Native mesh already released")
            return False
        return True

    def run(self, inputs: ExtractInput) -> ExtractOutput:
        # --- 1. Positions ---
        positions = extract_positions(self.session, inputs.mesh, inputs.num_points)

        # --- 2. Indices ---
        indices = extract_indices(
            self.session,
            inputs.mesh,
            inputs.num_points,
            inputs.num_faces,
            bulk=self.config.bulk_indices,
        )

        # --- 3. Colors (optional) ---
        colors, components = None, None
        if self.config.extract_colors:
            colors, components = extract_colors(self.session, inputs.mesh, inputs.num_points)

        logger.info(
            f"Extracted {positions.size} position values, {indices.size} indices, "
            f"colors={'yes' if colors is not None else 'no'}"
        )
        return ExtractOutput(
            positions=positions,
            indices=indices,
            colors=colors,
            color_components=components,
        )
