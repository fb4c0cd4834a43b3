"""Stage 02: Confirm the payload is a triangular mesh before decoding it."""

from __future__ import annotations

import logging
from typing import ClassVar

from drcmesh.codec.types import GeometryKind
from drcmesh.core.errors import UnsupportedGeometry
from drcmesh.core.stage_base import BaseStage
from .config import ValidateConfig
from .contracts import ValidateInput, ValidateOutput

logger = logging.getLogger(__name__)


class ValidateStage(BaseStage[ValidateInput, ValidateOutput, ValidateConfig]):
    """Probe the encoded header and fail fast on anything but a triangular mesh.

    Only header metadata is read; the expensive decode happens in the next stage.
    """

    name: ClassVar[str] = "validate"
    input_type: ClassVar = ValidateInput
    output_type: ClassVar = ValidateOutput
    config_type: ClassVar = ValidateConfig

    def validate_inputs(self, inputs: ValidateInput) -> bool:
        if inputs.buffer.released:
            logger.error("Native buffer already released")
            return False
        return True

    def run(self, inputs: ValidateInput) -> ValidateOutput:
        buffer = inputs.buffer.value
        supported = self.config.supported_major_versions
        header = self.codec.read_header(buffer)
        geometry = self.codec.probe_geometry_type(buffer, supported)

        if header is None:
            logger.info("No readable Draco header")
        else:
            logger.info(
                f"Draco header v{header.version}, method={header.method_name}, "
                f"metadata={header.has_metadata}"
            )
            if header.version_major not in supported:
                logger.warning(
                    f"Unsupported Draco major version {header.version_major} (supported: {supported})"
                )

        if geometry != GeometryKind.TRIANGULAR_MESH:
            raise UnsupportedGeometry(geometry)
        return ValidateOutput(geometry=geometry, header=header)
