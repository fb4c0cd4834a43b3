"""Stage 03: Decode the buffer into a native mesh."""

from __future__ import annotations

import logging
from typing import ClassVar

from drcmesh.codec.types import AttributeKind
from drcmesh.core.errors import DecodeFailure, EmptyMesh
from drcmesh.core.stage_base import BaseStage
from .config import ReconstructConfig
from .contracts import ReconstructInput, ReconstructOutput

logger = logging.getLogger(__name__)


class ReconstructStage(BaseStage[ReconstructInput, ReconstructOutput, ReconstructConfig]):
    """Run the full decompression and check the mesh is non-empty.

    A mesh handle returned alongside a failed status is still owned by the
    session and released with it.
    """

    name: ClassVar[str] = "reconstruct"
    input_type: ClassVar = ReconstructInput
    output_type: ClassVar = ReconstructOutput
    config_type: ClassVar = ReconstructConfig

    def validate_inputs(self, inputs: ReconstructInput) -> bool:
        if inputs.buffer.released:
            logger.error("Native buffer already released")
            return False
        return True

    def run(self, inputs: ReconstructInput) -> ReconstructOutput:
        status, mesh = self.session.decode_mesh(inputs.buffer)
        if not status.ok:
            raise DecodeFailure(f"Failed to decode Draco mesh: {status.message or 'codec error'}")
        if mesh is None:
            raise DecodeFailure("Failed to decode Draco mesh: codec returned no mesh")

        num_points = self.codec.num_points(mesh.value)
        num_faces = self.codec.num_faces(mesh.value)
        if num_points == 0 or num_faces == 0:
            raise EmptyMesh(num_points, num_faces)

        attributes = {}
        for kind in AttributeKind:
            info = self.codec.get_attribute(mesh.value, kind)
            if info is not None:
                attributes[kind.value] = info.num_components

        logger.info(f"Decoded mesh: {num_points} points, {num_faces} faces")
        if self.config.log_attributes:
            logger.info(f"Attributes: {attributes or 'none'}")
        return ReconstructOutput(
            mesh=mesh,
            num_points=num_points,
            num_faces=num_faces,
            attributes=attributes,
        )
