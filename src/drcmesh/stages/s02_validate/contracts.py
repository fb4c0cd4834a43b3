"""I/O contracts for Stage 02: Geometry validation."""

from typing import Optional

from pydantic import Field

from drcmesh.codec.header import DracoHeader
from drcmesh.codec.types import GeometryKind
from drcmesh.core.contracts import HandleField, StageIO


class ValidateInput(StageIO):
    buffer: HandleField = Field(..., description="Native decoder buffer from ingest")


class ValidateOutput(StageIO):
    geometry: GeometryKind = Field(..., description="Encoded geometry kind (always triangular_mesh)")
    header: Optional[DracoHeader] = Field(None, description="Parsed Draco header, when readable")
