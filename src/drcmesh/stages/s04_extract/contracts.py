"""I/O contracts for Stage 04: Attribute extraction."""

from typing import Optional

from pydantic import Field

from drcmesh.core.contracts import ArrayField, HandleField, StageIO


class ExtractInput(StageIO):
    mesh: HandleField = Field(..., description="Native decoded mesh from reconstruct")
    num_points: int = Field(..., gt=0, description="Number of distinct vertices")
    num_faces: int = Field(..., gt=0, description="Number of triangles")


class ExtractOutput(StageIO):
    positions: ArrayField = Field(..., description="(num_points * 3,) float32 xyz")
    indices: ArrayField = Field(..., description="(num_faces * 3,) uint32 triangle vertex ids")
    colors: Optional[ArrayField] = Field(None, description="(num_points * 4,) uint8 RGBA or None")
    color_components: Optional[int] = Field(
        None, description="Component count of the source color attribute, when present"
    )
