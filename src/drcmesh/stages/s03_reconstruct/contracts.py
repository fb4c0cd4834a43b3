"""I/O contracts for Stage 03: Mesh reconstruction."""

from pydantic import Field

from drcmesh.core.contracts import HandleField, StageIO


class ReconstructInput(StageIO):
    buffer: HandleField = Field(..., description="Native decoder buffer from ingest")


class ReconstructOutput(StageIO):
    mesh: HandleField = Field(..., description="Native decoded mesh")
    num_points: int = Field(..., gt=0, description="Number of distinct vertices")
    num_faces: int = Field(..., gt=0, description="Number of triangles")
    attributes: dict[str, int] = Field(
        default_factory=dict, description="Present attributes mapped to component count"
    )
