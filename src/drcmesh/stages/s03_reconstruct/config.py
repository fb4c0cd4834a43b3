"""Configuration for Stage 03: Mesh reconstruction."""

from pydantic import BaseModel, Field


class ReconstructConfig(BaseModel):
    log_attributes: bool = Field(
        True, description="Log the attribute table of the decoded mesh"
    )
