"""Configuration for Stage 02: Geometry validation."""

from pydantic import BaseModel, Field


class ValidateConfig(BaseModel):
    supported_major_versions: list[int] = Field(
        default=[1, 2],
        description="Draco bitstream major versions accepted; others probe as invalid",
    )
