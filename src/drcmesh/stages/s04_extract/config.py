"""Configuration for Stage 04: Attribute extraction."""

from pydantic import BaseModel, Field


class ExtractConfig(BaseModel):
    bulk_indices: bool = Field(
        True,
        description="Use the codec's all-faces extraction when available instead of one call per face",
    )
    extract_colors: bool = Field(True, description="Extract per-vertex colors when present")
