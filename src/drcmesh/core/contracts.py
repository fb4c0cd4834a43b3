"""Common Pydantic models shared across decode stages."""

from __future__ import annotations

from typing import Annotated, Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, WithJsonSchema

from drcmesh.stages.s01_ingest.config import IngestConfig
from drcmesh.stages.s02_validate.config import ValidateConfig
from drcmesh.stages.s03_reconstruct.config import ReconstructConfig
from drcmesh.stages.s04_extract.config import ExtractConfig
from .resources import NativeHandle

# Native handles and numpy arrays pass between stages by reference.
HandleField = Annotated[
    NativeHandle,
    WithJsonSchema({"type": "object", "description": "Decoder-native resource handle"}),
]
ArrayField = Annotated[
    np.ndarray,
    WithJsonSchema({"type": "array", "items": {"type": "number"}}),
]
BufferField = Annotated[
    Any,
    WithJsonSchema({"type": "string", "format": "binary"}),
]


class StageIO(BaseModel):
    """Base for stage Input/Output models carrying handles or arrays."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


class StageMeta(BaseModel):
    """Timing and parameters recorded for every executed stage."""

    stage_name: str
    elapsed_seconds: float = 0.0
    params: dict[str, Any] = Field(default_factory=dict)


class DecoderConfig(BaseModel):
    """Top-level decoder configuration loaded from decoder.yaml."""

    codec: str = Field("dracopy", description="Codec backend name")
    ingest: IngestConfig = Field(default_factory=IngestConfig)
    validation: ValidateConfig = Field(default_factory=ValidateConfig)
    reconstruct: ReconstructConfig = Field(default_factory=ReconstructConfig)
    extract: ExtractConfig = Field(default_factory=ExtractConfig)
