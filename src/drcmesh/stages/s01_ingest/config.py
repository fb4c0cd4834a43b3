"""Configuration for Stage 01: Buffer ingestion."""

from pydantic import BaseModel, Field


class IngestConfig(BaseModel):
    copy_buffer: bool = Field(
        True, description="Copy input bytes into the native buffer (False = reference them)"
    )
