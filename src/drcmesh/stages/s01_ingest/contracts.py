"""I/O contracts for Stage 01: Buffer ingestion."""

from pydantic import Field

from drcmesh.core.contracts import BufferField, HandleField, StageIO


class IngestInput(StageIO):
    data: BufferField = Field(
        ..., description="Raw Draco-compressed payload (bytes, bytearray or memoryview), passed by reference"
    )


class IngestOutput(StageIO):
    buffer: HandleField = Field(..., description="Native decoder buffer")
    byte_length: int = Field(..., description="Number of bytes held by the native buffer")
