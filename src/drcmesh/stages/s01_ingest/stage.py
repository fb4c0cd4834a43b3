"""Stage 01: Wrap raw compressed bytes in a decoder-native buffer."""

from __future__ import annotations

import logging
from typing import ClassVar

from drcmesh.core.stage_base import BaseStage
from .config import IngestConfig
from .contracts import IngestInput, IngestOutput

logger = logging.getLogger(__name__)


class IngestStage(BaseStage[IngestInput, IngestOutput, IngestConfig]):
    """Copy (or reference) the payload into a native buffer owned by the session.

    No size checks happen here; empty or truncated payloads are rejected
    by geometry validation.
    """

    name: ClassVar[str] = "ingest"
    input_type: ClassVar = IngestInput
    output_type: ClassVar = IngestOutput
    config_type: ClassVar = IngestConfig

    def validate_inputs(self, inputs: IngestInput) -> bool:
        if not isinstance(inputs.data, (bytes, bytearray, memoryview)):
            logger.error(f"Expected a bytes-like payload, got {type(inputs.data).__name__}")
            return False
        if self.session.closed:
            logger.error("Decoder session already closed")
            return False
        return True

    def run(self, inputs: IngestInput) -> IngestOutput:
        buffer = self.session.create_buffer(inputs.data, copy=self.config.copy_buffer)
        byte_length = self.codec.buffer_size(buffer.value)
        logger.info(f"Ingested {byte_length} bytes (copy={self.config.copy_buffer})")
        return IngestOutput(buffer=buffer, byte_length=byte_length)
