"""Base class for all decode stages.

Every stage declares typed Input, Output, Config via Pydantic models.
Stages run inside one ``DecoderSession`` and exchange native handles
through their Input/Output models; only the final stage produces data
that outlives the session.
"""

from __future__ import annotations

import time
import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, ClassVar

from pydantic import BaseModel

from .contracts import StageMeta
from .resources import DecoderSession

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)
ConfigT = TypeVar("ConfigT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseStage(ABC, Generic[InputT, OutputT, ConfigT]):
    """Abstract base for decode stages.

    Subclasses must:
    1. Define concrete Pydantic models for InputT, OutputT, ConfigT
    2. Set class variables: name, input_type, output_type, config_type
    3. Implement run() and validate_inputs()

    Example:
        class IngestStage(BaseStage[IngestInput, IngestOutput, IngestConfig]):
            input_type = IngestInput
            output_type = IngestOutput
            config_type = IngestConfig

            def run(self, inputs: IngestInput) -> IngestOutput: ...
            def validate_inputs(self, inputs: IngestInput) -> bool: ...
    """

    name: ClassVar[str] = ""
    input_type: ClassVar[type[BaseModel]]
    output_type: ClassVar[type[BaseModel]]
    config_type: ClassVar[type[BaseModel]]

    def __init__(self, config: ConfigT, session: DecoderSession):
        self.config = config
        self.session = session
        self.meta: StageMeta | None = None

    @property
    def codec(self):
        return self.session.codec

    @abstractmethod
    def run(self, inputs: InputT) -> OutputT:
        """Execute this stage. Returns output model."""
        ...

    @abstractmethod
    def validate_inputs(self, inputs: InputT) -> bool:
        """Check that all input handles are live and consistent."""
        ...

    def execute(self, inputs: InputT) -> OutputT:
        """Run with logging, timing, and validation."""
        stage_name = self.name or self.__class__.__name__
        logger.debug(f"[{stage_name}] Validating inputs...")

        if not self.validate_inputs(inputs):
            raise ValueError(f"[{stage_name}] Input validation failed")

        logger.debug(f"[{stage_name}] Starting...")
        t0 = time.perf_counter()
        result = self.run(inputs)
        elapsed = time.perf_counter() - t0
        self.meta = StageMeta(
            stage_name=stage_name,
            elapsed_seconds=elapsed,
            params=self.config.model_dump(mode="json"),
        )
        logger.info(f"[{stage_name}] Done in {elapsed * 1000:.2f}ms")
        return result

    @classmethod
    def get_input_schema(cls) -> dict:
        """Return JSON schema for inputs."""
        return cls.input_type.model_json_schema()

    @classmethod
    def get_output_schema(cls) -> dict:
        """Return JSON schema for outputs."""
        return cls.output_type.model_json_schema()

    @classmethod
    def get_config_schema(cls) -> dict:
        """Return JSON schema for config."""
        return cls.config_type.model_json_schema()
