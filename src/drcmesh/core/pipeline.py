"""Decode pipeline: runs the four stages in order inside one decoder session."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from drcmesh.codec import DracoCodec, get_codec
from drcmesh.stages.s01_ingest.stage import IngestStage
from drcmesh.stages.s02_validate.stage import ValidateStage
from drcmesh.stages.s03_reconstruct.stage import ReconstructStage
from drcmesh.stages.s04_extract.stage import ExtractStage
from .contracts import DecoderConfig, StageMeta
from .errors import DecodeErrorKind, DracoDecodeError
from .mesh import DecodedMesh
from .resources import DecoderSession, ResourceLedger
from .stage_base import BaseStage

logger = logging.getLogger(__name__)

# (stage class, DecoderConfig field holding its config)
STAGES: list[tuple[type[BaseStage], str]] = [
    (IngestStage, "ingest"),
    (ValidateStage, "validation"),
    (ReconstructStage, "reconstruct"),
    (ExtractStage, "extract"),
]


def load_decoder_config(config_path: Path) -> DecoderConfig:
    """Load and validate decoder.yaml."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return DecoderConfig(**raw)


def _fields_of(model: BaseModel) -> dict[str, Any]:
    # Shallow: keep native handles and arrays as-is.
    return {name: getattr(model, name) for name in type(model).model_fields}


class DecodePipeline:
    """Buffer -> DecodedMesh. One instance may serve many calls, including concurrent ones.

    Each call builds a private ``DecoderSession``; every native resource it
    allocates is released before the call returns or raises.
    """

    def __init__(
        self,
        config: DecoderConfig | None = None,
        codec: DracoCodec | None = None,
        ledger: ResourceLedger | None = None,
    ):
        self.config = config or DecoderConfig()
        self.codec = codec if codec is not None else get_codec(self.config.codec)
        self.ledger = ledger

    def run(self, data: bytes, normalize_colors: bool = True) -> DecodedMesh:
        mesh, _ = self.run_with_report(data, normalize_colors=normalize_colors)
        return mesh

    def run_with_report(
        self, data: bytes, normalize_colors: bool = True
    ) -> tuple[DecodedMesh, list[StageMeta]]:
        """Decode ``data`` and return the mesh with per-stage timings.

        ``data`` is handed to ingestion as-is; with ``copy_buffer=False`` the
        native buffer references the caller's object for the whole call.
        """
        context: dict[str, Any] = {"data": data}
        reports: list[StageMeta] = []

        with DecoderSession(self.codec, self.ledger) as session:
            try:
                for stage_cls, config_field in STAGES:
                    stage = stage_cls(config=getattr(self.config, config_field), session=session)
                    input_fields = {
                        k: context[k] for k in stage_cls.input_type.model_fields if k in context
                    }
                    output = stage.execute(stage_cls.input_type(**input_fields))
                    context.update(_fields_of(output))
                    reports.append(stage.meta)
            except DracoDecodeError as exc:
                logger.error(f"Draco decode failed ({exc.kind.value}): {exc}")
                raise
            except Exception as exc:
                logger.error(f"Draco decode aborted: {type(exc).__name__}: {exc}")
                raise

        mesh = DecodedMesh(
            positions=context["positions"],
            indices=context["indices"],
            colors=context["colors"],
            normalize_colors=normalize_colors,
        )
        return mesh, reports


@dataclass(frozen=True)
class DecodeOutcome:
    """Result of ``try_decode``: exactly one of ``mesh`` / ``error`` is set."""

    mesh: DecodedMesh | None = None
    error: DracoDecodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> DecodeErrorKind | None:
        return None if self.error is None else self.error.kind


def decode(
    buffer: bytes,
    normalize_colors: bool = True,
    *,
    config: DecoderConfig | None = None,
    codec: DracoCodec | None = None,
    ledger: ResourceLedger | None = None,
) -> DecodedMesh:
    """Decode a Draco triangular-mesh payload into flat arrays.

    Raises one of the ``DracoDecodeError`` subclasses on failure.
    ``normalize_colors`` is recorded on the result for presentation layers;
    the returned colors are always 0-255 integers.
    """
    pipeline = DecodePipeline(config=config, codec=codec, ledger=ledger)
    return pipeline.run(buffer, normalize_colors=normalize_colors)


def try_decode(
    buffer: bytes,
    normalize_colors: bool = True,
    *,
    config: DecoderConfig | None = None,
    codec: DracoCodec | None = None,
    ledger: ResourceLedger | None = None,
) -> DecodeOutcome:
    """Like ``decode`` but returns decode errors instead of raising them."""
    try:
        mesh = decode(buffer, normalize_colors, config=config, codec=codec, ledger=ledger)
    except DracoDecodeError as exc:
        return DecodeOutcome(error=exc)
    return DecodeOutcome(mesh=mesh)


async def decode_async(
    buffer: bytes,
    normalize_colors: bool = True,
    *,
    config: DecoderConfig | None = None,
    codec: DracoCodec | None = None,
    ledger: ResourceLedger | None = None,
) -> DecodedMesh:
    """Run ``decode`` in a worker thread."""
    return await asyncio.to_thread(
        decode, buffer, normalize_colors, config=config, codec=codec, ledger=ledger
    )
