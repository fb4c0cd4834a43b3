"""CLI entry point for the drcmesh decoder.

Usage:
    drcmesh probe mesh.drc              # Show the encoded header
    drcmesh decode mesh.drc             # Decode and summarize
    drcmesh info                        # Show decode stages and config
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from drcmesh.core.logging import setup_logging

app = typer.Typer(name="drcmesh", help="Draco triangle-mesh decoder")
console = Console()


def _load_config(config: Optional[Path]):
    from drcmesh.core.contracts import DecoderConfig
    from drcmesh.core.pipeline import load_decoder_config

    if config is None:
        return DecoderConfig()
    return load_decoder_config(config)


@app.command()
def probe(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Draco file"),
    config: Optional[Path] = typer.Option(None, help="Decoder config path"),
) -> None:
    """Print the Draco header and geometry kind without decoding."""
    from drcmesh.codec.header import parse_header, probe_geometry_kind

    supported = _load_config(config).validation.supported_major_versions
    data = path.read_bytes()
    header = parse_header(data)
    if header is None:
        console.print(f"[red]{path.name}: not a Draco payload ({len(data)} bytes)[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Draco header: {path.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Size", f"{len(data)} bytes")
    table.add_row("Version", header.version)
    table.add_row("Geometry", probe_geometry_kind(data, supported).value)
    table.add_row("Method", header.method_name)
    table.add_row("Metadata", "Y" if header.has_metadata else "N")
    console.print(table)


@app.command()
def decode(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Draco file"),
    config: Optional[Path] = typer.Option(None, help="Decoder config path"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Decode a Draco mesh and print a summary."""
    setup_logging(log_level)
    from drcmesh.core.errors import DracoDecodeError
    from drcmesh.core.pipeline import DecodePipeline

    pipeline = DecodePipeline(config=_load_config(config))
    try:
        mesh, reports = pipeline.run_with_report(path.read_bytes())
    except DracoDecodeError as exc:
        console.print(f"[red]{path.name}: {exc}[/red]")
        raise typer.Exit(1)

    lo, hi = mesh.bounds()
    table = Table(title=f"Decoded: {path.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Points", str(mesh.num_points))
    table.add_row("Faces", str(mesh.num_faces))
    table.add_row("Colors", "RGBA" if mesh.has_colors else "-")
    table.add_row("Bounds min", ", ".join(f"{v:.4g}" for v in lo))
    table.add_row("Bounds max", ", ".join(f"{v:.4g}" for v in hi))
    for meta in reports:
        table.add_row(f"Stage {meta.stage_name}", f"{meta.elapsed_seconds * 1000:.2f} ms")
    console.print(table)


@app.command()
def info(config: Optional[Path] = typer.Option(None, help="Decoder config path")) -> None:
    """Show decode stages and their configuration."""
    from drcmesh.core.pipeline import STAGES

    decoder_cfg = _load_config(config)
    table = Table(title=f"Decoder (codec: {decoder_cfg.codec})")
    table.add_column("#", style="dim")
    table.add_column("Stage", style="cyan")
    table.add_column("Class", style="green")
    table.add_column("Config", style="yellow")

    for i, (stage_cls, config_field) in enumerate(STAGES, 1):
        stage_cfg = getattr(decoder_cfg, config_field)
        table.add_row(
            str(i),
            stage_cls.name,
            stage_cls.__name__,
            ", ".join(f"{k}={v}" for k, v in stage_cfg.model_dump().items()) or "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
