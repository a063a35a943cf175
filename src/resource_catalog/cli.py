"""Typer-based command line interface for the resource catalog."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from catalog_utils.config import AppConfig, load_config
from catalog_utils.hashing import stream_sha1
from catalog_utils.logging import configure_logging
from catalog_utils.paths import normalise_path

from .catalog import ArtifactResourceCatalog
from .classifiers import build_classifier
from .errors import ResourceCatalogError

app = typer.Typer(add_completion=False, help="Inspect and extract resources embedded in .NET assemblies.")
console = Console()
err_console = Console(stderr=True)

SELF_ARTIFACT = "-"


class _State:
    config: AppConfig = AppConfig()


state = _State()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML configuration file."),
) -> None:
    state.config = load_config(config)
    configure_logging("DEBUG" if verbose else state.config.log_level)


def _open_catalog(artifact: str) -> ArtifactResourceCatalog:
    classifier = build_classifier(state.config.classifier, state.config.file_types_path)
    try:
        if artifact == SELF_ARTIFACT:
            return ArtifactResourceCatalog(classifier=classifier)
        return ArtifactResourceCatalog.from_path(normalise_path(artifact), classifier=classifier)
    except ResourceCatalogError as exc:
        err_console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1) from exc


@app.command("list")
def list_resources(
    artifact: str = typer.Argument(SELF_ARTIFACT, help="Assembly path, or '-' for this tool's own package."),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON record per line."),
) -> None:
    """List embedded resources sorted by name."""

    with _open_catalog(artifact) as catalog:
        infos = sorted(catalog.get_resource_infos(), key=lambda info: info.name)
        if as_json:
            for info in infos:
                typer.echo(info.jsonl())
            return
        table = Table(title=catalog.get_artifact_name())
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        for info in infos:
            table.add_row(info.name, info.type_label, f"{info.size_bytes:,}")
        console.print(table)


@app.command()
def info(
    artifact: str = typer.Argument(..., help="Assembly path, or '-' for this tool's own package."),
    name: str = typer.Argument(..., help="Logical resource name."),
    hash_: bool = typer.Option(False, "--hash/--no-hash", help="Print the SHA1 of the payload."),
) -> None:
    """Show one embedded resource."""

    with _open_catalog(artifact) as catalog:
        found = catalog.get_resource_info_by_name(name)
        if found is None:
            err_console.print(f"[red]No embedded resource named {name!r} in {catalog.get_artifact_name()}[/red]")
            raise typer.Exit(code=1)
        typer.echo(found.jsonl())
        if hash_:
            stream = catalog.open_resource(name)
            if stream is not None:
                with stream:
                    typer.echo(f"sha1: {stream_sha1(stream)}")


@app.command()
def summarize(
    artifact: str = typer.Argument(SELF_ARTIFACT, help="Assembly path, or '-' for this tool's own package."),
) -> None:
    """Print aggregate counts and sizes."""

    with _open_catalog(artifact) as catalog:
        typer.echo(catalog.summarize().model_dump_json(indent=2))


@app.command()
def extract(
    artifact: str = typer.Argument(..., help="Assembly path, or '-' for this tool's own package."),
    names: Optional[List[str]] = typer.Argument(None, help="Resources to extract."),
    out: Path = typer.Option(Path("."), "--out", help="Existing directory receiving the files."),
    all_: bool = typer.Option(False, "--all", help="Extract every embedded resource."),
) -> None:
    """Extract resources into a directory, one at a time."""

    out = normalise_path(out)
    if not out.is_dir():
        raise typer.BadParameter(f"Directory {out} does not exist", param_hint="--out")
    with _open_catalog(artifact) as catalog:
        selected = catalog.get_resource_names() if all_ else list(names or [])
        if not selected:
            raise typer.BadParameter("Give resource names or --all")
        failures = 0
        for name in selected:
            try:
                path = catalog.extract_resource_to_directory(name, out)
            except (ResourceCatalogError, OSError) as exc:
                failures += 1
                err_console.print(f"[red]{name}: {exc}[/red]")
                continue
            typer.echo(f"Extracted {name} -> {path}")
        if failures:
            raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
