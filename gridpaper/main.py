from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from . import config
from .models import PageKind
from .pipeline.run import ArtifactWriteError, distinct_outputs, expand_outputs, run_pipeline
from .storage import artifact_name

app = typer.Typer(help="Printable dot-grid and weekly calendar sheets")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def build(
    kind: Optional[List[PageKind]] = typer.Option(None, "--kind", "-k", help="Page kind (repeatable)"),
    color: Optional[List[str]] = typer.Option(None, "--color", "-c", help="Page color (repeatable)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    paper: str = typer.Option("letter", "--paper", help="Paper preset: letter or a4"),
    row_label: Optional[List[str]] = typer.Option(None, "--row-label", help="Calendar row label (repeatable)"),
    short_rows: bool = typer.Option(False, "--short-rows", help="Use the 8-row calendar label preset"),
    pdf: bool = typer.Option(False, "--pdf/--no-pdf", help="Also write a PDF per sheet"),
    preview: bool = typer.Option(False, "--preview/--no-preview", help="Also write a PNG preview per sheet"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each artifact"),
) -> None:
    _configure_logging(verbose)
    if out:
        config.set_out_dir(out)
    try:
        geometry = config.geometry_for_paper(paper)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--paper") from exc

    row_labels = None
    if row_label:
        row_labels = list(row_label)
    elif short_rows:
        row_labels = list(config.SHORT_ROW_LABELS)

    try:
        outputs = distinct_outputs(expand_outputs([k.value for k in (kind or [])], list(color or [])))
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--color") from exc
    try:
        results = run_pipeline(
            outputs,
            geometry=geometry,
            row_labels=row_labels,
            pdf=pdf,
            preview=preview,
        )
    except ArtifactWriteError as exc:
        typer.echo(f"FAILED: {exc}", err=True)
        raise typer.Exit(code=1)

    for artifact_type, paths in results.items():
        for path in paths:
            typer.echo(f"{artifact_type.upper()}: {path}")


@app.command()
def outputs() -> None:
    """List the files a default build writes."""
    for kind, color in expand_outputs([], []):
        typer.echo(artifact_name(kind, color, "svg"))


if __name__ == "__main__":
    app()
