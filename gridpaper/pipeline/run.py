from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .. import config
from ..config import PageGeometry
from ..models import Document, PageKind
from ..storage import artifact_path, artifact_stem
from .layout import build_page
from .render_pdf import render_pdf
from .render_preview import render_preview
from .render_svg import write_svg


logger = logging.getLogger(__name__)


class ArtifactWriteError(RuntimeError):
    """An output file could not be written; the run stops at the first one."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path


def expand_outputs(kinds: Sequence[str], colors: Sequence[str]) -> List[Tuple[PageKind, str]]:
    """Cartesian product of kinds and colors, or the default set when both are empty."""
    if not kinds and not colors:
        return [(PageKind(kind), color) for kind, color in config.DEFAULT_OUTPUTS]
    kinds = list(kinds) or [PageKind.GRID.value]
    colors = list(colors) or ["blue"]
    return [(PageKind(kind), color) for kind in kinds for color in colors]


def distinct_outputs(outputs: Iterable[Tuple[PageKind, str]]) -> List[Tuple[PageKind, str]]:
    """
    Drop repeated (kind, color) pairs and reject colors that share a file name.

    File names are slugs, so "Red" and "red" or "#FF0000" and "ff0000" would
    write the same artifact. That is refused before anything is written.
    """
    seen: Dict[str, str] = {}
    unique: List[Tuple[PageKind, str]] = []
    for kind, color in outputs:
        kind = PageKind(kind)
        stem = artifact_stem(kind, color)
        if stem in seen:
            if seen[stem] != color:
                raise ValueError(f"Colors {seen[stem]!r} and {color!r} both write {stem}")
            continue
        seen[stem] = color
        unique.append((kind, color))
    return unique


def _artifact_steps(
    doc: Document,
    pdf_path: Path,
    pdf: bool,
    preview: bool,
) -> List[tuple[str, Callable[[Path], Path]]]:
    steps: List[tuple[str, Callable[[Path], Path]]] = [("svg", lambda path: write_svg(doc, path))]
    if pdf or preview:
        steps.append(("pdf", lambda path: render_pdf(doc, path)))
    if preview:
        steps.append(("preview", lambda path: render_preview(pdf_path, path)))
    return steps


def process_output(
    kind: PageKind,
    color: str,
    geometry: PageGeometry = config.DEFAULT_GEOMETRY,
    row_labels: Sequence[str] | None = None,
    base_dir: Path | None = None,
    pdf: bool = False,
    preview: bool = False,
) -> List[tuple[str, Path]]:
    doc = build_page(kind, color, geometry=geometry, row_labels=row_labels)
    logger.info("Built %s page in %s with %d drawables", PageKind(kind).value, color, len(doc))

    pdf_path = artifact_path(kind, color, "pdf", base_dir=base_dir, create=False)
    artifacts: List[tuple[str, Path]] = []
    for artifact_type, write in _artifact_steps(doc, pdf_path, pdf, preview):
        path = artifact_path(kind, color, artifact_type, base_dir=base_dir, create=False)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            write(path)
        except (OSError, RuntimeError) as exc:
            logger.exception("Failed to write %s artifact %s", artifact_type, path)
            raise ArtifactWriteError(path, str(exc)) from exc
        logger.info("Wrote %s", path)
        artifacts.append((artifact_type, path))
    return artifacts


def run_pipeline(
    outputs: Iterable[Tuple[PageKind, str]],
    geometry: PageGeometry = config.DEFAULT_GEOMETRY,
    row_labels: Sequence[str] | None = None,
    base_dir: Path | None = None,
    pdf: bool = False,
    preview: bool = False,
) -> Dict[str, List[Path]]:
    results: Dict[str, List[Path]] = {"svg": [], "pdf": [], "preview": []}
    for kind, color in distinct_outputs(outputs):
        artifacts = process_output(
            kind,
            color,
            geometry=geometry,
            row_labels=row_labels,
            base_dir=base_dir,
            pdf=pdf,
            preview=preview,
        )
        for artifact_type, path in artifacts:
            results[artifact_type].append(path)
    return results
