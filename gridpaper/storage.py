from __future__ import annotations

from pathlib import Path

from slugify import slugify

from . import config
from .models import PageKind


KIND_PREFIXES = {
    PageKind.GRID: "grid_paper",
    PageKind.CALENDAR: "calendar",
}

ARTIFACT_SUFFIXES = {
    "svg": ".svg",
    "pdf": ".pdf",
    "preview": ".png",
}


def artifact_stem(kind: PageKind, color: str) -> str:
    """File stem for one (kind, color) output, e.g. ``grid_paper_red``."""
    prefix = KIND_PREFIXES[PageKind(kind)]
    color_slug = slugify(color, separator="_")
    if not color_slug:
        raise ValueError(f"Color does not produce a usable file name: {color!r}")
    return f"{prefix}_{color_slug}"


def artifact_name(kind: PageKind, color: str, artifact_type: str) -> str:
    return f"{artifact_stem(kind, color)}{ARTIFACT_SUFFIXES[artifact_type]}"


def output_dir(base_dir: Path | None = None, create: bool = True) -> Path:
    root = Path(base_dir or config.OUT_DIR)
    if create:
        root.mkdir(parents=True, exist_ok=True)
    return root


def artifact_path(
    kind: PageKind,
    color: str,
    artifact_type: str,
    base_dir: Path | None = None,
    create: bool = True,
) -> Path:
    return output_dir(base_dir, create=create) / artifact_name(kind, color, artifact_type)
