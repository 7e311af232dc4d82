"""Orchestrates template rendering to files on disk."""

from __future__ import annotations

import importlib.resources as ilr
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path, PurePosixPath

from flaskgen.cli._errors import AlreadyExistsError, FilesystemError
from flaskgen.cli._types import CATALOG, PROJECT_NAME_TOKEN, TemplateEntry, required_directories

_SCAFFOLD_PACKAGE = "flaskgen.cli"
_SCAFFOLD_DIR = "scaffold"


def _read(resource: str) -> str:
    return (
        ilr.files(_SCAFFOLD_PACKAGE)
        .joinpath(_SCAFFOLD_DIR)
        .joinpath(resource)
        .read_text(encoding="utf-8")
    )


def render_content(entry: TemplateEntry, project_name: str) -> str:
    """Payload text for ``entry``. Only entries flagged with placeholders are touched."""
    content = _read(entry.resource)
    if entry.placeholders:
        content = content.replace(PROJECT_NAME_TOKEN, project_name)
    return content


def ensure_absent(project_dir: Path) -> None:
    """Raise ``AlreadyExistsError`` if any entry, even a dangling symlink, is at ``project_dir``."""
    if project_dir.exists() or project_dir.is_symlink():
        raise AlreadyExistsError(f"Directory '{project_dir.name}' already exists")


def build_directories(project_dir: Path, directories: Iterable[PurePosixPath]) -> list[str]:
    """Create the project root and its subdirectories. Returns the created labels."""
    try:
        project_dir.mkdir(parents=True)
    except FileExistsError as exc:
        raise AlreadyExistsError(f"Directory '{project_dir.name}' already exists") from exc
    except OSError as exc:
        raise FilesystemError(f"Could not create directory '{project_dir}': {exc}") from exc

    created: list[str] = []
    for rel in directories:
        target = project_dir.joinpath(*rel.parts)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Could not create directory '{target}': {exc}") from exc
        created.append(f"{rel}/")
    return created


def render_entry(entry: TemplateEntry, project_dir: Path, project_name: str) -> Path:
    """Write one catalog entry below ``project_dir`` and return its path."""
    target = project_dir.joinpath(*entry.path.parts)
    if not target.parent.is_dir():
        raise FilesystemError(
            f"Cannot write '{entry.destination}': directory '{target.parent}' does not exist"
        )

    content = render_content(entry, project_name)
    try:
        with target.open("x", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as exc:
        raise FilesystemError(f"Could not write '{entry.destination}': {exc}") from exc
    return target


def render_project(
    project_dir: Path,
    project_name: str,
    on_created: Callable[[str], None] | None = None,
    catalog: Sequence[TemplateEntry] = CATALOG,
) -> list[str]:
    """
    Materialize ``catalog`` into a new directory ``project_dir``.

    Entries are written in catalog order. A failure stops the run and leaves
    whatever was already written on disk.

    Args:
        project_dir: Path of the project root. Must not exist yet.
        project_name: Validated name substituted into placeholder entries.
        on_created: Called with the label of each directory or file once created.
        catalog: Entries to render.

    Returns:
        Labels of every created directory (with a trailing ``/``) and file.
    """
    ensure_absent(project_dir)

    created = build_directories(project_dir, required_directories(catalog))
    if on_created is not None:
        for label in created:
            on_created(label)

    for entry in catalog:
        render_entry(entry, project_dir, project_name)
        created.append(entry.destination)
        if on_created is not None:
            on_created(entry.destination)

    return created
