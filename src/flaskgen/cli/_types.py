"""Template catalog for the generated Flask project."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath

PROJECT_NAME_TOKEN = "__PROJECT_NAME__"


@dataclass(frozen=True, kw_only=True)
class TemplateEntry:
    """
    A static payload and the place it lands in the generated project.

    Attributes:
        destination: POSIX path relative to the project root.
        resource: File name of the payload under ``flaskgen/cli/scaffold/``.
        description: Short label shown next to the file when it is created.
        placeholders: Whether the payload contains ``PROJECT_NAME_TOKEN``.
    """

    destination: str
    resource: str
    description: str
    placeholders: bool = False

    def __post_init__(self) -> None:
        path = PurePosixPath(self.destination)
        if path.is_absolute() or ".." in path.parts or not path.parts:
            raise ValueError(f"destination must be a relative path: {self.destination!r}")

    @property
    def path(self) -> PurePosixPath:
        return PurePosixPath(self.destination)


CATALOG: tuple[TemplateEntry, ...] = (
    TemplateEntry(
        destination="src/__init__.py",
        resource="app_init.py",
        description="Flask application factory",
    ),
    TemplateEntry(
        destination="run.py",
        resource="run.py",
        description="application entry point",
    ),
    TemplateEntry(
        destination="requirements.txt",
        resource="requirements.txt",
        description="pinned dependencies",
    ),
    TemplateEntry(
        destination="gunicorn.conf.py",
        resource="gunicorn.conf.py",
        description="Gunicorn server configuration",
    ),
    TemplateEntry(
        destination="Dockerfile",
        resource="Dockerfile",
        description="container image",
    ),
    TemplateEntry(
        destination="docker-compose.yml",
        resource="docker-compose.yml",
        description="local container setup",
    ),
    TemplateEntry(
        destination="Makefile",
        resource="Makefile",
        description="docker-compose shortcuts",
    ),
    TemplateEntry(
        destination=".gitignore",
        resource="gitignore",
        description="git ignore rules",
    ),
    TemplateEntry(
        destination=".flake8",
        resource="flake8",
        description="flake8 configuration",
    ),
    TemplateEntry(
        destination=".pylintrc",
        resource="pylintrc",
        description="pylint configuration",
    ),
    TemplateEntry(
        destination="src/config/config.json",
        resource="config.json",
        description="per-instance configuration",
    ),
    TemplateEntry(
        destination=".env.template",
        resource="env.template",
        description="environment variables template",
    ),
    TemplateEntry(
        destination="README.md",
        resource="README.md",
        description="project documentation",
        placeholders=True,
    ),
    TemplateEntry(
        destination="src/secrets/.gitkeep",
        resource="secrets.gitkeep",
        description="secrets directory placeholder",
    ),
    TemplateEntry(
        destination="deploy/.gitkeep",
        resource="deploy.gitkeep",
        description="deployment directory placeholder",
    ),
)


def required_directories(entries: Iterable[TemplateEntry]) -> list[PurePosixPath]:
    """Every directory that must exist before ``entries`` can be written, parents first."""
    dirs: set[PurePosixPath] = set()
    for entry in entries:
        dirs.update(p for p in entry.path.parents if p != PurePosixPath("."))
    return sorted(dirs, key=lambda p: (len(p.parts), str(p)))
