"""Command-line argument and project name checks."""

from __future__ import annotations

import re
from collections.abc import Sequence

from flaskgen.cli._errors import InvalidNameError, UsageError

USAGE = "flaskgen <project_name>"
EXAMPLE = "flaskgen my-flask-app"

# ASCII only: \w would let through non-ASCII letters.
_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
MAX_NAME_LENGTH = 255


def validate_args(args: Sequence[str] | None) -> str:
    """Return the single positional argument or raise ``UsageError``."""
    if not args or len(args) != 1:
        raise UsageError(f"Usage: {USAGE}\nExample: {EXAMPLE}")
    return args[0]


def validate_name(name: str) -> str:
    """Return ``name`` unchanged if it is a usable project name."""
    if not _NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(
            "App name should only contain letters, numbers, hyphens, and underscores"
        )
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(f"App name must be at most {MAX_NAME_LENGTH} characters long")
    return name
