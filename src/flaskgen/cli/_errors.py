"""Errors raised while materializing a project.

Every error is terminal: the command prints the message and exits with
``exit_code``. Nothing is retried.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for all generator failures."""

    exit_code: int = 1


class UsageError(ScaffoldError):
    """Wrong number of command-line arguments."""


class InvalidNameError(ScaffoldError):
    """Project name contains characters outside ``[A-Za-z0-9_-]``."""


class AlreadyExistsError(ScaffoldError):
    """Something already exists at the project path."""


class FilesystemError(ScaffoldError):
    """An OS-level failure while creating directories or writing files."""
