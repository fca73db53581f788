"""Checks on directories and on which template files to copy or render."""

from __future__ import annotations

import os
from pathlib import Path

_TEMPLATED_EXTENSIONS = frozenset({"rs", "toml", "md", "json", "txt"})
_TEMPLATED_BARE_NAMES = frozenset({"LICENSE", "README"})


class ValidationError(Exception):
    """Raised when a project or template directory is not usable."""


def validate_project_directory(project_name: str | os.PathLike[str]) -> None:
    """Raise ValidationError if the project directory already exists."""
    if Path(project_name).exists():
        raise ValidationError(f"Directory '{os.fspath(project_name)}' already exists")


def validate_template_directory(template_dir: str | os.PathLike[str]) -> None:
    """Raise ValidationError if the template directory is missing."""
    if not Path(template_dir).exists():
        raise ValidationError("Template directory not found")


def _extension(name: str) -> str | None:
    """Return the text after the last dot, or None for names without one.

    A single leading dot (as in ``.gitignore``) does not start an extension.
    """
    index = name.rfind(".")
    if index <= 0:
        return None
    return name[index + 1 :]


def should_template_file(file_path: str | os.PathLike[str]) -> bool:
    """Tell whether a file's content is rendered as a template."""
    name = Path(file_path).name
    extension = _extension(name)
    if extension is None:
        return name in _TEMPLATED_BARE_NAMES
    return extension in _TEMPLATED_EXTENSIONS


def should_skip_file(file_name: str) -> bool:
    """Tell whether a directory entry is left out of the generated project."""
    return file_name == "Cargo.lock" or file_name.endswith(".lock") or file_name == "target"