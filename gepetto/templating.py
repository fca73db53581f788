"""Copying the template tree into a new project, rendering text files."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2

from gepetto.config import Keypair, ProjectConfig
from gepetto.validation import should_skip_file, should_template_file

_RENAMED_DIRECTORY = "counter-pinocchio"


def create_template_context(config: ProjectConfig) -> dict[str, Any]:
    """Return the variables available to templates."""
    return {
        "program_name_dash": config.program_name_dash,
        "program_name_underscore": config.program_name_underscore,
        "program_name_readable": config.program_name_readable,
        "year": config.year,
        "company_name": config.company_name,
        "program_pubkey": config.program_pubkey,
    }


def copy_file_with_templating(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    env: jinja2.Environment,
    context: Mapping[str, Any],
) -> None:
    """Copy one file, rendering it when its type is templated.

    Content that does not render is copied unchanged.
    """
    with open(src, encoding="utf-8", newline="") as handle:
        content = handle.read()
    if should_template_file(src):
        try:
            content = env.from_string(content).render(context)
        except jinja2.TemplateError:
            pass
    with open(dst, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def copy_dir_recursive(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    env: jinja2.Environment,
    context: Mapping[str, Any],
    program_name_dash: str,
) -> None:
    """Copy a directory tree, skipping build output and renaming the program folder."""
    src, dst = Path(src), Path(dst)
    dst.mkdir(parents=True, exist_ok=True)
    for entry in sorted(src.iterdir()):
        if should_skip_file(entry.name):
            continue
        target_name = program_name_dash if entry.name == _RENAMED_DIRECTORY else entry.name
        destination = dst / target_name
        if entry.is_dir():
            copy_dir_recursive(entry, destination, env, context, program_name_dash)
        else:
            copy_file_with_templating(entry, destination, env, context)


def copy_template_files(
    template_dir: str | os.PathLike[str],
    project_dir: str | os.PathLike[str],
    env: jinja2.Environment,
    context: Mapping[str, Any],
    program_name_dash: str,
) -> None:
    """Copy the whole template directory into the project directory."""
    copy_dir_recursive(template_dir, project_dir, env, context, program_name_dash)


def create_program_id_file(project_dir: str | os.PathLike[str], program_keypair: Keypair) -> Path:
    """Write program-id.json holding the keypair bytes; return its path."""
    path = Path(project_dir) / "program-id.json"
    path.write_text(
        json.dumps(list(program_keypair.to_bytes()), separators=(",", ":")),
        encoding="utf-8",
    )
    return path