"""The command that scaffolds a new project."""

from __future__ import annotations

from pathlib import Path

import click
import jinja2

from gepetto.config import ProjectConfig
from gepetto.prompts import print_success_message
from gepetto.templating import (
    copy_template_files,
    create_program_id_file,
    create_template_context,
)
from gepetto.validation import validate_project_directory, validate_template_directory

TEMPLATE_DIR = "template"


def scaffold_project(package_name: str | None = None) -> ProjectConfig:
    """Create a new project directory from the template and return its configuration."""
    config = ProjectConfig.build(package_name)

    click.echo(
        f"{click.style('✨', fg='green')} Creating new Pinocchio project: "
        f"{click.style(config.program_name_dash, fg='cyan', bold=True)}"
    )

    validate_project_directory(config.program_name_dash)
    template_dir = Path(TEMPLATE_DIR)
    validate_template_directory(template_dir)

    project_dir = Path(config.program_name_dash)
    project_dir.mkdir(parents=True, exist_ok=True)

    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    context = create_template_context(config)

    copy_template_files(template_dir, project_dir, env, context, config.program_name_dash)
    create_program_id_file(project_dir, config.program_keypair)
    print_success_message(config.program_pubkey)
    return config