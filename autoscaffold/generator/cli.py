from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.logging import RichHandler

from ..config import load_settings
from ..errors import ScaffoldError
from .catalog import build_catalog
from .prompts import ConsolePrompter, FlowController
from .scaffolder import Scaffolder

__version__ = "0.1.0"

app = typer.Typer(add_completion=False, help="Scaffold a project from a template.")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )


def _show_version(value: bool) -> None:
    if value:
        print(f"autoscaffold {__version__}")
        raise typer.Exit()


@app.command()
def create(
    directory: Optional[str] = typer.Argument(None, help="Directory to create the project in (asked for when omitted)"),
    templates_dir: Optional[Path] = typer.Option(None, "--templates-dir", help="Directory holding template-* folders"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    skip_install: bool = typer.Option(False, "--skip-install", help="Don't run the package manager, just print the next steps"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    version: bool = typer.Option(False, "--version", callback=_show_version, is_eager=True, help="Show version and exit"),
):
    """Ask a few questions, then copy a template into DIRECTORY."""
    setup_logging(verbose)
    try:
        settings = load_settings(config, templates_dir=templates_dir)
        catalog = build_catalog(settings.templates_dir, settings.template_marker)
        if not catalog:
            raise ScaffoldError(f"No templates found in {settings.templates_dir}")
        answers = FlowController(
            catalog,
            ConsolePrompter(),
            package_managers=settings.package_managers,
            default_project=settings.default_project,
        ).run(directory)
    except ScaffoldError as e:
        print(f"[red]✖[/] {e}")
        raise typer.Exit(1)

    scaffolder = Scaffolder(settings)
    root = scaffolder.scaffold(answers)
    print(f"[green]✅ Scaffolding complete:[/] {root}")

    if skip_install:
        scaffolder.next_steps(answers.target_dir, answers.package_manager)
    else:
        scaffolder.install(root, answers.package_manager)


if __name__ == "__main__":
    app()
