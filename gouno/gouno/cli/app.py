"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..core.models import TemplateContext
from ..core.settings import get_settings
from ..rendering.engine import TemplateRenderError
from ..scaffold.copier import copy_template
from ..source.clone import DEFAULT_TEMPLATE_DIR, TemplateSourceError, resolve_template_source
from .parsers import derive_repo_url, parse_module_path, parse_project_name

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gouno-cli",
    help="Create new projects by copying a template tree and rendering its placeholders.",
    add_completion=False,
)


@app.callback()
def root() -> None:
    """Create new projects by copying a template tree and rendering its placeholders.

    Every file is rendered with ModulePath, ProjectName and RepoURL; files that
    are not valid templates are copied byte for byte.
    """


@app.command()
def new(
    project_name: Annotated[
        str,
        typer.Argument(
            help="Name of the project; also the destination directory.",
            callback=parse_project_name,
            metavar="PROJECT_NAME",
        ),
    ],
    module: Annotated[
        str,
        typer.Option(
            "--module",
            "-m",
            help="Go module path (e.g., github.com/your/project). Defaults to PROJECT_NAME.",
            callback=parse_module_path,
        ),
    ] = "",
    template: Annotated[
        str,
        typer.Option(
            "--template",
            "-t",
            help="Path to the template directory (default will clone the default template repository).",
            metavar="DIR",
        ),
    ] = DEFAULT_TEMPLATE_DIR,
    repo_url: Annotated[
        str,
        typer.Option(
            "--repo-url",
            help="Repository URL for the new project (default: derived from the module path).",
            metavar="URL",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Create a new web project from the go-uno template."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    module_path = module or project_name
    context = TemplateContext(
        module_path=module_path,
        project_name=project_name,
        repo_url=repo_url or derive_repo_url(module_path),
    )
    logger.debug(f"Context: {context.template_vars()}")

    settings = get_settings()
    dest_dir = Path(".") / project_name

    try:
        with resolve_template_source(template, settings) as template_dir:
            print(
                f"Creating new project '{project_name}' with module path "
                f"'{module_path}' from template '{template_dir}'"
            )
            copy_template(template_dir, dest_dir, context)
    except TemplateSourceError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e
    except (OSError, TemplateRenderError) as e:
        logger.error(f"Error creating project: {e}")
        raise typer.Exit(code=1) from e

    print(f"Project '{project_name}' created successfully in '{dest_dir}'")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
