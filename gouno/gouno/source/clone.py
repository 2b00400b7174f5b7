"""Locate the template tree: a local directory or a fresh clone."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .._utils import missing_commands, run_logged
from ..core.settings import Settings

logger = logging.getLogger(__name__)

# Passing this value means "use the default template repository".
DEFAULT_TEMPLATE_DIR = "./templates"


class TemplateSourceError(Exception):
    """Raised when the template repository cannot be fetched."""


def clone_template(repo_url: str, destination: Path, settings: Settings) -> Path:
    """Clone ``repo_url`` into ``destination``.

    Args:
        repo_url: Repository to clone
        destination: Empty directory receiving the working tree
        settings: Git executable and clone depth

    Returns:
        The destination directory
    """
    git = settings.git_executable
    if missing_commands([git]):
        raise TemplateSourceError(f"missing dependency: {git}")

    cmd = [git, "clone"]
    if settings.clone_depth:
        cmd += ["--depth", str(settings.clone_depth)]
    cmd += [repo_url, str(destination)]

    try:
        run_logged(cmd)
    except subprocess.CalledProcessError as e:
        raise TemplateSourceError(
            f"Error cloning template repository {repo_url}: git exited with {e.returncode}"
        ) from e

    return destination


@contextmanager
def resolve_template_source(template_dir: str, settings: Settings) -> Iterator[Path]:
    """Yield the directory to copy the template from.

    A ``template_dir`` equal to DEFAULT_TEMPLATE_DIR clones
    ``settings.template_repo`` into a temporary directory that is removed
    when the context exits.
    """
    if template_dir != DEFAULT_TEMPLATE_DIR:
        yield Path(template_dir)
        return

    with tempfile.TemporaryDirectory(prefix="gouno-template-") as tmpdir:
        print(f"Cloning default template from {settings.template_repo} to {tmpdir}")
        yield clone_template(settings.template_repo, Path(tmpdir), settings)
