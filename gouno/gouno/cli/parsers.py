"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_project_name(value: str) -> str:
    """Validate a project name used as the destination directory name."""
    name = value.strip()
    if not name or name in {".", ".."}:
        raise typer.BadParameter(f"Invalid project name: {value!r}")
    if "/" in name or "\\" in name:
        raise typer.BadParameter(
            f"Project name must not contain path separators, got: {value!r}"
        )
    return name


def parse_module_path(value: str) -> str:
    """Validate an optional module path (e.g. github.com/your/project)."""
    module_path = value.strip()
    if any(ch.isspace() for ch in module_path):
        raise typer.BadParameter(f"Module path must not contain whitespace: {value!r}")
    return module_path.strip("/")


def derive_repo_url(module_path: str) -> str:
    """Derive an HTTPS clone URL from a module path.

    ``github.com/acme/widget`` becomes ``https://github.com/acme/widget.git``.
    Module paths without a host segment yield an empty string.
    """
    segments = [segment for segment in module_path.split("/") if segment]
    if len(segments) < 3 or "." not in segments[0]:
        return ""
    return f"https://{'/'.join(segments)}.git"
