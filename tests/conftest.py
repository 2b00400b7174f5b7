"""Shared fixtures for gouno tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gouno.core.models import TemplateContext


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create files (and parent directories) under root."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every relative path under root to its bytes (None for directories)."""
    return {
        path.relative_to(root).as_posix(): None if path.is_dir() else path.read_bytes()
        for path in sorted(root.rglob("*"))
    }


@pytest.fixture
def context() -> TemplateContext:
    return TemplateContext(
        module_path="github.com/acme/widget",
        project_name="widget",
        repo_url="https://github.com/acme/widget.git",
    )
