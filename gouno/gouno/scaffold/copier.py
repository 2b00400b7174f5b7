"""Mirror a template tree into a new project directory."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from ..core.models import DEFAULT_EXCLUDES, CopyConfig, TemplateContext
from ..rendering.engine import render_content
from ..rendering.io import atomic_write_bytes, read_bytes

logger = logging.getLogger(__name__)


@dataclass
class CopyReport:
    """Counts collected while copying a template tree."""

    directories: int = 0
    rendered: int = 0
    copied: int = 0
    skipped: int = 0

    @property
    def files(self) -> int:
        return self.rendered + self.copied


def _raise_walk_error(error: OSError) -> None:
    raise error


def _mode_of(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def _mirror_directory(source: Path, destination: Path) -> None:
    destination.mkdir(parents=True, exist_ok=True)
    os.chmod(destination, _mode_of(source))


def _copy_file(
    source: Path, destination: Path, rel_path: str, context: TemplateContext
) -> bool:
    """Render or copy one file. Returns True when the file was rendered."""
    content = read_bytes(source)
    rendered = render_content(content, context, rel_path)

    atomic_write_bytes(
        destination,
        content if rendered is None else rendered,
        mode=_mode_of(source),
    )
    return rendered is not None


def copy_tree(config: CopyConfig, context: TemplateContext) -> CopyReport:
    """Copy ``config.source_root`` into ``config.dest_root``.

    Entries are visited in lexical order. Excluded directories are pruned
    together with their subtree. Files that parse as templates are
    rendered with ``context``; everything else is copied byte for byte.
    Any I/O or render error aborts the copy and leaves already written
    files in place.

    Args:
        config: Source, destination and exclusion patterns
        context: Template context data

    Returns:
        Counts of what was written and skipped
    """
    source_root = config.source_root
    dest_root = config.dest_root
    if not source_root.is_dir():
        raise FileNotFoundError(f"Template directory not found: {source_root}")

    logger.debug(f"Copying template {source_root} → {dest_root}")
    report = CopyReport()

    for dirpath, dirnames, filenames in os.walk(source_root, onerror=_raise_walk_error):
        current = Path(dirpath)
        rel_dir = current.relative_to(source_root)

        _mirror_directory(current, dest_root / rel_dir)
        report.directories += 1

        kept: list[str] = []
        for dirname in sorted(dirnames):
            rel_path = (rel_dir / dirname).as_posix()
            if config.is_excluded(rel_path):
                logger.debug(f"Skipping excluded directory: {rel_path}")
                report.skipped += 1
                continue
            if (current / dirname).is_symlink():
                logger.debug(f"Skipping symlinked directory: {rel_path}")
                report.skipped += 1
                continue
            kept.append(dirname)
        # os.walk only descends into the names left in dirnames
        dirnames[:] = kept

        for filename in sorted(filenames):
            source = current / filename
            rel_path = (rel_dir / filename).as_posix()
            if config.is_excluded(rel_path):
                logger.debug(f"Skipping excluded file: {rel_path}")
                report.skipped += 1
                continue
            if not source.is_file():
                logger.debug(f"Skipping non-regular file: {rel_path}")
                report.skipped += 1
                continue

            if _copy_file(source, dest_root / rel_dir / filename, rel_path, context):
                logger.debug(f"Rendered {rel_path}")
                report.rendered += 1
            else:
                logger.debug(f"Copied {rel_path}")
                report.copied += 1

    logger.info(
        f"Wrote {report.files} file(s) ({report.rendered} rendered, "
        f"{report.copied} copied) in {report.directories} director(ies), "
        f"skipped {report.skipped}"
    )
    return report


def copy_template(
    source_root: Path | str,
    dest_root: Path | str,
    context: TemplateContext,
    excludes: tuple[str, ...] = DEFAULT_EXCLUDES,
) -> CopyReport:
    """Copy a template directory into ``dest_root`` rendering placeholders."""
    config = CopyConfig(
        source_root=Path(source_root), dest_root=Path(dest_root), excludes=excludes
    )
    return copy_tree(config, context)
