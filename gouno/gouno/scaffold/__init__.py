"""Template tree copying."""

from .copier import CopyReport, copy_template, copy_tree

__all__ = ["CopyReport", "copy_template", "copy_tree"]
