"""Template rendering and file output."""

from .engine import TemplateRenderError, render_content

__all__ = ["TemplateRenderError", "render_content"]
