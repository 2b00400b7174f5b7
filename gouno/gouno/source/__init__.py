"""Template source resolution."""

from .clone import (
    DEFAULT_TEMPLATE_DIR,
    TemplateSourceError,
    clone_template,
    resolve_template_source,
)

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "TemplateSourceError",
    "clone_template",
    "resolve_template_source",
]
