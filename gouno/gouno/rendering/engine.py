"""Template rendering engine."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from jinja2 import Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError

from ..core.models import TemplateContext

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
# Text without any of these cannot contain a placeholder.
_DELIMITERS = ("{{", "{%", "{#")
# Go-style field reference: {{.ModulePath}} / {{- .ProjectName }}
_DOT_FIELD_PATTERN = re.compile(r"(\{\{-?\s*)\.(?=[A-Za-z_])")
# Private use area; stands in for "\r" so the lexer only ever sees "\n".
_SENTINEL_RANGE = range(0xE000, 0xF900)


class TemplateRenderError(RuntimeError):
    """Raised when a file parses as a template but cannot be rendered."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"Failed to render {name}: {message}")
        self.name = name


@lru_cache(maxsize=1)
def create_environment() -> Environment:
    """Create the shared Jinja2 environment used for every file."""
    return Environment(
        undefined=StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
        newline_sequence="\n",
    )


def has_placeholders(text: str) -> bool:
    return any(delimiter in text for delimiter in _DELIMITERS)


def normalize_field_refs(text: str) -> str:
    """Rewrite Go-style ``{{.Field}}`` references to plain Jinja2 names."""
    return _DOT_FIELD_PATTERN.sub(r"\1", text)


def carriage_return_sentinel(*texts: str) -> str:
    """Return a private use character that occurs in none of ``texts``."""
    for code_point in _SENTINEL_RANGE:
        candidate = chr(code_point)
        if not any(candidate in text for text in texts):
            return candidate
    raise ValueError("No free private use character to stand in for carriage returns")


def parse_template(text: str, name: str = "<string>") -> Template | None:
    """Parse text as a template.

    Args:
        text: File content without carriage returns
        name: Name used in log messages

    Returns:
        Compiled template, or None when the text is not a valid template
    """
    try:
        return create_environment().from_string(normalize_field_refs(text))
    except TemplateSyntaxError as e:
        logger.debug(f"Not a template ({e.message}), copying verbatim: {name}")
        return None


def render_content(content: bytes, context: TemplateContext, name: str) -> bytes | None:
    """Render file content with the template context.

    Bytes are decoded with ``surrogateescape`` so content that is not valid
    UTF-8 survives a render unchanged outside the placeholders. Jinja2
    rewrites every line ending to ``newline_sequence``, so carriage returns
    are swapped for a sentinel while rendering and put back afterwards.

    Args:
        content: Raw file content
        context: Values for ModulePath, ProjectName and RepoURL
        name: File name used in errors and log messages

    Returns:
        Rendered bytes, or None when the content must be copied verbatim
    """
    text = content.decode(ENCODING, errors="surrogateescape")
    if not has_placeholders(text):
        return None

    template_vars = context.template_vars()
    sentinel = carriage_return_sentinel(text, *template_vars.values())

    template = parse_template(text.replace("\r", sentinel), name)
    if template is None:
        return None

    try:
        rendered = template.render(**template_vars)
    except TemplateError as e:
        raise TemplateRenderError(name, str(e)) from e

    return rendered.replace(sentinel, "\r").encode(ENCODING, errors="surrogateescape")
