"""Gouno - project scaffolding from template repositories.

Copies a template tree into a new project, rendering Jinja2 placeholders
for the module path, project name and repository URL.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
