"""Domain models and settings."""

from .models import CopyConfig, TemplateContext
from .settings import Settings, get_settings

__all__ = ["CopyConfig", "Settings", "TemplateContext", "get_settings"]
