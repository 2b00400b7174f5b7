"""Domain models for template copying and rendering context."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EXCLUDES: tuple[str, ...] = (".git", ".idea", ".DS_Store", "bin", "templates")


class TemplateContext(BaseModel):
    """Values substituted into every rendered file."""

    model_config = ConfigDict(frozen=True)

    module_path: str = Field(..., description="Module path (e.g. github.com/acme/widget)")
    project_name: str = Field(..., description="Project name")
    repo_url: str = Field(default="", description="Repository URL")

    def template_vars(self) -> dict[str, str]:
        """Return the names templates use to reference the context."""
        return {
            "ModulePath": self.module_path,
            "ProjectName": self.project_name,
            "RepoURL": self.repo_url,
        }


class CopyConfig(BaseModel):
    """Configuration for a single template copy."""

    source_root: Path = Field(..., description="Template directory to copy from")
    dest_root: Path = Field(..., description="Directory receiving the new project")
    excludes: tuple[str, ...] = Field(
        default=DEFAULT_EXCLUDES,
        description="Relative path substrings that are never copied",
    )

    def is_excluded(self, rel_path: str) -> bool:
        return any(pattern in rel_path for pattern in self.excludes)
