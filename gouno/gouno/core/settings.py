from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATE_REPO = "https://github.com/rushairer/gouno-template"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GOUNO_", case_sensitive=False)

    template_repo: str = DEFAULT_TEMPLATE_REPO
    git_executable: str = "git"
    clone_depth: int | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
