from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from platformdirs import user_log_path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

APP_NAME = "fastalens"
APP_AUTHOR = "fastalens"
DEFAULT_EXTENSIONS = ("fasta", "fa", "fna")


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FASTALENS_", case_sensitive=False)

    log_level: str = "info"
    log_format: str = "json"
    log_dir: Path | None = None
    extensions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS)
    )
    quick_filter_min: int = Field(default=1000, ge=0)
    quick_filter_max: int = Field(default=10000, ge=0)

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            cleaned = [str(item).strip().lstrip(".").lower() for item in value]
            return [item for item in cleaned if item]
        return value

    def resolved_log_dir(self) -> Path:
        if self.log_dir is not None:
            return self.log_dir.expanduser()
        return Path(user_log_path(APP_NAME, APP_AUTHOR))


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
