"""flowcheck settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    action_name_max_length: int = 128
    definition_dir: str = "./definitions"
    default_execution_order: str = "FIFO"

    class Config:
        env_file = ".env"
        env_prefix = "FLOWCHECK_"
        extra = "ignore"

    @property
    def definition_dir_path(self) -> Path:
        return Path(self.definition_dir).expanduser().resolve()


settings = Settings()
