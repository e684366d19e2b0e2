from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=80, alias="PORT")
    build_dir: str = Field(default="build", alias="BUILD_DIR")
    index_file: str = Field(default="index.html", alias="INDEX_FILE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: Literal["json", "console"] = Field(default="json", alias="LOG_FORMAT")
    enable_metrics_endpoint: bool = Field(default=True, alias="ENABLE_METRICS_ENDPOINT")

    @property
    def build_path(self) -> Path:
        return Path(self.build_dir)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
