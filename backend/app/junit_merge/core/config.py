from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JUNIT_MERGE_", env_file=".env", extra="ignore")

    LOG_LEVEL: str = Field(default="WARNING")
    LOG_FILE: str | None = Field(default=None)

    # --update-only 的默认值
    UPDATE_ONLY: bool = Field(default=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
