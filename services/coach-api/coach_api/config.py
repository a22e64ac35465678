from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    COACH_DATABASE_URL: str = "sqlite+aiosqlite:///./coach.db"
    COACH_DATABASE_ECHO: bool = False
    COACH_REDIS_URL: str | None = None
    COACH_EXERCISES_CACHE_TTL_SECONDS: int = 5 * 60

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
