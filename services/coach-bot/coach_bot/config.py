from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    BOT_TOKEN: str
    PUBLIC_WEBAPP_URL: str = "https://your-web-app.vercel.app"
    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT_SECONDS: float = 10.0

    # long polling is used unless a public webhook URL is configured
    BOT_WEBHOOK_URL: str | None = None
    BOT_WEBHOOK_PATH: str = "/webhook"
    BOT_WEBHOOK_SECRET: str | None = None
    BOT_WEBHOOK_HOST: str = "0.0.0.0"
    BOT_WEBHOOK_PORT: int = 8080

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def history_url(self) -> str:
        return self.PUBLIC_WEBAPP_URL.rstrip("/") + "/history"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
