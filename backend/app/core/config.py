from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "SquadGPT"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # LLM_API_KEY takes precedence; OPENAI_API_KEY is kept for plain OpenAI setups.
    LLM_API_KEY: str = ""
    OPENAI_API_KEY: str = ""
    LLM_BASE_URL: str | None = None
    MODEL_DEFAULT: str = "gpt-3.5-turbo"
    LLM_TEMPERATURE: float = 0.2

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_MAX: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 60

    BACKEND_CORS_ORIGINS: list[str] = []

    @model_validator(mode="after")
    def _default_cors_origins(self) -> "Settings":
        if not self.BACKEND_CORS_ORIGINS:
            if self.ENVIRONMENT == "production":
                self.BACKEND_CORS_ORIGINS = ["https://yourdomain.com"]
            else:
                self.BACKEND_CORS_ORIGINS = ["http://localhost:3000"]
        return self

    @property
    def resolved_api_key(self) -> str:
        return self.LLM_API_KEY or self.OPENAI_API_KEY

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


settings = Settings()  # type: ignore
