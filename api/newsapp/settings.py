from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    NEWSAPI_KEY: SecretStr
    NEWSAPI_BASE_URL: str = "https://newsapi.org/v2"
    NEWSAPI_LANGUAGE: str = "en"
    NEWSAPI_PAGE_SIZE: int = Field(default=20, ge=1, le=100)
    NEWSAPI_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(default=2000, validation_alias=AliasChoices("API_PORT", "PORT"))

    LOG_LEVEL: str = "INFO"

    @field_validator("NEWSAPI_KEY")
    @classmethod
    def _key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("apiKey must be set")
        return value

    @field_validator("NEWSAPI_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")
