from functools import lru_cache
from typing import Annotated, List, Optional

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = Field(default="Agenda")
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )
    api_base_url: Optional[AnyHttpUrl] = Field(
        default=None
    )
    api_timeout: float = Field(
        default=10.0
    )
    api_token: Optional[str] = Field(
        default=None
    )
    use_mock_data: bool = Field(
        default=True
    )
    appointments_path: str = Field(
        default="/appointments"
    )
    employees_path: str = Field(
        default="/employees"
    )
    calendar_timezone: Optional[str] = Field(
        default=None
    )

    model_config = SettingsConfigDict(env_prefix="AGENDA_", case_sensitive=False)

    @field_validator("cors_origins", mode="before")
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
