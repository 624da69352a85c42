from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Registry behaviour
    emit_http_status: bool = Field(default=True, alias="ERRORSTORE_EMIT_HTTP_STATUS")

    # HTTP integration
    expose_debug: bool = Field(default=False, alias="ERRORSTORE_EXPOSE_DEBUG")
    export_prefix: str = Field(default="/errors", alias="ERRORSTORE_EXPORT_PREFIX")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Frontend URL allowed to fetch the client export
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("export_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure a single leading slash and no trailing slash."""
        return "/" + v.strip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
