from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION = "production"


class Settings(BaseSettings):
    app_name: str = Field(default="Logging & Error Handling Demo", alias="APP_NAME")

    # Only the exact value "production" switches on redaction and JSON logs
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    @field_validator("port", mode="before")
    @classmethod
    def invalid_port_to_default(cls, v: str | int | None) -> int:
        """Fall back to the default port for empty, zero or non-numeric values."""
        if v is None or v == "":
            return 3000
        if isinstance(v, str):
            try:
                v = int(v)
            except ValueError:
                return 3000
        return v or 3000

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
