"""API configuration from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """API settings loaded from environment."""

    database_url: str | None = None
    cors_origins: str = "*"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8081

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = {"env_prefix": "API_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
