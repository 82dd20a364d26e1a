from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Press"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Sessions
    site_domain: str = "localhost"
    session_cookie_name: str = "sessionid"
    session_cookie_max_age_days: int = 7
    session_cookie_secure: bool = True

    # Passwords
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    # Artwork catalog
    artwork_max_string_length: int = 250
    death_year_future_margin: int = 50

    # External sync (GitHub, Google Groups)
    github_api_key: str | None = None  # Unauthenticated requests are heavily rate limited
    external_http_timeout_seconds: float = 10.0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Reject wildcards, session cookies are sent with credentials."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("session_cookie_max_age_days")
    @classmethod
    def validate_cookie_max_age(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SESSION_COOKIE_MAX_AGE_DAYS must be at least 1")
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
