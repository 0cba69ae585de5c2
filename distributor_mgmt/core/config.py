from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Distributor Management API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"
    api_v1_prefix: str = "/api/v1"

    # Database (any async SQLAlchemy driver; SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./distributor_dev.db",
        alias="DATABASE_URL",
    )

    # Paging defaults for every /filter endpoint
    default_page_size: int = Field(default=20, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=200, alias="MAX_PAGE_SIZE")

    # Audit
    actor_header: str = Field(default="X-User-Id", alias="ACTOR_HEADER")
    audit_persist_enabled: bool = Field(default=True, alias="AUDIT_PERSIST_ENABLED")

    # Terms and conditions
    renewal_notice_days: int = Field(
        default=30, alias="RENEWAL_NOTICE_DAYS",
    )  # needs_renewal() is true this many days before expiration

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
