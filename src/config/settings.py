from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = ["*"]
    public_dir: str = "public"

    ENVIRONMENT: str = "Production"

    # Admin
    admin_username: str = "admin"
    admin_password: str = ""

    # Storage: an SQLAlchemy async URL, or a mongodb:// URL for the document store
    database_url: str = "sqlite+aiosqlite:///./rsvps.db"
    mongodb_db: str = "rsvp"
    create_tables_on_startup: bool = True
    LOG_DB: bool = False

    # RSVP rules
    max_guest_count: int = 50
    admin_list_limit: int = 5000

    # Event shown in the calendar invite
    event_title: str = "Anniversary Party"
    event_description: str = (
        "We can't wait to celebrate with you! Please RSVP on the invitation website."
    )
    event_venue: str = "Apollo Convention Centre"
    event_address: str = "6591 Innovator Drive, Mississauga"
    event_start: str = "2025-12-27T18:00:00"
    event_end: str = "2025-12-28T01:00:00"
    event_timezone: str = "America/Toronto"

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    RUN_MIGRATIONS_ON_STARTUP: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def uses_mongo(self) -> bool:
        return self.database_url.startswith(("mongodb://", "mongodb+srv://"))


@lru_cache
def get_settings() -> Settings:
    return Settings()
