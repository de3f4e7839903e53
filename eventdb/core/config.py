# eventdb/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment; unknown variables are ignored
    # so the same environment can be shared with other services.
    model_config = SettingsConfigDict(extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    # --- Production URL (PostgreSQL) ---
    DATABASE_URL_PROD: str = ""

    # --- Local Development URL ---
    DATABASE_URL_LOCAL: str = "sqlite:///./event_management.db"

    # Echo every SQL statement through the sqlalchemy.engine logger
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Roles created by init_db when the user_roles table is empty
    DEFAULT_ROLES: dict[str, str] = {
        "organizer": "Creates and manages events",
        "attendee": "Registers for and attends events",
        "admin": "Full administrative access",
    }

    # --- Dynamic Properties ---
    @property
    def DATABASE_URL(self) -> str:
        return (
            self.DATABASE_URL_LOCAL if self.ENV == "local" else self.DATABASE_URL_PROD
        )


# Create a single instance of the settings
settings = Settings()
