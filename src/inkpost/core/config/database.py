"""
Database connection settings.
"""
import logging
from typing import Optional

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Defines settings for connecting to the blog database.

    Either ``DATABASE_URL`` is given verbatim (any SQLAlchemy async URL, e.g.
    ``sqlite+aiosqlite:///./inkpost.db``) or it is assembled from the
    ``POSTGRES_*`` values into a ``postgresql+asyncpg`` URL.

    Performance Note:
        - Tune DATABASE_POOL_SIZE and DATABASE_MAX_OVERFLOW based on load.
          They are ignored for SQLite, which does not use a queue pool.
    """
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: SecretStr = SecretStr("")
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = Field(ge=1, le=65535, default=5432)
    DATABASE_POOL_SIZE: int = Field(ge=1, default=10)
    DATABASE_MAX_OVERFLOW: int = Field(ge=0, default=20)
    DATABASE_URL: str = Field(default="", validate_default=True)

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_url(cls, v: Optional[str], info: ValidationInfo) -> str:
        """
        Assembles the database connection URL if not provided explicitly.

        Args:
            v: Explicitly provided URL or None.
            info: Validation context with other field values.

        Returns:
            Assembled or provided database URL.

        Raises:
            ValueError: If neither a URL nor the PostgreSQL parts are configured.
        """
        if v:
            return v

        values = info.data
        missing = [
            name
            for name in ("POSTGRES_USER", "POSTGRES_HOST", "POSTGRES_DB")
            if not values.get(name)
        ]
        if missing:
            raise ValueError(
                "DATABASE_URL is not set and cannot be assembled, missing: "
                + ", ".join(missing)
            )

        password = values.get("POSTGRES_PASSWORD")
        secret = password.get_secret_value() if password else ""
        url = (
            f"postgresql+asyncpg://{values.get('POSTGRES_USER')}:"
            f"{secret}@{values.get('POSTGRES_HOST')}:"
            f"{values.get('POSTGRES_PORT')}/{values.get('POSTGRES_DB')}"
        )
        logger.debug("Assembled DATABASE_URL (password masked for security).")
        return url
