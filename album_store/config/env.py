"""
Environment configuration management module.

This module provides the immutable Env container that holds the validated
configuration values for one run of the application.
Validation is delegated to the pydantic ConfigSchema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import ValidationError

from ..constants import (
    DEFAULT_CONNECTION_TIMEOUT,
    DEFAULT_DB_HOST,
    DEFAULT_DB_NAME,
    DEFAULT_DB_PORT,
)
from ..database.config import build_database_url, redact_database_url
from .schema import ConfigSchema


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Env:
    """
    Immutable configuration container for environment variables.

    Field names match the environment variables they are read from.
    """

    DBUSER: Optional[str] = None
    DBPASS: Optional[str] = None
    DBHOST: str = DEFAULT_DB_HOST
    DBPORT: int = DEFAULT_DB_PORT
    DBNAME: str = DEFAULT_DB_NAME
    DATABASE_URL: Optional[str] = None
    DB_CONNECT_TIMEOUT: int = DEFAULT_CONNECTION_TIMEOUT

    @property
    def database_url(self) -> str:
        """DATABASE_URL if set, otherwise a URL built from the DB* values."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return build_database_url(
            user=self.DBUSER,
            password=self.DBPASS,
            host=self.DBHOST,
            port=self.DBPORT,
            dbname=self.DBNAME,
        )

    @staticmethod
    def from_schema(config: ConfigSchema) -> "Env":
        """Create an Env from a validated ConfigSchema instance."""
        return Env(
            DBUSER=config.db_user,
            DBPASS=config.db_password,
            DBHOST=config.db_host,
            DBPORT=config.db_port,
            DBNAME=config.db_name,
            DATABASE_URL=config.database_url,
            DB_CONNECT_TIMEOUT=config.connect_timeout,
        )

    def to_dict(self) -> dict:
        """
        Convert environment to dictionary representation.

        Returns:
            Dictionary with all configuration values
        """
        return {
            "DBUSER": self.DBUSER,
            "DBPASS": self.DBPASS,
            "DBHOST": self.DBHOST,
            "DBPORT": self.DBPORT,
            "DBNAME": self.DBNAME,
            "DATABASE_URL": self.DATABASE_URL,
            "DB_CONNECT_TIMEOUT": self.DB_CONNECT_TIMEOUT,
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Values go through the same schema validation as ConfigLoader.load(),
        but the process environment and .env.local are not consulted.

        Args:
            mapping: Dictionary of configuration values keyed by env var name

        Returns:
            Env instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        values = {}
        for field_name, field_info in ConfigSchema.model_fields.items():
            env_var = field_info.json_schema_extra.get("env_var")
            value = mapping.get(env_var)
            if value is not None and str(value).strip():
                values[field_name] = value

        try:
            config = ConfigSchema(**values)
        except ValidationError as e:
            missing = "; ".join(error["msg"] for error in e.errors())
            raise ConfigError(f"Invalid configuration: {missing}") from e

        return cls.from_schema(config)

    def mask(self) -> dict:
        """
        Return masked version for safe logging (hides sensitive values).

        Returns:
            Dictionary with sensitive values masked
        """
        masked = self.to_dict()
        masked["DBPASS"] = "***" if self.DBPASS else None
        masked["DATABASE_URL"] = (
            redact_database_url(self.DATABASE_URL) if self.DATABASE_URL else None
        )
        return masked
