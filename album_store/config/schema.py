"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator

from ..constants import (
    DEFAULT_CONNECTION_TIMEOUT,
    DEFAULT_DB_HOST,
    DEFAULT_DB_NAME,
    DEFAULT_DB_PORT,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    This is the single source of truth for all application configuration.
    Each field can be set via environment variables or CLI arguments.
    A full DATABASE_URL takes precedence over the individual DB* settings.
    """

    database_url: Optional[str] = Field(
        None,
        description="Database connection URL (overrides the DB* settings)",
        json_schema_extra={
            "env_var": "DATABASE_URL",
            "cli_arg": "db_url",
            "sensitive": True,
        }
    )

    db_user: Optional[str] = Field(
        None,
        description="Database user name",
        json_schema_extra={
            "env_var": "DBUSER",
            "cli_arg": "db_user",
        }
    )

    db_password: Optional[str] = Field(
        None,
        description="Database password",
        json_schema_extra={
            "env_var": "DBPASS",
            "cli_arg": "db_password",
            "sensitive": True,
        }
    )

    db_host: str = Field(
        DEFAULT_DB_HOST,
        description=f"Database server host (default: {DEFAULT_DB_HOST})",
        json_schema_extra={
            "env_var": "DBHOST",
            "cli_arg": "db_host",
        }
    )

    db_port: int = Field(
        DEFAULT_DB_PORT,
        ge=1,
        le=65535,
        description=f"Database server port (default: {DEFAULT_DB_PORT})",
        json_schema_extra={
            "env_var": "DBPORT",
            "cli_arg": "db_port",
        }
    )

    db_name: str = Field(
        DEFAULT_DB_NAME,
        description=f"Database name (default: {DEFAULT_DB_NAME})",
        json_schema_extra={
            "env_var": "DBNAME",
            "cli_arg": "db_name",
        }
    )

    connect_timeout: int = Field(
        DEFAULT_CONNECTION_TIMEOUT,
        ge=1,
        description=f"Seconds to wait for the connection (default: {DEFAULT_CONNECTION_TIMEOUT})",
        json_schema_extra={
            "env_var": "DB_CONNECT_TIMEOUT",
            "cli_arg": "connect_timeout",
        }
    )

    @model_validator(mode="after")
    def require_credentials(self) -> "ConfigSchema":
        """Either a full URL or at least a user name must be configured."""
        if not self.database_url and not self.db_user:
            raise ValueError("Set DATABASE_URL or DBUSER (and DBPASS)")
        return self

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }


def env_var_for(schema: type, field_name: str) -> Optional[str]:
    """Return the environment variable backing a schema field, if any."""
    field_info = schema.model_fields.get(field_name)
    if field_info is None or not field_info.json_schema_extra:
        return None
    return field_info.json_schema_extra.get("env_var")

