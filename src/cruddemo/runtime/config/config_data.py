"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./database.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    seed: bool = Field(
        default=False,
        description="Insert the sample employees on startup when the table is empty",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    api_prefix: str = Field(default="/api", description="Prefix for resource routes")
    not_found_status: int = Field(
        default=500,
        description="HTTP status returned when a resource id does not exist",
    )
    identity_violation_status: int = Field(
        default=500,
        description="HTTP status returned when a PATCH body tries to change the id",
    )

    @field_validator("not_found_status", "identity_violation_status")
    @classmethod
    def _validate_error_status(cls, value: int) -> int:
        if not 400 <= value <= 599:
            raise ValueError("error status must be a 4xx or 5xx code")
        return value


class UserConfig(BaseModel):
    """A single entry of the in-memory credential store."""

    username: str = Field(description="Login name")
    password: str = Field(
        description="Encoded password, e.g. '{noop}secret' or '{pbkdf2}...'"
    )
    roles: list[str] = Field(default_factory=list, description="Granted roles")


class AccessRuleConfig(BaseModel):
    """Maps an HTTP method and path pattern to the role it requires."""

    method: HttpMethod = Field(description="HTTP method the rule applies to")
    pattern: str = Field(
        description=(
            "Exact path or prefix pattern ending in '/**', relative to app.api_prefix"
        )
    )
    role: str = Field(description="Role required to pass the rule")

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


def _default_users() -> list[UserConfig]:
    return [
        UserConfig(username="john", password="{noop}test123", roles=["EMPLOYEE"]),
        UserConfig(
            username="mary", password="{noop}test123", roles=["EMPLOYEE", "MANAGER"]
        ),
        UserConfig(
            username="susan",
            password="{noop}test123M",
            roles=["EMPLOYEE", "MANAGER", "ADMIN"],
        ),
    ]


def _default_rules() -> list[AccessRuleConfig]:
    return [
        AccessRuleConfig(method="GET", pattern="/employees", role="EMPLOYEE"),
        AccessRuleConfig(method="GET", pattern="/employees/**", role="EMPLOYEE"),
        AccessRuleConfig(method="POST", pattern="/employees", role="MANAGER"),
        AccessRuleConfig(method="PUT", pattern="/employees", role="MANAGER"),
        AccessRuleConfig(method="PATCH", pattern="/employees/**", role="MANAGER"),
        AccessRuleConfig(method="DELETE", pattern="/employees/**", role="ADMIN"),
    ]


class SecurityConfig(BaseModel):
    """Authentication and authorization configuration."""

    realm: str = Field(default="Realm", description="HTTP Basic realm")
    users: list[UserConfig] = Field(
        default_factory=_default_users, description="In-memory users"
    )
    rules: list[AccessRuleConfig] = Field(
        default_factory=_default_rules,
        description="Access rules, evaluated in declaration order",
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )
