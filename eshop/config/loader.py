# eshop/config/loader.py
"""
Project configuration loader.
The single source of truth is config/config.json.
Secrets are overridden from environment variables.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# PATHS
# =============================================================================

def get_project_root() -> Path:
    """Returns the project root directory."""
    return Path(__file__).parent.parent.parent


def get_config_path() -> Path:
    """Returns the path to the configuration file."""
    return get_project_root() / "config" / "config.json"


def load_config_json(config_path: Path | None = None) -> dict[str, Any]:
    """Loads config.json and returns it as a dict."""
    config_path = config_path or get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


# =============================================================================
# SETTINGS SECTIONS
# =============================================================================

class SystemSettings(BaseModel):
    """System settings."""
    PROJECT_NAME: str = "eshop"
    VERSION: str = "1.0.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "DEBUG"
    ENVIRONMENT: str = "development"
    COMPONENT_MODE: str = "all"


class DeploymentSettings(BaseModel):
    """Ports and hosts of the two processes."""
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v2"
    RELAY_HOST: str = "0.0.0.0"
    RELAY_PORT: int = 4000
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])


class LoggingSettings(BaseModel):
    """Logging settings."""
    LOG_LEVEL: str = "DEBUG"
    LOG_TO_FILE: bool = True
    LOG_FILE_PATH: str = "logs/app.log"
    LOG_FORMAT: str = "colored"
    LOG_MAX_BYTES: int = 10485760


class DatabaseSettings(BaseModel):
    """PostgreSQL settings."""
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "eshop"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_MIN_POOL_SIZE: int = 5
    DB_MAX_POOL_SIZE: int = 20
    DB_COMMAND_TIMEOUT: int = 60
    DB_RETRY_ATTEMPTS: int = 3
    DB_RETRY_DELAY: float = 1.0

    @field_validator("DB_PASSWORD", mode="before")
    @classmethod
    def get_from_env(cls, v: str) -> str:
        """Takes the password from the environment when it is not set."""
        if not v:
            return os.getenv("DB_PASSWORD", "")
        return v

    @property
    def dsn(self) -> str:
        """DSN for the PostgreSQL connection."""
        return (
            f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


class AuthSettings(BaseModel):
    """Session token and cookie settings."""
    JWT_SECRET_KEY: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_DAYS: int = 90
    USER_COOKIE_NAME: str = "token"
    SELLER_COOKIE_NAME: str = "seller_token"
    COOKIE_SECURE: bool = True
    COOKIE_SAMESITE: str = "none"
    ADMIN_ROLE: str = "Admin"

    @field_validator("JWT_SECRET_KEY", mode="before")
    @classmethod
    def get_from_env(cls, v: str) -> str:
        """Takes the signing key from the environment when it is not set."""
        if not v:
            return os.getenv("JWT_SECRET_KEY", "")
        return v


class MarketplaceSettings(BaseModel):
    """Business constants."""
    SERVICE_CHARGE_PERCENT: float = 10.0


# =============================================================================
# MAIN SETTINGS CLASS
# =============================================================================

class Settings(BaseSettings):
    """
    Application settings.
    Aggregates every configuration section.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    system: SystemSettings = Field(default_factory=SystemSettings)
    deployment: DeploymentSettings = Field(default_factory=DeploymentSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    marketplace: MarketplaceSettings = Field(default_factory=MarketplaceSettings)

    @classmethod
    def from_config_json(cls, config_path: Path | None = None) -> "Settings":
        """
        Builds Settings from config.json.
        Secrets are overridden from environment variables.
        """
        config_data = load_config_json(config_path)

        # Keys starting with _comment_ are documentation only
        data = {k: v for k, v in config_data.items() if not k.startswith("_comment_")}

        return cls(
            system=SystemSettings(
                PROJECT_NAME=data.get("PROJECT_NAME", "eshop"),
                VERSION=data.get("VERSION", "1.0.0"),
                DEBUG=data.get("DEBUG", True),
                LOG_LEVEL=data.get("LOG_LEVEL", "DEBUG"),
                ENVIRONMENT=os.getenv("ENVIRONMENT", data.get("ENVIRONMENT", "development")),
                COMPONENT_MODE=os.getenv("COMPONENT_MODE", data.get("COMPONENT_MODE", "all")),
            ),
            deployment=DeploymentSettings(
                API_HOST=data.get("API_HOST", "0.0.0.0"),
                API_PORT=int(os.getenv("API_PORT", data.get("API_PORT", 8000))),
                API_PREFIX=data.get("API_PREFIX", "/api/v2"),
                RELAY_HOST=data.get("RELAY_HOST", "0.0.0.0"),
                RELAY_PORT=int(os.getenv("RELAY_PORT", data.get("RELAY_PORT", 4000))),
                CORS_ORIGINS=data.get("CORS_ORIGINS", ["*"]),
            ),
            logging=LoggingSettings(
                LOG_LEVEL=data.get("LOG_LEVEL", "DEBUG"),
                LOG_TO_FILE=data.get("LOG_TO_FILE", True),
                LOG_FILE_PATH=data.get("LOG_FILE_PATH", "logs/app.log"),
                LOG_FORMAT=data.get("LOG_FORMAT", "json"),
                LOG_MAX_BYTES=data.get("LOG_MAX_BYTES", 10485760),
            ),
            database=DatabaseSettings(
                DB_HOST=os.getenv("DB_HOST", data.get("DB_HOST", "localhost")),
                DB_PORT=int(os.getenv("DB_PORT", data.get("DB_PORT", 5432))),
                DB_NAME=os.getenv("DB_NAME", data.get("DB_NAME", "eshop")),
                DB_USER=os.getenv("DB_USER", data.get("DB_USER", "postgres")),
                DB_PASSWORD=os.getenv("DB_PASSWORD", data.get("DB_PASSWORD", "")),
                DB_MIN_POOL_SIZE=data.get("DB_MIN_POOL_SIZE", 5),
                DB_MAX_POOL_SIZE=data.get("DB_MAX_POOL_SIZE", 20),
                DB_COMMAND_TIMEOUT=data.get("DB_COMMAND_TIMEOUT", 60),
                DB_RETRY_ATTEMPTS=data.get("DB_RETRY_ATTEMPTS", 3),
                DB_RETRY_DELAY=data.get("DB_RETRY_DELAY", 1.0),
            ),
            auth=AuthSettings(
                JWT_SECRET_KEY=os.getenv("JWT_SECRET_KEY", data.get("JWT_SECRET_KEY", "")),
                JWT_ALGORITHM=data.get("JWT_ALGORITHM", "HS256"),
                JWT_EXPIRES_DAYS=data.get("JWT_EXPIRES_DAYS", 90),
                USER_COOKIE_NAME=data.get("USER_COOKIE_NAME", "token"),
                SELLER_COOKIE_NAME=data.get("SELLER_COOKIE_NAME", "seller_token"),
                COOKIE_SECURE=data.get("COOKIE_SECURE", True),
                COOKIE_SAMESITE=data.get("COOKIE_SAMESITE", "none"),
                ADMIN_ROLE=data.get("ADMIN_ROLE", "Admin"),
            ),
            marketplace=MarketplaceSettings(
                SERVICE_CHARGE_PERCENT=data.get("SERVICE_CHARGE_PERCENT", 10.0),
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Returns the application settings singleton.
    Loads .env from the project root first.
    """
    from dotenv import load_dotenv

    env_path = get_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Settings.from_config_json()


settings = get_settings()
