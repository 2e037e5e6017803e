"""Configuration management for the Trip Journal client.

Loads settings from .env and server profiles from servers.yaml.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv

DEFAULT_SERVER = "local"
DEFAULT_BASE_URL = "http://localhost:8000/"


class ServerProfile(BaseModel):
    """A journal server the client can talk to."""
    base_url: str


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    credential_path: str = Field(
        default="~/.trip_journal/credentials.json",
        description="File holding the cached bearer token",
    )
    default_server: str = Field(default=DEFAULT_SERVER, description="Server profile used when none is given")
    request_timeout: float = Field(default=30.0, description="Per-operation network timeout in seconds")
    resource_timeout: float = Field(default=60.0, description="Whole-request timeout in seconds")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings
    servers: dict[str, ServerProfile]

    def get_server(self, name: str | None = None) -> ServerProfile:
        """Get a server profile by name (defaults to settings.default_server)."""
        name = (name or self.settings.default_server).lower()
        if name not in self.servers:
            available = ", ".join(sorted(self.servers.keys()))
            raise ValueError(f"Unknown server '{name}'. Available: {available}")
        return self.servers[name]

    @property
    def all_servers(self) -> list[str]:
        """List all configured server names."""
        return sorted(self.servers.keys())


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "servers.yaml").exists():
            return parent
    return Path.cwd()


def _load_servers(project_root: Path) -> dict[str, ServerProfile]:
    """Load server profiles from servers.yaml, or the built-in local profile."""
    servers_path = project_root / "config" / "servers.yaml"
    if not servers_path.exists():
        return {DEFAULT_SERVER: ServerProfile(base_url=DEFAULT_BASE_URL)}

    with open(servers_path) as f:
        data = yaml.safe_load(f) or {}

    servers = {}
    for name, profile_data in data.get("servers", {}).items():
        servers[name.lower()] = ServerProfile(**profile_data)
    return servers


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from TRIP_JOURNAL_* environment variables."""
    return Settings(
        credential_path=_env("TRIP_JOURNAL_CREDENTIAL_PATH", default="~/.trip_journal/credentials.json"),
        default_server=_env("TRIP_JOURNAL_SERVER", default=DEFAULT_SERVER),
        request_timeout=float(_env("TRIP_JOURNAL_REQUEST_TIMEOUT", default="30")),
        resource_timeout=float(_env("TRIP_JOURNAL_RESOURCE_TIMEOUT", default="60")),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    settings = _load_settings()
    servers = _load_servers(project_root)

    return Config(settings=settings, servers=servers)
