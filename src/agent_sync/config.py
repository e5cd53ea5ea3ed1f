"""Sync configuration loaded once from the environment or a YAML file."""

import os
from pathlib import Path
from typing import Mapping, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, ConfigDict, Field

from agent_sync.errors import ConfigError

DEFAULT_HUBSPOT_BASE_URL = "https://api.hubapi.com"

# Environment variable for each settings field
ENV_VARS: dict[str, str] = {
    "hubspot_token": "HUBSPOT_TOKEN",
    "object_type_id": "HS_AI_AGENT_TYPE_ID",
    "feed_url": "AGENTS_JSON_URL",
    "hubspot_base_url": "HUBSPOT_BASE_URL",
    "pacing_ms": "SYNC_PACING_MS",
    "max_attempts": "HUBSPOT_MAX_ATTEMPTS",
    "backoff_seconds": "HUBSPOT_BACKOFF_SECONDS",
    "timeout_seconds": "HUBSPOT_TIMEOUT_SECONDS",
}

# Checked in this order; the first missing one is reported
_REQUIRED = ("hubspot_token", "object_type_id", "feed_url")


class SyncConfig(BaseModel):
    """
    Settings for one sync process.
    Built once at startup and handed to the CRM client, the job and the API app.
    """

    model_config = ConfigDict(frozen=True)

    hubspot_token: Optional[str] = Field(default=None, repr=False)
    object_type_id: Optional[str] = None
    feed_url: Optional[str] = None

    hubspot_base_url: str = DEFAULT_HUBSPOT_BASE_URL
    pacing_ms: int = Field(default=120, ge=0, description="Pause between records")
    max_attempts: int = Field(default=3, ge=1, description="Attempts per CRM call (5xx and unsent requests)")
    backoff_seconds: float = Field(default=0.5, ge=0)
    timeout_seconds: float = Field(default=30.0, gt=0)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SyncConfig":
        """Build config from environment variables. Empty values count as unset."""
        env = os.environ if environ is None else environ
        values = {}
        for field, var in ENV_VARS.items():
            raw = (env.get(var) or "").strip()
            if raw:
                values[field] = raw
        return cls.model_validate(values)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "SyncConfig":
        """
        Load config from YAML. Supports nested (hubspot/feed/sync) or flat structure.
        The token is never read from the file; it and any unset field come from the environment.
        """
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file {path} is not valid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        hubspot = data.get("hubspot", {}) or {}
        feed = data.get("feed", {}) or {}
        sync = data.get("sync", {}) or {}

        def _get(key: str, nested: dict, alias: Optional[str] = None):
            return nested.get(alias or key, data.get(key))

        from_file = {
            "object_type_id": _get("object_type_id", hubspot),
            "hubspot_base_url": _get("hubspot_base_url", hubspot, "base_url"),
            "max_attempts": _get("max_attempts", hubspot),
            "backoff_seconds": _get("backoff_seconds", hubspot),
            "timeout_seconds": _get("timeout_seconds", hubspot),
            "feed_url": _get("feed_url", feed, "url"),
            "pacing_ms": _get("pacing_ms", sync),
        }
        merged = cls.from_env(environ).model_dump(exclude_unset=True)
        for key, value in from_file.items():
            if value is not None and value != "":
                merged[key] = str(value) if key == "object_type_id" else value
        return cls.model_validate(merged)

    def require_sync_settings(self) -> None:
        """Raise ConfigError naming the first missing variable needed for a sync run."""
        for field in _REQUIRED:
            if not getattr(self, field):
                raise ConfigError(f"Missing {ENV_VARS[field]}")

    @property
    def pacing_seconds(self) -> float:
        return self.pacing_ms / 1000.0

    def diagnostics(self) -> dict:
        """Report which settings are present without exposing the token."""
        return {
            "ok": True,
            "has_HUBSPOT_TOKEN": bool(self.hubspot_token),
            "HS_AI_AGENT_TYPE_ID": self.object_type_id or None,
            "AGENTS_JSON_URL": self.feed_url or None,
        }
