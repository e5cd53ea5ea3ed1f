"""FastAPI application exposing the sync job."""

from agent_sync.api.app import create_app

__all__ = ["create_app"]
