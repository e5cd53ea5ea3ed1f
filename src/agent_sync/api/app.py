"""HTTP endpoints for the serverless sync and its diagnostics."""

from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from agent_sync.config import SyncConfig
from agent_sync.pipeline import run_sync


def _build_router() -> APIRouter:
    router = APIRouter(prefix="/api", tags=["sync"])

    @router.api_route("/sync-agents", methods=["GET", "POST"])
    def sync_agents(request: Request, dry: str = "") -> JSONResponse:
        """Run the sync. ?dry=1 previews actions without writing to the CRM."""
        config: SyncConfig = request.app.state.config
        status_code, body = run_sync(config, dry_run=dry == "1")
        return JSONResponse(status_code=status_code, content=body)

    @router.get("/diag")
    def diag(request: Request) -> dict:
        """Which settings are present. Never echoes the token."""
        return request.app.state.config.diagnostics()

    return router


def create_app(config: Optional[SyncConfig] = None) -> FastAPI:
    """Build the app. Config defaults to the process environment, read once here."""
    app = FastAPI(title="agent-crm-sync")
    app.state.config = SyncConfig.from_env() if config is None else config
    app.include_router(_build_router())
    return app
