"""Per-record outcomes and the run summary."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SyncAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    WOULD_CREATE = "would create"
    WOULD_UPDATE = "would update"


class SyncOutcome(BaseModel):
    """What happened (or would happen) to one feed record."""

    action: SyncAction
    id: Optional[str] = None
    name: str = ""


class SyncResult(BaseModel):
    """Outcomes for a completed run, in feed order."""

    ok: bool = True
    results: list[SyncOutcome] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.results)

    def to_response(self) -> dict:
        """Response body: {ok, count, results}. Dry-run outcomes carry no id."""
        return {
            "ok": self.ok,
            "count": self.count,
            "results": [o.model_dump(mode="json", exclude_none=True) for o in self.results],
        }
