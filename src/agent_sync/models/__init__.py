"""Data models for feed records, canonical properties and sync outcomes."""

from agent_sync.models.agent import CanonicalAgentProperties
from agent_sync.models.raw import SourceAgentRecord
from agent_sync.models.result import SyncAction, SyncOutcome, SyncResult

__all__ = [
    "CanonicalAgentProperties",
    "SourceAgentRecord",
    "SyncAction",
    "SyncOutcome",
    "SyncResult",
]
