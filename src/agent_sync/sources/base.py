"""Abstract base class for agent feed sources."""

from abc import ABC, abstractmethod
from typing import Any

from agent_sync.models.agent import CanonicalAgentProperties
from agent_sync.models.raw import SourceAgentRecord
from agent_sync.normalizer import normalize_agent


def extract_records(payload: Any) -> list[Any]:
    """
    Pull the record list out of a decoded feed.
    Accepts a bare array or an object with an "items" array; any other shape is empty.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        return payload["items"]
    return []


class BaseAgentSource(ABC):
    """
    Standard interface for marketplace agent feeds.
    Sources fetch raw items; normalization is shared.
    """

    source_id: str = ""

    @abstractmethod
    def fetch_raw(self) -> list[Any]:
        """
        Fetch the feed and return its items exactly as decoded.
        """
        pass

    def normalize(self, record: SourceAgentRecord) -> CanonicalAgentProperties:
        return normalize_agent(record)

    def fetch_records(self) -> list[SourceAgentRecord]:
        """Fetch the feed and wrap each item, preserving feed order."""
        return [SourceAgentRecord.from_feed_item(item) for item in self.fetch_raw()]

    def fetch_all(self) -> list[CanonicalAgentProperties]:
        """Fetch all records and return canonical properties, in feed order."""
        return [self.normalize(r) for r in self.fetch_records()]

    def close(self) -> None:
        """Release network resources. No-op for sources that hold none."""
