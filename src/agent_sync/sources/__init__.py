"""Agent feed sources."""

from agent_sync.sources.base import BaseAgentSource, extract_records
from agent_sync.sources.file_feed import FileFeedSource
from agent_sync.sources.http_feed import HttpFeedSource
from agent_sync.sources.registry import SourceRegistry

__all__ = [
    "BaseAgentSource",
    "FileFeedSource",
    "HttpFeedSource",
    "SourceRegistry",
    "extract_records",
]
