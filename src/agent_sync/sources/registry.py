"""Feed source lookup, by name or by the configured feed location."""

from pathlib import Path
from typing import Type
from urllib.parse import unquote, urlparse

from agent_sync.sources.base import BaseAgentSource
from agent_sync.sources.file_feed import FileFeedSource
from agent_sync.sources.http_feed import HttpFeedSource


class SourceRegistry:
    """
    Maps feed kinds to source classes.
    AGENTS_JSON_URL normally points at the marketplace's agents.json over HTTP,
    but a local path or file:// URL works for previews and fixtures.
    """

    _sources: dict[str, Type[BaseAgentSource]] = {
        "http": HttpFeedSource,
        "file": FileFeedSource,
    }

    @classmethod
    def get(cls, kind: str, **kwargs) -> BaseAgentSource:
        """Build the source for a feed kind ('http' or 'file'); kwargs go to its __init__."""
        source_cls = cls._sources.get(kind.lower())
        if not source_cls:
            raise ValueError(f"Unknown feed kind: {kind}. Expected one of {sorted(cls._sources)}")
        return source_cls(**kwargs)

    @classmethod
    def for_location(cls, location: str) -> BaseAgentSource:
        """Pick the source from the feed location: http(s) URL, file:// URL or filesystem path."""
        parsed = urlparse(location)
        scheme = parsed.scheme.lower()
        if scheme in ("http", "https"):
            return cls.get("http", feed_url=location)
        if scheme == "file":
            return cls.get("file", path=Path(unquote(parsed.path)))
        if scheme and len(scheme) > 1:
            raise ValueError(f"Unsupported feed URL scheme: {parsed.scheme}")
        # No scheme, or a Windows drive letter
        return cls.get("file", path=Path(location))

    @classmethod
    def available_sources(cls) -> list[str]:
        return list(cls._sources)
