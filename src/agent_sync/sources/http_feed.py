"""Agent feed served as JSON over HTTP (the marketplace's agents.json)."""

import logging
from typing import Any, Optional

import httpx

from agent_sync.errors import FeedFetchError
from agent_sync.sources.base import BaseAgentSource, extract_records

logger = logging.getLogger(__name__)


class HttpFeedSource(BaseAgentSource):
    """
    Fetches the agents feed with a plain GET on every run.
    No caching: the marketplace may publish a new feed at any time.
    """

    source_id = "http"

    DEFAULT_HEADERS = {
        "User-Agent": "agent-crm-sync/0.1",
        "Accept": "application/json",
        "Cache-Control": "no-cache",
    }

    def __init__(self, feed_url: str, client: Optional[httpx.Client] = None):
        if not feed_url:
            raise ValueError("feed_url is required")
        self.feed_url = feed_url
        self._client = client or httpx.Client(
            timeout=30.0,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    def _fetch_json(self) -> Any:
        try:
            resp = self._client.get(self.feed_url, headers=self.DEFAULT_HEADERS)
        except httpx.RequestError as e:
            raise FeedFetchError(f"Fetch agents.json failed: {e}") from e
        if not resp.is_success:
            raise FeedFetchError(
                f"Fetch agents.json failed {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as e:
            raise FeedFetchError(
                "Fetch agents.json failed: body is not valid JSON",
                status_code=resp.status_code,
            ) from e

    def fetch_raw(self) -> list[Any]:
        items = extract_records(self._fetch_json())
        logger.info("Fetched %d agent records from %s", len(items), self.feed_url)
        return items

    def close(self) -> None:
        self._client.close()
