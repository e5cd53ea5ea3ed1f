"""Agent feed read from a local JSON file."""

import json
from pathlib import Path
from typing import Any

from agent_sync.errors import FeedFetchError
from agent_sync.sources.base import BaseAgentSource, extract_records


class FileFeedSource(BaseAgentSource):
    """Local copy of the feed, e.g. data/agents.json from the marketplace build."""

    source_id = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_raw(self) -> list[Any]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as e:
            raise FeedFetchError(f"Cannot read feed file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise FeedFetchError(f"Feed file {self.path} is not valid JSON: {e}") from e
        return extract_records(payload)
