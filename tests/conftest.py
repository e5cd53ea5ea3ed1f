"""Pytest fixtures for agent-crm-sync tests."""

import json
from typing import Any

import httpx
import pytest

from agent_sync.config import SyncConfig
from agent_sync.crm import HubSpotClient
from agent_sync.pacing import RequestPacer
from agent_sync.sources import HttpFeedSource

FEED_URL = "https://marketplace.example.com/data/agents.json"
OBJECT_TYPE = "2-1234567"


class FakeHubSpot:
    """
    In-memory stand-in for the /crm/v3/objects API behind httpx.MockTransport.
    Supports EQ-filter search, create and PATCH update; records every request.
    """

    def __init__(self) -> None:
        self.objects: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, str, Any]] = []
        self.fail_with: list[int] = []
        self._next_id = 1000

    @property
    def mutations(self) -> list[tuple[str, str, Any]]:
        return [c for c in self.calls if not c[1].endswith("/search")]

    def seed(self, properties: dict[str, Any]) -> str:
        oid = str(self._next_id)
        self._next_id += 1
        self.objects[oid] = dict(properties)
        return oid

    def _matches(self, props: dict[str, Any], filters: list[dict]) -> bool:
        return all(props.get(f["propertyName"]) == f["value"] for f in filters)

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        path = request.url.path
        self.calls.append((request.method, path, body))

        if self.fail_with:
            return httpx.Response(self.fail_with.pop(0), text="upstream error")

        prefix = f"/crm/v3/objects/{OBJECT_TYPE}"
        if request.method == "POST" and path == prefix + "/search":
            filters = body["filterGroups"][0]["filters"]
            hits = [
                {"id": oid, "properties": props}
                for oid, props in self.objects.items()
                if self._matches(props, filters)
            ]
            return httpx.Response(200, json={"total": len(hits), "results": hits[: body["limit"]]})
        if request.method == "POST" and path == prefix:
            oid = self.seed(body["properties"])
            return httpx.Response(201, json={"id": oid, "properties": body["properties"]})
        if request.method == "PATCH" and path.startswith(prefix + "/"):
            oid = path.rsplit("/", 1)[1]
            if oid not in self.objects:
                return httpx.Response(404, text="not found")
            self.objects[oid].update(body["properties"])
            return httpx.Response(200, json={"id": oid, "properties": self.objects[oid]})
        return httpx.Response(400, text="unsupported")


@pytest.fixture
def config() -> SyncConfig:
    """Complete config with pacing and backoff disabled."""
    return SyncConfig(
        hubspot_token="pat-test-token",
        object_type_id=OBJECT_TYPE,
        feed_url=FEED_URL,
        pacing_ms=0,
        backoff_seconds=0,
    )


@pytest.fixture
def fake_hubspot() -> FakeHubSpot:
    return FakeHubSpot()


@pytest.fixture
def hubspot_client(config: SyncConfig, fake_hubspot: FakeHubSpot) -> HubSpotClient:
    """HubSpotClient wired to the fake API."""
    transport = httpx.MockTransport(fake_hubspot.handler)
    return HubSpotClient(config, client=httpx.Client(transport=transport))


def make_feed_source(payload: Any, status_code: int = 200) -> HttpFeedSource:
    """HttpFeedSource that serves payload as the feed body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return HttpFeedSource(FEED_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))


@pytest.fixture
def no_pause() -> RequestPacer:
    return RequestPacer(0)


@pytest.fixture
def sample_feed() -> list[dict[str, Any]]:
    """Two marketplace agents in feed format."""
    return [
        {
            "id": "workflow-automator",
            "name": "Workflow Automator Pro",
            "vendor": "AIFlow Solutions",
            "category": "workflow",
            "industries": ["SaaS", "finance", "healthcare"],
            "integrations": ["hubspot", "salesforce", "slack"],
            "compliance": ["GDPR", "SOC2", "ISO27001"],
            "price_tier": "Standard",
            "price_value": 299,
            "deployment_stats": "1247 deployments",
            "demo_url": "https://example.com/demo/workflow",
        },
        {
            "name": "Customer Intelligence Hub",
            "vendor": "CustomerAI",
            "industries": ["retail"],
            "price_tier": "",
        },
    ]
