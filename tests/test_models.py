"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from agent_sync.models import (
    CanonicalAgentProperties,
    SourceAgentRecord,
    SyncAction,
    SyncOutcome,
    SyncResult,
)


class TestSourceAgentRecord:
    """Tests for SourceAgentRecord model."""

    def test_all_fields_optional(self) -> None:
        """An empty object is a valid record."""
        record = SourceAgentRecord()
        assert record.id is None
        assert record.industries is None

    def test_keeps_unknown_keys(self) -> None:
        """Extra feed keys are preserved as extras."""
        record = SourceAgentRecord.from_feed_item({"name": "A", "tagline": "fast"})
        assert record.name == "A"
        assert record.model_extra == {"tagline": "fast"}

    def test_accepts_malformed_values(self) -> None:
        """Wrongly-typed values are accepted as-is."""
        record = SourceAgentRecord.from_feed_item({"industries": "saas", "price_value": "10"})
        assert record.industries == "saas"
        assert record.price_value == "10"

    @pytest.mark.parametrize("item", [None, 3, "x", ["a"]])
    def test_non_object_item(self, item) -> None:
        """Non-object feed items become empty records."""
        assert SourceAgentRecord.from_feed_item(item) == SourceAgentRecord()


class TestCanonicalAgentProperties:
    """Tests for CanonicalAgentProperties model."""

    def test_requires_external_id(self) -> None:
        """external_agent_id is mandatory."""
        with pytest.raises(ValidationError):
            CanonicalAgentProperties()

    def test_frozen(self) -> None:
        """Properties are immutable once produced."""
        props = CanonicalAgentProperties(external_agent_id="x1")
        with pytest.raises(ValidationError):
            props.ai_agent_name = "changed"

    def test_crm_properties_contains_every_field(self) -> None:
        """The CRM payload carries all eleven properties."""
        payload = CanonicalAgentProperties(external_agent_id="x1").to_crm_properties()
        assert set(payload) == {
            "external_agent_id",
            "ai_agent_name",
            "vendor_name",
            "category",
            "industries_supported",
            "supported_integrations",
            "compliance_certifications",
            "price_tier",
            "price_value",
            "deployment_stats",
            "demo_url",
        }
        assert payload["industries_supported"] == []


class TestSyncResult:
    """Tests for SyncOutcome / SyncResult."""

    def test_response_shape(self) -> None:
        """to_response returns ok, count and results in order."""
        result = SyncResult(
            results=[
                SyncOutcome(action=SyncAction.CREATED, id="101", name="A"),
                SyncOutcome(action=SyncAction.WOULD_UPDATE, name="B"),
            ]
        )
        assert result.to_response() == {
            "ok": True,
            "count": 2,
            "results": [
                {"action": "created", "id": "101", "name": "A"},
                {"action": "would update", "name": "B"},
            ],
        }

    def test_empty_result(self) -> None:
        """A run with no records reports zero."""
        assert SyncResult().to_response() == {"ok": True, "count": 0, "results": []}
