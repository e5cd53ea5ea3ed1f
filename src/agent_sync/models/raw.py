"""Raw agent record as it arrives in the marketplace feed."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SourceAgentRecord(BaseModel):
    """
    Loosely-typed feed record. Every field may be absent or malformed;
    the normalizer decides what survives. Unknown keys are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None
    vendor: Any = None
    category: Any = None
    industries: Any = None
    integrations: Any = None
    compliance: Any = None
    price_tier: Any = None
    price_value: Any = None
    deployment_stats: Any = None
    demo_url: Any = None

    @classmethod
    def from_feed_item(cls, item: Any) -> "SourceAgentRecord":
        """Wrap one feed item. Anything that is not a JSON object becomes an empty record."""
        if not isinstance(item, dict):
            return cls()
        return cls.model_validate(item)
