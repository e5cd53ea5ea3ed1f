"""Map loosely-typed feed records onto canonical CRM properties."""

from typing import AbstractSet, Any, Optional

from agent_sync import vocabularies
from agent_sync.models.agent import CanonicalAgentProperties
from agent_sync.models.raw import SourceAgentRecord


def normalize_enum(value: Any, allowed: AbstractSet[str]) -> Optional[str]:
    """
    Lower-case and trim value. Empty -> None, unknown -> "other",
    otherwise the normalized value.
    """
    if not value:
        return None
    text = str(value).strip().lower()
    if not text:
        return None
    return text if text in allowed else vocabularies.OTHER


def normalize_multi(values: Any, allowed: AbstractSet[str]) -> tuple[str, ...]:
    """Apply normalize_enum to each element, drop empties, dedupe keeping first-seen order."""
    if not isinstance(values, list):
        return ()
    seen: dict[str, None] = {}
    for v in values:
        norm = normalize_enum(v, allowed)
        if norm is not None:
            seen.setdefault(norm, None)
    return tuple(seen)


def _text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


def derive_external_id(record: SourceAgentRecord) -> str:
    """Explicit source id if present, else '{name}::{vendor}' with both parts trimmed."""
    if record.id:
        return _text(record.id)
    return f"{_text(record.name).strip()}::{_text(record.vendor).strip()}"


def _price_value(value: Any) -> Optional[int | float]:
    # bool is an int subclass but not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def normalize_agent(record: SourceAgentRecord | dict) -> CanonicalAgentProperties:
    """Produce canonical properties. Never raises on bad input; bad fields fall back to defaults."""
    if not isinstance(record, SourceAgentRecord):
        record = SourceAgentRecord.from_feed_item(record)
    return CanonicalAgentProperties(
        external_agent_id=derive_external_id(record),
        ai_agent_name=_text(record.name),
        vendor_name=_text(record.vendor),
        category=_text(record.category),
        industries_supported=normalize_multi(record.industries, vocabularies.INDUSTRIES),
        supported_integrations=normalize_multi(record.integrations, vocabularies.INTEGRATIONS),
        compliance_certifications=normalize_multi(record.compliance, vocabularies.COMPLIANCE),
        price_tier=normalize_enum(record.price_tier, vocabularies.PRICE_TIERS),
        price_value=_price_value(record.price_value),
        deployment_stats=_text(record.deployment_stats),
        demo_url=_text(record.demo_url),
    )
