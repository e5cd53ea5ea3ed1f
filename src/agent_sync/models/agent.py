"""Canonical agent properties pushed to the CRM."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CanonicalAgentProperties(BaseModel):
    """Normalized property set for one AI agent CRM object."""

    model_config = ConfigDict(frozen=True)

    external_agent_id: str = Field(..., description="Source id, or '{name}::{vendor}'")
    ai_agent_name: str = ""
    vendor_name: str = ""
    category: str = ""

    industries_supported: tuple[str, ...] = ()
    supported_integrations: tuple[str, ...] = ()
    compliance_certifications: tuple[str, ...] = ()

    price_tier: Optional[str] = None
    price_value: Optional[int | float] = None

    deployment_stats: str = ""
    demo_url: str = ""

    def to_crm_properties(self) -> dict[str, Any]:
        """JSON-ready property mapping for create/update payloads."""
        return self.model_dump(mode="json")
