"""HubSpot client and upsert logic."""

from agent_sync.crm.client import HubSpotClient
from agent_sync.crm.reconciler import Reconciler

__all__ = ["HubSpotClient", "Reconciler"]
