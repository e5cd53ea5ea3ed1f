"""Create-or-update of one agent object keyed by its external id."""

import logging
from typing import Optional

from agent_sync.crm.client import HubSpotClient
from agent_sync.models.agent import CanonicalAgentProperties
from agent_sync.models.result import SyncAction, SyncOutcome

logger = logging.getLogger(__name__)


class Reconciler:
    """Upserts canonical agent properties into one CRM object type."""

    def __init__(self, client: HubSpotClient, object_type_id: str):
        self._client = client
        self._object_type_id = object_type_id

    def find_existing(self, props: CanonicalAgentProperties) -> Optional[str]:
        """
        Look up by external_agent_id. The name+vendor search only runs when
        the id is empty, which derive_external_id never produces today.
        """
        if props.external_agent_id:
            return self._client.search_by_external_id(self._object_type_id, props.external_agent_id)
        return self._client.search_by_name_vendor(
            self._object_type_id, props.ai_agent_name, props.vendor_name
        )

    def reconcile(self, props: CanonicalAgentProperties, dry_run: bool = False) -> SyncOutcome:
        """Update the matching object or create one. dry_run reports the action without writing."""
        existing_id = self.find_existing(props)
        name = props.ai_agent_name

        if dry_run:
            action = SyncAction.WOULD_UPDATE if existing_id else SyncAction.WOULD_CREATE
            outcome = SyncOutcome(action=action, name=name)
        elif existing_id:
            self._client.update(self._object_type_id, existing_id, props.to_crm_properties())
            outcome = SyncOutcome(action=SyncAction.UPDATED, id=existing_id, name=name)
        else:
            created = self._client.create(self._object_type_id, props.to_crm_properties())
            new_id = (created or {}).get("id")
            outcome = SyncOutcome(
                action=SyncAction.CREATED,
                id=str(new_id) if new_id is not None else None,
                name=name,
            )

        logger.info("%s %s (%s)", outcome.action.value, props.external_agent_id, outcome.id or "-")
        return outcome
