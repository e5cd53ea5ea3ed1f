"""Sync job orchestration: fetch feed → normalize → reconcile → report."""

import logging
from contextlib import ExitStack
from typing import Optional

from agent_sync.config import SyncConfig
from agent_sync.crm import HubSpotClient, Reconciler
from agent_sync.models.result import SyncResult
from agent_sync.pacing import RequestPacer
from agent_sync.sources import BaseAgentSource, SourceRegistry

logger = logging.getLogger(__name__)


class SyncJob:
    """
    One sync run over the agent feed.
    Records are processed strictly in feed order, one CRM round-trip at a time,
    with the pacer's fixed pause between records. The first error aborts the
    run; objects already written stay written.
    """

    def __init__(
        self,
        config: SyncConfig,
        *,
        source: Optional[BaseAgentSource] = None,
        crm: Optional[HubSpotClient] = None,
        pacer: Optional[RequestPacer] = None,
    ):
        self.config = config
        self._source = source
        self._crm = crm
        self.pacer = pacer or RequestPacer(config.pacing_seconds)

    def run(self, dry_run: bool = False) -> SyncResult:
        """
        Run the sync. Raises on missing config, feed failure or any CRM error.
        Clients the job builds itself are closed when the run ends; injected ones are left open.
        """
        self.config.require_sync_settings()
        with ExitStack() as owned:
            source = self._source
            if source is None:
                source = SourceRegistry.for_location(self.config.feed_url)
                owned.callback(source.close)
            crm = self._crm
            if crm is None:
                crm = owned.enter_context(HubSpotClient(self.config))
            return self._sync(source, Reconciler(crm, self.config.object_type_id), dry_run)

    def _sync(self, source: BaseAgentSource, reconciler: Reconciler, dry_run: bool) -> SyncResult:
        records = source.fetch_records()
        logger.info("Syncing %d agents (dry_run=%s)", len(records), dry_run)

        result = SyncResult()
        for record in self.pacer.paced(records):
            props = source.normalize(record)
            result.results.append(reconciler.reconcile(props, dry_run=dry_run))

        logger.info("Sync finished: %d records", result.count)
        return result


def run_sync(
    config: SyncConfig,
    *,
    dry_run: bool = False,
    source: Optional[BaseAgentSource] = None,
    crm: Optional[HubSpotClient] = None,
    pacer: Optional[RequestPacer] = None,
) -> tuple[int, dict]:
    """
    Top-level handler. Returns (status_code, body):
    200 with {ok, count, results} or 500 with {ok: false, error}.
    """
    job = SyncJob(config, source=source, crm=crm, pacer=pacer)
    try:
        result = job.run(dry_run=dry_run)
    except Exception as e:
        logger.exception("Sync failed")
        return 500, {"ok": False, "error": f"{type(e).__name__}: {e}"}
    return 200, result.to_response()
