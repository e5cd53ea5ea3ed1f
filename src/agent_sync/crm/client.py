"""HubSpot CRM v3 objects API client.

Covers the calls the sync needs against a custom object type:
search (single EQ filter group, limit 1), create and update by id.
Every call is a fresh request; nothing is cached between calls.
"""

import logging
from typing import Any, Optional

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from agent_sync.config import SyncConfig
from agent_sync.errors import ConfigError, CRMHTTPError

logger = logging.getLogger(__name__)


# Failures where the request never reached HubSpot. A read timeout may
# follow a committed create, so it is not retried.
_UNSENT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout)


def _is_transient(exc: BaseException) -> bool:
    """Retry 5xx and unsent requests; 4xx means a bad request or bad config."""
    if isinstance(exc, CRMHTTPError):
        return exc.is_transient
    return isinstance(exc, _UNSENT_ERRORS)


class HubSpotClient:
    """
    Thin authenticated wrapper over /crm/v3/objects.
    The bearer token is taken from config once, at construction.
    """

    OBJECTS_PATH = "/crm/v3/objects/{object_type}"

    def __init__(self, config: SyncConfig, client: Optional[httpx.Client] = None):
        if not config.hubspot_token:
            raise ConfigError("Missing HUBSPOT_TOKEN")
        self._token = config.hubspot_token
        self._base_url = config.hubspot_base_url.rstrip("/")
        self._max_attempts = config.max_attempts
        self._backoff = config.backoff_seconds
        self._client = client or httpx.Client(timeout=config.timeout_seconds)

    def _headers(self, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def _send(
        self,
        method: str,
        path: str,
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        logger.debug("%s %s", method, path)
        resp = self._client.request(
            method,
            self._base_url + path,
            json=json,
            headers=self._headers(headers),
        )
        if not resp.is_success:
            raise CRMHTTPError(path, resp.status_code, resp.text)
        return resp.json()

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        json: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.
        Caller headers are merged over the defaults. Transient failures are
        retried up to max_attempts with exponential backoff, then re-raised.
        """
        retrying = Retrying(
            retry=retry_if_exception(_is_transient),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff, min=0, max=10),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(self._send, method, path, json, headers)

    def _search_first_id(
        self,
        object_type: str,
        filters: list[dict[str, str]],
        properties: list[str],
    ) -> Optional[str]:
        body = {
            "limit": 1,
            "properties": properties,
            "filterGroups": [{"filters": filters}],
        }
        data = self.request(
            self.OBJECTS_PATH.format(object_type=object_type) + "/search",
            method="POST",
            json=body,
        )
        results = (data or {}).get("results") or []
        if not results:
            return None
        found = results[0].get("id")
        return str(found) if found else None

    def search_by_external_id(self, object_type: str, external_id: str) -> Optional[str]:
        """Id of the object whose external_agent_id equals external_id, or None."""
        return self._search_first_id(
            object_type,
            [{"propertyName": "external_agent_id", "operator": "EQ", "value": external_id}],
            ["external_agent_id"],
        )

    def search_by_name_vendor(self, object_type: str, name: str, vendor: str) -> Optional[str]:
        """Fallback lookup on the (ai_agent_name, vendor_name) pair."""
        return self._search_first_id(
            object_type,
            [
                {"propertyName": "ai_agent_name", "operator": "EQ", "value": name or ""},
                {"propertyName": "vendor_name", "operator": "EQ", "value": vendor or ""},
            ],
            ["ai_agent_name", "vendor_name"],
        )

    def create(self, object_type: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Create an object; the response includes its generated id."""
        return self.request(
            self.OBJECTS_PATH.format(object_type=object_type),
            method="POST",
            json={"properties": properties},
        )

    def update(self, object_type: str, object_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        """Overwrite the supplied properties on an existing object."""
        return self.request(
            self.OBJECTS_PATH.format(object_type=object_type) + f"/{object_id}",
            method="PATCH",
            json={"properties": properties},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HubSpotClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
