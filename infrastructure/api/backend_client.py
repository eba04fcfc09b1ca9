"""Dashboard backend API client."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from config import settings
from core.logging import get_logger
from domain.exceptions import UpstreamUnavailableError
from .retry_policy import RetryPolicy
from .timeout_config import TimeoutConfig

logger = get_logger(__name__, service="backend")


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, UpstreamUnavailableError):
        return exc.is_transient
    return isinstance(exc, (httpx.TimeoutException, httpx.NetworkError))


class BackendAPIClient:
    """Asynchronous client for the ``/api/v0`` routes the timeline consumes.

    Every method returns decoded JSON; repositories turn it into entities.
    Failures surface as ``UpstreamUnavailableError`` after retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        *,
        timeout: Optional[TimeoutConfig] = None,
        retry: Optional[RetryPolicy] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.token    = token if token is not None else settings.API_TOKEN
        self.timeout  = timeout or TimeoutConfig.from_env()
        self.retry    = retry or RetryPolicy.from_settings()
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self._transport = transport

    async def __aenter__(self):
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout.to_httpx(),
            headers=headers,
            http2=settings.HTTP2,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _make_request(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        *,
        allow_not_found: bool = False,
    ) -> Any:
        if self.session is None:
            raise RuntimeError("BackendAPIClient used outside 'async with'")

        url = f"{self.base_url}{path}"

        async def _request() -> Any:
            try:
                response = await self.session.get(path, params=params)
            except httpx.HTTPError as exc:
                raise UpstreamUnavailableError(f"network error: {exc}", url=url) from exc

            self.last_status_code = response.status_code
            if response.status_code == 404 and allow_not_found:
                return None
            if response.status_code == 204:
                return None
            if response.status_code >= 400:
                raise UpstreamUnavailableError(
                    f"HTTP {response.status_code}: {self._error_message(response)}",
                    url=url,
                    status_code=response.status_code,
                )
            try:
                return response.json()
            except ValueError as exc:
                raise UpstreamUnavailableError(
                    "invalid JSON in response", url=url, status_code=response.status_code
                ) from exc

        return await self.retry.run(
            _request,
            is_transient=_is_transient,
            logger=logger,
            context={"url": url},
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or "request failed"
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.reason_phrase or "request failed"

    # ── Riot accounts ──────────────────────────────────────────────────

    async def list_accounts(self) -> List[Dict[str, Any]]:
        data = await self._make_request("/riot/accounts")
        return (data or {}).get("accounts") or []

    # ── Riot matches ───────────────────────────────────────────────────

    async def list_matches(
        self,
        puuid: str,
        limit: int,
        offset: int,
        extra_params: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        params = {"puuid": puuid, "limit": str(limit), "offset": str(offset)}
        if extra_params:
            params.update(extra_params)
        data = await self._make_request("/riot/matches", params)
        return (data or {}).get("matches") or []

    # ── Riot ranks ─────────────────────────────────────────────────────

    async def get_rank_at_time(self, puuid: str, queue_id: int, timestamp: int) -> Optional[Dict[str, Any]]:
        params = {"queueID": str(queue_id), "timestamp": str(timestamp)}
        return await self._make_request(
            f"/riot/accounts/{puuid}/rank-at-time", params, allow_not_found=True
        )

    # ── Data Dragon ────────────────────────────────────────────────────

    async def get_datadragon_version(self) -> str:
        data = await self._make_request("/datadragon/version")
        version = (data or {}).get("version")
        if not version:
            raise UpstreamUnavailableError("catalog version missing from response")
        return str(version)

    async def get_champion_data(self) -> Dict[str, Any]:
        return await self._make_request("/datadragon/champions") or {}

    async def get_item_data(self) -> Dict[str, Any]:
        return await self._make_request("/datadragon/items") or {}

    async def get_summoner_spell_data(self) -> Dict[str, Any]:
        return await self._make_request("/datadragon/summoner-spells") or {}
