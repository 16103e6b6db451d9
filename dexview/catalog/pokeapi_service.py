"""
PokeAPI integration for the catalog.  Exposes two coroutines on
``PokeApiService``:

* ``fetch_page()``: one page of the ``/pokemon`` list endpoint,
  mapped into ``CatalogEntry`` objects plus the total count.

* ``fetch_detail()``: a single record by numeric id or name, mapped
  into a ``RecordDetail``.

Requests go through one shared ``httpx.AsyncClient``.  Nothing is
cached: every call hits the API.  Transport failures, timeouts and
unparseable bodies raise ``NetworkError``; a non-success status on the
detail endpoint raises ``NotFoundError``.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any, List, Optional, Tuple

import httpx

from ..config import PAGE_SIZE, Settings, get_settings
from ..exceptions import NetworkError, NotFoundError
from .mapping import parse_list_page, parse_record_detail
from .pagination import page_offset
from .schemas import CatalogEntry, RecordDetail


logger = logging.getLogger(__name__)


class PokeApiService:
    """Thin async client around the two PokeAPI endpoints the viewer reads."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            headers={
                "User-Agent": self.settings.user_agent,
                "Accept": "application/json",
            },
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def _url(self, endpoint: str) -> str:
        return f"{self.settings.api_base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    async def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        try:
            return await self.client.get(url, params=params)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Request to {url} timed out") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"Network error requesting {url}: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {response.request.url}") from exc

    async def fetch_page(self, page: int, page_size: int = PAGE_SIZE) -> Tuple[int, List[CatalogEntry]]:
        """Return ``(total_count, entries)`` for a 1-indexed page."""
        url = self._url("pokemon")
        params = {"limit": page_size, "offset": page_offset(page, page_size)}
        response = await self._get(url, params=params)
        if not response.is_success:
            logger.warning("PokeAPI list request %s returned status %s", params, response.status_code)
            raise NetworkError(f"List request failed with status {response.status_code}")
        return parse_list_page(self._json(response), self.settings.image_base_url)

    async def fetch_detail(self, record_id: str) -> RecordDetail:
        """Return the record for a numeric id or a name."""
        key = str(record_id).strip().lower()
        url = self._url(f"pokemon/{urllib.parse.quote(key, safe='')}")
        response = await self._get(url)
        if not response.is_success:
            logger.warning("PokeAPI detail request for %r returned status %s", key, response.status_code)
            raise NotFoundError(status_code=response.status_code)
        return parse_record_detail(self._json(response))
