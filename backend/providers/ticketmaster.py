# providers/ticketmaster.py
# Ticketmaster Discovery read-only client. Returns raw payloads; normalize.py
# owns the mapping into Event.

import httpx
from typing import List, Optional, Tuple
from datetime import datetime
from urllib.parse import quote
from errors import UpstreamUnavailable
from providers.base import DEFAULT_TIMEOUT_S, get_json
from utils import iso_no_ms

PROVIDER = "ticketmaster"
BASE_URL = "https://app.ticketmaster.com/discovery/v2"
DEFAULT_PAGE_SIZE = 30


class TicketmasterClient:
    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT_S,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def _get(self, path: str, params: dict) -> dict:
        if not self.api_key:
            raise UpstreamUnavailable(PROVIDER, "no API key configured")
        return await get_json(
            PROVIDER,
            f"{BASE_URL}{path}",
            {"apikey": self.api_key, **params},
            timeout=self.timeout,
            transport=self.transport,
        )

    async def fetch_events(
        self,
        keyword: Optional[str] = None,
        city: Optional[str] = None,
        date_range: Optional[Tuple[datetime, datetime]] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
        classification: Optional[str] = None,
    ) -> dict:
        params = {"size": str(size or DEFAULT_PAGE_SIZE)}
        if keyword:
            params["keyword"] = keyword
        if city:
            params["city"] = city
        if classification:
            params["classificationName"] = classification
        if date_range:
            start, end = date_range
            params["startDateTime"] = iso_no_ms(start)
            params["endDateTime"] = iso_no_ms(end)
        if page:
            params["page"] = str(page)
        return await self._get("/events.json", params)

    async def fetch_event_by_id(self, event_id: str) -> dict:
        # escaped so the id stays a single path segment
        return await self._get(f"/events/{quote(event_id, safe='')}.json", {})


def extract_events(payload: dict) -> List[dict]:
    """Raw event dicts from a search payload; [] when the page has none."""
    events = (((payload or {}).get("_embedded") or {}).get("events") or [])
    if not isinstance(events, list):
        return []
    return [ev for ev in events if isinstance(ev, dict)]
