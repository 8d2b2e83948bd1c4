# providers/realtime_events.py
# Real-Time Events Search (RapidAPI): secondary source for ticket links

import httpx
from typing import Optional
from errors import UpstreamUnavailable
from providers.base import DEFAULT_TIMEOUT_S, get_json

PROVIDER = "realtime_events"
HOST = "real-time-events-search.p.rapidapi.com"
SEARCH_URL = f"https://{HOST}/search-events"


class RealTimeEventsClient:
    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT_S,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def fetch_listings(self, query: str, start: int = 0) -> dict:
        if not self.api_key:
            raise UpstreamUnavailable(PROVIDER, "no API key configured")
        return await get_json(
            PROVIDER,
            SEARCH_URL,
            {"query": query, "start": str(start)},
            headers={"x-rapidapi-key": self.api_key, "x-rapidapi-host": HOST},
            timeout=self.timeout,
            transport=self.transport,
        )
