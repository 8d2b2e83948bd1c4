# providers/base.py
# shared GET helper: one place that maps httpx failures onto errors.py

import logging
import httpx
from typing import Optional
from errors import MalformedPayload, NotFound, UpstreamUnavailable

log = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "TicketCompare/0.1",
    "Accept": "application/json",
}

# used when the caller does not pass an explicit timeout
DEFAULT_TIMEOUT_S = 12.0


async def get_json(
    provider: str,
    url: str,
    params: dict,
    *,
    headers: Optional[dict] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict:
    """
    GET url and return the decoded JSON object.
    Single attempt, bounded by `timeout`. Raises:
      UpstreamUnavailable  transport error, timeout, non-2xx other than 404
      NotFound             404
      MalformedPayload     body is not a JSON object
    """
    async with httpx.AsyncClient(
        timeout=timeout, headers={**HEADERS, **(headers or {})}, transport=transport
    ) as client:
        try:
            r = await client.get(url, params=params)
        except httpx.TimeoutException as e:
            log.warning("%s timed out after %ss: %s", provider, timeout, url)
            raise UpstreamUnavailable(provider, f"timed out after {timeout}s") from e
        except httpx.HTTPError as e:
            log.warning("%s request failed: %s", provider, e)
            raise UpstreamUnavailable(provider, str(e) or type(e).__name__) from e

    if r.status_code == 404:
        raise NotFound(provider, f"not found: {url}")
    if r.status_code != 200:
        log.warning("%s status: %s body: %s", provider, r.status_code, r.text[:400])
        raise UpstreamUnavailable(provider, f"status {r.status_code}")

    try:
        js = r.json()
    except ValueError as e:
        raise MalformedPayload(provider, "response body is not JSON") from e
    if not isinstance(js, dict):
        raise MalformedPayload(provider, f"expected a JSON object, got {type(js).__name__}")
    return js
