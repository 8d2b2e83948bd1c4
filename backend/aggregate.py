# aggregate.py
# Merge a primary (Ticketmaster) event with secondary-source ticket links.
#
# The two providers share no identifier, so the secondary lookup is keyed by
# the primary event's name. Names are compared case-insensitively with
# whitespace collapsed; punctuation differences still miss.

from __future__ import annotations
import logging
import re
from typing import Any, List, Protocol, Tuple
from errors import NotFound, ProviderError
from models import Comparison, Event, Listing
from normalize import Provider, _dicts, _obj, _text, normalize_event_data

log = logging.getLogger(__name__)

MSG_OK = "Loaded successfully"
MSG_NO_SELLERS = "No other sellers found"
MSG_AMBIGUOUS = "Several events share this name; no sellers shown"
MSG_EVENT_NOT_FOUND = "Event not found on Ticketmaster"
MSG_EVENT_ERROR = "Error loading event from Ticketmaster"
MSG_SELLERS_ERROR = "Error loading other sellers"


class EventSource(Protocol):
    async def fetch_event_by_id(self, event_id: str) -> dict: ...


class ListingSource(Protocol):
    async def fetch_listings(self, query: str) -> dict: ...


def name_key(name: str) -> str:
    return " ".join(name.casefold().split())


def seller_tag(seller: str | None) -> str:
    tag = re.sub(r"[^a-z0-9]+", "_", (seller or "").lower()).strip("_")
    return tag or Provider.REALTIME_EVENTS.value


def secondary_entries(raw: Any) -> List[dict]:
    """Event entries of a search payload. `data` may be a list or one object."""
    data = _obj(raw).get("data")
    if isinstance(data, dict):
        return [data]
    return _dicts(data)


def matching_entries(primary: Event, entries: List[dict]) -> List[Tuple[dict, Event]]:
    """Entries whose name matches the primary, paired with their normalized Event."""
    key = name_key(primary.name)
    matches = [
        (e, normalize_event_data(e, Provider.REALTIME_EVENTS))
        for e in entries if _text(e.get("name"))
    ]
    matches = [(e, ev) for e, ev in matches if name_key(ev.name) == key]
    if len(matches) > 1 and primary.date.start:
        same_day = [(e, ev) for e, ev in matches if ev.date.start == primary.date.start]
        if same_day:
            matches = same_day
    return matches


def ticket_listings(entry: dict) -> List[Listing]:
    # only ticket_links count; info_links and the rest are ignored
    event_name = _text(entry.get("name")) or ""
    out: List[Listing] = []
    for link in _dicts(entry.get("ticket_links")):
        url = _text(link.get("link"))
        if not url:
            continue
        seller = _text(link.get("source"))
        out.append(Listing(
            event_id=_text(entry.get("event_id")),
            event_name=event_name,
            provider_url=url,
            data_source=seller_tag(seller),
            seller=seller,
            icon=_text(link.get("fav_icon")),
        ))
    return out


def aggregate_listings(primary: Event, secondary_raw: Any) -> Comparison:
    """
    Combine the primary event with the secondary provider's ticket links.
    Unmatched names, missing collections and entries without ticket links
    all give an empty listing set with status "not found".
    """
    matches = matching_entries(primary, secondary_entries(secondary_raw))
    if not matches:
        return Comparison(primary=primary, status="not found", message=MSG_NO_SELLERS)
    if len(matches) > 1:
        return Comparison(primary=primary, status="ambiguous", message=MSG_AMBIGUOUS)

    entry, secondary = matches[0]
    listings = ticket_listings(entry)
    if not listings:
        return Comparison(primary=primary, secondary=secondary, status="not found", message=MSG_NO_SELLERS)
    return Comparison(primary=primary, secondary=secondary, listings=listings, status="ok", message=MSG_OK)


async def compare_event(event_id: str, primary: EventSource, secondary: ListingSource) -> Comparison:
    """
    Primary lookup by id, then secondary lookup by the primary's name.
    The secondary call is never made when the primary event is missing.
    """
    if not event_id:
        return Comparison(status="event not found", message=MSG_EVENT_NOT_FOUND)
    try:
        raw = await primary.fetch_event_by_id(event_id)
    except NotFound:
        return Comparison(status="event not found", message=MSG_EVENT_NOT_FOUND)
    except ProviderError as e:
        log.warning("primary lookup failed for %s: %s", event_id, e)
        return Comparison(status="error", message=MSG_EVENT_ERROR)

    event = normalize_event_data(raw, Provider.TICKETMASTER)
    try:
        secondary_raw = await secondary.fetch_listings(event.name)
    except ProviderError as e:
        log.warning("secondary lookup failed for %r: %s", event.name, e)
        return Comparison(primary=event, status="error", message=MSG_SELLERS_ERROR)
    return aggregate_listings(event, secondary_raw)
