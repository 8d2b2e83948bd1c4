# utils.py
# Helpers: search time windows, query parsing, post-retrieval event filters

from __future__ import annotations
from typing import Iterable, List, Optional
from datetime import datetime, timedelta, timezone
from models import Event, SearchCriteria


def iso_no_ms(dt: datetime) -> str:
    """
    Ticketmaster requires ISO8601 *without* fractional seconds and in UTC.
    Example: 2025-10-25T04:00:00Z
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_window(date_iso: str, timeframe: str = "day") -> tuple[datetime, datetime]:
    """Start/end window around a YYYY-MM-DD date. Raises ValueError on a bad date."""
    base = datetime.fromisoformat(date_iso)
    day_start = base.replace(hour=0, minute=0, second=0, microsecond=0)

    if timeframe == "weekend":
        days_to_sat = (5 - base.weekday()) % 7
        sat = day_start + timedelta(days=days_to_sat)
        return (sat, (sat + timedelta(days=1)).replace(hour=23, minute=59, second=59))

    if timeframe == "week":
        monday = day_start - timedelta(days=base.weekday())
        return (monday, (monday + timedelta(days=6)).replace(hour=23, minute=59, second=59))

    return (day_start, day_start.replace(hour=23, minute=59, second=59))


def parse_price_ceiling(value: Optional[str]) -> Optional[float]:
    # blank, "0" and junk all mean "no ceiling"
    try:
        ceiling = float(value) if value else None
    except ValueError:
        return None
    if not ceiling or ceiling < 0:
        return None
    return ceiling


def parse_sources(values: Optional[Iterable[str]]) -> List[str]:
    """Repeated ?source= params, also accepting comma separated values."""
    out: List[str] = []
    for v in values or []:
        out.extend(s.strip() for s in v.split(",") if s.strip())
    return out


def within_price(event: Event, ceiling: Optional[float]) -> bool:
    # unknown price never excludes an event
    if ceiling is None or event.pricing.min is None:
        return True
    return event.pricing.min <= ceiling


def from_sources(event: Event, sources: List[str]) -> bool:
    if not sources:
        return True
    allowed = {s.lower() for s in sources}
    return event.data_source.lower() in allowed


def filter_events(events: Iterable[Event], criteria: Optional[SearchCriteria] = None) -> List[Event]:
    """
    Keep events passing every supplied criterion, in input order.
    No criteria returns the input unchanged (as a new list).
    """
    if criteria is None:
        return list(events)
    return [
        ev for ev in events
        if within_price(ev, criteria.price_ceiling) and from_sources(ev, criteria.sources)
    ]
