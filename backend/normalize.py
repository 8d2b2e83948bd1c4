# normalize.py
# Provider payload -> Event. One total mapping function per provider,
# registered by source tag. Unknown tags get the minimal {id, name, data_source}.

from __future__ import annotations
import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
from models import (
    DEFAULT_EVENT_NAME, Attraction, Event, EventDate, Image, Location,
    Presale, Pricing, Promoter, SaleWindow, Sales, Venue,
)

log = logging.getLogger(__name__)


class Provider(str, Enum):
    TICKETMASTER = "ticketmaster"
    REALTIME_EVENTS = "realtime_events"


Normalizer = Callable[[dict], Event]

# source tag -> mapping function. Adding a provider is a registration here.
NORMALIZERS: Dict[str, Normalizer] = {}


def register_normalizer(tag):
    key = tag.value if isinstance(tag, Provider) else str(tag)

    def deco(fn: Normalizer) -> Normalizer:
        NORMALIZERS[key] = fn
        return fn
    return deco


# ---- tolerant accessors: wrong types read as missing ----

def _obj(v: Any) -> dict:
    return v if isinstance(v, dict) else {}


def _dicts(v: Any) -> List[dict]:
    if not isinstance(v, list):
        return []
    return [x for x in v if isinstance(x, dict)]


def _first(v: Any) -> dict:
    items = _dicts(v)
    return items[0] if items else {}


def _dig(obj: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def _text(v: Any) -> Optional[str]:
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        try:
            return str(v)
        except ValueError:
            # int past the interpreter digit limit
            return None
    if isinstance(v, str) and v.strip():
        return v
    return None


def _number(v: Any) -> Optional[float]:
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float, str)):
        try:
            n = float(v)
        except (ValueError, OverflowError):
            return None
    else:
        return None
    return n if math.isfinite(n) else None


def _int(v: Any) -> Optional[int]:
    n = _number(v)
    return int(n) if n is not None else None


def _flag(v: Any) -> bool:
    return v is True


def normalize_event_data(raw: Any, source_tag) -> Event:
    """
    Map one raw provider payload to an Event. Never raises: a payload the
    provider mapping cannot handle degrades to the minimal shape.
    """
    tag = source_tag.value if isinstance(source_tag, Provider) else str(source_tag)
    raw = _obj(raw)
    fn = NORMALIZERS.get(tag)
    if fn is not None:
        try:
            return fn(raw)
        except Exception:
            log.exception("%s payload could not be mapped", tag)
    return minimal_event(raw, tag)


def minimal_event(raw: dict, tag: str) -> Event:
    return Event(
        id=_text(raw.get("id")),
        name=_text(raw.get("name")) or DEFAULT_EVENT_NAME,
        data_source=tag,
    )


@register_normalizer(Provider.TICKETMASTER)
def normalize_ticketmaster(ev: dict) -> Event:
    classification = _first(ev.get("classifications"))
    venue = _first(_dig(ev, "_embedded", "venues"))
    start = _obj(_dig(ev, "dates", "start"))
    price = _first(ev.get("priceRanges"))
    promoter = _obj(ev.get("promoter")) or _first(ev.get("promoters"))
    public_sale = _obj(_dig(ev, "sales", "public"))
    age = _dig(ev, "ageRestrictions", "legalAgeEnforced")

    return Event(
        id=_text(ev.get("id")),
        data_source=Provider.TICKETMASTER.value,
        name=_text(ev.get("name")) or DEFAULT_EVENT_NAME,
        description=_text(ev.get("info")) or _text(ev.get("pleaseNote")),
        type=_text(ev.get("type")) or "event",
        category=_text(_dig(classification, "segment", "name")),
        genre=_text(_dig(classification, "genre", "name")),
        subGenre=_text(_dig(classification, "subGenre", "name")),
        url=_text(ev.get("url")),
        images=[
            Image(
                url=_text(img.get("url")),
                width=_int(img.get("width")),
                height=_int(img.get("height")),
                ratio=_text(img.get("ratio")),
                fallback=_flag(img.get("fallback")),
            )
            for img in _dicts(ev.get("images"))
        ],
        date=EventDate(
            start=_text(start.get("localDate")),
            time=_text(start.get("localTime")),
            datetime=_text(start.get("dateTime")),
            timezone=_text(start.get("timezone")) or _text(_dig(ev, "dates", "timezone")),
            tba=_flag(start.get("dateTBA")),
            tbd=_flag(start.get("dateTBD")),
            noSpecificTime=_flag(start.get("noSpecificTime")),
        ),
        venue=Venue(
            id=_text(venue.get("id")),
            name=_text(venue.get("name")),
            address=_text(_dig(venue, "address", "line1")),
            city=_text(_dig(venue, "city", "name")),
            state=_text(_dig(venue, "state", "name")),
            stateCode=_text(_dig(venue, "state", "stateCode")),
            postalCode=_text(venue.get("postalCode")),
            country=_text(_dig(venue, "country", "name")),
            countryCode=_text(_dig(venue, "country", "countryCode")),
            location=Location(
                latitude=_number(_dig(venue, "location", "latitude")),
                longitude=_number(_dig(venue, "location", "longitude")),
            ),
            timezone=_text(venue.get("timezone")),
            url=_text(venue.get("url")),
        ),
        pricing=Pricing(
            currency=_text(price.get("currency")) or "USD",
            min=_number(price.get("min")),
            max=_number(price.get("max")),
            type=_text(price.get("type")),
        ),
        sales=Sales(
            public=SaleWindow(
                startDateTime=_text(public_sale.get("startDateTime")),
                endDateTime=_text(public_sale.get("endDateTime")),
            ),
            presales=[
                Presale(
                    name=_text(p.get("name")),
                    startDateTime=_text(p.get("startDateTime")),
                    endDateTime=_text(p.get("endDateTime")),
                )
                for p in _dicts(_dig(ev, "sales", "presales"))
            ],
        ),
        status=_text(_dig(ev, "dates", "status", "code")) or "unknown",
        accessibility=_obj(ev.get("accessibility")) or None,
        ageRestrictions=age if isinstance(age, bool) else None,
        seatmap=_text(_dig(ev, "seatmap", "staticUrl")),
        promoter=Promoter(
            id=_text(promoter.get("id")),
            name=_text(promoter.get("name")),
        ),
        attractions=[
            Attraction(
                id=_text(a.get("id")),
                name=_text(a.get("name")),
                type=_text(a.get("type")),
                url=_text(a.get("url")),
                image=_text(_first(a.get("images")).get("url")),
            )
            for a in _dicts(_dig(ev, "_embedded", "attractions"))
        ],
    )


@register_normalizer(Provider.REALTIME_EVENTS)
def normalize_realtime_event(ev: dict) -> Event:
    """Real-Time Events Search entry. start_time is local 'YYYY-MM-DD HH:MM:SS'."""
    venue = _obj(ev.get("venue"))
    start_time = _text(ev.get("start_time")) or ""
    thumbnail = _text(ev.get("thumbnail"))

    return Event(
        id=_text(ev.get("event_id")),
        data_source=Provider.REALTIME_EVENTS.value,
        name=_text(ev.get("name")) or DEFAULT_EVENT_NAME,
        description=_text(ev.get("description")),
        url=_text(ev.get("link")),
        images=[Image(url=thumbnail)] if thumbnail else [],
        date=EventDate(
            start=start_time[:10] or None,
            time=start_time[11:19] or None,
            datetime=_text(ev.get("start_time_utc")),
            timezone=_text(venue.get("timezone")),
        ),
        venue=Venue(
            id=_text(venue.get("google_id")),
            name=_text(venue.get("name")),
            address=_text(venue.get("full_address")),
            city=_text(venue.get("city")),
            state=_text(venue.get("state")),
            postalCode=_text(venue.get("zipcode")),
            countryCode=_text(venue.get("country")),
            location=Location(
                latitude=_number(venue.get("latitude")),
                longitude=_number(venue.get("longitude")),
            ),
            timezone=_text(venue.get("timezone")),
            url=_text(venue.get("website")),
        ),
    )
