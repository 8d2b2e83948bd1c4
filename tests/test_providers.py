import asyncio
from datetime import datetime

import httpx
import pytest

from errors import MalformedPayload, NotFound, UpstreamUnavailable
from providers.realtime_events import RealTimeEventsClient
from providers.ticketmaster import TicketmasterClient, extract_events


def recording(handler):
    seen = []

    def wrapped(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)
    return httpx.MockTransport(wrapped), seen


def test_fetch_events_query_params():
    transport, seen = recording(lambda r: httpx.Response(200, json={"_embedded": {"events": []}}))
    tm = TicketmasterClient("secret", transport=transport)

    asyncio.run(tm.fetch_events(
        keyword="jazz",
        city="Denver",
        classification="Music",
        date_range=(datetime(2024, 5, 1), datetime(2024, 5, 1, 23, 59, 59)),
        page=2,
        size=10,
    ))

    req = seen[0]
    assert req.url.path == "/discovery/v2/events.json"
    params = req.url.params
    assert params["apikey"] == "secret"
    assert params["keyword"] == "jazz"
    assert params["city"] == "Denver"
    assert params["classificationName"] == "Music"
    assert params["startDateTime"] == "2024-05-01T00:00:00Z"
    assert params["endDateTime"] == "2024-05-01T23:59:59Z"
    assert params["page"] == "2"
    assert params["size"] == "10"
    assert req.headers["accept"] == "application/json"


def test_fetch_events_defaults_omit_empty_params():
    transport, seen = recording(lambda r: httpx.Response(200, json={}))
    asyncio.run(TicketmasterClient("k", transport=transport).fetch_events())

    params = seen[0].url.params
    assert params["size"] == "30"
    for key in ("keyword", "city", "classificationName", "startDateTime", "page"):
        assert key not in params


def test_fetch_event_by_id():
    transport, seen = recording(lambda r: httpx.Response(200, json={"id": "G5v", "name": "Jazz Night"}))
    payload = asyncio.run(TicketmasterClient("k", transport=transport).fetch_event_by_id("G5v"))

    assert payload["name"] == "Jazz Night"
    assert seen[0].url.path == "/discovery/v2/events/G5v.json"


@pytest.mark.parametrize("event_id,path", [
    ("x?y=1", "/discovery/v2/events/x%3Fy%3D1.json"),
    ("../venues/1", "/discovery/v2/events/..%2Fvenues%2F1.json"),
])
def test_event_id_stays_one_path_segment(event_id, path):
    transport, seen = recording(lambda r: httpx.Response(200, json={}))
    asyncio.run(TicketmasterClient("k", transport=transport).fetch_event_by_id(event_id))

    req = seen[0]
    assert req.url.raw_path.decode().split("?")[0] == path
    assert "y" not in req.url.params


def test_404_is_not_found():
    transport, _ = recording(lambda r: httpx.Response(404, json={"errors": []}))
    with pytest.raises(NotFound):
        asyncio.run(TicketmasterClient("k", transport=transport).fetch_event_by_id("missing"))


@pytest.mark.parametrize("status", [401, 429, 500, 503])
def test_other_statuses_are_unavailable(status):
    transport, _ = recording(lambda r: httpx.Response(status, text="nope"))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(TicketmasterClient("k", transport=transport).fetch_events(keyword="x"))


@pytest.mark.parametrize("exc", [httpx.ReadTimeout, httpx.ConnectError])
def test_transport_failures_are_unavailable(exc):
    def boom(request):
        raise exc("boom", request=request)

    with pytest.raises(UpstreamUnavailable):
        asyncio.run(TicketmasterClient("k", transport=httpx.MockTransport(boom)).fetch_events())


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>maintenance</html>"),
    httpx.Response(200, json=[1, 2, 3]),
])
def test_non_object_body_is_malformed(response):
    transport, _ = recording(lambda r: response)
    with pytest.raises(MalformedPayload):
        asyncio.run(TicketmasterClient("k", transport=transport).fetch_events())


def test_missing_api_key_makes_no_request():
    transport, seen = recording(lambda r: httpx.Response(200, json={}))
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(TicketmasterClient("", transport=transport).fetch_events())
    with pytest.raises(UpstreamUnavailable):
        asyncio.run(RealTimeEventsClient("", transport=transport).fetch_listings("Jazz Night"))
    assert seen == []


def test_fetch_listings_request():
    transport, seen = recording(lambda r: httpx.Response(200, json={"status": "OK", "data": []}))
    payload = asyncio.run(RealTimeEventsClient("rapid", transport=transport).fetch_listings("Jazz Night"))

    assert payload == {"status": "OK", "data": []}
    req = seen[0]
    assert req.url.host == "real-time-events-search.p.rapidapi.com"
    assert req.url.params["query"] == "Jazz Night"
    assert req.url.params["start"] == "0"
    assert req.headers["x-rapidapi-key"] == "rapid"
    assert req.headers["x-rapidapi-host"] == "real-time-events-search.p.rapidapi.com"


def test_extract_events():
    assert extract_events({}) == []
    assert extract_events({"_embedded": {"events": "x"}}) == []
    assert extract_events({"_embedded": {"events": [{"id": "1"}, None]}}) == [{"id": "1"}]
