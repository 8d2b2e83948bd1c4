# main.py
# FastAPI app: event search, discovery, and cross-seller comparison (JSON only)

import os
import logging
from typing import List, Optional, Tuple
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from aggregate import compare_event
from errors import ProviderError
from models import Comparison, Event, SearchCriteria, SearchResponse
from normalize import Provider, normalize_event_data
from providers.realtime_events import RealTimeEventsClient
from providers.ticketmaster import TicketmasterClient, extract_events
from utils import build_window, filter_events, parse_price_ceiling, parse_sources

load_dotenv()

app = FastAPI(title="Ticket Compare API", version="0.1.0")
# CORS origins
FRONTEND_LOCAL = "http://localhost:3000"
FRONTEND_PROD = os.getenv("FRONTEND_PROD", "")

origins = [FRONTEND_LOCAL]
if FRONTEND_PROD:
    origins.append(FRONTEND_PROD)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# logging
logging.basicConfig(level=logging.INFO)
log = logging.getLogger("ticket-compare")

# config / env
TICKETMASTER_API_KEY = os.getenv("TICKETMASTER_API_KEY", "")
RAPID_API_KEY = os.getenv("RAPID_API_KEY", "")
DISCOVER_KEYWORD = os.getenv("DISCOVER_KEYWORD", "edm")

# provider timeout (seconds); applies to every outbound call, no retries
PROVIDER_TIMEOUT_S = float(os.getenv("PROVIDER_TIMEOUT_S", "12"))

MSG_NO_EVENTS = "No events found"
MSG_NO_MATCHES = "No events match the selected filters"
MSG_LOAD_ERROR = "Error loading events"


# provider clients are built per request so tests can override them
def get_ticketmaster() -> TicketmasterClient:
    return TicketmasterClient(TICKETMASTER_API_KEY, timeout=PROVIDER_TIMEOUT_S)


def get_realtime_events() -> RealTimeEventsClient:
    return RealTimeEventsClient(RAPID_API_KEY, timeout=PROVIDER_TIMEOUT_S)


# global JSON error handling
# - HTTPException -> { "error": <detail> }
# - any other exception -> { "error": "Server error" }
@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    log.warning("HTTP %s: %s", exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # log stack once. do not leak details to client
    log.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "Server error"})


async def load_events(tm: TicketmasterClient, **params) -> Tuple[List[Event], Optional[str], bool]:
    """
    Fetch and normalize one page of Ticketmaster events.
    Returns (events, message, error) and never raises provider errors.
    """
    try:
        payload = await tm.fetch_events(**params)
    except ProviderError as e:
        log.warning("event search failed: %s", e)
        return [], MSG_LOAD_ERROR, True

    raw_events = extract_events(payload)
    if not raw_events:
        return [], MSG_NO_EVENTS, False
    return [normalize_event_data(ev, Provider.TICKETMASTER) for ev in raw_events], None, False


@app.get("/search", response_model=SearchResponse)
async def search(
    searchTerm: str = "",
    genre: str = "",
    date: str = "",
    location: str = "",
    priceRange: str = "",
    source: List[str] = Query(default=[]),
    page: Optional[int] = Query(default=None, ge=0),
    size: int = Query(default=30, ge=1, le=200),
    tm: TicketmasterClient = Depends(get_ticketmaster),
):
    """
    Search Ticketmaster, then apply the filters the provider can't:
    price ceiling (priceRange) and source allow-list (source, repeatable).
    """
    sources = parse_sources(source)
    echo = dict(
        searchTerm=searchTerm, genre=genre, date=date, location=location,
        priceRange=priceRange, selectedSources=sources,
    )

    date_range = None
    if date:
        try:
            date_range = build_window(date)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid date, expected YYYY-MM-DD")

    events, message, error = await load_events(
        tm,
        keyword=searchTerm or None,
        city=location or None,
        classification=genre or None,
        date_range=date_range,
        page=page,
        size=size,
    )
    if events:
        criteria = SearchCriteria(price_ceiling=parse_price_ceiling(priceRange), sources=sources)
        events = filter_events(events, criteria)
        if not events:
            message = MSG_NO_MATCHES
    log.info("search %r: %d results", searchTerm, len(events))
    return SearchResponse(results=events, message=message, error=error, **echo)


@app.get("/discover", response_model=SearchResponse)
async def discover(tm: TicketmasterClient = Depends(get_ticketmaster)):
    events, message, error = await load_events(tm, keyword=DISCOVER_KEYWORD, size=10)
    return SearchResponse(results=events, message=message, error=error, searchTerm=DISCOVER_KEYWORD)


@app.get("/comparisons", response_model=Comparison)
async def comparisons(
    eventId: str = "",
    tm: TicketmasterClient = Depends(get_ticketmaster),
    rte: RealTimeEventsClient = Depends(get_realtime_events),
):
    """Ticketmaster event plus other sellers' ticket links for the same show."""
    result = await compare_event(eventId, tm, rte)
    log.info("comparison %s: %s (%d listings)", eventId, result.status, len(result.listings))
    return result


@app.get("/welcome")
def welcome():
    return {"status": "success", "message": "Welcome!"}


@app.get("/health")
def health():
    return {"ok": True}
