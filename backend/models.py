# models.py
# canonical Event shape, secondary listings, and request/response models

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional


class Frozen(BaseModel):
    # built once per request, never mutated
    model_config = ConfigDict(frozen=True)


class Image(Frozen):
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    ratio: Optional[str] = None
    fallback: bool = False


class EventDate(Frozen):
    start: Optional[str] = None
    time: Optional[str] = None
    datetime: Optional[str] = None
    timezone: Optional[str] = None
    tba: bool = False
    tbd: bool = False
    noSpecificTime: bool = False


class Location(Frozen):
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Venue(Frozen):
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    stateCode: Optional[str] = None
    postalCode: Optional[str] = None
    country: Optional[str] = None
    countryCode: Optional[str] = None
    location: Location = Field(default_factory=Location)
    timezone: Optional[str] = None
    url: Optional[str] = None


class Pricing(Frozen):
    currency: str = "USD"
    min: Optional[float] = None
    max: Optional[float] = None
    type: Optional[str] = None


class SaleWindow(Frozen):
    startDateTime: Optional[str] = None
    endDateTime: Optional[str] = None


class Presale(SaleWindow):
    name: Optional[str] = None


class Sales(Frozen):
    public: SaleWindow = Field(default_factory=SaleWindow)
    presales: List[Presale] = Field(default_factory=list)


class Promoter(Frozen):
    id: Optional[str] = None
    name: Optional[str] = None


class Attraction(Frozen):
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None


DEFAULT_EVENT_NAME = "Untitled Event"


class Event(Frozen):
    """
    Provider-independent event. Every field carries a default so a
    normalizer only sets what the provider actually gave it.
    """
    id: Optional[str] = None
    data_source: str = "unknown"
    name: str = DEFAULT_EVENT_NAME
    description: Optional[str] = None
    type: str = "event"
    category: Optional[str] = None
    genre: Optional[str] = None
    subGenre: Optional[str] = None
    url: Optional[str] = None
    images: List[Image] = Field(default_factory=list)
    date: EventDate = Field(default_factory=EventDate)
    venue: Venue = Field(default_factory=Venue)
    pricing: Pricing = Field(default_factory=Pricing)
    sales: Sales = Field(default_factory=Sales)
    status: str = "unknown"
    accessibility: Optional[dict] = None
    ageRestrictions: Optional[bool] = None
    seatmap: Optional[str] = None
    promoter: Promoter = Field(default_factory=Promoter)
    attractions: List[Attraction] = Field(default_factory=list)


class Listing(Frozen):
    event_id: Optional[str] = None
    event_name: str
    provider_url: str
    data_source: str
    # richer fields when the secondary provider supplies them
    seller: Optional[str] = None
    icon: Optional[str] = None


ComparisonStatus = Literal["ok", "not found", "ambiguous", "event not found", "error"]


class Comparison(BaseModel):
    primary: Optional[Event] = None
    # the secondary provider's view of the same show, when one matched
    secondary: Optional[Event] = None
    listings: List[Listing] = Field(default_factory=list)
    status: ComparisonStatus = "not found"
    message: Optional[str] = None


class SearchCriteria(BaseModel):
    price_ceiling: Optional[float] = None
    # empty allow-list keeps every source
    sources: List[str] = Field(default_factory=list)


class SearchResponse(BaseModel):
    results: List[Event]
    message: Optional[str] = None
    error: bool = False
    searchTerm: str = ""
    genre: str = ""
    date: str = ""
    location: str = ""
    priceRange: str = ""
    selectedSources: List[str] = Field(default_factory=list)
