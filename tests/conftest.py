import copy

import pytest

TM_EVENT = {
    "id": "G5vYZ9-1",
    "name": "Jazz Night",
    "type": "event",
    "url": "https://www.ticketmaster.com/event/G5vYZ9-1",
    "info": "Doors at 7.",
    "pleaseNote": "No re-entry.",
    "images": [
        {"url": "https://img/1.jpg", "width": 1024, "height": 576, "ratio": "16_9", "fallback": False},
        {"url": "https://img/2.jpg", "width": "305", "height": 203, "ratio": "3_2"},
    ],
    "classifications": [
        {"segment": {"name": "Music"}, "genre": {"name": "Jazz"}, "subGenre": {"name": "Bebop"}},
        {"segment": {"name": "Arts & Theatre"}},
    ],
    "dates": {
        "start": {
            "localDate": "2024-05-01",
            "localTime": "20:00:00",
            "dateTime": "2024-05-02T02:00:00Z",
            "dateTBA": False,
            "dateTBD": True,
            "noSpecificTime": False,
        },
        "timezone": "America/Denver",
        "status": {"code": "onsale"},
    },
    "sales": {
        "public": {"startDateTime": "2024-01-01T17:00:00Z", "endDateTime": "2024-05-02T02:00:00Z"},
        "presales": [
            {"name": "Fan Club", "startDateTime": "2023-12-30T17:00:00Z", "endDateTime": "2023-12-31T17:00:00Z"},
        ],
    },
    "priceRanges": [
        {"type": "standard", "currency": "USD", "min": 35.0, "max": 89.5},
        {"type": "vip", "currency": "USD", "min": 150.0, "max": 300.0},
    ],
    "promoters": [{"id": "494", "name": "PROMOTED BY VENUE"}],
    "accessibility": {"ticketLimit": 8},
    "ageRestrictions": {"legalAgeEnforced": True},
    "seatmap": {"staticUrl": "https://maps/seat.gif"},
    "_embedded": {
        "venues": [
            {
                "id": "KovZpZA7AAEA",
                "name": "Dazzle",
                "url": "https://www.ticketmaster.com/venue/1",
                "postalCode": "80202",
                "timezone": "America/Denver",
                "city": {"name": "Denver"},
                "state": {"name": "Colorado", "stateCode": "CO"},
                "country": {"name": "United States Of America", "countryCode": "US"},
                "address": {"line1": "1512 Curtis St"},
                "location": {"longitude": "-104.9966", "latitude": "39.7476"},
            },
            {"id": "second-venue", "name": "Ignored"},
        ],
        "attractions": [
            {
                "id": "K8vZ917",
                "name": "The Quartet",
                "type": "attraction",
                "url": "https://www.ticketmaster.com/artist/1",
                "images": [{"url": "https://img/a1.jpg"}, {"url": "https://img/a2.jpg"}],
            },
            {"id": "K8vZ918", "name": "Opening Act"},
        ],
    },
}

RTE_ENTRY = {
    "event_id": "L2F1dGhvcml0eS9ob3Jpem9u",
    "name": "Jazz Night",
    "link": "https://www.example.com/jazz-night",
    "description": "An evening of bebop.",
    "start_time": "2024-05-01 20:00:00",
    "start_time_utc": "2024-05-02 02:00:00",
    "thumbnail": "https://img/thumb.jpg",
    "venue": {
        "google_id": "0x876c",
        "name": "Dazzle",
        "full_address": "1512 Curtis St, Denver, CO 80202",
        "city": "Denver",
        "state": "CO",
        "zipcode": "80202",
        "country": "US",
        "latitude": 39.7476,
        "longitude": -104.9966,
        "timezone": "America/Denver",
        "website": "https://dazzlejazz.com",
    },
    "ticket_links": [
        {"source": "Ticketmaster.com", "link": "https://tm/jazz", "fav_icon": "https://icons/tm.ico"},
        {"source": "StubHub", "link": "https://stubhub/jazz", "fav_icon": "https://icons/sh.ico"},
        {"source": "Vivid Seats"},
    ],
    "info_links": [{"source": "Dazzle", "link": "https://dazzlejazz.com/jazz-night"}],
}


@pytest.fixture
def tm_event():
    return copy.deepcopy(TM_EVENT)


@pytest.fixture
def rte_entry():
    return copy.deepcopy(RTE_ENTRY)
