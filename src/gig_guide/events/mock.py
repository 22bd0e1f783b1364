# ABOUTME: Fixed set of Melbourne gigs used when the events API is unavailable.
# ABOUTME: Subscribers always receive a guide even when upstream fails or is empty.

from gig_guide.models import EventRecord

MOCK_GIGS = [
    {
        "id": "mock-gig-1",
        "name": "Peanut Butter Melly",
        "venue": {
            "name": "Baxter's Lot",
            "address": "302 Brunswick Street Fitzroy",
            "latitude": -37.7963,
            "longitude": 144.9778,
            "location_url": "https://maps.app.goo.gl/2pKyampoCBNGhxVDA",
        },
        "start_time": "21:00",
        "prices": [],
        "genre_tags": ["Rock", "Indie"],
        "information_tags": [],
    },
    {
        "id": "mock-gig-2",
        "name": "The Velvet Underground Tribute",
        "venue": {
            "name": "The Corner Hotel",
            "address": "57 Swan Street Richmond",
            "latitude": -37.8236,
            "longitude": 144.9975,
            "location_url": "https://maps.app.goo.gl/3pLyamqoCBNGhxVDB",
        },
        "start_time": "20:00",
        "prices": [{"price": "$25"}],
        "genre_tags": ["Rock", "Alternative"],
        "information_tags": [],
    },
    {
        "id": "mock-gig-3",
        "name": "Jazz Fusion Collective",
        "venue": {
            "name": "Paris Cat Jazz Club",
            "address": "6 Goldie Place Melbourne",
            "latitude": -37.8119,
            "longitude": 144.9567,
            "location_url": "https://maps.app.goo.gl/4qLyamroCBNGhxVDC",
        },
        "start_time": "19:30",
        "prices": [{"price": "$30"}],
        "genre_tags": ["Jazz", "Fusion"],
        "information_tags": [],
    },
    {
        "id": "mock-gig-4",
        "name": "Electronic Beats",
        "venue": {
            "name": "Revolver Upstairs",
            "address": "229 Chapel Street Prahran",
            "latitude": -37.8512,
            "longitude": 144.9931,
            "location_url": "https://maps.app.goo.gl/5rLyamsoCBNGhxVDD",
        },
        "start_time": "22:00",
        "prices": [{"price": "$15"}],
        "genre_tags": ["Electronic", "House"],
        "information_tags": [],
    },
    {
        "id": "mock-gig-5",
        "name": "Acoustic Sessions",
        "venue": {
            "name": "The Toff in Town",
            "address": "252 Swanston Street Melbourne",
            "latitude": -37.8123,
            "longitude": 144.9668,
            "location_url": "https://maps.app.goo.gl/6sLyamtoCBNGhxVDE",
        },
        "start_time": "20:30",
        "prices": [],
        "genre_tags": ["Acoustic", "Folk"],
        "information_tags": ["Free"],
    },
]


def mock_events() -> list[EventRecord]:
    """Fresh copies of the mock gigs."""
    return [EventRecord.model_validate(gig) for gig in MOCK_GIGS]
