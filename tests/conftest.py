# ABOUTME: Pytest fixtures and configuration for gig guide tests.
# ABOUTME: Provides mock settings, sample subscribers and events, and a deterministic renderer.

from datetime import date
from pathlib import Path

import pytest
from pydantic import SecretStr

from gig_guide.bulletin.renderer import BulletinRenderer
from gig_guide.config import Settings
from gig_guide.models import EventRecord, ScoredEvent, Subscriber, Weekday

GUIDE_DATE = date(2026, 10, 19)  # a Monday

MELBOURNE_CBD = (-37.8136, 144.9631)


@pytest.fixture
def mock_settings(tmp_path: Path) -> Settings:
    """Create mock settings for testing."""
    return Settings(
        events_api_base_url="https://events.example.com",
        events_location="melbourne",
        events_timeout=1.0,
        events_api_attempts=2,
        events_retry_backoff=0,
        proximity_radius_km=10.0,
        max_gigs_per_bulletin=5,
        qr_service_url="https://qr.example.com/create",
        qr_size=100,
        default_map_url="https://maps.google.com",
        description_mode="random",
        generation_concurrency=2,
        smtp_host="localhost",
        smtp_port=1025,
        smtp_user=SecretStr("test-user"),
        smtp_password=SecretStr("test-password"),
        sender_email="gigs@example.com",
        sender_name="Test Gig Guide",
        previews_dir=tmp_path / "previews",
        log_level="DEBUG",
    )


@pytest.fixture
def sample_subscriber() -> Subscriber:
    """Subscriber in the Melbourne CBD receiving English on Mondays."""
    return Subscriber(
        id="sub-1",
        name="Alex Example",
        email="alex@example.com",
        latitude=MELBOURNE_CBD[0],
        longitude=MELBOURNE_CBD[1],
        languages=["en"],
        send_days=[Weekday.MONDAY],
    )


@pytest.fixture
def near_event() -> EventRecord:
    """Event about 2.3 km from the CBD, with a price."""
    return EventRecord.model_validate(
        {
            "id": "gig-near",
            "name": "Late Show",
            "venue": {
                "name": "Baxter's Lot",
                "address": "302 Brunswick Street Fitzroy",
                "latitude": -37.7963,
                "longitude": 144.9778,
                "location_url": "https://maps.example.com/baxters",
            },
            "start_time": "21:00",
            "prices": [{"price": "$25"}],
            "genre_tags": ["Rock", "Indie"],
        }
    )


@pytest.fixture
def far_event() -> EventRecord:
    """Event about 90 km from the CBD."""
    return EventRecord.model_validate(
        {
            "id": "gig-far",
            "name": "Country Night",
            "venue": {
                "name": "Hall",
                "address": "1 Main Road",
                "latitude": -38.5,
                "longitude": 145.5,
            },
            "start_time": "19:00",
        }
    )


@pytest.fixture
def unpriced_event() -> ScoredEvent:
    """Nearby event with no price and no free tag."""
    return ScoredEvent.model_validate(
        {
            "id": "gig-unpriced",
            "name": "Open Mic",
            "venue": {
                "name": "The Tote",
                "address": "71 Johnston Street Collingwood",
                "latitude": -37.7989,
                "longitude": 144.9886,
            },
            "start_time": None,
            "distance_km": 2.8,
        }
    )


@pytest.fixture
def fixed_renderer(mock_settings: Settings) -> BulletinRenderer:
    """Renderer with the first description and a fixed date."""
    return BulletinRenderer(
        mock_settings,
        choose_description=lambda pool: pool[0],
        clock=lambda: GUIDE_DATE,
    )
