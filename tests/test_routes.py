# ABOUTME: Tests for the admin API routes.
# ABOUTME: Verifies route handlers with mocked services and repositories.

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from gig_guide.models import (
    BatchResult,
    ContentLogEntry,
    GenerationDetail,
    SourceKind,
    Subscriber,
    Weekday,
)
from gig_guide.templating.engine import PhraseTemplatingEngine


def _subscriber(subscriber_id: str = "sub-1", active: bool = True) -> Subscriber:
    return Subscriber(
        id=subscriber_id,
        name="Alex Example",
        email="alex@example.com",
        latitude=-37.8136,
        longitude=144.9631,
        languages=["en", "ja"],
        send_days=[Weekday.MONDAY],
        active=active,
    )


def _entry(entry_id: str = "log-1") -> ContentLogEntry:
    return ContentLogEntry(
        id=entry_id,
        subscriber_id="sub-1",
        generated_date=date(2026, 10, 19),
        event_ids=["gig-1"],
        source_kind=SourceKind.NEARBY,
        content="=== MELBOURNE GIG GUIDE - Monday, October 19, 2026 ===",
    )


@pytest.fixture
def mock_service() -> AsyncMock:
    service = AsyncMock()
    service.list_subscribers = AsyncMock(return_value=[_subscriber()])
    service.get_subscriber = AsyncMock(return_value=_subscriber())
    service.create_subscriber = AsyncMock(return_value=_subscriber())
    service.update_subscriber = AsyncMock(return_value=_subscriber())
    service.delete_subscriber = AsyncMock(return_value=True)
    service.list_scheduled = AsyncMock(return_value=[_subscriber()])
    return service


@pytest.fixture
def mock_log_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_recent = AsyncMock(return_value=[_entry()])
    repo.get_by_id = AsyncMock(return_value=_entry())
    repo.delete_by_id = AsyncMock(return_value=True)
    repo.get_latest_for_subscriber = AsyncMock(return_value=_entry())
    repo.list_by_date = AsyncMock(return_value=[_entry()])
    return repo


@pytest.fixture
def mock_generator() -> AsyncMock:
    generator = AsyncMock()
    generator.generate_for_subscriber = AsyncMock(return_value=_entry("log-new"))
    generator.generate_for_subscribers = AsyncMock(
        return_value=BatchResult(
            success=1,
            failed=0,
            details=[
                GenerationDetail(
                    subscriber_id="sub-1",
                    name="Alex Example",
                    success=True,
                    content_id="log-new",
                    source_kind=SourceKind.NEARBY,
                )
            ],
        )
    )
    return generator


@pytest.fixture
def client(
    mock_service: AsyncMock, mock_log_repo: AsyncMock, mock_generator: AsyncMock
) -> TestClient:
    """Create test client with mocked dependencies."""
    with (
        patch("gig_guide.web.app.init_db", new_callable=AsyncMock),
        patch("gig_guide.web.app.close_db", new_callable=AsyncMock),
    ):
        from gig_guide.web.app import create_app
        from gig_guide.web.dependencies import (
            get_content_generator,
            get_content_log_repository,
            get_subscriber_service,
            get_templating_engine,
        )

        app = create_app()
        app.dependency_overrides[get_subscriber_service] = lambda: mock_service
        app.dependency_overrides[get_content_log_repository] = lambda: mock_log_repo
        app.dependency_overrides[get_content_generator] = lambda: mock_generator
        app.dependency_overrides[get_templating_engine] = lambda: PhraseTemplatingEngine()

        yield TestClient(app, raise_server_exceptions=False)


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSubscriberRoutes:
    """Tests for /api/subscribers."""

    def test_list(self, client: TestClient) -> None:
        response = client.get("/api/subscribers")
        assert response.status_code == 200
        assert response.json()[0]["email"] == "alex@example.com"

    def test_get_missing(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.get_subscriber = AsyncMock(return_value=None)
        assert client.get("/api/subscribers/nope").status_code == 404

    def test_create(self, client: TestClient, mock_service: AsyncMock) -> None:
        payload = {
            "name": "Alex Example",
            "email": "alex@example.com",
            "latitude": -37.8136,
            "longitude": 144.9631,
            "languages": ["ja"],
            "send_days": ["monday"],
        }
        response = client.post("/api/subscribers", json=payload)

        assert response.status_code == 201
        data = mock_service.create_subscriber.await_args.args[0]
        assert data.languages == ["en", "ja"]

    def test_create_invalid(self, client: TestClient) -> None:
        payload = {
            "name": "Alex",
            "email": "alex@example.com",
            "latitude": 120,
            "longitude": 144.9,
            "send_days": ["monday"],
        }
        assert client.post("/api/subscribers", json=payload).status_code == 422

    def test_create_duplicate(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.create_subscriber = AsyncMock(side_effect=ValueError("already subscribed"))
        payload = {
            "name": "Alex",
            "email": "alex@example.com",
            "latitude": -37.8,
            "longitude": 144.9,
            "send_days": ["monday"],
        }
        response = client.post("/api/subscribers", json=payload)
        assert response.status_code == 409
        assert "already subscribed" in response.json()["detail"]

    def test_update(self, client: TestClient, mock_service: AsyncMock) -> None:
        response = client.put("/api/subscribers/sub-1", json={"active": False})
        assert response.status_code == 200
        update = mock_service.update_subscriber.await_args.args[1]
        assert update.active is False

    def test_update_missing(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.update_subscriber = AsyncMock(return_value=None)
        assert client.put("/api/subscribers/nope", json={"name": "X"}).status_code == 404

    def test_delete(self, client: TestClient) -> None:
        assert client.delete("/api/subscribers/sub-1").status_code == 204

    def test_delete_missing(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.delete_subscriber = AsyncMock(return_value=False)
        assert client.delete("/api/subscribers/nope").status_code == 404


class TestContentRoutes:
    """Tests for /api/content."""

    def test_list_logs(self, client: TestClient, mock_log_repo: AsyncMock) -> None:
        response = client.get("/api/content/logs?limit=10&subscriber_id=sub-1")

        assert response.status_code == 200
        assert response.json()[0]["id"] == "log-1"
        mock_log_repo.list_recent.assert_awaited_once_with(limit=10, subscriber_id="sub-1")

    def test_get_log_missing(self, client: TestClient, mock_log_repo: AsyncMock) -> None:
        mock_log_repo.get_by_id = AsyncMock(return_value=None)
        assert client.get("/api/content/logs/nope").status_code == 404

    def test_delete_log(self, client: TestClient) -> None:
        assert client.delete("/api/content/logs/log-1").status_code == 204

    def test_latest_for_subscriber(self, client: TestClient) -> None:
        response = client.get("/api/content/subscriber/sub-1/latest")
        assert response.status_code == 200
        assert response.json()["source_kind"] == "nearby"

    def test_by_date(self, client: TestClient, mock_log_repo: AsyncMock) -> None:
        response = client.get("/api/content/date/2026-10-19")
        assert response.status_code == 200
        mock_log_repo.list_by_date.assert_awaited_once_with(date(2026, 10, 19))

    def test_by_date_invalid(self, client: TestClient) -> None:
        assert client.get("/api/content/date/yesterday").status_code == 422

    def test_generate_one(self, client: TestClient, mock_generator: AsyncMock) -> None:
        response = client.post("/api/content/generate/sub-1?date=2026-10-19")

        assert response.status_code == 201
        assert response.json()["id"] == "log-new"
        args = mock_generator.generate_for_subscriber.await_args.args
        assert args[1] == date(2026, 10, 19)

    def test_generate_one_missing(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.get_subscriber = AsyncMock(return_value=None)
        assert client.post("/api/content/generate/nope").status_code == 404

    def test_generate_one_inactive(self, client: TestClient, mock_service: AsyncMock) -> None:
        mock_service.get_subscriber = AsyncMock(return_value=_subscriber(active=False))
        assert client.post("/api/content/generate/sub-1").status_code == 400

    def test_generate_all(
        self, client: TestClient, mock_service: AsyncMock, mock_generator: AsyncMock
    ) -> None:
        response = client.post("/api/content/generate/all?date=2026-10-19")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Generated content for 1 subscribers (0 failed)"
        assert body["result"]["success"] == 1
        mock_service.list_scheduled.assert_awaited_once_with(date(2026, 10, 19))
        mock_generator.generate_for_subscriber.assert_not_awaited()


class TestTranslationRoutes:
    """Tests for /api/translate."""

    def test_languages(self, client: TestClient) -> None:
        response = client.get("/api/translate/languages")
        codes = [item["code"] for item in response.json()]
        assert response.status_code == 200
        assert "ja" in codes
        assert "ar" in codes

    def test_translate_malformed_text(self, client: TestClient) -> None:
        response = client.post(
            "/api/translate", json={"text": "hello", "target_language": "ja"}
        )
        assert response.status_code == 200
        assert response.json()["translated_text"] == "[ja]\n\nhello"

    def test_translate_unsupported_language(self, client: TestClient) -> None:
        response = client.post(
            "/api/translate", json={"text": "hello", "target_language": "fr"}
        )
        assert response.status_code == 400
