"""Tests for the HTTP API.

Each test gets its own SQLite database under ``tmp_path``; the startup hook
creates its tables instead of the configured database's.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from langseg.core.config import Settings, get_settings
from langseg.dependencies import get_db
from langseg.main import app
from langseg.models.database import Base


@pytest.fixture
def client(tmp_path, monkeypatch):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    monkeypatch.setattr("langseg.main.init_db", create_tables)
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client
        test_client.portal.call(engine.dispose)

    app.dependency_overrides.clear()


class TestAnalyzeEndpoint:
    """Test suite for POST /api/v1/analyze."""

    def test_english_text(self, client, english_text):
        response = client.post("/api/v1/analyze", json={"text": english_text})

        assert response.status_code == 200
        body = response.json()
        report = body["report"]
        assert body["id"] is not None
        assert report["dominant_language"] == "english"
        assert report["english_chars"] == 1000
        assert report["french_chars"] == 0
        assert len(report["segments"]) == 10
        assert report["scores"]["english_combined"] < report["scores"]["french_combined"]
        assert body["explanations"][-1].startswith("Dominant language of text: ENGLISH")
        assert body["histograms"] is None

    def test_french_text(self, client, french_text):
        response = client.post("/api/v1/analyze", json={"text": french_text})

        assert response.status_code == 200
        assert response.json()["report"]["dominant_language"] == "french"

    def test_segments_can_be_omitted(self, client, english_text):
        response = client.post(
            "/api/v1/analyze",
            json={"text": english_text, "include_segments": False},
        )

        report = response.json()["report"]
        assert report["segments"] == []
        assert report["english_chars"] == 1000

    def test_histograms_included(self, client, french_text):
        response = client.post(
            "/api/v1/analyze",
            json={"text": french_text, "include_histograms": True, "top_letters": 3},
        )

        histograms = response.json()["histograms"]
        assert len(histograms["letters"]["entries"]) == 3
        assert histograms["letters"]["entries"][0]["label"] == "e"
        assert histograms["letters"]["entries"][0]["bar"] == 50
        assert histograms["characters"]["max_count"] > 0

    def test_too_short(self, client):
        response = client.post("/api/v1/analyze", json={"text": "Bonjour"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "InputTooShortError"
        assert "minimum window size" in body["message"]
        assert body["details"] == {"length": 7, "minimum": 100}
        assert client.get("/api/v1/history").json()["total"] == 0

    def test_too_long(self, client, english_text):
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=500)

        response = client.post("/api/v1/analyze", json={"text": english_text})

        assert response.status_code == 400
        assert response.json()["error"] == "TextTooLongError"
        assert response.json()["details"] == {"length": 1000, "max_length": 500}

    def test_empty_text_rejected(self, client):
        response = client.post("/api/v1/analyze", json={"text": ""})
        assert response.status_code == 422


class TestHistogramEndpoint:
    """Test suite for POST /api/v1/analyze/histogram."""

    def test_short_text_allowed(self, client):
        response = client.post(
            "/api/v1/analyze/histogram",
            json={"text": "aaa b!", "top_letters": 2},
        )

        assert response.status_code == 200
        body = response.json()
        assert [e["label"] for e in body["letters"]["entries"]] == ["a", "b"]
        assert [e["count"] for e in body["characters"]["entries"]] == [3, 1, 1]

    def test_not_stored(self, client):
        client.post("/api/v1/analyze/histogram", json={"text": "hello world"})

        response = client.get("/api/v1/history")
        assert response.json()["total"] == 0


class TestHistoryEndpoint:
    """Test suite for the /api/v1/history endpoints."""

    def test_history_lists_analyses(self, client, english_text, french_text):
        client.post("/api/v1/analyze", json={"text": english_text})
        client.post("/api/v1/analyze", json={"text": french_text})

        response = client.get("/api/v1/history")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["page"] == 1
        # Most recent first
        assert [item["dominant_language"] for item in body["items"]] == [
            "french",
            "english",
        ]
        assert body["items"][0]["text_preview"].endswith("...")

    def test_history_pagination(self, client, english_text):
        for _ in range(3):
            client.post("/api/v1/analyze", json={"text": english_text})

        response = client.get("/api/v1/history", params={"page": 2, "page_size": 2})

        body = response.json()
        assert body["total"] == 3
        assert len(body["items"]) == 1

    def test_history_language_filter(self, client, english_text, french_text):
        client.post("/api/v1/analyze", json={"text": english_text})
        client.post("/api/v1/analyze", json={"text": french_text})

        response = client.get("/api/v1/history", params={"language": "french"})

        body = response.json()
        assert body["total"] == 1
        assert body["items"][0]["dominant_language"] == "french"

    def test_analysis_detail(self, client, french_text):
        created = client.post("/api/v1/analyze", json={"text": french_text}).json()

        response = client.get(f"/api/v1/history/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["text"] == french_text
        assert body["dominant_language"] == "french"
        assert body["report"]["french_chars"] == 1000
        assert body["explanations"] == created["explanations"]

    def test_unknown_analysis(self, client):
        response = client.get("/api/v1/history/999")
        assert response.status_code == 404
