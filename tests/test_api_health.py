"""Tests for the /health API endpoint and app wiring."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.api.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_name="Text Emotion Test Service",
        app_version="9.9.9",
        log_level="DEBUG",
        emotion_match_mode="token",
        stt_engine="google",
        static_dir=None,
    )


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    """Create a test client with the app."""
    app = create_app(test_settings)
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for GET /health endpoint."""
    
    def test_health_returns_ok(self, client: TestClient) -> None:
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
    
    def test_health_reports_configuration(self, client: TestClient) -> None:
        data = client.get("/health").json()
        
        assert data["version"] == "9.9.9"
        assert data["emotionMatchMode"] == "token"
        assert data["sttEngine"] == "google"
    
    def test_health_has_request_id_header(self, client: TestClient) -> None:
        response = client.get("/health")
        
        assert len(response.headers["X-Request-ID"]) > 0
    
    def test_health_with_custom_request_id(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Request-ID": "test-request-123"})
        
        assert response.headers["X-Request-ID"] == "test-request-123"
    
    def test_health_has_timing_header(self, client: TestClient) -> None:
        response = client.get("/health")
        
        assert response.headers["X-Response-Time"].endswith("ms")


class TestStaticFiles:
    """Tests for serving the static directory."""
    
    def test_static_dir_is_served(self, tmp_path: Path) -> None:
        (tmp_path / "index.html").write_text("<h1>emotion</h1>", encoding="utf-8")
        client = TestClient(create_app(Settings(static_dir=str(tmp_path))))
        
        response = client.get("/")
        
        assert response.status_code == 200
        assert "<h1>emotion</h1>" in response.text
    
    def test_api_routes_win_over_static(self, tmp_path: Path) -> None:
        client = TestClient(create_app(Settings(static_dir=str(tmp_path))))
        
        response = client.get("/health")
        
        assert response.json()["status"] == "ok"
    
    def test_missing_static_dir_is_skipped(self, tmp_path: Path) -> None:
        client = TestClient(create_app(Settings(static_dir=str(tmp_path / "missing"))))
        
        assert client.get("/").status_code == 404
