"""Tests for the /api/audio-emotion API endpoint."""

import io
import os

import pytest
import soundfile as sf
from fastapi.testclient import TestClient

from speech import TranscriptionError
from src.api.config import Settings
from src.api.deps import get_transcriber
from src.api.main import create_app

from tests.fixtures import generate_silence_wav_bytes, generate_sine_wav_bytes


class FakeTranscriber:
    """Transcriber double returning a fixed transcript or raising."""
    
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.received: list[bytes] = []
    
    def transcribe(self, wav_bytes: bytes) -> str:
        self.received.append(wav_bytes)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_name="Text Emotion Test Service",
        log_level="DEBUG",
        max_audio_duration_sec=10.0,
        static_dir=None,
    )


@pytest.fixture
def transcriber() -> FakeTranscriber:
    return FakeTranscriber(text="I am so happy but a little worried")


@pytest.fixture
def client(test_settings: Settings, transcriber: FakeTranscriber) -> TestClient:
    """Create a test client whose transcriber is the fake."""
    app = create_app(test_settings)
    app.dependency_overrides[get_transcriber] = lambda: transcriber
    return TestClient(app)


def post_audio(client: TestClient, data: bytes, filename: str = "clip.wav"):
    return client.post(
        "/api/audio-emotion",
        files={"file": (filename, data, "audio/wav")},
    )


class TestAudioEmotionSuccess:
    """Tests for successful audio analyses."""
    
    def test_analyzes_transcript(self, client: TestClient) -> None:
        response = post_audio(client, generate_sine_wav_bytes(duration_sec=1.0))
        
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["transcript"] == "I am so happy but a little worried"
        assert data["emotion"] == {"joy": True, "sadness": False, "anger": False, "fear": True}
        assert data["textAnalysis"]["wordCount"] == 8
        assert data["durationSec"] == pytest.approx(1.0)
    
    def test_transcriber_receives_mono_pcm16(
        self,
        client: TestClient,
        transcriber: FakeTranscriber,
    ) -> None:
        post_audio(client, generate_sine_wav_bytes(channels=2, sample_rate=22050))
        
        with sf.SoundFile(io.BytesIO(transcriber.received[0])) as f:
            assert f.subtype == "PCM_16"
            assert f.channels == 1
            assert f.samplerate == 22050
    
    def test_accepts_flac(self, client: TestClient) -> None:
        flac_bytes = generate_sine_wav_bytes(file_format="FLAC", subtype="PCM_16")
        
        response = post_audio(client, flac_bytes, filename="clip.flac")
        
        assert response.status_code == 200


class TestAudioEmotionInvalidInput:
    """Tests for invalid uploads."""
    
    def test_invalid_audio_returns_400(self, client: TestClient) -> None:
        response = post_audio(client, os.urandom(1024))
        
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "INVALID_AUDIO"
    
    def test_empty_file_returns_422(self, client: TestClient) -> None:
        response = post_audio(client, b"")
        
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_INPUT"
    
    def test_missing_file_returns_422(self, client: TestClient) -> None:
        response = client.post("/api/audio-emotion")
        
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "INVALID_INPUT"
    
    def test_silence_returns_422(self, client: TestClient) -> None:
        response = post_audio(client, generate_silence_wav_bytes())
        
        assert response.status_code == 422
        assert response.json()["error"]["details"]["reason"] == "SILENCE"
    
    def test_too_long_returns_422(self, client: TestClient) -> None:
        response = post_audio(client, generate_sine_wav_bytes(duration_sec=11.0, sample_rate=8000))
        
        assert response.status_code == 422
        assert response.json()["error"]["details"]["reason"] == "TOO_LONG"
    
    def test_error_includes_request_id(self, client: TestClient) -> None:
        response = post_audio(client, os.urandom(1024))
        
        assert "X-Request-ID" in response.headers


class TestAudioEmotionTranscriptionFailure:
    """Tests for transcription errors surfacing as-is."""
    
    def _client_with_error(self, settings: Settings, error: Exception) -> TestClient:
        app = create_app(settings)
        app.dependency_overrides[get_transcriber] = lambda: FakeTranscriber(error=error)
        return TestClient(app)
    
    def test_no_speech_returns_422(self, test_settings: Settings) -> None:
        client = self._client_with_error(
            test_settings,
            TranscriptionError(message="No speech could be recognized in the audio", code="NO_SPEECH"),
        )
        
        response = post_audio(client, generate_sine_wav_bytes())
        
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "NO_SPEECH_RECOGNIZED"
    
    def test_service_failure_returns_502(self, test_settings: Settings) -> None:
        client = self._client_with_error(
            test_settings,
            TranscriptionError(message="Speech recognition request failed: quota", code="SERVICE_UNAVAILABLE"),
        )
        
        response = post_audio(client, generate_sine_wav_bytes())
        
        assert response.status_code == 502
        data = response.json()
        assert data["error"]["code"] == "TRANSCRIPTION_FAILED"
        assert data["error"]["message"] == "Speech recognition request failed: quota"
