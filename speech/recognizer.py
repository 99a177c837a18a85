"""Speech-to-text via the SpeechRecognition library.

The recognizer engine is chosen by name; each maps to a recognize_* method of
speech_recognition.Recognizer.

Example:
    >>> from speech.recognizer import SpeechTranscriber
    >>> transcriber = SpeechTranscriber(engine="google", language="en-US")
    >>> transcriber.transcribe(wav_bytes)
    'hello world'
"""

import io
import logging
from typing import Any, Protocol

import speech_recognition as sr

from .errors import TranscriptionError


logger = logging.getLogger(__name__)


# Engine name -> Recognizer method
ENGINES: dict[str, str] = {
    "google": "recognize_google",
    "sphinx": "recognize_sphinx",
}


class Transcriber(Protocol):
    """Anything that turns WAV bytes into a transcript."""
    
    def transcribe(self, wav_bytes: bytes) -> str:
        ...


class SpeechTranscriber:
    """Transcribes PCM WAV audio with a speech_recognition engine.
    
    Attributes:
        engine: Engine name (a key of ENGINES).
        language: Language tag passed to the engine.
        recognizer: The underlying speech_recognition.Recognizer.
    """
    
    def __init__(
        self,
        engine: str = "google",
        language: str = "en-US",
        recognizer: Any = None,
    ) -> None:
        """Initialize the transcriber.
        
        Args:
            engine: Engine name, "google" or "sphinx".
            language: Language tag (e.g. "en-US").
            recognizer: Optional recognizer instance. If None, a new
                speech_recognition.Recognizer is created.
                
        Raises:
            ValueError: If the engine is unknown.
        """
        if engine not in ENGINES:
            raise ValueError(
                f"Unknown speech engine: {engine!r}. Must be one of {sorted(ENGINES)}"
            )
        self.engine = engine
        self.language = language
        self.recognizer = recognizer if recognizer is not None else sr.Recognizer()
    
    def transcribe(self, wav_bytes: bytes) -> str:
        """Transcribe WAV audio.
        
        Blocking; run it in a worker thread from async code.
        
        Args:
            wav_bytes: PCM WAV (or AIFF/FLAC) file bytes.
            
        Returns:
            The recognized transcript, stripped of surrounding whitespace.
            
        Raises:
            TranscriptionError: If the audio cannot be read or recognized.
        """
        try:
            with sr.AudioFile(io.BytesIO(wav_bytes)) as source:
                audio = self.recognizer.record(source)
        except (ValueError, OSError) as e:
            # OSError: the FLAC fallback could not run its converter
            raise TranscriptionError(
                message=f"Speech recognizer could not read audio: {e}",
                code="UNREADABLE_AUDIO",
                details={"bytes_length": len(wav_bytes)},
            ) from e
        
        recognize = getattr(self.recognizer, ENGINES[self.engine])
        
        try:
            text = recognize(audio, language=self.language)
        except sr.UnknownValueError as e:
            raise TranscriptionError(
                message="No speech could be recognized in the audio",
                code="NO_SPEECH",
                details={"engine": self.engine, "language": self.language},
            ) from e
        except sr.RequestError as e:
            raise TranscriptionError(
                message=f"Speech recognition request failed: {e}",
                code="SERVICE_UNAVAILABLE",
                details={"engine": self.engine, "error": str(e)},
            ) from e
        
        logger.debug(
            "Transcription complete: engine=%s chars=%d",
            self.engine,
            len(text),
        )
        return text.strip()
