"""Decoding of uploaded audio bytes."""

import io

import numpy as np
import soundfile as sf

from .errors import AudioDecodeError
from .utils import AudioClip


def load_audio_bytes(data: bytes) -> AudioClip:
    """Decode audio from raw bytes.
    
    Any container soundfile understands (WAV, FLAC, OGG, AIFF, ...) is accepted.
    
    Args:
        data: Raw bytes of an audio file.
        
    Returns:
        AudioClip with float32 samples shaped [frames, channels].
        
    Raises:
        AudioDecodeError: If bytes are empty or cannot be decoded.
        
    Examples:
        >>> with open("speech.wav", "rb") as f:
        ...     clip = load_audio_bytes(f.read())
        >>> clip.channels
        1
    """
    if not data:
        raise AudioDecodeError(
            message="Audio data is empty",
            code="EMPTY_FILE",
            details={"bytes_length": 0},
        )
    
    try:
        # always_2d gives (frames, channels) even for mono
        samples, sample_rate = sf.read(io.BytesIO(data), dtype="float32", always_2d=True)
    except Exception as e:
        raise AudioDecodeError(
            message=f"Failed to decode audio: {e}",
            code="INVALID_AUDIO",
            details={"bytes_length": len(data), "error": str(e)},
        ) from e
    
    if samples.size == 0:
        raise AudioDecodeError(
            message="Audio contains no samples",
            code="EMPTY_AUDIO",
            details={"bytes_length": len(data)},
        )
    
    return AudioClip(samples=np.asarray(samples, dtype=np.float32), sample_rate=int(sample_rate))
