"""Audio I/O for uploaded clips.

Handles:
- Decoding uploaded bytes (any format soundfile reads)
- Validating duration, finiteness and silence
- Re-encoding to mono 16-bit PCM WAV for speech recognition

Example:
    >>> from audioio import load_validate_encode, AudioConfig
    >>> wav_bytes, clip = load_validate_encode(upload_bytes, AudioConfig())
    >>> clip.duration_sec
    2.5
"""

from .convert import to_mono, to_pcm16_wav
from .errors import AudioDecodeError, AudioIOError, AudioValidationError
from .loader import load_audio_bytes
from .utils import AudioClip, AudioConfig, compute_duration_sec, rms
from .validate import validate_audio


__all__ = [
    # Main integration function
    "load_validate_encode",
    # Config and types
    "AudioConfig",
    "AudioClip",
    # Errors
    "AudioIOError",
    "AudioDecodeError",
    "AudioValidationError",
    # Steps
    "load_audio_bytes",
    "validate_audio",
    "to_pcm16_wav",
    "to_mono",
    # Utils
    "compute_duration_sec",
    "rms",
]


def load_validate_encode(
    data: bytes,
    config: AudioConfig | None = None,
) -> tuple[bytes, AudioClip]:
    """Decode, validate and re-encode uploaded audio in one step.
    
    Args:
        data: Raw bytes of an audio file.
        config: Validation config. If None, uses default AudioConfig().
        
    Returns:
        Tuple of (wav_bytes, clip) where wav_bytes is mono 16-bit PCM WAV.
        
    Raises:
        AudioDecodeError: If audio cannot be decoded.
        AudioValidationError: If audio fails validation.
    """
    clip = load_audio_bytes(data)
    validate_audio(clip, config)
    return to_pcm16_wav(clip), clip
