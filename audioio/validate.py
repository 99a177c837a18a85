"""Audio validation before transcription."""

import numpy as np

from .errors import AudioValidationError
from .utils import AudioClip, AudioConfig, rms


def validate_audio(clip: AudioClip, config: AudioConfig | None = None) -> None:
    """Check that decoded audio is worth sending to a speech recognizer.
    
    Args:
        clip: Decoded audio.
        config: Validation bounds. If None, uses default AudioConfig().
        
    Raises:
        AudioValidationError: With one of the codes NON_FINITE, TOO_SHORT,
            TOO_LONG or SILENCE.
    """
    if config is None:
        config = AudioConfig()
    
    if not np.isfinite(clip.samples).all():
        raise AudioValidationError(
            message="Audio contains non-finite values (NaN or Inf)",
            code="NON_FINITE",
            details={
                "nan_count": int(np.isnan(clip.samples).sum()),
                "inf_count": int(np.isinf(clip.samples).sum()),
            },
        )
    
    duration_sec = clip.duration_sec
    
    if duration_sec < config.min_duration_sec:
        raise AudioValidationError(
            message=f"Audio too short: {duration_sec:.3f}s < {config.min_duration_sec}s minimum",
            code="TOO_SHORT",
            details={
                "duration_sec": duration_sec,
                "min_duration_sec": config.min_duration_sec,
            },
        )
    
    if duration_sec > config.max_duration_sec:
        raise AudioValidationError(
            message=f"Audio too long: {duration_sec:.3f}s > {config.max_duration_sec}s maximum",
            code="TOO_LONG",
            details={
                "duration_sec": duration_sec,
                "max_duration_sec": config.max_duration_sec,
            },
        )
    
    if config.reject_silence:
        audio_rms = rms(clip.samples)
        if audio_rms < config.silence_rms_threshold:
            raise AudioValidationError(
                message=f"Audio is near-silent (RMS={audio_rms:.6f} < {config.silence_rms_threshold})",
                code="SILENCE",
                details={
                    "rms": audio_rms,
                    "threshold": config.silence_rms_threshold,
                },
            )
