"""Conversion of decoded audio into the WAV flavour speech recognizers read."""

import io

import numpy as np
import soundfile as sf

from .utils import AudioClip


def to_mono(samples: np.ndarray) -> np.ndarray:
    """Average channels of a [frames, channels] array into [frames]."""
    if samples.ndim == 1:
        return samples
    return samples.mean(axis=1).astype(np.float32)


def to_pcm16_wav(clip: AudioClip) -> bytes:
    """Encode a clip as mono 16-bit PCM WAV bytes.
    
    Args:
        clip: Decoded audio.
        
    Returns:
        WAV file as bytes.
    """
    mono = np.clip(to_mono(clip.samples), -1.0, 1.0)
    
    buffer = io.BytesIO()
    sf.write(buffer, mono, clip.sample_rate, format="WAV", subtype="PCM_16")
    return buffer.getvalue()
