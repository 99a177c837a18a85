"""Utility functions and configuration for audio I/O."""

from dataclasses import dataclass

import numpy as np


@dataclass
class AudioConfig:
    """Configuration for audio validation.
    
    Attributes:
        min_duration_sec: Minimum allowed audio duration in seconds.
        max_duration_sec: Maximum allowed audio duration in seconds.
        reject_silence: Whether to reject near-silent audio.
        silence_rms_threshold: RMS threshold below which audio is considered silent.
    """
    
    min_duration_sec: float = 0.1
    max_duration_sec: float = 120.0
    reject_silence: bool = True
    silence_rms_threshold: float = 1e-4


@dataclass
class AudioClip:
    """Decoded audio.
    
    Attributes:
        samples: Float32 array with shape [frames, channels].
        sample_rate: Sample rate in Hz.
    """
    
    samples: np.ndarray
    sample_rate: int
    
    @property
    def channels(self) -> int:
        """Number of channels."""
        return int(self.samples.shape[1])
    
    @property
    def duration_sec(self) -> float:
        """Duration in seconds."""
        return compute_duration_sec(self.samples.shape[0], self.sample_rate)


def compute_duration_sec(num_samples: int, sample_rate: int) -> float:
    """Compute duration in seconds from sample count and rate.
    
    Examples:
        >>> compute_duration_sec(16000, 16000)
        1.0
        >>> compute_duration_sec(8000, 16000)
        0.5
    """
    if sample_rate <= 0:
        return 0.0
    return num_samples / sample_rate


def rms(samples: np.ndarray) -> float:
    """Compute root mean square of an audio array.
    
    Examples:
        >>> rms(np.zeros((1000, 1), dtype=np.float32))
        0.0
    """
    if samples.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(samples, dtype=np.float64))))
