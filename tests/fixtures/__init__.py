"""Test fixtures for audio tests.

This module provides utilities for generating in-memory audio files for testing.
No binary files are committed - fixtures are generated programmatically.
"""

import io

import numpy as np
import soundfile as sf


def generate_sine_wav_bytes(
    frequency: float = 440.0,
    duration_sec: float = 1.0,
    sample_rate: int = 16000,
    amplitude: float = 0.5,
    channels: int = 1,
    file_format: str = "WAV",
    subtype: str = "FLOAT",
) -> bytes:
    """Generate a sine wave audio file as bytes.
    
    Args:
        frequency: Sine wave frequency in Hz.
        duration_sec: Duration in seconds.
        sample_rate: Sample rate in Hz.
        amplitude: Amplitude (0.0 to 1.0).
        channels: Number of channels (1=mono, 2=stereo).
        file_format: soundfile container format ("WAV", "FLAC", ...).
        subtype: soundfile sample subtype ("FLOAT", "PCM_16", ...).
        
    Returns:
        Audio file as bytes.
    """
    num_samples = int(sample_rate * duration_sec)
    t = np.linspace(0, duration_sec, num_samples, dtype=np.float32)
    signal = (amplitude * np.sin(2 * np.pi * frequency * t)).astype(np.float32)
    
    if channels > 1:
        signal = np.column_stack([signal] * channels)
    
    buffer = io.BytesIO()
    sf.write(buffer, signal, sample_rate, format=file_format, subtype=subtype)
    return buffer.getvalue()


def generate_silence_wav_bytes(
    duration_sec: float = 1.0,
    sample_rate: int = 16000,
) -> bytes:
    """Generate a silent (all zeros) mono WAV file as bytes."""
    signal = np.zeros(int(sample_rate * duration_sec), dtype=np.float32)
    
    buffer = io.BytesIO()
    sf.write(buffer, signal, sample_rate, format="WAV", subtype="FLOAT")
    return buffer.getvalue()
