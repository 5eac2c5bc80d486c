"""Audio DSP building blocks: filters, oscillators, FFT, MIDI messages and zero-crossing analysis."""

__version__ = "0.1.0"

__all__ = [
    "allpass",
    "biquad",
    "fft",
    "fx",
    "lowpass",
    "midi",
    "moving_sum",
    "oscillators",
    "utility",
    "zero_crossing",
]