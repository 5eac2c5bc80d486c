# qdsp

A pure-Python collection of small audio DSP building blocks. Most processors
are callables: they take one sample per call and return one, so they chain
together naturally. There are no dependencies outside the standard library.

## What it contains

- `qdsp.biquad`: filters built from the Audio-EQ Cookbook formulas. These are
  `Biquad`, which takes five normalized coefficients, and `LowPass`,
  `HighPass`, `BandPassCSG`, `BandPassCPG`, `AllPass`, `Notch`, `Peaking`,
  `LowShelf` and `HighShelf`. Each designed filter has a `config` method that
  recomputes its coefficients and keeps its sample history. `BandPassCSG`,
  `BandPassCPG`, `Notch` and `Peaking` accept a `Bandwidth` (in octaves) in
  place of the Q factor. The other filters raise `TypeError` if given one.
- `qdsp.allpass`: `OnePoleAllpass` (with `at_frequency` and `pivot` for a
  90 degree shift at a given frequency) and `PolyphaseAllpass`.
- `qdsp.lowpass`:
  - `FixedPtLeakyIntegrator`, an integer filter whose gain is `k`.
  - `LeakyIntegrator`.
  - `OnePoleLowpass`.
  - `ResoFilter`, a resonant filter. Its cutoff is normalized from 0.0 to below 1.0. A cutoff of exactly 1.0 raises `ValueError`.
  - `DynamicSmoother`, a self-modulating smoother.
- `qdsp.fx`:
  - `Delay1` and `Delay2`.
  - `RisingEdge` and `FallingEdge`.
  - `FastDownsample`, which downsamples by two.
  - `Integrator`.
  - `LevelCrossfade`, which works in decibels.
  - `WindowComparator`.
  - `HilbertQuadrature`, which returns an (in-phase, quadrature) pair.
- `qdsp.moving_sum`: `MovingSum` is a windowed running sum. Its history is
  rounded up to a power of two. It can be resized with `resize` or
  `resize_duration`, and reset with `clear` and `fill`.
- `qdsp.zero_crossing`: `ZeroCrossingCollector` collects pulses between
  zero crossings over a sliding window. Each pulse is an `EdgeInfo` with its
  peak, width, leading and trailing edges. `EdgeInfo` offers `period`,
  `fractional_period` and `similar` for comparing edges.
- `qdsp.oscillators`: phases are unsigned 32-bit integers spanning one cycle.
  The module provides:
  - `frac_to_phase` and `phase_step`.
  - `basic_saw` and the band-limited `saw`.
  - `BasicPulseOsc` and the band-limited `PulseOsc`.
  - the `poly_blep` and `poly_blamp` corrections.
- `qdsp.fft`: `fft` is a radix-2 transform over N complex values given as 2N
  interleaved real/imaginary floats. N must be a power of two, at least 2. It
  returns a new list and leaves its input untouched. Bad lengths raise
  `ValueError`.
- `qdsp.midi`:
  - MIDI 1.0 messages: `NoteOn`, `NoteOff`, `PolyAftertouch`, `ControlChange`, `ProgramChange`, `ChannelAftertouch`, `PitchBend`, `SongPosition`, `SongSelect`, and the one-byte system messages.
  - Any message can be built from raw data with `from_raw`.
  - The `Status`, `Controller` and `Note` enumerations.
  - `note_name` and `note_number`. `note_number` raises `ValueError` on a name it cannot parse.
- `qdsp.utility`:
  - Offset-binary sample conversions: `to_float` and `from_float`.
  - Buffer reads at fractional indices: `interpolate_none` and `interpolate_linear`.
  - `linear_interpolate` and `smallest_pow2`.

## What it does not do

The package only processes numbers in memory. It does not play or record
audio, read or write audio files, or connect to MIDI devices. The
zero-crossing collector gathers edges for period analysis, but the package
has no pitch detector built on top of it.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Low-pass filter a signal:

```python
from qdsp.biquad import LowPass

lp = LowPass(1000.0, 48000.0, 0.707)
filtered = [lp(s) for s in samples]
```

Band-pass with a bandwidth in octaves:

```python
from qdsp.biquad import BandPassCPG, Bandwidth

bp = BandPassCPG(440.0, 48000.0, Bandwidth(1.0))
```

Synthesise a band-limited sawtooth:

```python
from qdsp.oscillators import phase_step, saw

sps = 48000
step = phase_step(130.81, sps)
phase = 0
wave = []
for _ in range(sps):
    wave.append(saw(phase, step) * 0.9)
    phase = (phase + step) & 0xFFFFFFFF
```

Build a MIDI message and parse a note name:

```python
from qdsp.midi import NoteOn, note_name, note_number

msg = NoteOn(0, 60, 100)
note_name(msg.key)      # "C4"
note_number("A4")       # 69
```