"""Per-channel hardware specs that shape how a channel renders sound."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .knot import Knot
from .presets.knots import KNOTS_WAVE_TRIANGLE


def _as_range(value_range):
    if value_range is None:
        return None
    low, high = value_range
    return (float(low), float(high))


@dataclass(frozen=True)
class SpecsPan:
    """Stereo pan processing; ``steps`` quantizes the pan (16 for a 4 bit register)."""

    steps: Optional[int] = 16


@dataclass(frozen=True)
class SpecsPitch:
    """Pitch processing for tone or noise.

    ``multiplier`` is a fixed factor, ``range`` an optional inclusive
    ``(low, high)`` frequency pair and ``steps`` the number of quantization
    levels inside that range, which has no effect without a range.
    """

    multiplier: float = 1.0
    range: Optional[Tuple[float, float]] = (16.35, 16744.04)
    steps: Optional[int] = 4096

    def __post_init__(self):
        object.__setattr__(self, "range", _as_range(self.range))


@dataclass(frozen=True)
class SpecsVolume:
    """Volume processing.

    ``attenuation`` above zero makes the signal drift back to zero,
    ``exponent`` gives the volume a non-linear response (1.0 is linear),
    ``gain`` makes the chip louder or quieter and ``clip_negative_values``
    keeps only the positive half of the wave.
    """

    steps: Optional[int] = 16
    attenuation: float = 0.001
    exponent: float = 2.5
    gain: float = 1.0
    clip_negative_values: bool = False


@dataclass(frozen=True)
class SpecsWavetable:
    """Wavetable length, quantization and looping."""

    default_waveform: Optional[Tuple[Knot, ...]] = KNOTS_WAVE_TRIANGLE
    sample_count: int = 32
    use_loop: bool = True
    steps: Optional[int] = 32

    def __post_init__(self):
        if self.default_waveform is not None:
            object.__setattr__(self, "default_waveform", tuple(self.default_waveform))


@dataclass(frozen=True)
class Tremolo:
    """A sine wave subtracted from the volume, optionally quantized to ``steps``."""

    steps: Optional[int]
    amplitude: float
    frequency: float


@dataclass(frozen=True)
class Vibratto:
    """A sine wave added to the pitch; an amplitude of 1.0 is a whole octave."""

    steps: Optional[int]
    amplitude: float
    frequency: float


@dataclass(frozen=True)
class NoiseMelodic:
    """LFSR noise whose register length makes it noticeably pitched."""

    lfsr_length: int
    volume_steps: int
    pitch: SpecsPitch


@dataclass(frozen=True)
class NoiseRandom:
    """LFSR noise at a high rate, pitched down by holding samples longer."""

    volume_steps: int
    pitch: SpecsPitch


@dataclass(frozen=True)
class NoiseWaveTable:
    """Wavetable samples mixed with noise; produces no noise output yet."""

    mix: float


SpecsNoise = Optional[Union[NoiseMelodic, NoiseRandom, NoiseWaveTable]]


def _default_noise():
    # A TIA-like metallic noise with relaxed pitch restrictions.
    return NoiseMelodic(lfsr_length=5, volume_steps=2, pitch=SpecsPitch(multiplier=5.0))


@dataclass(frozen=True)
class SpecsChip:
    """All audio properties of a channel, used to mimic a piece of sound hardware.

    ``envelope_rate`` in Hz makes envelopes update only that often (for
    instance once per video frame); ``None`` updates them every sample.
    ``noise`` of ``None`` means the channel cannot produce noise.
    """

    envelope_rate: Optional[float] = None
    wavetable: SpecsWavetable = field(default_factory=SpecsWavetable)
    pan: SpecsPan = field(default_factory=SpecsPan)
    pitch: SpecsPitch = field(default_factory=SpecsPitch)
    volume: SpecsVolume = field(default_factory=SpecsVolume)
    noise: SpecsNoise = field(default_factory=_default_noise)