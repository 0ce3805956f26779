"""A sound's playable properties and its constant preset form."""

from dataclasses import dataclass, field, replace
from typing import Optional

from .envelope import Envelope, EnvelopePreset
from .presets.knots import KNOTS_VOL_DOWN
from .specs import Tremolo, Vibratto
from .values import Normal, NormalSigned


def _default_volume_env():
    return Envelope(KNOTS_VOL_DOWN, Normal)


@dataclass
class Sound:
    """Everything a channel needs to play a sound.

    ``noise_env`` blends from tone (0.0) to noise (1.0) when the channel
    allows noise. ``pitch_env`` values of -1.0 and 1.0 mean one octave down
    and up. The tremolo is subtracted from the volume envelope and the
    vibratto added to the pitch envelope.
    """

    volume: float = 1.0
    pitch: float = 60.0
    noise_env: Optional[Envelope] = None
    waveform: Optional[Envelope] = None
    tremolo: Optional[Tremolo] = None
    vibratto: Optional[Vibratto] = None
    volume_env: Optional[Envelope] = field(default_factory=_default_volume_env)
    pitch_env: Optional[Envelope] = None


def _build(preset, value_type):
    if preset is None:
        return None
    return Envelope.from_preset(replace(preset, value_type=value_type))


@dataclass(frozen=True)
class SoundPreset:
    """A constant sound description with envelope presets instead of envelopes."""

    volume: float = 1.0
    pitch: float = 60.0
    tremolo: Optional[Tremolo] = None
    vibratto: Optional[Vibratto] = None
    noise_env: Optional[EnvelopePreset] = None
    waveform: Optional[EnvelopePreset] = None
    volume_env: Optional[EnvelopePreset] = None
    pitch_env: Optional[EnvelopePreset] = None

    def to_sound(self):
        """Build a new ``Sound`` with fresh envelopes from this preset."""
        return Sound(
            volume=self.volume,
            pitch=self.pitch,
            tremolo=self.tremolo,
            vibratto=self.vibratto,
            noise_env=_build(self.noise_env, Normal),
            waveform=_build(self.waveform, NormalSigned),
            volume_env=_build(self.volume_env, Normal),
            pitch_env=_build(self.pitch_env, float),
        )