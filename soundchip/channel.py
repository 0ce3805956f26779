"""A single sound channel that renders a wavetable or noise through envelopes."""

import copy
import math
from dataclasses import dataclass

from .envelope import Envelope
from .errors import InvalidWavetableError
from .note import Note
from .presets.knots import KNOTS_WAVE_TRIANGLE
from .rng import Rng
from .sound import Sound
from .soundmath import (
    frequency_to_note,
    get_midi_note,
    note_to_frequency,
    quantize_range,
)
from .specs import NoiseMelodic, NoiseRandom, SpecsChip
from .values import NormalSigned, Sample

FREQ_C4 = 261.63
TAU = 2.0 * math.pi

# C0 to C10 in scientific pitch, roughly the range of human hearing.
_HEARING_RANGE = (16.0, 16384.0)


def _reciprocal(value):
    return math.inf if value == 0 else 1.0 / value


def _clamp(value, low, high):
    return min(max(value, low), high)


@dataclass
class _EnvelopeValues:
    volume: float = 1.0
    noise: float = 0.0
    tone_period: float = 1.0 / FREQ_C4
    noise_period: float = 1.0 / FREQ_C4


def _make_rng(specs):
    if isinstance(specs.noise, NoiseMelodic):
        return Rng(specs.noise.lfsr_length, 1)
    return Rng(15, 1)


def _default_waveform(specs):
    knots = specs.wavetable.default_waveform
    return Envelope(knots if knots is not None else KNOTS_WAVE_TRIANGLE, NormalSigned)


def _render_wavetable(specs, envelope):
    envelope = copy.deepcopy(envelope)
    count = specs.wavetable.sample_count
    return [float(envelope.peek(i / count)) for i in range(count)]


class Channel:
    """One sound channel whose behaviour is shaped by a ``SpecsChip``.

    Without specs the default ``SpecsChip`` is used. A new channel is set
    to C4 at full volume and is not playing.
    """

    def __init__(self, specs=None):
        specs = specs if specs is not None else SpecsChip()
        self._specs = specs
        # Wavetable
        self._wavetable = _render_wavetable(specs, _default_waveform(specs))
        self._wave_out = 0.0
        # Timing
        self._phase = 0.0
        self._time = 0.0
        self._time_env = 0.0
        self._time_tone = 0.0
        self._time_noise = 0.0
        # Volume
        self._volume_attn = 0.0
        # Pitch
        self._midi_note = 60.0
        self._period = 1.0 / FREQ_C4
        # Noise
        self._rng = _make_rng(specs)
        self._noise_on = False
        self._noise_period = 0.0
        self._noise_output = 0.0
        # State
        self._sound = Sound(waveform=_default_waveform(specs))
        self._pan = NormalSigned(0.0)
        self._playing = False
        self._left_mult = 0.5
        self._right_mult = 0.5
        self._last_sample_index = 0
        self._last_sample_value = 0.0
        self._last_cycle_index = 0
        # Envelope processing
        self._env_period = 0.0
        self._last_env = _EnvelopeValues()
        self._last_env_time = 0.0

        self.set_note(4, Note.C)
        self.set_volume(1.0)
        self.reset()

    def __repr__(self):
        return (
            f"Channel(pitch={self.pitch:.2f}, volume={self.volume}, "
            f"playing={self._playing}, noise={self._noise_on})"
        )

    # Playback control

    def play(self):
        """Allow sound generation on this channel."""
        self._playing = True
        self.set_pitch(self._sound.pitch)
        self.calculate_multipliers()

    def play_and_release(self):
        """Play and immediately release, so looping envelopes do not loop."""
        self.set_pitch(self._sound.pitch)
        self.play()
        self.release()

    def play_sound(self, sound, release):
        """Reset the channel, set ``sound``, play it and optionally release it."""
        self.reset()
        self.set_sound(sound)
        self.play()
        if release:
            self.release()

    def stop(self):
        """Stop sound generation on this channel."""
        self._playing = False
        self.reset()

    def release(self):
        """Release the volume and pitch envelopes so they can leave their loops."""
        if self._sound.volume_env is not None:
            self._sound.volume_env.release()
        if self._sound.pitch_env is not None:
            self._sound.pitch_env.release()

    # State

    @property
    def time(self):
        """The current internal time in seconds."""
        return self._time

    @property
    def is_playing(self):
        """True while the channel generates sound."""
        return self._playing

    @property
    def specs(self):
        """The chip specs used by this channel."""
        return self._specs

    @property
    def sound(self):
        """The current sound settings."""
        return self._sound

    @property
    def is_noise(self):
        """True if the channel produces noise, False if it produces a tone."""
        return self._noise_on

    @property
    def octave(self):
        """Current octave, ignoring the pitch envelope."""
        return math.floor(self._midi_note / 12.0) - 1

    @property
    def note(self):
        """Current note within the octave (C is 0), ignoring the pitch envelope."""
        return int(math.fmod(math.floor(self._midi_note), 12))

    @property
    def pitch(self):
        """Current frequency in Hz, ignoring the pitch envelope."""
        return 1.0 / self._period

    @property
    def volume(self):
        """Main volume, ignoring the volume envelope."""
        return self._sound.volume

    @property
    def pan(self):
        """Stereo panning from -1.0 (left) to 1.0 (right); 0.0 is centred."""
        return float(self._pan)

    @property
    def wavetable(self):
        """The wavetable samples, which may be changed in place within -1.0 to 1.0."""
        return self._wavetable

    # Resetting

    def reset(self):
        """Reset every internal timer: tone, noise and envelopes."""
        self._time = 0.0
        self._time_tone = 0.0
        self._time_noise = 0.0
        self._last_cycle_index = 0
        self.calculate_multipliers()
        self.reset_envelopes()

    def reset_envelopes(self):
        """Reset only the envelope timer and envelope states."""
        self._time_env = 0.0
        self._last_env_time = 0.0
        for env in (self._sound.volume_env, self._sound.pitch_env, self._sound.noise_env):
            if env is not None:
                env.reset()
        self._process_envelopes()

    # Configuration

    def set_specs(self, specs):
        """Reconfigure the channel for new chip specs."""
        self._rng = _make_rng(specs)
        self._wavetable = _render_wavetable(specs, _default_waveform(specs))
        self._specs = specs

    def set_sound(self, sound):
        """Take a copy of ``sound``; its waveform, if any, replaces the wavetable."""
        self._sound = copy.deepcopy(sound)
        if sound.waveform is not None:
            self._wavetable = _render_wavetable(self._specs, sound.waveform)
        self.reset()

    def set_wavetable(self, wave):
        """Render the wavetable from an envelope of signed values."""
        self._sound.waveform = copy.deepcopy(wave)
        self._wavetable = _render_wavetable(self._specs, wave)

    def set_wavetable_raw(self, table):
        """Set the wavetable directly; every value must lie within -1.0 to 1.0."""
        values = [float(item) for item in table]
        if not all(-1.0 <= item <= 1.0 for item in values):
            raise InvalidWavetableError()
        self._wavetable = values

    def set_volume(self, volume):
        """Set the main volume, clamped to 0.0 to 16.0."""
        self._sound.volume = _clamp(float(volume), 0.0, 16.0)
        self.calculate_multipliers()

    def set_pan(self, pan):
        """Set the stereo pan from -1.0 to 1.0; quantized according to the specs."""
        self._pan = NormalSigned(pan)
        self.calculate_multipliers()

    def set_noise(self, state):
        """Switch between tone and noise, if the specs allow noise."""
        if self._specs.noise is not None:
            self._noise_on = bool(state)

    def set_note(self, octave, note):
        """Set the pitch from an octave and a note (C is 0, C sharp is 1 and so on)."""
        self.set_midi_note(float(get_midi_note(octave, note)))

    def set_midi_note(self, note):
        """Set the pitch from a possibly fractional MIDI note (C4 is 60)."""
        self.set_pitch(note_to_frequency(float(note)))

    def set_pitch(self, frequency):
        """Set the channel's frequency in Hz."""
        frequency = float(frequency)
        if not frequency > 0.0:
            raise ValueError(f"frequency must be positive, got {frequency}")
        self._sound.pitch = frequency
        self._period = 1.0 / frequency
        midi_note = frequency_to_note(frequency)
        nearest = round(midi_note)
        self._midi_note = float(nearest) if abs(midi_note - nearest) < 1e-9 else midi_note

        if not self._specs.wavetable.use_loop or not self._playing:
            # Start the next cycle from the beginning to avoid clicks.
            self._time = 0.0
            self._time_tone = 0.0
        else:
            # Keep the phase so the pitch change is continuous.
            self._time = self._phase * self._period
            self._time_tone = self._phase * self._period

        match self._specs.noise:
            case NoiseRandom(pitch=pitch) | NoiseMelodic(pitch=pitch):
                if pitch.steps is not None:
                    freq_range = pitch.range if pitch.range is not None else _HEARING_RANGE
                    noise_freq = quantize_range(1.0 / self._period, pitch.steps, freq_range)
                    self._noise_period = _reciprocal(noise_freq) / pitch.multiplier
                else:
                    self._noise_period = self._period / pitch.multiplier
            case _:
                pass
        self._last_env = self._process_envelopes()

    # Rendering

    def _process_envelopes(self):
        sound = self._sound
        specs = self._specs

        volume_env = sound.volume_env.peek(self._time_env) if sound.volume_env else 1.0
        if sound.tremolo is not None:
            tremolo = sound.tremolo
            sine = math.sin(self._time * TAU * tremolo.frequency)
            if tremolo.steps is not None:
                sine = quantize_range(sine, tremolo.steps, (-1.0, 1.0))
            normalized = ((sine / 2.0) + 0.5) * tremolo.amplitude
            volume_env = _clamp(volume_env - normalized, 0.0, 1.0)

        level = sound.volume * volume_env
        if specs.volume.steps is not None:
            level = quantize_range(level, specs.volume.steps, (0.0, 1.0))
        volume = math.pow(level, specs.volume.exponent)

        pitch_change = sound.pitch_env.peek(self._time_env) if sound.pitch_env else 0.0
        if sound.vibratto is not None:
            vibratto = sound.vibratto
            sine = math.sin(self._time * TAU * vibratto.frequency)
            if vibratto.steps is not None:
                sine = quantize_range(sine, vibratto.steps, (-1.0, 1.0))
            pitch_change += sine * vibratto.amplitude

        bend = math.pow(2.0, -pitch_change)
        base_period = (self._period / specs.pitch.multiplier) * bend
        tone_period = base_period
        if specs.pitch.steps is not None and specs.pitch.range is not None:
            freq = 1.0 / base_period
            tone_period = _reciprocal(
                quantize_range(freq, specs.pitch.steps, specs.pitch.range)
            )

        noise_period = self._noise_period * bend
        if sound.noise_env is not None:
            noise = sound.noise_env.peek(self._time_env)
        else:
            noise = 1.0 if self._noise_on else 0.0

        # Preserve the phase under the new period.
        self._time_tone = self._phase * tone_period
        self._last_env_time = self._time

        return _EnvelopeValues(volume, noise, tone_period, noise_period)

    def sample(self, delta_time):
        """Return the current stereo sample and advance the timers by ``delta_time``."""
        # Attenuation always applies, so the output drifts towards zero.
        self._wave_out *= self._volume_attn

        if not self._playing:
            return Sample(self._wave_out * self._left_mult, self._wave_out * self._right_mult)

        specs = self._specs
        if specs.envelope_rate is not None:
            process_now = (
                self._time - self._last_env_time >= self._env_period or self._time == 0.0
            )
        else:
            process_now = True

        if self._last_env.noise > 0.0:
            match specs.noise:
                case NoiseRandom(volume_steps=steps) | NoiseMelodic(volume_steps=steps):
                    if process_now:
                        self._last_env = self._process_envelopes()
                    if self._time_noise >= self._last_env.noise_period:
                        self._time_noise = 0.0
                        level = quantize_range(self._rng.next_float(), steps, (0.0, 1.0))
                        self._noise_output = level * 2.0 - 1.0
                case _:
                    self._noise_output = 0.0

        length = len(self._wavetable)
        index = max(0, int(self._phase * length))
        if not specs.wavetable.use_loop:
            index = min(index, length - 1)

        if index != self._last_sample_index:
            self._last_sample_index = index
            wave = self._wavetable[index]
            if specs.wavetable.steps is not None:
                wave = quantize_range(wave, specs.wavetable.steps, (-1.0, 1.0))
            if wave != self._last_sample_value:
                # Envelopes are only sampled at the start of a wave cycle.
                cycle_index = max(0, int(self._time_tone / self._last_env.tone_period))
                if cycle_index != self._last_cycle_index:
                    self._last_cycle_index = cycle_index
                    if process_now:
                        self._last_env = self._process_envelopes()
                self._wave_out = wave
                self._last_sample_value = wave

        self._time += delta_time
        self._time_noise += delta_time
        self._time_env += delta_time
        self._time_tone += delta_time
        tone_period = self._last_env.tone_period
        if specs.wavetable.use_loop:
            self._phase = math.fmod(self._time_tone, tone_period) / tone_period
        else:
            self._phase = self._time_tone / tone_period

        # Noise replaces the tone while it is on.
        if self._last_env.noise > 0.0:
            self._wave_out = self._noise_output

        if specs.volume.clip_negative_values:
            output = _clamp(self._wave_out, 0.0, 1.0) * self._last_env.volume
        else:
            output = self._wave_out * self._last_env.volume

        return Sample(output * self._left_mult, output * self._right_mult)

    def calculate_multipliers(self):
        """Recompute attenuation, pan multipliers and envelope period from the specs."""
        specs = self._specs
        self._volume_attn = 1.0 - _clamp(specs.volume.attenuation, 0.0, 1.0)
        pan = float(self._pan)
        if specs.pan.steps is not None:
            pan = quantize_range(pan, specs.pan.steps, (-1.0, 1.0))
        self._left_mult = ((pan - 1.0) / -2.0) * specs.volume.gain
        self._right_mult = ((pan + 1.0) / 2.0) * specs.volume.gain
        if specs.envelope_rate is not None:
            self._env_period = 1.0 / specs.envelope_rate