from soundchip.envelope import Envelope, EnvelopePreset
from soundchip.knot import LoopRepeat
from soundchip.presets.chip_specs import TREMOLO_SUBTLE, VIBRATTO_SUBTLE
from soundchip.presets.knots import (
    KNOTS_PITCH_DOWN,
    KNOTS_PITCH_UP,
    KNOTS_VOL_DOWN,
    KNOTS_WAVE_SQUARE,
)
from soundchip.sound import Sound, SoundPreset
from soundchip.values import Normal, NormalSigned


def test_default_sound_values():
    sound = Sound()
    assert sound.volume == 1.0
    assert sound.pitch == 60.0
    assert sound.waveform is None
    assert sound.pitch_env is None


def test_default_volume_envelope_is_vol_down():
    sound = Sound()
    assert sound.volume_env == Envelope(KNOTS_VOL_DOWN)
    assert sound.volume_env.value_type is Normal
    assert sound.volume_env.peek(0.0) == 1.0


def test_default_envelopes_are_not_shared():
    first = Sound()
    second = Sound()
    assert first.volume_env is not second.volume_env
    first.volume_env.release()
    assert first == Sound() or first.volume_env != second.volume_env
    assert second == Sound()


def test_preset_with_no_envelopes():
    sound = SoundPreset(volume=0.5, pitch=440.0, tremolo=TREMOLO_SUBTLE).to_sound()
    assert sound.volume == 0.5
    assert sound.pitch == 440.0
    assert sound.tremolo == TREMOLO_SUBTLE
    assert sound.vibratto is None
    assert sound.volume_env is None
    assert sound.noise_env is None


def test_preset_envelope_types():
    preset = SoundPreset(
        volume_env=EnvelopePreset(KNOTS_VOL_DOWN),
        waveform=EnvelopePreset(KNOTS_WAVE_SQUARE),
        pitch_env=EnvelopePreset(KNOTS_PITCH_UP),
        noise_env=EnvelopePreset(KNOTS_VOL_DOWN),
        vibratto=VIBRATTO_SUBTLE,
    )
    sound = preset.to_sound()
    assert sound.volume_env.value_type is Normal
    assert sound.noise_env.value_type is Normal
    assert sound.waveform.value_type is NormalSigned
    assert sound.pitch_env.value_type is float
    assert sound.vibratto == VIBRATTO_SUBTLE


def test_preset_volume_envelope_matches_direct_envelope():
    sound = SoundPreset(volume_env=EnvelopePreset(KNOTS_VOL_DOWN)).to_sound()
    assert sound.volume_env == Envelope(KNOTS_VOL_DOWN)
    assert sound == Sound(volume_env=Envelope(KNOTS_VOL_DOWN))


def test_preset_time_scale_and_loop_are_applied():
    preset = EnvelopePreset(KNOTS_PITCH_UP, time_scale=2.0, loop_kind=LoopRepeat())
    sound = SoundPreset(pitch_env=preset).to_sound()
    assert sound.pitch_env.knots[-1].time == 2.0
    assert sound.pitch_env.loop_kind == LoopRepeat()
    assert sound.pitch_env.peek(2.0) == 1.0


def test_float_knots_are_clipped_when_used_as_volume():
    sound = SoundPreset(volume_env=EnvelopePreset(KNOTS_PITCH_DOWN)).to_sound()
    values = [float(knot.value) for knot in sound.volume_env.knots]
    assert all(0.0 <= value <= 1.0 for value in values)
    assert values[-1] == 0.0


def test_to_sound_builds_fresh_envelopes_each_time():
    preset = SoundPreset(volume_env=EnvelopePreset(KNOTS_VOL_DOWN))
    first = preset.to_sound()
    second = preset.to_sound()
    assert first == second
    assert first.volume_env is not second.volume_env