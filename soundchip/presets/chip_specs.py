"""Spec presets that mimic classic sound hardware."""

from ..specs import (
    NoiseMelodic,
    NoiseRandom,
    SpecsChip,
    SpecsPan,
    SpecsPitch,
    SpecsVolume,
    SpecsWavetable,
    Tremolo,
    Vibratto,
)
from .knots import KNOTS_SIGNED_ZERO, KNOTS_WAVE_SQUARE, KNOTS_WAVE_TRIANGLE

# Frequencies used by the noise presets.
FREQ_C0 = 16.35
FREQ_C1 = 32.7
FREQ_C2 = 35.4
FREQ_C3 = 130.81
FREQ_C8 = 4186.0
FREQ_C9 = 8372.0
FREQ_C10 = 16744.04
FREQ_GS5 = 830.61

# Noise
SPEC_NOISE_MSX = NoiseRandom(
    volume_steps=2,
    pitch=SpecsPitch(multiplier=55.0, steps=32, range=(FREQ_C3, FREQ_GS5)),
)

SPEC_NOISE_PCE = NoiseRandom(
    volume_steps=2,
    pitch=SpecsPitch(multiplier=55.0, steps=4096, range=(FREQ_C0, FREQ_C10)),
)

SPEC_NOISE_POKEY = NoiseMelodic(
    lfsr_length=5,
    volume_steps=2,
    pitch=SpecsPitch(multiplier=5.0, steps=128, range=(FREQ_C1, FREQ_C9)),
)

SPEC_NOISE_NES = NoiseRandom(
    volume_steps=2,
    pitch=SpecsPitch(multiplier=15.46, steps=32, range=(FREQ_C2, FREQ_C8)),
)

SPEC_NOISE_NES_MELODIC = NoiseMelodic(
    lfsr_length=5,
    volume_steps=2,
    pitch=SpecsPitch(multiplier=5.0, steps=32, range=(FREQ_C2, FREQ_C8)),
)

# Pan
SPEC_PAN_CLEAN = SpecsPan(steps=None)
SPEC_PAN_STEREO = SpecsPan(steps=16)
SPEC_PAN_MONO = SpecsPan(steps=0)

# Pitch
SPEC_PITCH_CLEAN = SpecsPitch(multiplier=1.0, range=None, steps=None)
SPEC_PITCH_PSG = SpecsPitch(multiplier=1.0, range=(16.35, 16744.04), steps=4096)
SPEC_PITCH_SCC = SPEC_PITCH_PSG

# Tremolo
TREMOLO_SUBTLE = Tremolo(steps=None, amplitude=0.1, frequency=7.5)
TREMOLO_INTENSE = Tremolo(steps=None, amplitude=0.2, frequency=15.0)
TREMOLO_ROUGH = Tremolo(steps=None, amplitude=0.5, frequency=15.0)

# Vibratto
VIBRATTO_SUBTLE = Vibratto(steps=16, amplitude=1.0 / 48.0, frequency=6.0)
VIBRATTO_INTENSE = Vibratto(steps=16, amplitude=1.0 / 12.0, frequency=10.0)

# Volume
SPEC_VOLUME_CLEAN = SpecsVolume(
    steps=None, attenuation=0.0, exponent=2.5, gain=1.0, clip_negative_values=False
)
SPEC_VOLUME_PSG = SpecsVolume(
    steps=16, attenuation=0.001, exponent=3.0, gain=1.0, clip_negative_values=True
)
SPEC_VOLUME_SCC = SpecsVolume(
    steps=16, attenuation=0.0015, exponent=3.0, gain=1.0, clip_negative_values=True
)
SPEC_VOLUME_PCE = SpecsVolume(
    steps=16, attenuation=0.001, exponent=3.0, gain=1.0, clip_negative_values=False
)
SPEC_VOLUME_NES = SpecsVolume(
    steps=16, attenuation=0.0017, exponent=3.0, gain=1.0, clip_negative_values=False
)
SPEC_VOLUME_NES_TRIANGLE = SpecsVolume(
    steps=1, attenuation=0.0017, exponent=3.0, gain=1.0, clip_negative_values=False
)

# Wavetables
SPEC_WAVE_FLAT = SpecsWavetable(
    default_waveform=KNOTS_SIGNED_ZERO, sample_count=8, use_loop=True, steps=0
)
SPEC_WAVE_CLEAN = SpecsWavetable(
    default_waveform=KNOTS_WAVE_TRIANGLE, sample_count=256, use_loop=True, steps=256
)
SPEC_WAVE_PSG = SpecsWavetable(
    default_waveform=KNOTS_WAVE_SQUARE, sample_count=8, use_loop=True, steps=2
)
SPEC_WAVE_SCC = SpecsWavetable(
    default_waveform=KNOTS_WAVE_TRIANGLE, sample_count=32, use_loop=True, steps=256
)
SPEC_WAVE_PCE = SpecsWavetable(
    default_waveform=KNOTS_WAVE_TRIANGLE, sample_count=32, use_loop=True, steps=32
)
SPEC_WAVE_NES_SQUARE = SpecsWavetable(
    default_waveform=KNOTS_WAVE_SQUARE, sample_count=8, use_loop=True, steps=2
)
SPEC_WAVE_NES_TRIANGLE = SpecsWavetable(
    default_waveform=KNOTS_WAVE_TRIANGLE, sample_count=32, use_loop=True, steps=16
)
# Non-looping sample playback.
SPEC_WAVE_NES_DMC = SpecsWavetable(
    default_waveform=KNOTS_WAVE_TRIANGLE, sample_count=256, use_loop=False, steps=16
)

# Chips
SPEC_CHIP_CLEAN = SpecsChip(
    envelope_rate=None,
    wavetable=SPEC_WAVE_CLEAN,
    pan=SPEC_PAN_CLEAN,
    pitch=SPEC_PITCH_CLEAN,
    volume=SPEC_VOLUME_CLEAN,
    noise=SPEC_NOISE_POKEY,
)

SPEC_CHIP_PSG = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_PSG,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_PSG,
    noise=None,
)

SPEC_CHIP_PSG_NOISE = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_PSG,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_PSG,
    noise=SPEC_NOISE_MSX,
)

SPEC_CHIP_SCC = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_SCC,
    pan=SPEC_PAN_STEREO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_PSG,
    noise=None,
)

SPEC_CHIP_PCE = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_PCE,
    pan=SPEC_PAN_STEREO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_PCE,
    noise=SPEC_NOISE_PCE,
)

SPEC_CHIP_NES_SQUARE = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_NES_SQUARE,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_NES,
    noise=None,
)

SPEC_CHIP_NES_TRIANGLE = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_NES_TRIANGLE,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_NES_TRIANGLE,
    noise=None,
)

SPEC_CHIP_NES_NOISE = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_FLAT,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_NES,
    noise=SPEC_NOISE_NES,
)

SPEC_CHIP_NES_NOISE_MELODIC = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_FLAT,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_NES,
    noise=SPEC_NOISE_NES_MELODIC,
)

SPEC_CHIP_NES_DMC = SpecsChip(
    envelope_rate=60.0,
    wavetable=SPEC_WAVE_NES_DMC,
    pan=SPEC_PAN_MONO,
    pitch=SPEC_PITCH_PSG,
    volume=SPEC_VOLUME_PSG,
    noise=SPEC_NOISE_NES,
)