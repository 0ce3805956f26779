# soundchip

Software synthesis in the style of 1980s sound chips. A `SoundChip` holds any
number of `Channel`s and mixes them into 16-bit stereo samples. Each channel
is configured by a `SpecsChip` that sets its character: wavetable size and
bit depth, volume steps and curve, pan steps, pitch quantization, envelope
update rate and noise generator. Ready-made specs cover PSG (AY-3-8910),
SCC, PC Engine and NES-like channels.

The package has no third-party dependencies.

## Installation

```
pip install soundchip
```

To run the test suite, install the test extra (`pip install soundchip[test]`)
and run `pytest`.

## Quick start

```python
from soundchip.sound_chip import SoundChip
from soundchip.sound import Sound
from soundchip.envelope import Envelope
from soundchip.note import Note
from soundchip.values import Normal
from soundchip.presets.knots import KNOTS_VOL_DOWN
from soundchip.presets.chip_specs import SPEC_CHIP_PCE, TREMOLO_SUBTLE

chip = SoundChip(44100)
index = chip.add_channel(SPEC_CHIP_PCE)

sound = Sound(
    volume=1.0,
    pitch=Note.A.frequency(4),
    volume_env=Envelope.from_knots(KNOTS_VOL_DOWN, Normal).scale_time(0.5),
    tremolo=TREMOLO_SUBTLE,
)

channel = chip.channels[index]
channel.play_sound(sound, True)   # reset, set the sound, play, release

# Render one second of audio as 16-bit stereo samples.
for sample in chip.render(44100):
    left, right = sample.left, sample.right
```

`render(count)` is a generator: the chip advances one sample each time a
sample is taken. `process_sample()` renders a single one. `chip.time` is the
elapsed time in seconds from the number of samples rendered.

## Modules

- `soundchip.sound_chip`: `SoundChip` with `add_channel`, `remove_channel`,
  `channel_init_all`, `channel_stop_all`, `render`, `process_sample`,
  `reset`, the `time` property and the constructors `new_msx`,
  `new_msx_scc` and `new_nes`. `channels` is a plain list.
- `soundchip.channel`: `Channel(specs=None)`. Set the pitch with
  `set_note(octave, note)`, `set_midi_note(note)` or `set_pitch(frequency)`
  (a non-positive frequency raises `ValueError`). Shape the output with
  `set_volume` (clamped to 0.0–16.0), `set_pan` (-1.0 to 1.0),
  `set_noise` (only when the specs allow noise), `set_sound`,
  `set_wavetable`, `set_wavetable_raw` and `set_specs`. Control playback
  with `play`, `play_and_release`, `play_sound`, `release`, `stop`,
  `reset` and `reset_envelopes`. State is read through properties:
  `time`, `is_playing`, `specs`, `sound`, `is_noise`, `octave`, `note`,
  `pitch`, `volume`, `pan` and `wavetable`.
- `soundchip.envelope`: `Envelope`, a list of `Knot`s sampled with
  `peek(time)`. Build one with `Envelope(knots, value_type, loop_kind)`,
  `Envelope.from_knots` or `Envelope.from_preset(EnvelopePreset(...))`.
  Knots are sorted by time and their values converted to the value type
  (`float`, `Normal` or `NormalSigned`), which clips them.
  `offset_values`, `scale_values`, `scale_time` and `set_loop` return
  new envelopes; `sort_by_time`, `reset` and `release` act in place.
- `soundchip.knot`: `Knot(time, value, interpolation)`, `Interpolation`
  (`LINEAR`, `STEP`) and the loop modes `LoopNone` (hold the last value),
  `LoopRepeat` (repeat the whole envelope), `LoopPoints(loop_in, loop_out)`
  (loop between two knot indices until released) and
  `LoopEcho(loop_in, loop_out, decay)` (like `LoopPoints`, then repeat the
  envelope with decreasing amplitude after release).
- `soundchip.sound`: `Sound`, a bundle of volume, pitch, waveform,
  volume/pitch/noise envelopes, tremolo and vibratto applied to a channel in
  one go; `SoundPreset` holds the same settings as `EnvelopePreset`s and
  builds a `Sound` with `to_sound()`.
- `soundchip.specs`: `SpecsChip` and its parts `SpecsWavetable`,
  `SpecsVolume`, `SpecsPitch`, `SpecsPan`, `Tremolo`, `Vibratto` and the
  noise kinds `NoiseMelodic`, `NoiseRandom` and `NoiseWaveTable`
  (`noise=None` means no noise).
- `soundchip.presets.chip_specs`: ready-made specs (`SPEC_CHIP_PSG`,
  `SPEC_CHIP_PSG_NOISE`, `SPEC_CHIP_SCC`, `SPEC_CHIP_PCE`,
  `SPEC_CHIP_NES_SQUARE`, `SPEC_CHIP_NES_TRIANGLE`, `SPEC_CHIP_NES_NOISE`,
  `SPEC_CHIP_NES_NOISE_MELODIC`, `SPEC_CHIP_NES_DMC`, `SPEC_CHIP_CLEAN`
  and their parts), plus `TREMOLO_SUBTLE`, `TREMOLO_INTENSE`,
  `TREMOLO_ROUGH`, `VIBRATTO_SUBTLE` and `VIBRATTO_INTENSE`.
- `soundchip.presets.knots`: knot sequences such as `KNOTS_VOL_DOWN`,
  `KNOTS_VOL_PIANO`, `KNOTS_PITCH_UP`, `KNOTS_WAVE_SQUARE` and
  `KNOTS_WAVE_TRIANGLE`.
- `soundchip.values`: `Normal` (0.0 to 1.0) and `NormalSigned`
  (-1.0 to 1.0), stored as 16-bit integers and clipped on creation, and
  `Sample(left, right)`.
- `soundchip.note`: `Note`, an `IntEnum` from `C` (0) to `B` (11), with
  `frequency(octave)`.
- `soundchip.soundmath`: `get_midi_note`, `note_to_frequency`,
  `frequency_to_note`, `lerp`, `wrap`, `compress_volume` and
  `quantize_range`.
- `soundchip.rng`: `Rng(bit_count, initial_state)`, a 3- to 32-bit LFSR with
  `next_int()` and `next_float()`, used by the noise generator.
- `soundchip.errors`: `ChipError` and its subclasses
  `InvalidWavetableError` (raised by `set_wavetable_raw`),
  `InvalidChannelError` (raised by `remove_channel`),
  `InvalidEnvelopeError` (raised when peeking an envelope with no knots),
  `InvalidNormalError` and `InvalidNormalSignedError`.

## Ready-made chips

```python
msx = SoundChip.new_msx(48000)      # 3 PSG square channels, the first with noise
scc = SoundChip.new_msx_scc(48000)  # PSG plus 5 SCC wavetable channels
nes = SoundChip.new_nes(48000)      # 2 square, triangle, noise and 4 DMC channels
msx.channel_init_all(True)          # every channel at C4, playing
```

## What it does not do

The package only computes samples. It does not open an audio device, play
sound, read input or write audio files, and it has no command-line program.
To save output, hand the samples to something else, for instance the
standard library's `wave` module:

```python
import struct
import wave

with wave.open("out.wav", "wb") as wav:
    wav.setnchannels(2)
    wav.setsampwidth(2)
    wav.setframerate(chip.sample_rate)
    wav.writeframes(
        b"".join(struct.pack("<hh", s.left, s.right) for s in chip.render(44100))
    )
```

`NoiseWaveTable` noise is accepted in specs but produces no noise output.