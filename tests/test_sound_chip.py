import pytest

from soundchip.errors import ChipError, InvalidChannelError
from soundchip.presets.chip_specs import (
    SPEC_CHIP_NES_DMC,
    SPEC_CHIP_NES_NOISE,
    SPEC_CHIP_NES_SQUARE,
    SPEC_CHIP_NES_TRIANGLE,
    SPEC_CHIP_PCE,
    SPEC_CHIP_PSG,
    SPEC_CHIP_PSG_NOISE,
    SPEC_CHIP_SCC,
)
from soundchip.sound_chip import SoundChip
from soundchip.values import Sample


def _playing_chip():
    chip = SoundChip(44100)
    chip.add_channel(SPEC_CHIP_PCE)
    chip.channel_init_all(True)
    return chip


def test_new_chip_has_no_channels():
    chip = SoundChip(48000)
    assert chip.sample_rate == 48000
    assert chip.channels == []


def test_default_sample_rate():
    assert SoundChip().sample_rate == 44100


def test_new_msx_layout():
    chip = SoundChip.new_msx(44100)
    assert [c.specs for c in chip.channels] == [
        SPEC_CHIP_PSG_NOISE,
        SPEC_CHIP_PSG,
        SPEC_CHIP_PSG,
    ]


def test_new_msx_scc_layout():
    chip = SoundChip.new_msx_scc(44100)
    specs = [c.specs for c in chip.channels]
    assert len(specs) == 8
    assert specs[0] == SPEC_CHIP_PSG_NOISE
    assert specs[1:3] == [SPEC_CHIP_PSG] * 2
    assert specs[3:] == [SPEC_CHIP_SCC] * 5


def test_new_nes_layout():
    chip = SoundChip.new_nes(44100)
    specs = [c.specs for c in chip.channels]
    assert len(specs) == 8
    assert specs[:2] == [SPEC_CHIP_NES_SQUARE] * 2
    assert specs[2] == SPEC_CHIP_NES_TRIANGLE
    assert specs[3] == SPEC_CHIP_NES_NOISE
    assert specs[4:] == [SPEC_CHIP_NES_DMC] * 4


def test_add_channel_returns_index():
    chip = SoundChip(44100)
    assert chip.add_channel(SPEC_CHIP_PSG) == 0
    assert chip.add_channel(SPEC_CHIP_SCC) == 1
    assert chip.channels[1].specs == SPEC_CHIP_SCC


def test_remove_channel():
    chip = SoundChip(44100)
    chip.add_channel(SPEC_CHIP_PSG)
    chip.add_channel(SPEC_CHIP_SCC)
    chip.remove_channel(0)
    assert [c.specs for c in chip.channels] == [SPEC_CHIP_SCC]


@pytest.mark.parametrize("index", [1, 5, -1])
def test_remove_invalid_channel_raises(index):
    chip = SoundChip(44100)
    chip.add_channel(SPEC_CHIP_PSG)
    with pytest.raises(InvalidChannelError):
        chip.remove_channel(index)
    assert len(chip.channels) == 1


def test_invalid_channel_is_chip_error():
    with pytest.raises(ChipError, match="Channel Index not found"):
        SoundChip(44100).remove_channel(0)


def test_render_yields_requested_count():
    chip = _playing_chip()
    samples = list(chip.render(100))
    assert len(samples) == 100
    assert all(isinstance(s, Sample) for s in samples)


def test_render_is_lazy():
    chip = _playing_chip()
    gen = chip.render(10)
    assert chip.time == 0.0
    next(gen)
    assert chip.time == pytest.approx(1 / 44100)


def test_silent_chip_outputs_zero():
    chip = SoundChip(44100)
    chip.add_channel(SPEC_CHIP_PSG)
    assert all(s == Sample(0, 0) for s in chip.render(50))


def test_playing_chip_outputs_sound_in_range():
    chip = _playing_chip()
    samples = list(chip.render(2000))
    assert any(s.left != 0 for s in samples)
    for s in samples:
        assert -32766 <= s.left <= 32766
        assert -32766 <= s.right <= 32766
        assert isinstance(s.left, int)


def test_output_is_deterministic():
    first = list(_playing_chip().render(500))
    second = list(_playing_chip().render(500))
    assert first == second


def test_time_advances_with_samples():
    chip = _playing_chip()
    for _ in range(441):
        chip.process_sample()
    assert chip.time == pytest.approx(441 / 44100)


def test_reset_stops_and_rewinds():
    chip = _playing_chip()
    list(chip.render(100))
    chip.reset()
    assert chip.time == 0.0
    assert not any(c.is_playing for c in chip.channels)
    assert chip.channels[0].octave == 4
    assert chip.channels[0].note == 0


def test_channel_init_all_and_stop_all():
    chip = SoundChip.new_msx(44100)
    chip.channel_init_all(True)
    assert all(c.is_playing for c in chip.channels)
    chip.channel_stop_all()
    assert not any(c.is_playing for c in chip.channels)


def test_channel_init_all_without_play():
    chip = SoundChip.new_msx(44100)
    chip.channel_init_all(False)
    assert not any(c.is_playing for c in chip.channels)
    assert all(c.octave == 4 and c.note == 0 for c in chip.channels)