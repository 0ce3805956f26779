"""A set of sound channels rendered and mixed into 16-bit stereo samples."""

import math

from .channel import Channel
from .errors import InvalidChannelError
from .note import Note
from .presets.chip_specs import (
    SPEC_CHIP_NES_DMC,
    SPEC_CHIP_NES_NOISE,
    SPEC_CHIP_NES_SQUARE,
    SPEC_CHIP_NES_TRIANGLE,
    SPEC_CHIP_PSG,
    SPEC_CHIP_PSG_NOISE,
    SPEC_CHIP_SCC,
)
from .soundmath import compress_volume
from .values import Sample

MAX_I16 = float(32767 - 1)
MIX_COMPRESSION = 1.6


def _to_i16(level):
    value = min(max(compress_volume(level, MIX_COMPRESSION), -1.0), 1.0) * MAX_I16
    if math.isnan(value):
        return 0
    return int(value)


class SoundChip:
    """Holds several channels and mixes them into 16-bit stereo samples.

    ``sample_rate`` should match the playback device, usually 44100 or 48000.
    ``channels`` is a plain list that may be changed directly.
    """

    def __init__(self, sample_rate=44100):
        self.sample_rate = sample_rate
        self.channels = []
        self._sample_head = 0
        self._last_sample_time = 0.0

    def __repr__(self):
        return f"SoundChip(sample_rate={self.sample_rate}, channels={len(self.channels)})"

    @classmethod
    def _with_specs(cls, sample_rate, specs_list):
        chip = cls(sample_rate)
        chip.channels = [Channel(specs) for specs in specs_list]
        return chip

    @classmethod
    def new_msx(cls, sample_rate):
        """A chip like the AY-3-8910: three square wave channels, the first with noise."""
        return cls._with_specs(
            sample_rate, [SPEC_CHIP_PSG_NOISE, SPEC_CHIP_PSG, SPEC_CHIP_PSG]
        )

    @classmethod
    def new_msx_scc(cls, sample_rate):
        """An AY-3-8910 plus an SCC: three square wave and five wavetable channels."""
        return cls._with_specs(
            sample_rate,
            [SPEC_CHIP_PSG_NOISE, SPEC_CHIP_PSG, SPEC_CHIP_PSG] + [SPEC_CHIP_SCC] * 5,
        )

    @classmethod
    def new_nes(cls, sample_rate):
        """A chip mimicking the NES APU."""
        return cls._with_specs(
            sample_rate,
            [
                SPEC_CHIP_NES_SQUARE,
                SPEC_CHIP_NES_SQUARE,
                SPEC_CHIP_NES_TRIANGLE,
                SPEC_CHIP_NES_NOISE,
            ]
            + [SPEC_CHIP_NES_DMC] * 4,
        )

    def add_channel(self, specs):
        """Add a channel built from ``specs`` and return its index."""
        self.channels.append(Channel(specs))
        return len(self.channels) - 1

    def remove_channel(self, index):
        """Remove the channel at ``index``; raise ``InvalidChannelError`` if there is none."""
        if not 0 <= index < len(self.channels):
            raise InvalidChannelError()
        del self.channels[index]

    def channel_init_all(self, play):
        """Initialise every channel to C4 and optionally start playing them."""
        for channel in self.channels:
            channel.reset()
            channel.set_note(4, Note.C)
            if play:
                channel.play()
            else:
                channel.calculate_multipliers()

    def channel_stop_all(self):
        """Stop every channel."""
        for channel in self.channels:
            channel.stop()

    def render(self, sample_count):
        """Yield ``sample_count`` mixed samples, advancing the chip as they are taken."""
        for _ in range(sample_count):
            yield self.process_sample()

    def process_sample(self):
        """Mix one sample from every channel and advance the internal timer."""
        now = self._sample_head / self.sample_rate
        delta_time = now - self._last_sample_time
        self._last_sample_time = now

        left = 0.0
        right = 0.0
        for channel in self.channels:
            sample = channel.sample(delta_time)
            left += sample.left
            right += sample.right

        self._sample_head += 1
        return Sample(_to_i16(left), _to_i16(right))

    @property
    def time(self):
        """Elapsed time in seconds, from the number of samples rendered."""
        return self._sample_head / self.sample_rate

    def reset(self):
        """Stop every channel and reset all timers."""
        self._sample_head = 0
        self._last_sample_time = 0.0
        for channel in self.channels:
            channel.stop()
            channel.set_note(4, Note.C)
            channel.calculate_multipliers()