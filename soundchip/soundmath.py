"""Small numeric helpers used throughout the sound chip."""

import math

FRAC_2_PI = 2.0 / math.pi


def wrap(value, modulus):
    """Wrap ``value`` into ``0 .. modulus``, handling negative numbers."""
    return ((value % modulus) + modulus) % modulus


def get_midi_note(octave, note):
    """Return the MIDI note number for an octave (0 to 10) and a note (0 to 11).

    Out of range values wrap around. C4 is 60.
    """
    octave = wrap(int(octave), 10)
    note = wrap(int(note), 12)
    return ((octave + 1) * 12) + note


def note_to_frequency(note):
    """Frequency in Hz of any (possibly fractional) MIDI note value."""
    return math.pow(2.0, (float(note) - 69.0) / 12.0) * 440.0


def frequency_to_note(frequency):
    """MIDI note value corresponding to a frequency in Hz."""
    return 69.0 + 12.0 * math.log2(frequency / 440.0)


def lerp(start, end, t):
    """Linear interpolation between two knot values, returned as a float."""
    start = float(start)
    end = float(end)
    return start + t * (end - start)


def compress_volume(input_vol, max_vol):
    """Soft-compress a mixed volume level with a sine curve."""
    return math.sin(input_vol / (max_vol * FRAC_2_PI))


def _round_half_away(x):
    return math.copysign(math.floor(abs(x) + 0.5), x)


def quantize_range(value, steps, value_range):
    """Snap ``value`` to one of ``steps`` evenly spaced levels in ``value_range``.

    Zero steps always gives 0.0 and one step always gives 1.0.
    ``value_range`` is an inclusive ``(minimum, maximum)`` pair.
    """
    if steps == 0:
        return 0.0
    if steps == 1:
        return 1.0
    low, high = value_range
    step_size = (high - low) / (steps - 1)
    quantized = _round_half_away((value - low) / step_size) * step_size + low
    return min(max(quantized, low), high)