"""A simple Galois LFSR with a configurable bit count."""

_DEFAULT_VALUE = 0b01100010101011110110101010101011

# Maximal-length tap configurations by bit count.
_TAPS = {
    3: 0b110,
    4: 0b1100,
    5: 0b10100,
    6: 0b110000,
    7: 0b1100000,
    8: 0b10111000,
    9: 0b100010000,
    10: 0b1001000000,
    11: 0b10100000000,
    12: 0b111000001000,
    13: 0b1110010000000,
    14: 0b11100000000010,
    15: 0b110000000000000,
    16: 0b1101000000001000,
    17: 0b10010000000000000,
    18: 0b100000010000000000,
    19: 0b1110010000000000000,
    20: 0b10010000000000000000,
    21: 0b101000000000000000000,
    22: 0b1100000000000000000000,
    23: 0b10000100000000000000000,
    24: 0b111000010000000000000000,
    25: 0b1000100000000000000000000,
    26: 0b10010000000000000000000000,
    27: 0b101000000000000000000000000,
    28: 0b1011100000000000000000000000,
    29: 0b11000000000000000000000000000,
    30: 0b110010000000000000000000000000,
    31: 0b1101000000000000000000000000000,
    32: 0b11100000000000000000000000000000,
}


class Rng:
    """Linear feedback shift register producing pseudo random numbers."""

    def __init__(self, bit_count, initial_state):
        bit_count = min(max(bit_count, 3), 32)
        self._mask = (1 << bit_count) - 1
        state = initial_state & self._mask
        self._state = state if state else _DEFAULT_VALUE & self._mask
        self._tap = _TAPS[bit_count]
        self._max = float(2**bit_count)

    def __repr__(self):
        return f"Rng(state={self._state:#x}, mask={self._mask:#x})"

    def next_int(self):
        """Advance the register and return the new state."""
        lsb = self._state & 1
        self._state >>= 1
        if lsb:
            self._state ^= self._tap
        return self._state & self._mask

    def next_float(self):
        """Advance the register and return the state scaled to ``0.0 .. 1.0``."""
        return self.next_int() / self._max