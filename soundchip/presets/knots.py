"""Knot sequences for common volume, pitch and waveform envelopes."""

from ..knot import Interpolation, Knot
from ..values import Normal, NormalSigned

_L = Interpolation.LINEAR
_S = Interpolation.STEP

KNOTS_FLAT_ZERO = (
    Knot(0.0, Normal.ZERO, _L),
    Knot(1.0, Normal.ZERO, _L),
)

KNOTS_FLAT_ONE = (
    Knot(0.0, Normal.ONE, _S),
    Knot(1.0, Normal.ONE, _S),
)

KNOTS_SIGNED_ZERO = (
    Knot(0.0, NormalSigned.ZERO, _L),
    Knot(1.0, NormalSigned.ZERO, _L),
)

KNOTS_SIGNED_ONE = (
    Knot(0.0, NormalSigned.ONE, _S),
    Knot(1.0, NormalSigned.ONE, _S),
)

# Volume
KNOTS_VOL_TEST = (
    Knot(0.0, Normal.ONE, _L),
    Knot(0.25, Normal.HALF, _L),
    Knot(0.5, Normal.THREE_QUARTER, _L),
    Knot(0.75, Normal.HALF, _L),
    Knot(2.0, Normal.ZERO, _L),
)

KNOTS_VOL_DOWN = (
    Knot(0.0, Normal.ONE, _L),
    Knot(0.5, Normal.HALF, _L),
    Knot(1.0, Normal.ZERO, _L),
)

KNOTS_VOL_UP = (
    Knot(0.0, Normal.ZERO, _L),
    Knot(0.5, Normal.HALF, _L),
    Knot(1.0, Normal.ONE, _L),
)

KNOTS_VOL_UP_DOWN = (
    Knot(0.0, Normal.ZERO, _L),
    Knot(0.5, Normal.ONE, _L),
    Knot(1.0, Normal.ZERO, _L),
)

KNOTS_VOL_SQUARE = (
    Knot(0.0, Normal.ONE, _S),
    Knot(1.0, Normal.ZERO, _S),
)

KNOTS_VOL_PIANO = (
    Knot(0.0, Normal.ONE, _L),
    Knot(0.075, Normal.HALF, _L),
    Knot(0.1, Normal.HALF, _L),
    Knot(1.0, Normal.ZERO, _L),
)

# Pitch
KNOTS_PITCH_DOWN = (
    Knot(0.0, 0.0, _L),
    Knot(0.5, -0.5, _L),
    Knot(1.0, -1.0, _L),
)

KNOTS_PITCH_UP = (
    Knot(0.0, 0.0, _L),
    Knot(0.5, 0.5, _L),
    Knot(1.0, 1.0, _L),
)

# Wavetables
KNOTS_WAVE_SQUARE = (
    Knot(0.0, NormalSigned.ONE, _S),
    Knot(0.5, NormalSigned.NEG_ONE, _S),
    Knot(1.0, NormalSigned.NEG_ONE, _S),
)

KNOTS_WAVE_SQUARESAW = (
    Knot(0.0, NormalSigned.ONE, _S),
    Knot(0.5, NormalSigned.NEG_ONE, _L),
    Knot(1.0, NormalSigned.ONE, _L),
)

KNOTS_WAVE_TRAPEZOID = (
    Knot(0.0, NormalSigned.ZERO, _L),
    Knot(0.1, NormalSigned.ONE, _L),
    Knot(0.4, NormalSigned.ONE, _L),
    Knot(0.6, NormalSigned.NEG_ONE, _L),
    Knot(0.9, NormalSigned.NEG_ONE, _L),
    Knot(1.0, NormalSigned.ZERO, _L),
)

KNOTS_WAVE_TRIANGLE = (
    Knot(0.0, NormalSigned.ZERO, _L),
    Knot(0.25, NormalSigned.ONE, _L),
    Knot(0.75, NormalSigned.NEG_ONE, _L),
    Knot(1.0, NormalSigned.ZERO, _L),
)

KNOTS_WAVE_SAWTOOTH = (
    Knot(0.0, NormalSigned.ONE, _L),
    Knot(1.0, NormalSigned.NEG_ONE, _L),
)