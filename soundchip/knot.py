"""Envelope knots, their interpolation and envelope looping modes."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from .values import Normal


class Interpolation(Enum):
    """How an envelope moves from one knot to the next."""

    LINEAR = "linear"
    STEP = "step"


@dataclass(frozen=True)
class Knot:
    """A point in an envelope with its time, value and interpolation.

    The value is a float, a ``Normal`` or a ``NormalSigned``.
    """

    time: float = 0.0
    value: Any = 0.0
    interpolation: Interpolation = Interpolation.LINEAR

    def _with_value(self, number):
        # Converting through the value's own type clips to its valid range.
        return replace(self, value=type(self.value)(number))

    def offset(self, offset):
        """Return a knot whose value has ``offset`` added to it."""
        return self._with_value(float(self.value) + float(offset))

    def scale_value(self, factor):
        """Return a knot whose value is multiplied by ``factor``."""
        return self._with_value(float(self.value) * float(factor))

    def scale_time(self, factor):
        """Return a knot whose time is multiplied by ``factor``."""
        return replace(self, time=self.time * factor)

    def __lt__(self, other):
        if not isinstance(other, Knot):
            return NotImplemented
        return self.time < other.time


def _check_index(name, value):
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be a knot index from 0 to 255, got {value}")


@dataclass(frozen=True)
class LoopNone:
    """No loop: the last knot's value is held."""


@dataclass(frozen=True)
class LoopRepeat:
    """Repeat the whole envelope from the beginning."""


@dataclass(frozen=True)
class LoopPoints:
    """Loop between two knot indices until the envelope is released."""

    loop_in: int
    loop_out: int

    def __post_init__(self):
        _check_index("loop_in", self.loop_in)
        _check_index("loop_out", self.loop_out)


@dataclass(frozen=True)
class LoopEcho:
    """Like ``LoopPoints``, then repeat the whole envelope as a decaying echo."""

    loop_in: int
    loop_out: int
    decay: Normal = Normal.HALF

    def __post_init__(self):
        _check_index("loop_in", self.loop_in)
        _check_index("loop_out", self.loop_out)
        if not isinstance(self.decay, Normal):
            object.__setattr__(self, "decay", Normal(self.decay))


LoopKind = Union[LoopNone, LoopRepeat, LoopPoints, LoopEcho]