"""Knot based envelopes with optional looping, release and echo."""

import copy
import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .errors import InvalidEnvelopeError
from .knot import Interpolation, Knot, LoopEcho, LoopNone, LoopPoints, LoopRepeat
from .soundmath import lerp
from .values import Normal, NormalSigned

# Twice the single precision machine epsilon.
SAFETY_EPSILON = 2.384185791015625e-07


def get_loop_position(t, loop_in, loop_out):
    """Map time ``t`` into the ``loop_in .. loop_out`` range once it passes ``loop_out``."""
    if t > loop_out:
        diff = t - loop_out
        width = loop_out - loop_in
        if width < SAFETY_EPSILON:
            return loop_out
        return math.fmod(diff, width) + loop_in
    return t


def _get_iteration(local_time, first_time, last_time):
    if last_time > first_time:
        return math.floor((local_time - first_time) / (last_time - first_time))
    if last_time == 0:
        return math.inf
    return math.floor(local_time / last_time)


def _infer_value_type(knots):
    for knot in knots:
        if isinstance(knot.value, (Normal, NormalSigned)):
            return type(knot.value)
        break
    return float


def _convert(knot, value_type):
    return Knot(knot.time, value_type(float(knot.value)), knot.interpolation)


class Envelope:
    """A sequence of knots that can be sampled at any time.

    Knot values are stored as ``value_type`` (``float``, ``Normal`` or
    ``NormalSigned``), which clips them to that type's range.
    """

    def __init__(self, knots=None, value_type=None, loop_kind=None):
        if knots is None:
            value_type = value_type or float
            knots = [Knot(0.0, 1.0), Knot(1.0, 0.0)]
        knots = list(knots)
        if value_type is None:
            value_type = _infer_value_type(knots)
        self.value_type = value_type
        self.knots = sorted((_convert(k, value_type) for k in knots), key=lambda k: k.time)
        self.loop_kind = loop_kind if loop_kind is not None else LoopNone()
        self._release = False
        self._release_time: Optional[float] = None
        self._release_loop_pos = 0.0
        self._head = 0

    @classmethod
    def from_knots(cls, knots, value_type=None):
        """Build an envelope from knots, converting and sorting them by time."""
        return cls(knots, value_type)

    @classmethod
    def from_preset(cls, preset):
        """Build an envelope from an ``EnvelopePreset``."""
        return (
            cls(preset.knots, preset.value_type)
            .offset_values(preset.value_offset)
            .scale_values(preset.value_scale)
            .scale_time(preset.time_scale)
            .set_loop(preset.loop_kind)
        )

    def __len__(self):
        return len(self.knots)

    def __eq__(self, other):
        if not isinstance(other, Envelope):
            return NotImplemented
        return (
            self.knots == other.knots
            and self.value_type is other.value_type
            and self.loop_kind == other.loop_kind
            and self._release == other._release
            and self._release_time == other._release_time
            and self._release_loop_pos == other._release_loop_pos
            and self._head == other._head
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Envelope(knots={self.knots!r}, value_type={self.value_type.__name__}, "
            f"loop_kind={self.loop_kind!r})"
        )

    def _with_knots(self, knots):
        result = copy.copy(self)
        result.knots = list(knots)
        return result

    def offset_values(self, offset):
        """Return a copy with ``offset`` added to every value.

        The offset itself is first converted to the value type, so it is clipped too.
        """
        offset = self.value_type(offset)
        return self._with_knots(k.offset(offset) for k in self.knots)

    def scale_values(self, factor):
        """Return a copy with every value multiplied by ``factor``.

        The factor itself is first converted to the value type, so it is clipped too.
        """
        factor = self.value_type(factor)
        return self._with_knots(k.scale_value(factor) for k in self.knots)

    def scale_time(self, factor):
        """Return a copy with every knot time multiplied by ``factor``."""
        return self._with_knots(k.scale_time(factor) for k in self.knots)

    def set_loop(self, kind):
        """Return a copy using loop mode ``kind``."""
        result = self._with_knots(self.knots)
        result.loop_kind = kind
        return result

    def sort_by_time(self):
        """Sort the knots by time, in place."""
        self.knots.sort(key=lambda k: k.time)

    def reset(self):
        """Reset the internal playback state."""
        self._head = 0
        self._release = False
        self._release_time = None
        self._release_loop_pos = 0.0

    def release(self):
        """Let a looping envelope leave its loop once the loop start is reached."""
        self._release = True

    def _loop_times(self, loop_in, loop_out, last_time) -> Tuple[float, float]:
        time_in = self.knots[loop_in].time if loop_in < len(self.knots) else 0.0
        time_out = self.knots[loop_out].time if loop_out < len(self.knots) else last_time
        return time_in, time_out

    def _update_release(self, time, time_in, loop_pos):
        if self._release and self._release_time is None and time >= time_in:
            self._release_time = time
            self._release_loop_pos = loop_pos

    def peek(self, time):
        """Return the envelope value at ``time``."""
        if not self.knots:
            raise InvalidEnvelopeError("Invalid Envelope: no knots to sample")
        first = self.knots[0]
        if time <= first.time:
            return float(first.value)
        last = self.knots[-1]

        match self.loop_kind:
            case LoopRepeat():
                if time == last.time:
                    return float(last.value)
                if time > last.time:
                    self._head = 0
                    normal_t = get_loop_position(time, first.time, last.time)
                    return self._peek_between(normal_t, 1.0)
                return self._peek_between(time, 1.0)
            case LoopEcho(loop_in=loop_in, loop_out=loop_out, decay=decay):
                decay = float(decay)
                time_in, time_out = self._loop_times(loop_in, loop_out, last.time)
                loop_pos = get_loop_position(time, time_in, time_out)
                self._update_release(time, time_in, loop_pos)
                if self._release_time is None:
                    return self._peek_between(loop_pos, 1.0)
                local_time = self._release_loop_pos + (time - self._release_time)
                if local_time > last.time:
                    self._head = 0
                    normal_t = get_loop_position(local_time, first.time, last.time)
                    iteration = _get_iteration(local_time, first.time, last.time)
                    attenuation = 1.0 - (1.0 - (decay / iteration))
                    return self._peek_between(normal_t, attenuation)
                return self._peek_between(local_time, 1.0)
            case LoopPoints(loop_in=loop_in, loop_out=loop_out):
                time_in, time_out = self._loop_times(loop_in, loop_out, last.time)
                loop_pos = get_loop_position(time, time_in, time_out)
                self._update_release(time, time_in, loop_pos)
                if self._release_time is None:
                    return self._peek_between(loop_pos, 1.0)
                local_time = self._release_loop_pos + (time - self._release_time)
                if local_time > last.time:
                    return float(last.value)
                return self._peek_between(local_time, 1.0)
            case _:
                if time >= last.time:
                    return float(last.value)
                return self._peek_between(time, 1.0)

    def _peek_between(self, time, attenuation):
        # Expects ``time`` to lie within the knots' time range.
        knots = self.knots
        last_index = len(knots) - 1
        if self._head >= last_index:
            return 0.0
        head = self._head
        while head > 0 and time < knots[head].time:
            head -= 1
        while head < last_index - 1 and time > knots[head + 1].time:
            head += 1
        self._head = head
        current = knots[head]
        following = knots[head + 1]
        if current.interpolation is Interpolation.STEP:
            return float(current.value) * attenuation
        span = following.time - current.time
        x = (time - current.time) / span if span else 0.0
        return lerp(current.value, following.value, x) * attenuation


@dataclass(frozen=True)
class EnvelopePreset:
    """A constant description of an envelope, turned into one by ``Envelope.from_preset``."""

    knots: Tuple[Knot, ...]
    time_scale: float = 1.0
    value_scale: float = 1.0
    value_offset: float = 0.0
    loop_kind: Any = LoopNone()
    value_type: Optional[type] = None