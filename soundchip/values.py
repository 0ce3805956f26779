"""Compact normalised value types and the stereo sample pair."""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

_U16_MAX = 65535
_I16_MAX = 32767
_I16_MIN = -32768


class _Quantized:
    __slots__ = ("_raw",)
    _LOW = 0.0
    _HIGH = 1.0
    _SCALE = 1.0

    def __init__(self, value):
        if isinstance(value, type(self)):
            self._raw = value._raw
            return
        value = float(value)
        if math.isnan(value):
            self._raw = 0
        else:
            self._raw = int(min(max(value, self._LOW), self._HIGH) * self._SCALE)

    @classmethod
    def _from_raw(cls, raw):
        obj = object.__new__(cls)
        obj._raw = raw
        return obj

    @property
    def raw(self):
        """The stored integer."""
        return self._raw

    def __float__(self):
        return self._raw / self._SCALE

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash((type(self).__name__, self._raw))

    def __repr__(self):
        return f"{type(self).__name__}({float(self)})"

    def __str__(self):
        return str(float(self))


class Normal(_Quantized):
    """A 0.0 to 1.0 value stored as a 16-bit unsigned integer; inputs are clipped."""

    __slots__ = ()
    _LOW = 0.0
    _HIGH = 1.0
    _SCALE = float(_U16_MAX)

    def __init__(self, value):
        super().__init__(value)

    def __float__(self):
        return super().__float__()

    def __eq__(self, other):
        return super().__eq__(other)

    def __hash__(self):
        return super().__hash__()

    def __repr__(self):
        return super().__repr__()

    def __str__(self):
        return super().__str__()


class NormalSigned(_Quantized):
    """A -1.0 to 1.0 value stored as a 16-bit signed integer; inputs are clipped."""

    __slots__ = ()
    _LOW = -1.0
    _HIGH = 1.0
    _SCALE = float(_I16_MAX)

    def __init__(self, value):
        super().__init__(value)

    def __float__(self):
        return super().__float__()

    def __eq__(self, other):
        return super().__eq__(other)

    def __hash__(self):
        return super().__hash__()

    def __repr__(self):
        return super().__repr__()

    def __str__(self):
        return super().__str__()


Normal.ZERO = Normal._from_raw(0)
Normal.QUARTER = Normal._from_raw(_U16_MAX // 4)
Normal.HALF = Normal._from_raw(_U16_MAX // 2)
Normal.THREE_QUARTER = Normal._from_raw((_U16_MAX // 4) * 3)
Normal.ONE = Normal._from_raw(_U16_MAX)

NormalSigned.ZERO = NormalSigned._from_raw(0)
NormalSigned.QUARTER = NormalSigned._from_raw(_I16_MAX // 4)
NormalSigned.HALF = NormalSigned._from_raw(_I16_MAX // 2)
NormalSigned.THREE_QUARTER = NormalSigned._from_raw((_I16_MIN // 4) * 3)
NormalSigned.ONE = NormalSigned._from_raw(_I16_MAX)
NormalSigned.NEG_QUARTER = NormalSigned._from_raw(_I16_MIN // 4)
NormalSigned.NEG_HALF = NormalSigned._from_raw(_I16_MIN // 2)
NormalSigned.NEG_THREE_QUARTER = NormalSigned._from_raw((_I16_MIN // 4) * 3)
NormalSigned.NEG_ONE = NormalSigned._from_raw(_I16_MIN)

T = TypeVar("T")


@dataclass(frozen=True)
class Sample(Generic[T]):
    """A stereo sample with left and right values."""

    left: T
    right: T