"""Errors raised by the sound chip."""


class ChipError(Exception):
    """Base class for every sound chip error."""

    default_message = "Sound chip error"

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.default_message)


class InvalidNormalSignedError(ChipError, ValueError):
    """A signed normal value fell outside -1.0 to 1.0."""

    default_message = "Invalid NormalSigned: value out of -1.0 to 1.0 range"


class InvalidNormalError(ChipError, ValueError):
    """A normal value fell outside 0.0 to 1.0."""

    default_message = "Invalid Uf16: value out of 0.0 to 1.0 range"


class InvalidWavetableError(ChipError, ValueError):
    """A wavetable sample fell outside -1.0 to 1.0."""

    default_message = "Invalid Wavetable: sample out of -1.0 to 1.0 range"


class InvalidEnvelopeError(ChipError, ValueError):
    """An envelope knot value fell outside -1.0 to 1.0."""

    default_message = "Invalid Envelope: knot value out of -1.0 to 1.0 range"


class InvalidChannelError(ChipError, IndexError):
    """A channel index does not exist."""

    default_message = "Invalid Channel: Channel Index not found"