"""Exception taxonomy for the Hydrogen LCOH Engine.

Profile-acquisition errors stay local to the provider boundary. Numeric
failures (zero lifetime energy, zero hydrogen output) are always raised so
callers can tell an invalid result apart from a valid zero.
"""

from __future__ import annotations


class LCOHEngineError(Exception):
    """Base class for all engine errors."""


class InvalidLocationError(LCOHEngineError, ValueError):
    """A renewable source has no usable latitude/longitude."""


class EmptyProfileError(LCOHEngineError):
    """A profile provider returned no usable hourly samples."""


class ProfilePayloadError(LCOHEngineError):
    """A provider payload does not match the expected schema."""


class MissingLCOEError(LCOHEngineError):
    """A source has neither a generation profile nor a precomputed LCOE."""

    def __init__(self, source_index: int, kind: str) -> None:
        self.source_index = source_index
        self.kind = kind
        super().__init__(
            f"source #{source_index} ({kind}) has no generation profile and no LCOE"
        )


class DivisionByZeroResultError(LCOHEngineError, ArithmeticError):
    """A levelized cost has a zero denominator."""

    def __init__(self, quantity: str, detail: str = "") -> None:
        self.quantity = quantity
        message = f"{quantity} is undefined: zero denominator"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
