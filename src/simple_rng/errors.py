"""
Errors raised by simple-rng.

Both kinds are fatal for the call that raised them: nothing is clamped,
retried or replaced with a fallback value.
"""


class RngError(Exception):
    """Base error for all generator failures."""

    pass


class InvalidArgumentError(RngError, ValueError):
    """Caller passed an argument outside the operation's contract.

    Raised for inverted or empty ranges, unsupported bit widths, seeds that
    are not u64 values and unsupported algorithm/variant pairings.
    """

    pass


class TimeSourceError(RngError, RuntimeError):
    """The time source reported a reading before the epoch."""

    pass
