"""
Derivation Layer - raw engine output to caller-requested shapes.

Every function here is pure: it takes one raw value and returns the derived
value. Generator methods validate arguments first, advance once, then call
into this module, so a rejected call never consumes engine output.

Bias note: map_range uses a plain modulo. When the span does not evenly
divide 2**64 (or 2**32 for the legacy variant), low values in the span are
very slightly more likely than high ones. That is acceptable for a
non-cryptographic generator and is kept for sequence compatibility.
"""

from __future__ import annotations

from .constants import FLOAT_MANTISSA_BITS, INT_WIDTHS_SUPPORTED, U64_MAX
from .errors import InvalidArgumentError


# =============================================================================
# Argument Checks
# =============================================================================


def _check_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")


def check_range(min_val: int, max_val: int) -> None:
    """Reject anything but 0 <= min_val < max_val <= U64_MAX."""
    _check_int("min", min_val)
    _check_int("max", max_val)
    if max_val <= min_val:
        raise InvalidArgumentError(
            f"max ({max_val}) must be greater than min ({min_val})"
        )
    if min_val < 0 or max_val > U64_MAX:
        raise InvalidArgumentError(
            f"range [{min_val}, {max_val}] must lie within [0, {U64_MAX}]"
        )


def check_width(width: int) -> None:
    _check_int("width", width)
    if width not in INT_WIDTHS_SUPPORTED:
        raise InvalidArgumentError(
            f"unsupported width {width}, expected one of {INT_WIDTHS_SUPPORTED}"
        )


# =============================================================================
# Derivations
# =============================================================================


def map_range(raw: int, min_val: int, max_val: int) -> int:
    """Map raw onto [min_val, max_val] inclusive by modulo.

    Callers must have validated the bounds; equal bounds are allowed here
    (a span of one) so that single-element picks can share the mapping.
    """
    span = max_val - min_val + 1
    return raw % span + min_val


def to_float(raw: int, float_bits: int) -> float:
    """Scale raw into [0.0, 1.0) as raw / 2**float_bits.

    Above 53 bits only the top 53 are kept. A double cannot represent the
    exact quotient, and rounding the full value could produce 1.0. The
    result is therefore not bit-for-bit equal to float(raw) / 2**64: about
    half of all raw values differ from that plain division by one ulp.
    """
    raw &= (1 << float_bits) - 1
    if float_bits > FLOAT_MANTISSA_BITS:
        shift = float_bits - FLOAT_MANTISSA_BITS
        return (raw >> shift) / (1 << FLOAT_MANTISSA_BITS)
    return raw / (1 << float_bits)


def to_bool(raw: int) -> bool:
    return raw & 1 == 1


def to_unsigned(raw: int, width: int) -> int:
    """Low `width` bits of raw, zero-extended."""
    return raw & ((1 << width) - 1)


def to_signed(raw: int, width: int) -> int:
    """Low `width` bits of raw as a two's-complement value, sign-extended."""
    value = raw & ((1 << width) - 1)
    if value & (1 << (width - 1)):
        value -= 1 << width
    return value
