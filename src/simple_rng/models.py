"""
simple-rng Data Models

- Algorithm: closed set of transition functions the engine dispatches on
- Variant: named LCG parameterizations
- TransitionConstants: the multiplier/increment/widths behind a variant
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    LCG32_LEGACY_FLOAT_BITS,
    LCG32_LEGACY_INCREMENT,
    LCG32_LEGACY_MULTIPLIER,
    LCG64_FLOAT_BITS,
    LCG64_INCREMENT,
    LCG64_MULTIPLIER,
    U32_BITS,
    U64_BITS,
    U64_MAX,
)


# =============================================================================
# Enums
# =============================================================================


class Algorithm(str, Enum):
    """Transition function selected by a generator."""

    LCG = "lcg"  # Plain linear congruential step
    PCG = "pcg"  # LCG step followed by xorshift + rotate output permutation


class Variant(str, Enum):
    """Named sets of LCG transition constants."""

    LCG64 = "lcg64"  # Canonical full-width form
    LCG32_LEGACY = "lcg32-legacy"  # Truncated to 32 bits, original crate sequences

    @property
    def constants(self) -> "TransitionConstants":
        """Transition constants for this variant."""
        return VARIANT_CONSTANTS[self]


# =============================================================================
# Transition Constants
# =============================================================================


class TransitionConstants(BaseModel):
    """Parameters of one LCG step: state' = (state * multiplier + increment) mod 2**state_bits.

    float_bits sets the gen_float denominator to 2**float_bits.
    """

    model_config = ConfigDict(frozen=True)

    multiplier: int = Field(..., ge=1, le=U64_MAX)
    increment: int = Field(..., ge=0, le=U64_MAX)
    state_bits: Literal[32, 64]
    float_bits: Literal[32, 64]

    @property
    def state_mask(self) -> int:
        return (1 << self.state_bits) - 1


VARIANT_CONSTANTS: dict[Variant, TransitionConstants] = {
    Variant.LCG64: TransitionConstants(
        multiplier=LCG64_MULTIPLIER,
        increment=LCG64_INCREMENT,
        state_bits=U64_BITS,
        float_bits=LCG64_FLOAT_BITS,
    ),
    Variant.LCG32_LEGACY: TransitionConstants(
        multiplier=LCG32_LEGACY_MULTIPLIER,
        increment=LCG32_LEGACY_INCREMENT,
        state_bits=U32_BITS,
        float_bits=LCG32_LEGACY_FLOAT_BITS,
    ),
}
