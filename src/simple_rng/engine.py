"""
Core Engine - seedable congruential generator.

TigerStyle: all randomness is seeded and reproducible. One state word, one
algorithm tag, one mutator (advance). Every derived value costs exactly one
advance.

NOT cryptographically secure. Use the `secrets` module for anything that
must resist prediction.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from . import derive
from .clock import SystemTimeSource, TimeSource
from .constants import (
    PCG_OUTPUT_SHIFT_BITS,
    PCG_ROTATE_SHIFT_BITS,
    PCG_XORSHIFT_BITS,
    TIME_EPOCH_NS,
    U64_BITS,
    U64_MASK,
    U64_MAX,
)
from .errors import InvalidArgumentError, TimeSourceError
from .models import Algorithm, TransitionConstants, Variant

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Transition Functions
# =============================================================================


def lcg_step(state: int, constants: TransitionConstants) -> int:
    """state * M + C, wrapped to the variant's state width."""
    return (state * constants.multiplier + constants.increment) & constants.state_mask


def rotr64(value: int, rot: int) -> int:
    """Rotate a 64-bit word right. The amount is taken modulo 64."""
    rot %= U64_BITS
    value &= U64_MASK
    if rot == 0:
        return value
    return ((value >> rot) | (value << (U64_BITS - rot))) & U64_MASK


def pcg_permute(state: int) -> int:
    """Xorshift then rotate a freshly stepped 64-bit LCG state."""
    x = (state >> PCG_XORSHIFT_BITS) ^ state
    x >>= PCG_OUTPUT_SHIFT_BITS
    rot = state >> PCG_ROTATE_SHIFT_BITS
    return rotr64(x, rot)


def _coerce_algorithm(algorithm: Algorithm | str) -> Algorithm:
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise InvalidArgumentError(f"unknown algorithm: {algorithm!r}") from None


def _coerce_variant(variant: Variant | str) -> Variant:
    try:
        return Variant(variant)
    except ValueError:
        raise InvalidArgumentError(f"unknown variant: {variant!r}") from None


def _check_pairing(algorithm: Algorithm, variant: Variant) -> None:
    if algorithm is Algorithm.PCG and variant.constants.state_bits != U64_BITS:
        raise InvalidArgumentError(
            f"{algorithm.value} needs a 64-bit variant, got {variant.value}"
        )


# =============================================================================
# Generator
# =============================================================================


@dataclass
class Generator:
    """Deterministic pseudo-random generator.

    TigerStyle:
    - Same seed, algorithm and variant always give the same sequence
    - Any u64 is a valid seed, zero included
    - Argument errors raise before the state is touched
    - No internal locking; give each thread its own instance

    Usage:
        rng = Generator.new(123)
        rng.gen_range(1, 6)
        rng.pick_random(["a", "b", "c"])
    """

    _seed: int
    _algorithm: Algorithm = Algorithm.LCG
    _variant: Variant = Variant.LCG64
    _state: int = field(init=False)

    def __post_init__(self) -> None:
        """Validate the seed and selectors.

        TigerStyle: Assert preconditions.
        """
        if not isinstance(self._seed, int) or isinstance(self._seed, bool):
            raise InvalidArgumentError(f"seed must be an int, got {type(self._seed).__name__}")
        if not 0 <= self._seed <= U64_MAX:
            raise InvalidArgumentError(f"seed ({self._seed}) must be within [0, {U64_MAX}]")
        self._algorithm = _coerce_algorithm(self._algorithm)
        self._variant = _coerce_variant(self._variant)
        _check_pairing(self._algorithm, self._variant)
        self._state = self._seed

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        seed: int,
        algorithm: Algorithm | str = Algorithm.LCG,
        variant: Variant | str = Variant.LCG64,
    ) -> Generator:
        """Create a generator from an explicit seed."""
        return cls(seed, algorithm, variant)

    @classmethod
    def from_time(
        cls,
        time_source: TimeSource | None = None,
        algorithm: Algorithm | str = Algorithm.LCG,
        variant: Variant | str = Variant.LCG64,
    ) -> Generator:
        """Create a generator seeded from nanoseconds since the Unix epoch.

        Args:
            time_source: Where to read the time. Defaults to the wall clock.

        Raises:
            TimeSourceError: The source reports a time before the epoch.
                No fallback seed is substituted.

        TigerStyle: Always log the seed for reproducibility.
        """
        source = time_source if time_source is not None else SystemTimeSource()
        now_ns = source.now_ns()
        if now_ns < TIME_EPOCH_NS:
            raise TimeSourceError(f"time went backwards: {now_ns}ns is before the epoch")

        seed = (now_ns - TIME_EPOCH_NS) & U64_MASK
        logger.info("Seeded generator from time (replay with seed=%d)", seed)
        return cls(seed, algorithm, variant)

    # -------------------------------------------------------------------------
    # Engine
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> int:
        """The seed this generator was created with."""
        return self._seed

    @property
    def state(self) -> int:
        """Current engine state. Equals the seed before the first advance."""
        return self._state

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def variant(self) -> Variant:
        return self._variant

    def set_algorithm(self, algorithm: Algorithm | str) -> None:
        """Switch the transition function for later advances.

        Does not advance or modify the state.
        """
        algorithm = _coerce_algorithm(algorithm)
        _check_pairing(algorithm, self._variant)
        if algorithm is not self._algorithm:
            logger.debug("Switching algorithm %s -> %s", self._algorithm.value, algorithm.value)
        self._algorithm = algorithm

    def advance(self) -> int:
        """Step the engine and return the raw output.

        LCG returns the new state itself. PCG keeps the LCG state and
        returns its permuted form.
        """
        constants = self._variant.constants
        self._state = lcg_step(self._state, constants)

        # Postcondition
        assert 0 <= self._state <= constants.state_mask, "state escaped its width"

        if self._algorithm is Algorithm.LCG:
            return self._state
        elif self._algorithm is Algorithm.PCG:
            return pcg_permute(self._state)
        raise AssertionError(f"unhandled algorithm: {self._algorithm!r}")

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def gen_range(self, min_val: int, max_val: int) -> int:
        """Integer in [min_val, max_val] inclusive.

        Raises:
            InvalidArgumentError: max_val <= min_val, or a bound outside u64.
        """
        derive.check_range(min_val, max_val)
        return derive.map_range(self.advance(), min_val, max_val)

    def gen_float(self) -> float:
        """Float in [0.0, 1.0). Never returns 1.0."""
        return derive.to_float(self.advance(), self._variant.constants.float_bits)

    def gen_bool(self) -> bool:
        """Low bit of the next raw output."""
        return derive.to_bool(self.advance())

    def gen_unsigned(self, width: int) -> int:
        """Unsigned integer of 8, 16, 32 or 64 bits."""
        derive.check_width(width)
        return derive.to_unsigned(self.advance(), width)

    def gen_signed(self, width: int) -> int:
        """Two's-complement signed integer of 8, 16, 32 or 64 bits."""
        derive.check_width(width)
        return derive.to_signed(self.advance(), width)

    def pick_random(self, sequence: Sequence[T]) -> T | None:
        """Uniformly chosen element of sequence, or None when it is empty.

        The element itself is returned, not a copy. An empty sequence does
        not advance the engine.
        """
        if len(sequence) == 0:
            return None
        index = derive.map_range(self.advance(), 0, len(sequence) - 1)
        return sequence[index]

    def shuffle(self, sequence: MutableSequence[T]) -> None:
        """Shuffle a sequence in place (Fisher-Yates).

        Consumes len(sequence) - 1 advances.
        """
        for i in range(len(sequence) - 1, 0, -1):
            j = self.gen_range(0, i)
            sequence[i], sequence[j] = sequence[j], sequence[i]

    def fork(self) -> Generator:
        """Create an independent generator seeded from this one's next output.

        Useful for handing each component or thread its own reproducible
        stream.
        """
        child = Generator(self.advance(), self._algorithm, self._variant)
        logger.debug("Forked generator with seed=%d", child.seed)
        return child
