"""
simple-rng - Seedable Pseudo-Random Number Generator

Deterministic integers, floats and booleans from a 64-bit congruential
engine, plus helpers for ranged sampling and random element selection.

Components:
- Engine: Generator holding one state word and an algorithm tag (LCG / PCG)
- Derivation: range mapping, float scaling, bit-width truncation, picking

The generator is fast and reproducible, and NOT cryptographically secure.
"""

from .clock import FixedTimeSource, SystemTimeSource, TimeSource
from .engine import Generator
from .errors import InvalidArgumentError, RngError, TimeSourceError
from .models import Algorithm, TransitionConstants, Variant

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Engine
    "Generator",
    "Algorithm",
    "Variant",
    "TransitionConstants",
    # Time
    "TimeSource",
    "SystemTimeSource",
    "FixedTimeSource",
    # Errors
    "RngError",
    "InvalidArgumentError",
    "TimeSourceError",
]
