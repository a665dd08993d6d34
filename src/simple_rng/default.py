"""
Process-wide default generator.

There is no implicit global: the instance exists only after init_default()
and every access should go through default_lock() when threads share it.

Usage:
    init_default(seed=42)
    with default_lock() as rng:
        rng.gen_range(1, 6)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .clock import TimeSource
from .config import Settings, get_settings
from .engine import Generator
from .errors import RngError

logger = logging.getLogger(__name__)

_lock = threading.RLock()
_default: Generator | None = None


def init_default(
    seed: int | None = None,
    settings: Settings | None = None,
    time_source: TimeSource | None = None,
) -> Generator:
    """Create (or replace) the default generator.

    An explicit seed wins, then settings.seed, then the clock.
    """
    global _default

    settings = settings if settings is not None else get_settings()
    if seed is None:
        seed = settings.seed

    if seed is None:
        rng = Generator.from_time(time_source, settings.algorithm, settings.variant)
    else:
        rng = Generator.new(seed, settings.algorithm, settings.variant)

    with _lock:
        _default = rng
    logger.info(
        "Default generator initialized (seed=%d, algorithm=%s, variant=%s)",
        rng.seed,
        rng.algorithm.value,
        rng.variant.value,
    )
    return rng


def get_default() -> Generator:
    """Return the default generator.

    Raises:
        RngError: init_default() has not been called.
    """
    if _default is None:
        raise RngError("default generator is not initialized; call init_default() first")
    return _default


@contextmanager
def default_lock() -> Iterator[Generator]:
    """Hold the default generator's lock for the duration of the block.

    The lock is reentrant, so init_default() and reset_default() may be
    called from inside the block by the same thread.
    """
    with _lock:
        yield get_default()


def reset_default() -> None:
    """Drop the default generator. Mainly for tests."""
    global _default
    with _lock:
        _default = None
