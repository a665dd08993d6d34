"""
Shared test fixtures for the simple-rng test suite.

Provides fixtures for:
- Seeded generators for each algorithm/variant pairing
- Clean settings cache and default-generator state between tests
"""

import pytest

from simple_rng import Algorithm, Generator, Variant
from simple_rng.config import get_settings
from simple_rng.default import reset_default


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_globals(monkeypatch):
    """Drop cached settings, SIMPLE_RNG_* env vars and the default generator."""
    for name in ("SEED", "ALGORITHM", "VARIANT", "LOG_LEVEL"):
        monkeypatch.delenv(f"SIMPLE_RNG_{name}", raising=False)
    get_settings.cache_clear()
    reset_default()
    yield
    get_settings.cache_clear()
    reset_default()


# =============================================================================
# Generators
# =============================================================================


@pytest.fixture
def rng() -> Generator:
    """Canonical LCG64 generator, seed 123."""
    return Generator.new(123)


@pytest.fixture(
    params=[
        (Algorithm.LCG, Variant.LCG64),
        (Algorithm.PCG, Variant.LCG64),
        (Algorithm.LCG, Variant.LCG32_LEGACY),
    ],
    ids=["lcg64", "pcg64", "lcg32-legacy"],
)
def any_rng(request) -> Generator:
    """Every supported algorithm/variant pairing, seed 42."""
    algorithm, variant = request.param
    return Generator.new(42, algorithm, variant)
