"""
simple-rng Constants - TigerStyle

All transition parameters are explicit and named per variant.
Category comes first, specifics last: LCG64_MULTIPLIER not MULTIPLIER_LCG64.
"""

# =============================================================================
# Word Widths
# =============================================================================

U32_BITS: int = 32
U64_BITS: int = 64
U32_MASK: int = (1 << U32_BITS) - 1
U64_MASK: int = (1 << U64_BITS) - 1
U64_MAX: int = U64_MASK

# Widths accepted by gen_unsigned / gen_signed
INT_WIDTHS_SUPPORTED: tuple[int, ...] = (8, 16, 32, 64)

# =============================================================================
# LCG64 (canonical)
# =============================================================================

LCG64_MULTIPLIER: int = 6364136223846793005  # Knuth MMIX
LCG64_INCREMENT: int = 1
LCG64_FLOAT_BITS: int = 64  # gen_float divides by 2**64

# =============================================================================
# LCG32 (legacy, period <= 2**32)
# =============================================================================

LCG32_LEGACY_MULTIPLIER: int = 1664525  # Numerical Recipes
LCG32_LEGACY_INCREMENT: int = 1013904223
LCG32_LEGACY_FLOAT_BITS: int = 32  # gen_float divides by 2**32

# =============================================================================
# PCG Output Permutation
# =============================================================================

PCG_XORSHIFT_BITS: int = 18
PCG_OUTPUT_SHIFT_BITS: int = 27
PCG_ROTATE_SHIFT_BITS: int = 59

# =============================================================================
# Floats
# =============================================================================

FLOAT_MANTISSA_BITS: int = 53  # IEEE 754 double precision

# =============================================================================
# Time Seeding
# =============================================================================

TIME_EPOCH_NS: int = 0  # Unix epoch, 1970-01-01T00:00:00Z

# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX: str = "SIMPLE_RNG_"
CLI_SAMPLES_COUNT_DEFAULT: int = 1
CLI_SAMPLES_COUNT_MAX: int = 100_000
