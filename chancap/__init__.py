"""Double-precision SIMD-oriented Fast Mersenne Twister random number generation."""

__version__ = "0.1.0"
__all__ = ["params", "engine", "dsfmt"]