"""Public package surface for the squirrel_rng seekable random source."""

from .errors import EmptyCollectionError, SquirrelRngError
from .inverf import inv_erf
from .noise import NoiseBasis, Squirrel3, noise_float, noise_u32
from .sampler import DrawConfig, run_draws
from .source import MAX_SAFE_INTEGER, RandomSource

__all__ = [
    "DrawConfig",
    "EmptyCollectionError",
    "MAX_SAFE_INTEGER",
    "NoiseBasis",
    "RandomSource",
    "Squirrel3",
    "SquirrelRngError",
    "inv_erf",
    "noise_float",
    "noise_u32",
    "run_draws",
]
