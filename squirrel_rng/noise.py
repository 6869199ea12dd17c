# Squirrel3 positional noise (Squirrel Eiserloh, GDC 2017 "Math for Game Programmers: Noise-Based RNG")
# Stateless hash of (seed, position) wrapped in a small cursor so draws advance on their own.
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

MASK_32 = 0xFFFFFFFF
BIT_NOISE1 = 0xB5297A4D
BIT_NOISE2 = 0x68E31DA4
BIT_NOISE3 = 0x1B56C4E9
# Normalisation reference: v is read as signed 32-bit, v / MAX_VALUE lands in [-1, 1).
MAX_VALUE = 1 << 31


class NoiseBasis(Protocol):
    """Capability set a RandomSource needs from its generator."""

    offset: int

    def set_seed(self, seed: int) -> None: ...
    def seek_to(self, offset: int) -> None: ...
    def float(self) -> float: ...


def noise_u32(seed: int, position: int) -> int:
    """Raw unsigned 32-bit hash of ``position`` under ``seed``."""
    v = position & MASK_32
    v = (v * BIT_NOISE1) & MASK_32
    v = (v + seed) & MASK_32
    v ^= v >> 8
    v = (v + BIT_NOISE2) & MASK_32
    v ^= (v << 8) & MASK_32
    v = (v * BIT_NOISE3) & MASK_32
    v ^= v >> 8
    return v


def noise_float(seed: int, position: int) -> float:
    """Hash of ``(seed, position)`` normalised to the unit interval."""
    v = noise_u32(seed, position)
    if v & 0x80000000:
        v -= 1 << 32
    return ((v / MAX_VALUE) + 1) / 2


@dataclass
class Squirrel3:
    seed: int
    offset: int = 0

    @classmethod
    def from_clock(cls, offset: int = 0) -> "Squirrel3":
        # wall-clock milliseconds; only for entry points that want a fresh stream
        seed = time.time_ns() // 1_000_000
        logger.info("Seeding Squirrel3 from wall clock: seed=%d", seed)
        return cls(seed, offset)

    def set_seed(self, seed: int) -> None:
        # offset is left alone; callers reset it if they want a fresh sequence
        self.seed = seed

    def seek_to(self, offset: int) -> None:
        self.offset = offset

    def float(self) -> float:
        value = noise_float(self.seed, self.offset)
        self.offset += 1
        return value
