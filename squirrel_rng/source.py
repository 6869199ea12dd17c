"""Stateful random source layered over a seekable noise basis."""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence

from .errors import EmptyCollectionError
from .inverf import inv_erf
from .noise import NoiseBasis, Squirrel3

logger = logging.getLogger(__name__)

# Largest integer a double holds exactly; upper bound for a bare integer() draw.
MAX_SAFE_INTEGER = 2**53 - 1


class RandomSource:
    """Reseedable, seekable random stream.

    Every distribution consumes exactly one draw from ``basis``, so the
    offset of the basis counts the units of randomness handed out.
    ``seek_to`` saves the current offset on a stack before jumping and
    ``restore`` pops it back, letting callers reuse a region of the stream
    and resume where they left off.

    Not thread safe: share an instance across threads only behind a lock,
    and expect interleaved draws to lose reproducibility.
    """

    def __init__(self, basis: Optional[NoiseBasis] = None) -> None:
        self.basis: NoiseBasis = basis if basis is not None else Squirrel3.from_clock()
        self.position_stack: List[int] = []

    @classmethod
    def from_seed(cls, seed: int, offset: int = 0) -> "RandomSource":
        return cls(Squirrel3(seed, offset))

    @property
    def offset(self) -> int:
        return self.basis.offset

    @property
    def seed(self) -> Optional[int]:
        return getattr(self.basis, "seed", None)

    @property
    def depth(self) -> int:
        return len(self.position_stack)

    def reseed(self, seed: int) -> None:
        """Switch to ``seed`` and rewind to position 0.

        Saved positions on the stack are kept as-is.
        """
        logger.debug("reseed: seed=%d (stack depth %d kept)", seed, len(self.position_stack))
        self.basis.set_seed(seed)
        self.basis.seek_to(0)

    def seek_to(self, position: int) -> None:
        self.position_stack.append(self.basis.offset)
        self.basis.seek_to(position)
        logger.debug("seek_to: %d (depth %d)", position, len(self.position_stack))

    def restore(self) -> None:
        """Jump back to the offset saved by the latest ``seek_to``; no-op when none is saved."""
        if not self.position_stack:
            return
        position = self.position_stack.pop()
        self.basis.seek_to(position)
        logger.debug("restore: %d (depth %d)", position, len(self.position_stack))

    @contextmanager
    def detour(self, position: int) -> Iterator["RandomSource"]:
        self.seek_to(position)
        try:
            yield self
        finally:
            self.restore()

    def float(self) -> float:
        return self.basis.float()

    def bool(self, odds: float = 0.5) -> bool:
        # odds outside [0, 1] degrade to always-False / always-True
        return self.basis.float() < odds

    def normal(self, mean: float = 0.5, deviation: float = 1.0) -> float:
        """Approximate normal sample via inverse-CDF of a single uniform draw."""
        x = self.float()
        return mean + deviation * math.sqrt(2.0) * inv_erf((x * 2.0) - 1.0)

    def integer(self, alpha: Optional[int] = None, beta: Optional[int] = None) -> int:
        """Random integer with an exclusive upper bound.

        ``integer()`` draws from ``[0, MAX_SAFE_INTEGER)``, ``integer(n)``
        from ``[0, n)`` and ``integer(lo, hi)`` from ``[lo, hi)``. Bounds are
        not checked: an inverted range yields whatever the formula gives.
        """
        low, high = 0, MAX_SAFE_INTEGER
        if alpha is not None:
            if beta is not None:
                low, high = alpha, beta
            else:
                high = alpha
        return math.floor(self.float() * (high - low) + low)

    def array_index(self, collection: Sequence[Any]) -> int:
        size = len(collection)
        if size == 0:
            raise EmptyCollectionError("cannot pick an index from an empty collection")
        return self.integer(size)

    def array_item(self, collection: Sequence[Any]) -> Any:
        return collection[self.array_index(collection)]
