"""
Random source — the only place flyingferret gets entropy from.

Every tool takes an object with a single method, randrange(stop), that
returns an integer in [0, stop). random.Random satisfies it, so production
code passes a (possibly seeded) random.Random and tests pass either a seeded
instance or a tiny stub that replays fixed values.

Shuffling and picking are built here on top of randrange() so a stub never
has to implement anything else.
"""

import logging
import random
from typing import Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """Build a random source. A seed makes every call sequence reproducible."""
    if seed is not None:
        logger.info("Random source seeded with %s", seed)
    return random.Random(seed)


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element uniformly. items must not be empty."""
    return items[rng.randrange(len(items))]


def shuffled(rng: RandomSource, items: Sequence[T]) -> list[T]:
    """Return a Fisher-Yates shuffled copy of items."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out
