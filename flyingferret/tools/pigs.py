"""
Pigs tool — a round of Pass the Pigs.

Two pigs are tossed; each lands in one of six positions with these
measured frequencies:

    Side - Right (no dot)   34.97%
    Side - Left (dot)       30.17%
    Razorback               22.37%
    Trotter                  8.84%
    Snouter                  3.04%
    Leaning Jowler           0.61%

The pair is scored from SCORE_TABLE. Now and then the pigs touch and the
player loses everything.
"""

import logging
from enum import Enum

from flyingferret.rng import RandomSource

logger = logging.getLogger(__name__)


class PigToss(Enum):
    SIDE_LEFT = "Side - Left"
    SIDE_RIGHT = "Side - Right"
    TROTTER = "Trotter"
    RAZORBACK = "Razorback"
    SNOUTER = "Snouter"
    LEANING_JOWLER = "Leaning Jowler"

    @property
    def is_side(self) -> bool:
        return self in (PigToss.SIDE_LEFT, PigToss.SIDE_RIGHT)


# Upper bounds out of 10000, checked in order.
TOSS_THRESHOLDS = (
    (3497, PigToss.SIDE_RIGHT),
    (6514, PigToss.SIDE_LEFT),
    (8751, PigToss.RAZORBACK),
    (9635, PigToss.TROTTER),
    (9939, PigToss.SNOUTER),
    (10000, PigToss.LEANING_JOWLER),
)

_SL, _SR = PigToss.SIDE_LEFT, PigToss.SIDE_RIGHT
_TR, _RB = PigToss.TROTTER, PigToss.RAZORBACK
_SN, _LJ = PigToss.SNOUTER, PigToss.LEANING_JOWLER

SCORE_TABLE = {
    _SL: {_SL: 1, _SR: 0, _TR: 5, _RB: 5, _SN: 10, _LJ: 15},
    _SR: {_SL: 0, _SR: 1, _TR: 5, _RB: 5, _SN: 10, _LJ: 15},
    _TR: {_SL: 5, _SR: 5, _TR: 20, _RB: 10, _SN: 15, _LJ: 20},
    _RB: {_SL: 5, _SR: 5, _TR: 10, _RB: 20, _SN: 15, _LJ: 20},
    _SN: {_SL: 10, _SR: 10, _TR: 15, _RB: 15, _SN: 40, _LJ: 25},
    _LJ: {_SL: 15, _SR: 15, _TR: 20, _RB: 20, _SN: 25, _LJ: 60},
}

TOUCHING = "They're touching! You're back to zero points. Pass the pigs."
OINKER = "Oinker.  No points for you this round.  Pass the pigs."


def roll_pig(rng: RandomSource) -> PigToss:
    value = rng.randrange(10000)
    for bound, toss in TOSS_THRESHOLDS:
        if value < bound:
            return toss
    raise ValueError(f"random source returned {value}, expected < 10000")


def score(pig1: PigToss, pig2: PigToss) -> int:
    return SCORE_TABLE[pig1][pig2]


def describe(pig1: PigToss, pig2: PigToss) -> str:
    """The result line for a scored toss."""
    points = score(pig1, pig2)
    if points == 0:
        return OINKER

    if pig1 is pig2:
        position = "Sider." if pig1.is_side else f"Double {pig1.value}!"
    else:
        position = f"{pig1.value} and {pig2.value}."

    unit = "point" if points == 1 else "points"
    return f"You got a {position} {points} {unit}."


class PigsTool:
    """One toss of two pigs, scored. Once in 500 tosses the pigs touch."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def run(self, query: str = "") -> list[str]:
        if self.rng.randrange(500) == 0:
            return [TOUCHING]

        pig1 = roll_pig(self.rng)
        pig2 = roll_pig(self.rng)
        logger.debug("Pigs: %s / %s", pig1.value, pig2.value)
        return [describe(pig1, pig2)]
