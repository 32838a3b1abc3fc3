"""
Yes/no tool — answers a question that ends in "?".

Questions starting with how/why/what/who/when/where can't be answered
with yes or no, so they get "I don't know." Everything else gets a
weighted pick: positive and negative answers are common, neutral ones
less so, and the silly ones are rare.
"""

import logging
import re

from flyingferret.rng import RandomSource, choice

logger = logging.getLogger(__name__)

POSITIVE_ANSWERS = ("Yes", "Probably", "Sure", "Definitely")
NEGATIVE_ANSWERS = ("No", "Absolutely not!", "Nope")
NEUTRAL_ANSWERS = ("Maybe", "Possibly", "Sort of")
SILLY_ANSWERS = (
    "Rub your belly three times and ask again.",
    "Light some candles and ask again.",
    "42",
)

# Weights are repetitions of each group in the pool.
ANSWER_POOL = (
    POSITIVE_ANSWERS * 10
    + NEGATIVE_ANSWERS * 10
    + NEUTRAL_ANSWERS * 3
    + SILLY_ANSWERS * 1
)

DONT_KNOW = "I don't know."

_QUESTION = re.compile(r"\?\s*$")
_OPEN_QUESTION = re.compile(r"^(?:how|why|what|who|when|where)", re.IGNORECASE)


class YesNoTool:
    """Answers a yes/no question from the weighted pool; open questions get DONT_KNOW."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def run(self, query: str) -> list[str]:
        if not _QUESTION.search(query):
            return []
        if _OPEN_QUESTION.match(query):
            return [DONT_KNOW]
        return [choice(self.rng, ANSWER_POOL)]
