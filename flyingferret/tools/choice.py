"""
Or tool — picks one of the options offered in the input.

Examples:
  "Pizza or Tacos?"                          → "Tacos"
  "Go to bed or find food or watch TV?"      → "find food"
  "salt <or> vinegar or ketchup <OR> mayo"   → "vinegar or ketchup"

Options are split on the word "or", or on the literal marker <or> when
one is present (so an option may itself contain "or"). Once in a hundred
tries it ignores the options and gives a noncommittal answer.
"""

import logging
import re

from flyingferret.rng import RandomSource, choice

logger = logging.getLogger(__name__)

NONCOMMITTAL_ANSWERS = ("Neither", "Both", "Doesn't matter to me")

_MARKER = re.compile(r"<or>", re.IGNORECASE)
_MARKER_OPTIONS = re.compile(r"(.+?)(?:<or>|$)", re.IGNORECASE)
_WORD_OPTIONS = re.compile(r"(.+?)(?:\bor\b|$)", re.IGNORECASE)
# Only a junk run that starts after a non-junk character can reach the end.
_TRAILING_JUNK = re.compile(r"(?<![\s?.])[\s?.]+$")


def split_options(text: str) -> list[str]:
    """Raw options, in order, including the one running to end of line."""
    pattern = _MARKER_OPTIONS if _MARKER.search(text) else _WORD_OPTIONS
    return pattern.findall(text)


def clean_option(option: str) -> str:
    option = option.lstrip()
    return _TRAILING_JUNK.sub("", option)


class OrTool:
    """Chooses between the alternatives in an "x or y" question."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def run(self, query: str) -> list[str]:
        if self.rng.randrange(100) == 1:
            options = list(NONCOMMITTAL_ANSWERS)
        else:
            options = split_options(query)

        if not options:
            return []

        picked = clean_option(choice(self.rng, options))
        logger.debug("Or: %d option(s), picked %r", len(options), picked)
        return [picked]
