"""
Responder — turns one line of text into zero or more lines of reply.

The input is trimmed and tested against each route in order. The first
route whose pattern matches runs its tool and nothing else is tried:

    ORDER  ROUTE      TRIGGER                         EXAMPLE
    -----  ---------  ------------------------------  ---------------------------
    1      sample     "<n> [random] <type> from ..."  "3 names from Al, Bo, Cy"
    2      or         the word "or"                   "Pizza or Tacos?"
    3      pigs       exactly "roll pigs"             "Roll Pigs"
    4      dice       a "d" between digits            "2d6+1"
    5      yes_no     ends with "?"                   "Is it raining?"

Input that matches nothing gets an empty reply. A tool that blows up is
logged and also gives an empty reply; transform() never raises.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from flyingferret.rng import RandomSource, make_rng
from flyingferret.tools.choice import OrTool
from flyingferret.tools.dice import DiceTool
from flyingferret.tools.pigs import PigsTool
from flyingferret.tools.sampler import SAMPLE_PATTERN, ListSampleTool
from flyingferret.tools.yes_no import YesNoTool

logger = logging.getLogger(__name__)


@dataclass
class Route:
    """One category: a trigger pattern and the tool that answers it."""
    name: str
    pattern: re.Pattern[str]
    run: Callable[[str], list[str]]

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


class Responder:
    """Ordered first-match dispatch over the built-in tools."""

    def __init__(self, rng: RandomSource | None = None):
        self.rng = rng if rng is not None else make_rng()
        self.routes: list[Route] = [
            Route("sample", SAMPLE_PATTERN, ListSampleTool(self.rng).run),
            Route("or", re.compile(r"\bor\b", re.IGNORECASE), OrTool(self.rng).run),
            Route("pigs", re.compile(r"^roll\s+pigs$", re.IGNORECASE), PigsTool(self.rng).run),
            Route("dice", re.compile(r"d\d", re.IGNORECASE), DiceTool(self.rng).run),
            Route("yes_no", re.compile(r"\?$"), YesNoTool(self.rng).run),
        ]

    def list_routes(self) -> list[str]:
        """Route names in priority order."""
        return [route.name for route in self.routes]

    def classify(self, text: str) -> Route | None:
        """The route that would handle text, or None."""
        text = (text or "").strip()
        for route in self.routes:
            if route.matches(text):
                return route
        return None

    def transform(self, text: str | None) -> list[str]:
        text = (text or "").strip()
        if not text:
            return []

        route = self.classify(text)
        if route is None:
            logger.debug("No route for %r", text)
            return []

        logger.debug("Route '%s' for %r", route.name, text)
        try:
            return route.run(text)
        except Exception as e:
            logger.exception("Route '%s' failed for %r: %s", route.name, text, e)
            return []


_default_responder: Responder | None = None


def get_responder() -> Responder:
    """Process-wide Responder, built on first use."""
    global _default_responder
    if _default_responder is None:
        _default_responder = Responder()
    return _default_responder


def set_responder(responder: Responder | None):
    """Replace (or with None, reset) the process-wide Responder."""
    global _default_responder
    _default_responder = responder


def transform(text: str | None) -> list[str]:
    """Reply lines for text using the process-wide Responder."""
    return get_responder().transform(text)
