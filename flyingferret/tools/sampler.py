"""
List sample tool — picks N random things from a list or number range.

Request grammar (case-insensitive):
    [select|get|give me] <count> [random] <thing type> [from|in|of] <things>
        [without|w/o|wo|no|don't sort|resort|re-sort][.]

Examples:
  "Give me 3 random names from Danny, George, Lynne, Mike, Sam, Paul, Josh"
  "10 numbers 1-100"
  "get 2 colors from red; dark blue; green without sort"

When the thing type mentions "number", <things> is read as a number
description (see tools.numbers) and picks are sorted numerically. Anything
else is split on semicolons, commas or whitespace (the first of those
present) and sorted case-insensitively. Picks are never repeated.
"""

import logging
import re
from dataclasses import dataclass

from flyingferret.rng import RandomSource, shuffled
from flyingferret.tools.numbers import possible_numbers

logger = logging.getLogger(__name__)

SAMPLE_PATTERN = re.compile(
    r"^(?:(?:select|get|give me)\s+)?"
    r"(\d+)\s+"
    r"(?:random\s+)?"
    r"(\w\S*)\s+"
    r"(?:(?:from|in|of)\s+)?"
    r"(.*?)"
    r"( (?:without|w/?o|no|don't) (?:re-?)?sort)?"
    r"\.?$",
    re.IGNORECASE,
)

_NUMBER_TYPE = re.compile(r"numbers?", re.IGNORECASE)

NOTHING_SELECTED = "No elements could be selected."


@dataclass
class SampleRequest:
    count: int
    thing_type: str
    things: str
    no_sort: bool = False

    @property
    def wants_numbers(self) -> bool:
        return bool(_NUMBER_TYPE.search(self.thing_type))


def parse_sample_request(text: str) -> SampleRequest | None:
    """Pull a SampleRequest out of text, or None if it isn't one."""
    m = SAMPLE_PATTERN.match(text)
    if not m:
        return None
    return SampleRequest(
        count=int(m.group(1)),
        thing_type=m.group(2),
        things=m.group(3),
        no_sort=m.group(4) is not None,
    )


def split_things(things: str) -> list[str]:
    """
    Split free text on semicolons if it has any, else commas, else
    whitespace. Duplicates stay; a trailing delimiter adds nothing.
    """
    if ";" in things:
        parts = re.split(r"\s*;\s*", things)
    elif "," in things:
        parts = re.split(r"\s*,\s*", things)
    else:
        parts = re.split(r"\s+", things)

    while parts and parts[-1] == "":
        parts.pop()
    return parts


def random_elements(count: int, things: list, rng: RandomSource) -> list:
    """
    count random entries of things without reusing a position.
    Empty when count is below 1 or larger than the pool.
    """
    size = len(things)
    if count == size:
        return shuffled(rng, things)
    if count == 1 and size > 1:
        return [things[rng.randrange(size)]]
    if 1 < count < size:
        return shuffled(rng, things)[:count]
    return []


def format_picks(picks: list[str]) -> str:
    """'a', 'a and b', 'a, b and c'."""
    if not picks:
        return NOTHING_SELECTED
    if len(picks) == 1:
        return picks[0]
    return ", ".join(picks[:-1]) + " and " + picks[-1]


class ListSampleTool:
    """Draws a random subset from a described list of things."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def run(self, query: str) -> list[str]:
        request = parse_sample_request(query)
        if request is None:
            return []
        return [self.sample(request)]

    def sample(self, request: SampleRequest) -> str:
        if request.wants_numbers:
            pool = possible_numbers(request.things)
            picks = random_elements(request.count, pool, self.rng)
            if not request.no_sort:
                picks.sort()
        else:
            pool = split_things(request.things)
            picks = random_elements(request.count, pool, self.rng)
            if not request.no_sort:
                picks.sort(key=str.lower)

        logger.debug(
            "Sample: %d %s from a pool of %d → %d pick(s)",
            request.count, request.thing_type, len(pool), len(picks),
        )
        return format_picks([str(p) for p in picks])
