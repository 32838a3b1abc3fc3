"""
Number descriptions → candidate numbers.

Understands:
  "up to 42"                       → 1 .. 42
  "1 to 3", "8-55", "2:7", "4..9"  → inclusive ranges (either direction)
  "-1, -2, -3"                     → single values
  "3:99, 105, 110-115, -20 to -10" → any mix of the above

A hyphen that follows a number (even across whitespace) is always a range
delimiter, never the sign of the next number: "-3-3" is -3 .. 3 and
"1 -5" is 1 .. 5. Use a comma to list a negative value after another
value: "1, -5".

The description is read with a small scanner rather than one big regex so
that long invalid input is rejected in linear time.
"""

import logging
import re

logger = logging.getLogger(__name__)

# Descriptions resolving to more numbers than this are refused.
MAX_POOL_SIZE = 1_000_000

_UP_TO = re.compile(r"^up\s+to\s+(\d+)$", re.IGNORECASE)
_NUMBER = re.compile(r"-?[0-9]+")
_SPACE = re.compile(r"\s*")

# Delimiter kinds
_LIST = "list"
_RANGE = "range"


def number_range(v1: int, v2: int) -> list[int]:
    """Every integer between v1 and v2 inclusive, ascending."""
    lo, hi = min(v1, v2), max(v1, v2)
    return list(range(lo, hi + 1))


def unique(values: list) -> list:
    """Drop repeats, keeping the first occurrence of each value."""
    return list(dict.fromkeys(values))


def _skip_space(text: str, pos: int) -> int:
    return _SPACE.match(text, pos).end()


def _read_number(text: str, pos: int) -> tuple[int, int] | None:
    m = _NUMBER.match(text, pos)
    if not m:
        return None
    return int(m.group()), m.end()


def _read_delimiter(text: str, pos: int) -> tuple[str, int] | None:
    """Delimiter kind and the position just after it (and any spaces)."""
    start = pos
    pos = _skip_space(text, pos)
    if text.startswith(",", pos):
        return _LIST, _skip_space(text, pos + 1)
    if text.startswith(":", pos) or text.startswith("-", pos):
        return _RANGE, _skip_space(text, pos + 1)
    if text.startswith("..", pos) or text.startswith("to", pos):
        return _RANGE, _skip_space(text, pos + 2)
    if pos > start:
        # Plain whitespace between two numbers.
        return _LIST, pos
    return None


def scan_entries(description: str) -> list[list[int]] | None:
    """
    Split a description into entries. An entry is the run of numbers joined
    by range delimiters; list delimiters (commas, whitespace) start a new
    entry. Returns None when the description is not a number list at all.
    """
    first = _read_number(description, 0)
    if first is None:
        return None
    value, pos = first
    entries = [[value]]

    while pos < len(description):
        delim = _read_delimiter(description, pos)
        if delim is None:
            return None
        kind, pos = delim
        number = _read_number(description, pos)
        if number is None:
            return None
        value, pos = number
        if kind == _RANGE:
            entries[-1].append(value)
        else:
            entries.append([value])

    return entries


def possible_numbers(description: str) -> list[int]:
    """Resolve a description into its numbers, deduplicated, in order."""
    description = description.strip()

    m = _UP_TO.match(description)
    if m:
        stop = int(m.group(1))
        if stop > MAX_POOL_SIZE:
            logger.debug("Numbers: 'up to %d' is too many", stop)
            return []
        return number_range(1, stop) if stop >= 1 else []

    entries = scan_entries(description)
    if entries is None:
        logger.debug("Numbers: %r is not a number description", description)
        return []

    size = 0
    for entry in entries:
        if len(entry) == 2:
            size += abs(entry[0] - entry[1]) + 1
        elif len(entry) == 1:
            size += 1
    if size > MAX_POOL_SIZE:
        logger.debug("Numbers: %r describes %d numbers, too many", description, size)
        return []

    values = []
    for entry in entries:
        if len(entry) == 1:
            values.append(entry[0])
        elif len(entry) == 2:
            values.extend(number_range(entry[0], entry[1]))
        # Three or more numbers chained by range delimiters ("1-5-10")
        # don't describe anything and are skipped.

    return unique(values)
