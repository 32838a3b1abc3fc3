"""
Dice tool — rolls every dice expression found in the input.

Understands [count]d<faces>[+/-modifier] anywhere in a line, so all of
these work:
  "d20"
  "roll 2d6+1 for damage"
  "3d6-2 and d100"

Each expression becomes one line:
  8d6+2 = 31: 3, 1, 2, 5, 6, 6, 4, 2  (+2)

When more than one expression is present a final "grand total: N" line is
added.

Expressions asking for more than MAX_DICE dice are skipped and logged.
"""

import logging
import re
from dataclasses import dataclass

from flyingferret.rng import RandomSource

logger = logging.getLogger(__name__)

MAX_DICE = 1000

# d6 2d20 2d10+1 3d6-5 d100+3 ...
# A count only starts where a digit run starts.
DICE_PATTERN = re.compile(r"(?:(?<!\d)\d+)?d\d+(?:[+-]\d+)?", re.IGNORECASE)

_COUNT = re.compile(r"^(\d+)")
_FACES = re.compile(r"d(\d+)", re.IGNORECASE)
_MODIFIER = re.compile(r"([+-])(\d+)$")


@dataclass(frozen=True)
class DiceSpec:
    count: int = 1
    faces: int = 1
    modifier: int = 0

    @property
    def modifier_text(self) -> str:
        """'+2', '-3', or '' for no modifier."""
        if self.modifier > 0:
            return f"+{self.modifier}"
        if self.modifier < 0:
            return str(self.modifier)
        return ""

    def __str__(self) -> str:
        return f"{self.count}d{self.faces}{self.modifier_text}"


@dataclass(frozen=True)
class RollResult:
    spec: DiceSpec
    rolls: tuple[int, ...]
    total: int

    def describe(self) -> str:
        line = f"{self.spec} = {self.total}: " + ", ".join(str(r) for r in self.rolls)
        if self.spec.modifier:
            line += f"  ({self.spec.modifier_text})"
        return line


def parse_dice_spec(setup: str) -> DiceSpec:
    """
    Turn one matched expression into a DiceSpec.
    Missing pieces fall back to count=1, faces=1, modifier=0, and zero
    faces is treated as one face.
    """
    setup = re.sub(r"^[^\dd]*", "", setup.strip(), flags=re.IGNORECASE)

    count = 1
    faces = 1
    modifier = 0

    m = _COUNT.match(setup)
    if m:
        count = int(m.group(1))
    m = _FACES.search(setup)
    if m:
        faces = int(m.group(1)) or 1
    m = _MODIFIER.search(setup)
    if m:
        modifier = int(m.group(2))
        if m.group(1) == "-":
            modifier = -modifier

    return DiceSpec(count=count, faces=faces, modifier=modifier)


def parse_dice_specs(text: str) -> list[DiceSpec]:
    """All non-overlapping dice expressions in text, left to right."""
    return [parse_dice_spec(setup) for setup in DICE_PATTERN.findall(text)]


def roll_dice(spec: DiceSpec, rng: RandomSource) -> RollResult:
    """Roll spec.count dice with spec.faces faces and add the modifier."""
    rolls = tuple(rng.randrange(spec.faces) + 1 for _ in range(spec.count))
    return RollResult(spec=spec, rolls=rolls, total=sum(rolls) + spec.modifier)


class DiceTool:
    """Rolls every XdY expression in the input and reports the details."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def run(self, query: str) -> list[str]:
        specs = []
        for spec in parse_dice_specs(query):
            if spec.count > MAX_DICE:
                logger.warning("Skipping %s: more than %d dice", spec, MAX_DICE)
                continue
            specs.append(spec)
        results = [roll_dice(spec, self.rng) for spec in specs]
        logger.debug("Dice: %s", ", ".join(str(s) for s in specs))

        lines = [result.describe() for result in results]
        if len(results) > 1:
            lines.append(f"grand total: {sum(r.total for r in results)}")
        return lines
