"""
Scoring ladders.

A ladder is an ordered tuple of rungs evaluated top to bottom; the
first rung whose predicate holds awards its points and contributes its
message. Every ladder ends with an unconditional rung, so exactly one
rung fires per climb.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

ISSUE = "issue"
STRENGTH = "strength"


@dataclass(frozen=True)
class Rung:
    predicate: Callable[[Any], bool]
    points: int
    message: Optional[Callable[[Any], str] | str] = None
    kind: str = ISSUE

    def render(self, signals) -> Optional[str]:
        if self.message is None:
            return None
        if callable(self.message):
            return self.message(signals)
        return self.message


def always(_signals) -> bool:
    return True


def climb(rungs: tuple[Rung, ...], signals) -> Rung:
    """Return the first rung whose predicate holds for `signals`."""
    for rung in rungs:
        if rung.predicate(signals):
            return rung
    raise ValueError("Ladder has no matching rung; end it with an `always` rung")
