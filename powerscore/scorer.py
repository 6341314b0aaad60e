"""
Dimension Scorers

Converts detector signals into points out of 25 for each dimension,
plus the human-readable issues and strengths behind every award.

Point allocations (each dimension sums to exactly 25 at maximum):

  Clarity      fillers 8, jargon 7, length 5, active voice 5
  Impact       business/customer 10, quantification 10, scale 5
  Action       strong opening 15, verb density 5, weak verbs 5
  Specificity  metrics 10, context 8, timeframe 7

Each explainable award or deduction appends exactly one string, in the
order the checks run: strengths on the good branch, issues on the bad
branch, never both for the same check.

`score_*` take raw text. `rate_*` take already-detected signals and are
what the ladders are tested against.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional

from powerscore.config import Calibration, settings
from powerscore.detectors import (
    ActionVerbSignals,
    ClaritySignals,
    ImpactSignals,
    SpecificitySignals,
    detect_action_verbs,
    detect_clarity,
    detect_impact,
    detect_specificity,
)
from powerscore.ladder import ISSUE, STRENGTH, Rung, always, climb
from powerscore.lexicons import DEFAULT_LEXICON, Lexicon

MAX_DIMENSION_SCORE = 25
# Issues name at most this many offending words.
NAMED_OFFENDERS = 3


@dataclass
class DimensionScore:
    """Score for a single dimension."""
    score: int
    max_score: int = MAX_DIMENSION_SCORE
    issues: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class _Tally:
    """Accumulates points and messages for one dimension."""

    def __init__(self):
        self.score = 0
        self.issues: list[str] = []
        self.strengths: list[str] = []

    def add(self, points: int, message: Optional[str] = None, kind: str = STRENGTH):
        self.score += points
        if message:
            (self.strengths if kind == STRENGTH else self.issues).append(message)

    def take(self, rungs: tuple[Rung, ...], signals):
        rung = climb(rungs, signals)
        self.add(rung.points, rung.render(signals), rung.kind)

    def result(self) -> DimensionScore:
        return DimensionScore(
            score=max(0, min(MAX_DIMENSION_SCORE, self.score)),
            issues=self.issues,
            strengths=self.strengths,
        )


def _named(words: tuple[str, ...]) -> str:
    return ", ".join(f'"{w}"' for w in words[:NAMED_OFFENDERS])


# ============================================================
# LADDERS
# ============================================================

QUANTIFICATION_LADDER: tuple[Rung, ...] = (
    Rung(lambda s: s.has_comparisons, 10,
         "Quantifies the change with a before/after comparison", STRENGTH),
    Rung(lambda s: s.has_percentages or s.has_dollar_amounts, 8,
         "Includes quantified results", STRENGTH),
    Rung(lambda s: s.has_numbers, 5,
         "Quantify the impact further with percentages, dollar amounts or comparisons"),
    Rung(always, 0, "Add quantified impact (percentages, dollar amounts)"),
)

OPENING_LADDER: tuple[Rung, ...] = (
    Rung(lambda s: s.starts_with_strong_verb, 15,
         lambda s: f'Opens with a strong action verb ("{s.opening_word}")', STRENGTH),
    Rung(lambda s: s.starts_with_weak_pattern, 0,
         "Replace weak opening with a strong action verb"),
    Rung(lambda s: s.strong_verb_count > 0, 8,
         "Move the strongest action verb to the beginning"),
    Rung(always, 0, "Start with a strong action verb"),
)

VERB_DENSITY_LADDER: tuple[Rung, ...] = (
    Rung(lambda s: s.strong_verb_count >= 2, 5,
         lambda s: f"Uses {s.strong_verb_count} strong action verbs", STRENGTH),
    Rung(lambda s: s.strong_verb_count == 1, 3),
    Rung(always, 0),
)

METRICS_LADDER: tuple[Rung, ...] = (
    Rung(lambda s: s.metric_count >= 2, 10,
         lambda s: f"Includes {s.metric_count} quantified metrics", STRENGTH),
    Rung(lambda s: s.metric_count == 1, 6,
         "Add more metrics (only one quantified metric found)"),
    Rung(lambda s: s.has_numbers, 3,
         "Convert numbers to meaningful metrics (%, $, time, quantity)"),
    Rung(always, 0, "Add specific numbers and metrics"),
)

CONTEXT_LADDER: tuple[Rung, ...] = (
    Rung(lambda s: s.has_context and s.has_team_context, 8,
         "Provides company and team context", STRENGTH),
    Rung(lambda s: s.has_context or s.has_team_context, 5,
         "Add more context (company name plus team or scope)"),
    Rung(always, 0, "Add context about scope (company, team or organization)"),
)

TIMEFRAME_LADDER: tuple[Rung, ...] = (
    Rung(lambda s: s.has_time_metrics or s.has_time_cadence, 7,
         "Includes a timeframe", STRENGTH),
    Rung(always, 0, "Add a timeframe (duration, quarter or cadence)"),
)


# ============================================================
# RATERS (signals -> DimensionScore)
# ============================================================

def rate_clarity(
    signals: ClaritySignals,
    calibration: Optional[Calibration] = None,
) -> DimensionScore:
    calibration = calibration or settings.calibration
    tally = _Tally()

    if not signals.has_fillers:
        tally.add(8, "No filler words")
    else:
        tally.add(
            max(0, 8 - 2 * signals.filler_count),
            f"Remove filler words: {_named(signals.fillers_found)}",
            ISSUE,
        )

    if not signals.has_jargon:
        tally.add(7, "No jargon or buzzwords")
    else:
        tally.add(
            max(0, 7 - 2 * signals.jargon_count),
            f"Replace jargon with plain language: {_named(signals.jargon_found)}",
            ISSUE,
        )

    wc = signals.word_count
    if signals.is_concise and not signals.is_too_short:
        tally.add(5, f"Concise length ({wc} words)")
    elif signals.is_too_long:
        tally.add(
            0,
            f"Too long ({wc} words) - aim for "
            f"{calibration.concise_min}-{calibration.concise_max} words",
            ISSUE,
        )
    elif signals.is_too_short:
        tally.add(2, f"Too short ({wc} words) - add more detail", ISSUE)
    else:
        tally.add(3)

    if not signals.has_passive_voice:
        tally.add(5, "Uses active voice")
    else:
        tally.add(2, "Use active voice instead of passive constructions", ISSUE)

    return tally.result()


def rate_impact(
    impact: ImpactSignals,
    specificity: SpecificitySignals,
) -> DimensionScore:
    tally = _Tally()

    if impact.has_business_impact or impact.has_customer_impact:
        tally.add(10)
        if impact.has_business_impact:
            tally.add(0, "States business impact")
        if impact.has_customer_impact:
            tally.add(0, "States customer impact")
    else:
        tally.add(0, "Add business or customer impact", ISSUE)

    tally.take(QUANTIFICATION_LADDER, specificity)

    if impact.has_scale or specificity.has_team_context:
        tally.add(5, "Shows scale or organizational scope")
    else:
        tally.add(0, "Add context about scale (team, company-wide, enterprise)", ISSUE)

    return tally.result()


def rate_action(
    signals: ActionVerbSignals,
    calibration: Optional[Calibration] = None,
) -> DimensionScore:
    calibration = calibration or settings.calibration
    tally = _Tally()

    tally.take(OPENING_LADDER, signals)
    tally.take(VERB_DENSITY_LADDER, signals)

    if not signals.has_weak_verbs:
        tally.add(5, "No weak verbs")
    else:
        points = max(
            calibration.weak_verb_floor,
            5 - calibration.weak_verb_step * signals.weak_verb_count,
        )
        tally.add(
            max(0, min(5, points)),
            f"Replace weak verbs: {_named(signals.weak_verbs_found)}",
            ISSUE,
        )

    return tally.result()


def rate_specificity(signals: SpecificitySignals) -> DimensionScore:
    tally = _Tally()
    tally.take(METRICS_LADDER, signals)
    tally.take(CONTEXT_LADDER, signals)
    tally.take(TIMEFRAME_LADDER, signals)
    return tally.result()


# ============================================================
# SCORERS (text -> DimensionScore)
# ============================================================

def score_clarity(
    text: str,
    *,
    lexicon: Lexicon = DEFAULT_LEXICON,
    calibration: Optional[Calibration] = None,
) -> DimensionScore:
    """Clarity: fillers (8), jargon (7), length (5), active voice (5)."""
    calibration = calibration or settings.calibration
    return rate_clarity(
        detect_clarity(text, lexicon=lexicon, calibration=calibration),
        calibration,
    )


def score_impact(text: str) -> DimensionScore:
    """Impact: business/customer (10), quantification (10), scale (5)."""
    return rate_impact(detect_impact(text), detect_specificity(text))


def score_action(
    text: str,
    *,
    lexicon: Lexicon = DEFAULT_LEXICON,
    calibration: Optional[Calibration] = None,
) -> DimensionScore:
    """Action: strong opening (15), verb density (5), weak verbs (5)."""
    return rate_action(detect_action_verbs(text, lexicon=lexicon), calibration)


def score_specificity(text: str) -> DimensionScore:
    """Specificity: metrics (10), context (8), timeframe (7)."""
    return rate_specificity(detect_specificity(text))
