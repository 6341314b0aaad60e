"""
Detectors — Signal Extraction

Four pure functions, one per scoring dimension. Each scans the text
once and returns a frozen signal bundle of booleans, counts and a few
matched substrings. Detectors hold no state and never raise: anything
that is not a string is scanned as the empty string.

  detect_clarity       filler, jargon, length band, passive voice
  detect_impact        business / customer / scale / improvement language
  detect_action_verbs  opening word, strong verbs, weak verbs
  detect_specificity   numbers, percentages, money, durations, quantities
"""

from __future__ import annotations

import re
from dataclasses import dataclass, asdict
from typing import Optional

from powerscore.config import Calibration, settings
from powerscore.lexicons import DEFAULT_LEXICON, Lexicon, PatternRule

# Matched-substring lists are capped at this many entries.
MATCH_CAP = 5


# ============================================================
# SIGNAL BUNDLES
# ============================================================

@dataclass(frozen=True)
class ClaritySignals:
    has_fillers: bool
    filler_count: int
    fillers_found: tuple[str, ...]
    has_jargon: bool
    jargon_count: int
    jargon_found: tuple[str, ...]
    word_count: int
    is_concise: bool
    is_too_short: bool
    is_too_long: bool
    has_passive_voice: bool
    indicators: tuple[str, ...]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ImpactSignals:
    has_business_impact: bool
    business_count: int
    has_customer_impact: bool
    customer_count: int
    has_scale: bool
    scale_count: int
    has_improvement_language: bool
    improvement_count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ActionVerbSignals:
    opening_word: str
    starts_with_strong_verb: bool
    starts_with_weak_pattern: bool
    strong_verb_count: int
    strong_verbs_found: tuple[str, ...]
    has_weak_verbs: bool
    weak_verb_count: int
    weak_verbs_found: tuple[str, ...]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SpecificitySignals:
    has_numbers: bool
    number_count: int
    numbers: tuple[str, ...]
    has_percentages: bool
    percentage_count: int
    percentages: tuple[str, ...]
    has_dollar_amounts: bool
    dollar_count: int
    dollar_amounts: tuple[str, ...]
    has_time_metrics: bool
    time_count: int
    time_metrics: tuple[str, ...]
    has_quantities: bool
    quantity_count: int
    quantities: tuple[str, ...]
    has_comparisons: bool
    comparisons: tuple[str, ...]
    has_context: bool
    has_team_context: bool
    has_time_cadence: bool

    @property
    def metric_count(self) -> int:
        """Quantified metrics only. Bare numbers do not count."""
        return (
            self.percentage_count + self.dollar_count
            + self.time_count + self.quantity_count
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["metric_count"] = self.metric_count
        return data


# ============================================================
# PATTERNS
# ============================================================

_PASSIVE_RE = re.compile(r"\b(?:was|were|been|being)\s+\w+ed\b", re.IGNORECASE)

_BUSINESS_IMPACT_RE = re.compile(
    r"\b(?:revenue|profits?|profitability|costs?|savings?|efficiency|"
    r"productivity|growth|roi|margins?|bottom\s+line|market\s+share|"
    r"sales|earnings|conversions?|pipeline|throughput)\b",
    re.IGNORECASE,
)

_CUSTOMER_IMPACT_RE = re.compile(
    r"\b(?:customers?|users?|clients?|satisfaction|retention|churn|nps|"
    r"loyalty|experience|engagement|adoption|patients?|buyers?|"
    r"shoppers?|subscribers?)\b",
    re.IGNORECASE,
)

_SCALE_RE = re.compile(
    r"\b(?:(?:company|organization|org|department|industry|region)[- ]wide|"
    r"enterprise(?:[- ]wide)?|global(?:ly)?|nation[- ]?wide|world[- ]?wide|"
    r"international(?:ly)?|multi[- ]?national|cross[- ]functional|"
    r"fortune\s+\d+)\b",
    re.IGNORECASE,
)

_IMPROVEMENT_RE = re.compile(
    r"\b(?:improved|increased|reduced|decreased|grew|doubled|tripled|"
    r"boosted|cut|accelerated|optimized|streamlined|expanded|lowered|"
    r"raised|saved|eliminated|enhanced|strengthened|maximized|minimized|"
    r"shortened)\b",
    re.IGNORECASE,
)

_NUMBER_RE = re.compile(r"\d+(?:[.,]\d+)*")

_PERCENT_RE = re.compile(r"\d+(?:\.\d+)?\s?(?:%|percent\b)", re.IGNORECASE)

_DOLLAR_RE = re.compile(
    r"(?:[$€£]\s?\d[\d,]*(?:\.\d+)?"
    r"(?:\s?(?:k|m|b|bn|mm|thousand|million|billion|trillion)\b)?"
    r"|\b\d[\d,]*(?:\.\d+)?\s?(?:thousand|million|billion|trillion)\b)",
    re.IGNORECASE,
)

_TIME_RE = re.compile(
    r"\b\d+(?:\.\d+)?[\s-]?(?:hours?|hrs?|minutes?|mins?|seconds?|days?|"
    r"weeks?|months?|years?|yrs?|quarters?)\b",
    re.IGNORECASE,
)

# A scale word after the number makes it an amount, not a head count.
_QUANTITY_RE = re.compile(
    r"\b\d[\d,]*\+?\s+(?!(?:thousand|million|billion|trillion)\b)(?:[a-z-]+\s+)?"
    r"(?:engineers?|developers?|people|employees?|staff|teams?|members?|"
    r"customers?|clients?|users?|accounts?|stores?|locations?|sites?|"
    r"offices?|countries|markets?|regions?|projects?|products?|partners?|"
    r"vendors?|stakeholders?|reps?|representatives?|agents?|dealerships?|"
    r"hospitals?|schools?|departments?|units?|deals?|leads?|calls?|"
    r"transactions?|orders?|tickets?|releases?|features?|applications?|"
    r"apps?|services?|servers?|integrations?)\b",
    re.IGNORECASE,
)

_COMPARISON_RE = re.compile(
    r"\b(?:increased|decreased|reduced|improved|grew|doubled|tripled|cut|"
    r"boosted|raised|lowered|accelerated|expanded|dropped|shrank|saved|"
    r"slashed)\s+(?:[\w$%-]+\s+){0,3}?by\s+[$€£]?\d",
    re.IGNORECASE,
)

# Preposition is case-insensitive; the following word must be capitalized.
_CONTEXT_RE = re.compile(r"\b(?i:at|for|with|across|within)\s+[A-Z][\w&.-]*")

_TEAM_RE = re.compile(
    r"\b(?:teams?|departments?|company|companies|organi[sz]ations?|"
    r"division|business\s+unit|org|group|squad|staff|agency|firm)\b",
    re.IGNORECASE,
)

_CADENCE_RE = re.compile(
    r"\b(?:quarters?|quarterly|q[1-4]|annually|annual|yearly|monthly|"
    r"weekly|year[- ]over[- ]year|yoy)\b",
    re.IGNORECASE,
)

_OPENING_PUNCT = "\"'“”‘’()[]{}.,;:!?*•-"


# ============================================================
# HELPERS
# ============================================================

def _coerce(text) -> str:
    return text if isinstance(text, str) else ""


def _normalize(match: str) -> str:
    return " ".join(match.lower().split())


def _dedupe(matches: list[str]) -> tuple[str, ...]:
    """Normalized, order-preserving, capped."""
    return tuple(dict.fromkeys(_normalize(m) for m in matches))[:MATCH_CAP]


def _at_opening(text: str, pos: int) -> bool:
    return not text[:pos].strip().strip(_OPENING_PUNCT)


def _scan_rules(text: str, rules: tuple[PatternRule, ...]) -> tuple[int, list[str]]:
    """Weighted match count and raw matches across a rule table."""
    count = 0
    found: list[str] = []
    for rule in rules:
        matches = rule.find(text)
        count += len(matches) * rule.weight
        found.extend(matches)
    return count, found


# ============================================================
# DETECTORS
# ============================================================

def detect_clarity(
    text: str,
    *,
    lexicon: Lexicon = DEFAULT_LEXICON,
    calibration: Optional[Calibration] = None,
) -> ClaritySignals:
    """Filler, jargon, length and voice signals."""
    text = _coerce(text)
    calibration = calibration or settings.calibration

    filler_count, fillers = _scan_rules(text, lexicon.filler_rules)
    jargon_count, jargon = _scan_rules(text, lexicon.jargon_rules)

    word_count = len([w for w in text.split() if w])
    is_concise = calibration.concise_min <= word_count <= calibration.concise_max
    is_too_short = word_count < calibration.too_short_below
    is_too_long = word_count > calibration.too_long_above
    has_passive = bool(_PASSIVE_RE.search(text))

    indicators: list[str] = []
    if filler_count == 0:
        indicators.append("No filler words")
    else:
        indicators.append(f"{filler_count} filler word(s) found")
    if jargon_count == 0:
        indicators.append("No jargon")
    else:
        indicators.append(f"{jargon_count} jargon term(s) found")
    if is_concise:
        indicators.append(f"Concise ({word_count} words)")
    if is_too_long:
        indicators.append(f"Too long ({word_count} words)")
    if is_too_short:
        indicators.append(f"Too short ({word_count} words)")
    if has_passive:
        indicators.append("Passive voice detected")
    else:
        indicators.append("Active voice")

    return ClaritySignals(
        has_fillers=filler_count > 0,
        filler_count=filler_count,
        fillers_found=_dedupe(fillers),
        has_jargon=jargon_count > 0,
        jargon_count=jargon_count,
        jargon_found=_dedupe(jargon),
        word_count=word_count,
        is_concise=is_concise,
        is_too_short=is_too_short,
        is_too_long=is_too_long,
        has_passive_voice=has_passive,
        indicators=tuple(indicators),
    )


def detect_impact(text: str) -> ImpactSignals:
    """Four independent impact families. No cross-family interaction."""
    text = _coerce(text)

    business = _BUSINESS_IMPACT_RE.findall(text)
    customer = _CUSTOMER_IMPACT_RE.findall(text)
    scale = _SCALE_RE.findall(text)
    improvement = _IMPROVEMENT_RE.findall(text)

    return ImpactSignals(
        has_business_impact=bool(business),
        business_count=len(business),
        has_customer_impact=bool(customer),
        customer_count=len(customer),
        has_scale=bool(scale),
        scale_count=len(scale),
        has_improvement_language=bool(improvement),
        improvement_count=len(improvement),
    )


def detect_action_verbs(
    text: str,
    *,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> ActionVerbSignals:
    """
    Opening-word and verb-strength signals.

    The strong-opening and weak-opening checks are independent: a text
    whose first word is in neither list leaves both flags False.
    """
    text = _coerce(text)

    tokens = text.split()
    opening_word = tokens[0].lower().strip(_OPENING_PUNCT) if tokens else ""
    starts_strong = bool(opening_word) and lexicon.is_strong_verb(opening_word)
    starts_weak = bool(lexicon.weak_opener_re.match(text))

    stems = [
        m.group(1).lower()
        for m in lexicon.strong_verb_re.finditer(text)
        if _at_opening(text, m.start()) or lexicon.counts_in_body(m.group(0))
    ]
    distinct_stems = list(dict.fromkeys(stems))

    weak: list[str] = []
    for rule in lexicon.weak_verbs:
        matches = rule.find(text)
        if matches:
            weak.append(_normalize(matches[0]))
    distinct_weak = list(dict.fromkeys(weak))

    return ActionVerbSignals(
        opening_word=opening_word,
        starts_with_strong_verb=starts_strong,
        starts_with_weak_pattern=starts_weak,
        strong_verb_count=len(distinct_stems),
        strong_verbs_found=tuple(distinct_stems[:MATCH_CAP]),
        has_weak_verbs=bool(distinct_weak),
        weak_verb_count=len(distinct_weak),
        weak_verbs_found=tuple(distinct_weak[:MATCH_CAP]),
    )


def detect_specificity(text: str) -> SpecificitySignals:
    """Five independent metric families plus context and cadence flags."""
    text = _coerce(text)

    numbers = _NUMBER_RE.findall(text)
    percentages = _PERCENT_RE.findall(text)
    dollars = _DOLLAR_RE.findall(text)
    times = _TIME_RE.findall(text)
    quantities = _QUANTITY_RE.findall(text)
    comparisons = [m.group(0) for m in _COMPARISON_RE.finditer(text)]

    return SpecificitySignals(
        has_numbers=bool(numbers),
        number_count=len(numbers),
        numbers=_dedupe(numbers),
        has_percentages=bool(percentages),
        percentage_count=len(percentages),
        percentages=_dedupe(percentages),
        has_dollar_amounts=bool(dollars),
        dollar_count=len(dollars),
        dollar_amounts=_dedupe(dollars),
        has_time_metrics=bool(times),
        time_count=len(times),
        time_metrics=_dedupe(times),
        has_quantities=bool(quantities),
        quantity_count=len(quantities),
        quantities=_dedupe(quantities),
        has_comparisons=bool(comparisons),
        comparisons=_dedupe(comparisons),
        has_context=bool(_CONTEXT_RE.search(text)),
        has_team_context=bool(_TEAM_RE.search(text)),
        has_time_cadence=bool(_CADENCE_RE.search(text)),
    )
