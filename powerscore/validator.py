"""
Validator — Power Statement Aggregator

Runs the four dimension scorers, sums them and applies the slop
deduction:

    total = max(0, clarity + impact + action + specificity - slop_deduction)
    slop_deduction = min(SLOP_DEDUCTION_CAP, floor(penalty * SLOP_DEDUCTION_RATE))

Input that is not a string, is blank, or (in strict mode) is shorter
than MIN_CONTENT_LENGTH after trimming yields the zero result instead
of being scored. Scoring itself never raises; only an unknown
calibration name does, at lookup.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from powerscore.config import Calibration, get_calibration, settings
from powerscore.lexicons import DEFAULT_LEXICON, Lexicon
from powerscore.scorer import (
    DimensionScore,
    score_action,
    score_clarity,
    score_impact,
    score_specificity,
)
from powerscore.slop import detect_slop as _detect_slop

logger = logging.getLogger(__name__)

NO_CONTENT = "No content to validate"
DIMENSIONS = ("clarity", "impact", "action", "specificity")


@dataclass
class SlopDetection:
    penalty: int
    issues: list[str]
    deduction: int

    def to_dict(self) -> dict:
        return {
            "penalty": self.penalty,
            "issues": list(self.issues),
            "deduction": self.deduction,
        }


@dataclass
class ValidationResult:
    """Complete scoring result for one power statement."""
    total_score: int
    clarity: DimensionScore
    impact: DimensionScore
    action: DimensionScore
    specificity: DimensionScore
    slop_detection: Optional[SlopDetection] = None

    def dimensions(self) -> dict[str, DimensionScore]:
        return {name: getattr(self, name) for name in DIMENSIONS}

    def to_dict(self) -> dict:
        data = {"total_score": self.total_score}
        data.update({name: dim.to_dict() for name, dim in self.dimensions().items()})
        if self.slop_detection is not None:
            data["slop_detection"] = self.slop_detection.to_dict()
        return data


def _empty_dimension() -> DimensionScore:
    return DimensionScore(score=0, issues=[NO_CONTENT], strengths=[])


def empty_result() -> ValidationResult:
    return ValidationResult(
        total_score=0,
        clarity=_empty_dimension(),
        impact=_empty_dimension(),
        action=_empty_dimension(),
        specificity=_empty_dimension(),
    )


def resolve_calibration(calibration: Union[Calibration, str, None]) -> Calibration:
    """Accept a profile, a profile name, or None for the configured default."""
    if calibration is None:
        return settings.calibration
    if isinstance(calibration, Calibration):
        return calibration
    return get_calibration(calibration)


def slop_deduction(penalty: int) -> int:
    """Bounded score deduction for a slop penalty."""
    if penalty <= 0:
        return 0
    return min(
        settings.SLOP_DEDUCTION_CAP,
        math.floor(penalty * settings.SLOP_DEDUCTION_RATE),
    )


def validate_power_statement(
    text: str,
    *,
    strict: Optional[bool] = None,
    calibration: Union[Calibration, str, None] = None,
    detect_slop: Optional[bool] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> ValidationResult:
    """
    Score a power statement out of 100.

    Args:
        text: The statement to score.
        strict: Enforce MIN_CONTENT_LENGTH. Defaults to settings.STRICT_MODE.
        calibration: Profile or profile name. Defaults to settings.CALIBRATION.
        detect_slop: Apply the slop deduction. Defaults to settings.SLOP_DETECTION.
        lexicon: Vocabulary for the clarity and action detectors.

    Returns:
        ValidationResult. `slop_detection` is set only when a positive
        penalty was found and detection is enabled.
    """
    if not isinstance(text, str) or not text.strip():
        return empty_result()

    profile = resolve_calibration(calibration)
    strict = settings.STRICT_MODE if strict is None else strict
    detect_slop = settings.SLOP_DETECTION if detect_slop is None else detect_slop

    if strict and len(text.strip()) < settings.MIN_CONTENT_LENGTH:
        return empty_result()

    clarity = score_clarity(text, lexicon=lexicon, calibration=profile)
    impact = score_impact(text)
    action = score_action(text, lexicon=lexicon, calibration=profile)
    specificity = score_specificity(text)

    total = clarity.score + impact.score + action.score + specificity.score

    slop = None
    if detect_slop:
        signals = _detect_slop(text)
        if signals.penalty > 0:
            deduction = slop_deduction(signals.penalty)
            slop = SlopDetection(
                penalty=signals.penalty,
                issues=list(signals.issues),
                deduction=deduction,
            )
            total -= deduction

    result = ValidationResult(
        total_score=max(0, total),
        clarity=clarity,
        impact=impact,
        action=action,
        specificity=specificity,
        slop_detection=slop,
    )

    logger.debug(
        "Power statement scored",
        extra={
            "total_score": result.total_score,
            "calibration": profile.name,
            "slop_penalty": slop.penalty if slop else 0,
        },
    )
    return result


# ============================================================
# PRESENTATION
# ============================================================

def get_score_color(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 50:
        return "yellow"
    if score >= 30:
        return "orange"
    return "red"


def get_score_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 70:
        return "Ready"
    if score >= 50:
        return "Needs Work"
    if score >= 30:
        return "Draft"
    return "Incomplete"
