"""
PowerScore — Power Statement Quality Scoring

Deterministic, rule-based scoring of short persuasive statements across
four 25-point dimensions (clarity, impact, action, specificity), minus
a bounded deduction for generic AI-sounding phrasing.

Public API:
  - validate_power_statement: Full 0-100 score with per-dimension feedback
  - score_clarity / score_impact / score_action / score_specificity
  - detect_clarity / detect_impact / detect_action_verbs / detect_specificity
  - detect_slop:      Generic AI phrasing penalty (0-100)
  - get_score_color / get_score_label: Presentation helpers
  - Prompt builders for copy/paste LLM review

Usage:
    from powerscore import validate_power_statement
    result = validate_power_statement("Led a team of 8 engineers ...")
    print(result.total_score)
"""

__version__ = "1.0.0"

from powerscore.config import Calibration, CALIBRATIONS, get_calibration, settings
from powerscore.lexicons import DEFAULT_LEXICON, Lexicon, PatternRule
from powerscore.detectors import (
    detect_action_verbs,
    detect_clarity,
    detect_impact,
    detect_specificity,
)
from powerscore.scorer import (
    DimensionScore,
    score_action,
    score_clarity,
    score_impact,
    score_specificity,
)
from powerscore.slop import SlopSignals, detect_slop
from powerscore.validator import (
    SlopDetection,
    ValidationResult,
    get_score_color,
    get_score_label,
    validate_power_statement,
)
from powerscore.prompts import (
    clean_ai_response,
    generate_critique_prompt,
    generate_rewrite_prompt,
    generate_scoring_prompt,
)

__all__ = [
    "Calibration",
    "CALIBRATIONS",
    "get_calibration",
    "settings",
    "DEFAULT_LEXICON",
    "Lexicon",
    "PatternRule",
    "detect_action_verbs",
    "detect_clarity",
    "detect_impact",
    "detect_specificity",
    "DimensionScore",
    "score_action",
    "score_clarity",
    "score_impact",
    "score_specificity",
    "SlopSignals",
    "detect_slop",
    "SlopDetection",
    "ValidationResult",
    "get_score_color",
    "get_score_label",
    "validate_power_statement",
    "clean_ai_response",
    "generate_critique_prompt",
    "generate_rewrite_prompt",
    "generate_scoring_prompt",
]
