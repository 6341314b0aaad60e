"""
Tests for the aggregate validator.

Covers the empty-input contract, the sum invariant, bounds,
idempotence, the slop deduction and the four reference scenarios.
"""

import pytest

from powerscore.config import RESUME, SALES, Settings, settings
from powerscore.validator import (
    NO_CONTENT,
    ValidationResult,
    get_score_color,
    get_score_label,
    slop_deduction,
    validate_power_statement,
)

EXCELLENT = "Led a team of 8 engineers to cut deployment time 75% in Q1 2025, saving $500K annually."
WEAK = "Helped the team with various things."
JARGON = "We basically leverage synergy to deliver very best-in-class results."
FORTY_WORDS = (
    "Redesigned the onboarding program for account managers by pairing each hire "
    "with a mentor, rewriting the training guides, and adding weekly practice calls "
    "so that new managers could answer customer questions with confidence during "
    "their first quarter on the job."
)
SLOPPY = EXCELLENT + " As an AI, I find this seamless and crucial."

SAMPLES = [EXCELLENT, WEAK, JARGON, FORTY_WORDS, SLOPPY, "x" * 50, "word " * 400]


def _sum(result: ValidationResult) -> int:
    return sum(d.score for d in result.dimensions().values())


# ============================================================
# EMPTY INPUT
# ============================================================

class TestEmptyInput:

    @pytest.mark.parametrize("value", [None, "", "   \n\t ", 42, ["text"]])
    def test_zero_result(self, value):
        result = validate_power_statement(value)
        assert result.total_score == 0
        assert result.slop_detection is None
        for dim in result.dimensions().values():
            assert dim.score == 0
            assert dim.issues == [NO_CONTENT]
            assert dim.strengths == []

    def test_strict_mode_minimum_length(self):
        assert validate_power_statement("Led team.", strict=True).total_score == 0
        assert validate_power_statement("Led team.", strict=False).total_score > 0

    def test_whitespace_is_empty_even_without_strict(self):
        assert validate_power_statement("     ", strict=False).clarity.issues == [NO_CONTENT]


# ============================================================
# INVARIANTS
# ============================================================

class TestInvariants:

    @pytest.mark.parametrize("text", SAMPLES)
    def test_sum_invariant(self, text):
        result = validate_power_statement(text)
        deduction = result.slop_detection.deduction if result.slop_detection else 0
        assert result.total_score == max(0, _sum(result) - deduction)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_bounds(self, text):
        result = validate_power_statement(text)
        assert 0 <= result.total_score <= 100
        for dim in result.dimensions().values():
            assert 0 <= dim.score <= dim.max_score == 25

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        assert validate_power_statement(text).to_dict() == validate_power_statement(text).to_dict()

    def test_unknown_calibration_raises(self):
        with pytest.raises(ValueError):
            validate_power_statement(EXCELLENT, calibration="poetry")

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_empty_input_checked_before_calibration(self, value):
        result = validate_power_statement(value, calibration="poetry")
        assert result.total_score == 0
        assert result.clarity.issues == [NO_CONTENT]

    def test_misconfigured_default_only_affects_real_text(self, monkeypatch):
        import powerscore.validator as validator
        monkeypatch.setattr(validator, "settings", Settings(CALIBRATION="poetry"))
        assert validate_power_statement("").total_score == 0
        with pytest.raises(ValueError):
            validate_power_statement(EXCELLENT)

    def test_calibration_by_name(self):
        by_name = validate_power_statement(EXCELLENT, calibration="resume")
        by_profile = validate_power_statement(EXCELLENT, calibration=RESUME)
        assert by_name.to_dict() == by_profile.to_dict()


# ============================================================
# SLOP DEDUCTION
# ============================================================

class TestSlopDeduction:

    def test_deduction_formula(self):
        assert slop_deduction(0) == 0
        assert slop_deduction(1) == 0
        assert slop_deduction(4) == 2
        assert slop_deduction(100) == settings.SLOP_DEDUCTION_CAP

    def test_deduction_applied(self):
        result = validate_power_statement(SLOPPY, calibration=SALES, detect_slop=True)
        assert result.slop_detection is not None
        assert result.slop_detection.penalty == 14
        assert result.slop_detection.deduction == 5
        assert result.total_score == _sum(result) - 5

    def test_disabled(self):
        result = validate_power_statement(SLOPPY, calibration=SALES, detect_slop=False)
        assert result.slop_detection is None
        assert result.total_score == _sum(result)

    def test_absent_when_no_penalty(self):
        result = validate_power_statement(EXCELLENT, detect_slop=True)
        assert result.slop_detection is None
        assert "slop_detection" not in result.to_dict()


# ============================================================
# SCENARIOS
# ============================================================

class TestScenarios:

    def test_weak_opener(self):
        result = validate_power_statement(WEAK, calibration=SALES)
        assert result.action.score == 4
        assert "Replace weak opening with a strong action verb" in result.action.issues
        assert result.clarity.score == 22
        assert result.total_score == 36

    def test_excellent_statement(self):
        result = validate_power_statement(EXCELLENT, calibration=SALES)
        assert result.action.strengths[0].startswith("Opens with a strong action verb")
        assert result.specificity.score >= 17
        assert result.total_score == 92
        assert result.total_score >= 70

    def test_excellent_statement_resume_profile(self):
        result = validate_power_statement(EXCELLENT, calibration=RESUME)
        assert result.clarity.score == 25
        assert result.total_score == 95

    def test_jargon_and_filler(self):
        result = validate_power_statement(JARGON, calibration=SALES)
        assert result.clarity.score < result.clarity.max_score
        assert any(i.startswith("Remove filler words:") for i in result.clarity.issues)
        assert any(i.startswith("Replace jargon") for i in result.clarity.issues)

    def test_dimension_independence(self):
        result = validate_power_statement(FORTY_WORDS, calibration=SALES)
        assert result.clarity.score == 23
        assert "Add specific numbers and metrics" in result.specificity.issues
        assert result.specificity.score <= 15


# ============================================================
# PRESENTATION
# ============================================================

class TestPresentation:

    @pytest.mark.parametrize("score,color", [
        (100, "green"), (70, "green"), (69, "yellow"), (50, "yellow"),
        (49, "orange"), (30, "orange"), (29, "red"), (0, "red"),
    ])
    def test_color(self, score, color):
        assert get_score_color(score) == color

    @pytest.mark.parametrize("score,label", [
        (80, "Excellent"), (79, "Ready"), (70, "Ready"), (69, "Needs Work"),
        (50, "Needs Work"), (49, "Draft"), (30, "Draft"), (29, "Incomplete"),
    ])
    def test_label(self, score, label):
        assert get_score_label(score) == label

    def test_to_dict_shape(self):
        data = validate_power_statement(EXCELLENT).to_dict()
        assert set(data) == {"total_score", "clarity", "impact", "action", "specificity"}
        assert data["action"]["max_score"] == 25
