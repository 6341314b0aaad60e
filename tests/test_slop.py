"""
Tests for slop detection: rule weights, per-rule occurrence caps,
structural checks and the 0-100 clamp.
"""

import pytest

from powerscore.slop import (
    MAX_PENALTY,
    OCCURRENCE_CAP,
    SLOP_RULES,
    detect_slop,
)
from powerscore.lexicons import DEFAULT_LEXICON


class TestDetectSlop:

    def test_clean_text(self):
        s = detect_slop("Led a team of 8 engineers to cut deployment time 75% in Q1 2025.")
        assert s.penalty == 0
        assert s.issues == ()

    def test_disclosure_and_adjectives(self):
        s = detect_slop("As an AI, I think this seamless, groundbreaking plan is crucial.")
        # disclosure 10 + three adjectives at 2 each
        assert s.penalty == 16
        assert s.issues[0].startswith("Generic AI adjectives:")
        assert s.issues[-1].startswith("Assistant chatter")

    def test_occurrence_cap(self):
        s = detect_slop("crucial crucial crucial crucial crucial")
        assert s.penalty == 2 * OCCURRENCE_CAP

    def test_issue_dedupes_matches(self):
        s = detect_slop("Crucial, crucial, CRUCIAL")
        assert s.issues == ('Generic AI adjectives: "crucial"',)

    def test_not_just_but(self):
        s = detect_slop("This is not just a tool, but a partner")
        assert s.penalty == 3
        assert "not just X, but Y" in s.issues[0]

    def test_placeholder(self):
        s = detect_slop("Grew [Company Name] revenue 20%")
        assert s.penalty == 5
        assert s.issues[0].startswith("Unfilled template placeholders")

    def test_em_dash_density(self):
        s = detect_slop("Results — fast — cheap — done")
        assert s.penalty == 3
        assert s.issues == ("Heavy em-dash use: 3 in 7 words",)

    def test_single_em_dash_in_long_text_is_fine(self):
        text = " ".join(["word"] * 200) + " — end"
        assert detect_slop(text).penalty == 0

    def test_penalty_clamped(self):
        text = " ".join([
            "As an AI, I hope this helps. Feel free to ask. Great question.",
            "Let me know if you need more. As a language model I delve.",
            "crucial pivotal seamless tapestry journey realm moreover notably",
        ] * 10)
        s = detect_slop(text)
        assert 0 < s.penalty <= MAX_PENALTY

    @pytest.mark.parametrize("value", [None, "", "   ", 12])
    def test_empty_or_non_string(self, value):
        assert detect_slop(value).penalty == 0

    def test_to_dict(self):
        data = detect_slop("A crucial step").to_dict()
        assert data["penalty"] == 2
        assert data["matches"] == ("crucial",)


class TestSlopRuleTable:

    def test_all_rules_are_slop_kind(self):
        assert all(r.kind == "slop" for r in SLOP_RULES)

    def test_rule_names_unique(self):
        names = [r.name for r in SLOP_RULES]
        assert len(names) == len(set(names))

    def test_no_overlap_with_strong_verbs(self):
        """Slop words must not double-punish verbs the action scorer rewards."""
        for verb in DEFAULT_LEXICON.strong_verbs:
            assert detect_slop(verb).penalty == 0, verb

    def test_no_overlap_with_jargon(self):
        for phrase in ("synergy", "leverage", "holistic", "game-changer", "best-in-class"):
            assert detect_slop(phrase).penalty == 0
