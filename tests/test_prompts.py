"""
Tests for the copy/paste prompt builders and response cleaning.
"""

from powerscore.config import RESUME, SALES
from powerscore.prompts import (
    CRITIQUE_ISSUE_LIMIT,
    clean_ai_response,
    generate_critique_prompt,
    generate_rewrite_prompt,
    generate_scoring_prompt,
)
from powerscore.validator import validate_power_statement

STATEMENT = (
    "Led a team of 5 engineers to deliver a new payment system that reduced "
    "checkout time by 40% and increased revenue by $2M annually."
)

MOCK_RESULT = {
    "total_score": 65,
    "clarity": {"score": 18, "issues": ["Contains filler words"]},
    "impact": {"score": 20, "issues": []},
    "action": {"score": 15, "issues": ["Weak opening verb"]},
    "specificity": {"score": 12, "issues": ["Missing timeframe"]},
}


class TestScoringPrompt:

    def test_contains_statement(self):
        assert STATEMENT in generate_scoring_prompt(STATEMENT)

    def test_rubric_sections(self):
        prompt = generate_scoring_prompt(STATEMENT)
        for section in ("Clarity", "Impact", "Action", "Specificity"):
            assert section in prompt
        assert "25 points" in prompt
        assert "/100" in prompt

    def test_guidance_and_output_format(self):
        prompt = generate_scoring_prompt(STATEMENT)
        assert "CALIBRATION GUIDANCE" in prompt
        assert "Be HARSH" in prompt
        assert "REQUIRED OUTPUT FORMAT" in prompt
        assert "TOTAL SCORE" in prompt

    def test_word_band_follows_calibration(self):
        assert "8-25 words ideal" in generate_scoring_prompt(STATEMENT, calibration=RESUME)
        assert "50-150 words ideal" in generate_scoring_prompt(STATEMENT, calibration=SALES)

    def test_braces_in_statement_survive(self):
        text = "Cut {latency} by 30%"
        assert text in generate_scoring_prompt(text)


class TestCritiquePrompt:

    def test_contains_statement_and_scores(self):
        prompt = generate_critique_prompt(STATEMENT, MOCK_RESULT)
        assert STATEMENT in prompt
        assert "Total Score: 65/100" in prompt
        assert "- Clarity: 18/25" in prompt
        assert "- Impact: 20/25" in prompt

    def test_lists_issues(self):
        prompt = generate_critique_prompt(STATEMENT, MOCK_RESULT)
        assert "- Contains filler words" in prompt
        assert "- Weak opening verb" in prompt
        assert "- Missing timeframe" in prompt

    def test_issue_limit(self):
        result = {
            "total_score": 10,
            "clarity": {"score": 0, "issues": [f"issue {i}" for i in range(8)]},
        }
        prompt = generate_critique_prompt(STATEMENT, result)
        assert f"issue {CRITIQUE_ISSUE_LIMIT - 1}" in prompt
        assert f"issue {CRITIQUE_ISSUE_LIMIT}" not in prompt

    def test_missing_fields(self):
        prompt = generate_critique_prompt(STATEMENT, {"total_score": 50})
        assert "Total Score: 50/100" in prompt
        assert "- Clarity: 0/25" in prompt
        assert "None detected by automated scan" in prompt

    def test_non_mapping_dimension_ignored(self):
        prompt = generate_critique_prompt(STATEMENT, {"total_score": 30, "clarity": 5})
        assert "- Clarity: 0/25" in prompt

    def test_accepts_validation_result(self):
        result = validate_power_statement("Helped the team with various things.")
        prompt = generate_critique_prompt("Helped the team with various things.", result)
        assert f"Total Score: {result.total_score}/100" in prompt
        assert "Replace weak opening with a strong action verb" in prompt


class TestRewritePrompt:

    def test_contents(self):
        prompt = generate_rewrite_prompt(STATEMENT, MOCK_RESULT, calibration=RESUME)
        assert "CURRENT SCORE: 65/100" in prompt
        assert STATEMENT in prompt
        assert "Is 8-25 words" in prompt
        assert "Output ONLY the rewritten Power Statement" in prompt

    def test_none_result(self):
        assert "CURRENT SCORE: 0/100" in generate_rewrite_prompt(STATEMENT, None)


class TestCleanAIResponse:

    def test_strips_preamble(self):
        assert clean_ai_response("Here's the rewrite: Led a team.") == "Led a team."

    def test_preamble_case_insensitive(self):
        assert clean_ai_response("below is my version:\nShipped it.") == "Shipped it."

    def test_unwraps_code_block(self):
        raw = "Sure.\n```markdown\nLed a team of 8.\n```\nHope that works."
        assert clean_ai_response(raw) == "Led a team of 8."

    def test_plain_text_trimmed(self):
        assert clean_ai_response("  Led a team.  ") == "Led a team."

    def test_non_string(self):
        assert clean_ai_response(None) == ""
