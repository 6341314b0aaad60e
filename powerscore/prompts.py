"""
Prompt Builders

Copy/paste prompts for scoring a power statement with an external LLM,
critiquing it against the deterministic result, and rewriting it.
Nothing here calls a model; the human pastes the prompt and brings the
response back through `clean_ai_response`.

Results may be passed as a ValidationResult or as its `to_dict()` form.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from powerscore.config import Calibration, settings
from powerscore.validator import DIMENSIONS, ValidationResult

CRITIQUE_ISSUE_LIMIT = 5

ResultLike = Union[ValidationResult, dict, None]


# ============================================================
# TEMPLATES
# ============================================================

SCORING_PROMPT = """You are an expert sales and career coach evaluating a Power Statement.

Power statements are achievement-focused statements that follow the format:
"Action verb + accomplishment + measurable result"

Calibration: {calibration_description}

Score this Power Statement using the following rubric (0-100 points total):

## SCORING RUBRIC

### 1. Clarity (25 points)
- **No Filler Words (8 pts)**: Clean, direct language without "very", "really", "basically"
- **No Jargon (7 pts)**: Avoids buzzwords like "synergy", "leverage", "paradigm shift"
- **Concise Length (5 pts)**: {concise_min}-{concise_max} words ideal, not too long or too short
- **Active Voice (5 pts)**: Uses active voice, not passive ("was done by")

### 2. Impact (25 points)
- **Business/Customer Impact (10 pts)**: States a clear outcome for the business or its customers
- **Quantified Results (10 pts)**: Includes specific numbers, percentages, or dollar amounts
- **Scale/Scope (5 pts)**: Indicates the scope (team size, company-wide, etc.)

### 3. Action (25 points)
- **Strong Opening Verb (15 pts)**: Starts with a powerful action verb (Led, Achieved, Drove)
- **Strong Verbs Throughout (5 pts)**: Uses multiple strong verbs
- **No Weak Verbs (5 pts)**: Avoids "helped", "assisted", "was responsible for"

### 4. Specificity (25 points)
- **Quantified Metrics (10 pts)**: At least 2 specific metrics (%, $, time, quantity)
- **Context Provided (8 pts)**: Clear setting (company, team size, scope)
- **Timeframe (7 pts)**: Includes when this happened or how long it took

### Deduction
- **Generic AI phrasing (up to -5 pts)**: Stock adjectives, "not just X, but Y", assistant chatter

## CALIBRATION GUIDANCE
- Be HARSH. Most power statements score 30-50. Only exceptional ones score 80+.
- A score of 70+ means ready to use.
- Deduct heavily for weak opening verbs ("Helped", "Was responsible for").
- Deduct for vague claims without numbers.
- Reward specific, quantified achievements.

## POWER STATEMENT TO EVALUATE

```
{text}
```

## REQUIRED OUTPUT FORMAT

Provide your evaluation in this exact format:

**TOTAL SCORE: [X]/100**

### Clarity: [X]/25
[2-3 sentence justification]

### Impact: [X]/25
[2-3 sentence justification]

### Action: [X]/25
[2-3 sentence justification]

### Specificity: [X]/25
[2-3 sentence justification]

### Top 3 Issues
1. [Most critical issue]
2. [Second issue]
3. [Third issue]

### Top 3 Strengths
1. [Strongest aspect]
2. [Second strength]
3. [Third strength]"""


CRITIQUE_PROMPT = """You are an expert sales and career coach giving detailed feedback on a Power Statement.

## CURRENT VALIDATION RESULTS
Total Score: {total_score}/100
{dimension_lines}

Key issues detected:
{issues}

## POWER STATEMENT TO CRITIQUE

```
{text}
```

## YOUR TASK

Provide:
1. **Quick Assessment** (2-3 sentences on overall quality)
2. **Detailed Critique** by dimension:
   - What works well
   - What needs improvement
   - Specific suggestions with examples
3. **Rewritten Power Statement** - the improved version

Be specific. Show exact rewrites. Stay within {concise_min}-{concise_max} words."""


REWRITE_PROMPT = """You are an expert sales and career coach rewriting a Power Statement to achieve a score of 85+.

## CURRENT SCORE: {total_score}/100

## ORIGINAL POWER STATEMENT

```
{text}
```

## REWRITE REQUIREMENTS

Create a powerful, ready-to-use statement that:
1. Starts with a strong action verb (Led, Drove, Achieved, Delivered, etc.)
2. Is {concise_min}-{concise_max} words (concise but complete)
3. Includes 2+ specific metrics (%, $, time, quantity)
4. States clear business or customer impact
5. Provides context (scope, team size, company)
6. Includes a timeframe when relevant
7. Uses active voice throughout
8. Avoids filler words, jargon, weak verbs and generic AI phrasing

Output ONLY the rewritten Power Statement. No commentary."""


# ============================================================
# HELPERS
# ============================================================

def _as_dict(result: ResultLike) -> dict:
    if result is None:
        return {}
    if isinstance(result, ValidationResult):
        return result.to_dict()
    return result


def _dimension(data: dict, name: str) -> dict:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _profile(calibration: Optional[Calibration]) -> Calibration:
    return calibration or settings.calibration


# ============================================================
# BUILDERS
# ============================================================

def generate_scoring_prompt(text: str, calibration: Optional[Calibration] = None) -> str:
    """Full rubric prompt for scoring `text` with an LLM."""
    profile = _profile(calibration)
    return SCORING_PROMPT.format(
        calibration_description=profile.description,
        concise_min=profile.concise_min,
        concise_max=profile.concise_max,
        text=text,
    )


def generate_critique_prompt(
    text: str,
    result: ResultLike,
    calibration: Optional[Calibration] = None,
) -> str:
    """Critique prompt seeded with the current scores and the first issues found."""
    profile = _profile(calibration)
    data = _as_dict(result)

    dimension_lines = "\n".join(
        f"- {name.capitalize()}: {_dimension(data, name).get('score') or 0}/25"
        for name in DIMENSIONS
    )

    issues: list[str] = []
    for name in DIMENSIONS:
        issues.extend(_dimension(data, name).get("issues") or [])
    issue_lines = "\n".join(f"- {i}" for i in issues[:CRITIQUE_ISSUE_LIMIT])

    return CRITIQUE_PROMPT.format(
        total_score=data.get("total_score", 0),
        dimension_lines=dimension_lines,
        issues=issue_lines or "- None detected by automated scan",
        text=text,
        concise_min=profile.concise_min,
        concise_max=profile.concise_max,
    )


def generate_rewrite_prompt(
    text: str,
    result: ResultLike,
    calibration: Optional[Calibration] = None,
) -> str:
    """Rewrite prompt targeting a score of 85+."""
    profile = _profile(calibration)
    data = _as_dict(result)
    return REWRITE_PROMPT.format(
        total_score=data.get("total_score", 0),
        text=text,
        concise_min=profile.concise_min,
        concise_max=profile.concise_max,
    )


_PREAMBLE_RE = re.compile(r"^(?:Here's|Here is|I've|I have|Below is)[^:]*:\s*", re.IGNORECASE)
_CODE_BLOCK_RE = re.compile(r"```(?:markdown)?\s*([\s\S]*?)```")


def clean_ai_response(response: str) -> str:
    """Strip a conversational preamble and unwrap the first fenced block."""
    if not isinstance(response, str):
        return ""
    cleaned = _PREAMBLE_RE.sub("", response, count=1)
    match = _CODE_BLOCK_RE.search(cleaned)
    if match:
        cleaned = match.group(1)
    return cleaned.strip()
