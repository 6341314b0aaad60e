"""
Slop Detection

Flags generic, AI-sounding phrasing: stock adjectives and verbs, canned
transitions, "not just X, but Y" constructions, assistant disclosures,
template placeholders and em-dash density.

Each rule carries a weight. A rule's occurrences are capped before
weighting so one repeated word cannot dominate:

    penalty = clamp(0, 100, sum(weight * min(occurrences, OCCURRENCE_CAP)))

The validator turns the penalty into a small deduction from the total
score. Words already covered by the jargon table or the strong-verb
list are left out here so no phrase is punished twice.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, asdict

from powerscore.lexicons import PatternRule

OCCURRENCE_CAP = 3
MAX_PENALTY = 100
NAMED_MATCHES = 3

# Em dashes per 150 words above which the text reads as generated.
EM_DASH_WORDS_BASIS = 150.0
EM_DASH_DENSITY_THRESHOLD = 1.0
EM_DASH_WEIGHT = 3
PLACEHOLDER_WEIGHT = 5


@dataclass(frozen=True)
class SlopSignals:
    penalty: int
    issues: tuple[str, ...]
    matches: tuple[str, ...]

    def to_dict(self) -> dict:
        return asdict(self)


# ============================================================
# RULE TABLE
# ============================================================

SLOP_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        "ai_adjectives",
        r"crucial|pivotal|paramount|seamless(?:ly)?|multifaceted|"
        r"meticulous(?:ly)?|unparalleled|groundbreaking|cutting.edge|"
        r"revolutionary|transformative|invaluable|robust|impactful|"
        r"unprecedented|state.of.the.art",
        "slop",
        weight=2,
    ),
    PatternRule(
        "ai_verbs",
        r"delv(?:e|es|ed|ing)|embark(?:s|ed|ing)?|unleash(?:es|ed|ing)?|"
        r"unlock(?:s|ed|ing)?|foster(?:s|ed|ing)?|underscor(?:e|es|ed|ing)|"
        r"transcend(?:s|ed|ing)?|reimagin(?:e|es|ed|ing)",
        "slop",
        weight=2,
    ),
    PatternRule(
        "ai_nouns",
        r"tapestry|testament|landscape|realm|symphony|odyssey|nexus|"
        r"intricacies|journey",
        "slop",
        weight=2,
    ),
    PatternRule(
        "hedge_transitions",
        r"moreover|furthermore|additionally|notably|importantly|"
        r"interestingly|remarkably",
        "slop",
        weight=1,
    ),
    PatternRule(
        "stock_phrases",
        r"it['’]s\s+worth\s+noting|it['’]s\s+important\s+to\s+note|"
        r"at\s+the\s+end\s+of\s+the\s+day|in\s+today['’]s\s+fast.paced|"
        r"let['’]s\s+dive\s+in|here['’]s\s+the\s+thing|in\s+conclusion|"
        r"in\s+summary|without\s+further\s+ado|the\s+bottom\s+line\s+is|"
        r"the\s+key\s+takeaway",
        "slop",
        weight=3,
    ),
    PatternRule(
        "not_just_but",
        r"not\s+(?:just|only)\s+[^,.;]{1,40},?\s+but",
        "slop",
        weight=3,
    ),
    PatternRule(
        "assistant_disclosure",
        r"as\s+an\s+ai|as\s+a\s+language\s+model|i\s+hope\s+this\s+helps|"
        r"let\s+me\s+know\s+if|would\s+you\s+like\s+me\s+to|"
        r"feel\s+free\s+to|great\s+question",
        "slop",
        weight=10,
    ),
)

ISSUE_TEXT: dict[str, str] = {
    "ai_adjectives": "Generic AI adjectives",
    "ai_verbs": "Generic AI verbs",
    "ai_nouns": "Generic AI nouns",
    "hedge_transitions": "Filler transitions",
    "stock_phrases": "Stock phrases",
    "not_just_but": 'Formulaic "not just X, but Y" construction',
    "assistant_disclosure": "Assistant chatter left in the text",
    "placeholder": "Unfilled template placeholders",
    "em_dash": "Heavy em-dash use",
}

_PLACEHOLDER_RE = re.compile(
    r"\[(?:insert|your|describe|todo|company|name)[^\]]*\]", re.IGNORECASE
)
_EM_DASH_RE = re.compile(r"—| -- ")


def _quoted(matches: list[str]) -> str:
    distinct = list(dict.fromkeys(" ".join(m.lower().split()) for m in matches))
    return ", ".join(f'"{m}"' for m in distinct[:NAMED_MATCHES])


def detect_slop(text: str, *, rules: tuple[PatternRule, ...] = SLOP_RULES) -> SlopSignals:
    """Score generic AI phrasing. Non-strings and empty text score 0."""
    if not isinstance(text, str) or not text.strip():
        return SlopSignals(penalty=0, issues=(), matches=())

    penalty = 0
    issues: list[str] = []
    matches: list[str] = []

    for rule in rules:
        found = rule.find(text)
        if not found:
            continue
        penalty += rule.weight * min(len(found), OCCURRENCE_CAP)
        issues.append(f"{ISSUE_TEXT.get(rule.name, rule.name)}: {_quoted(found)}")
        matches.extend(found)

    placeholders = _PLACEHOLDER_RE.findall(text)
    if placeholders:
        penalty += PLACEHOLDER_WEIGHT * min(len(placeholders), OCCURRENCE_CAP)
        issues.append(f"{ISSUE_TEXT['placeholder']}: {_quoted(placeholders)}")
        matches.extend(placeholders)

    word_count = len(text.split())
    em_dashes = len(_EM_DASH_RE.findall(text))
    if em_dashes and word_count:
        density = em_dashes / word_count * EM_DASH_WORDS_BASIS
        if density > EM_DASH_DENSITY_THRESHOLD:
            penalty += EM_DASH_WEIGHT
            issues.append(
                f"{ISSUE_TEXT['em_dash']}: {em_dashes} in {word_count} words"
            )

    return SlopSignals(
        penalty=max(0, min(MAX_PENALTY, penalty)),
        issues=tuple(issues),
        matches=tuple(matches),
    )
