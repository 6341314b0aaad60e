"""
Lexicons — Immutable Domain Tables

The static knowledge the detectors match against:
  1. Strong action verbs (base form, or irregular past tense)
  2. Weak verbs and weak openers
  3. Filler rules
  4. Jargon / buzzword rules

This module holds no logic beyond compiling its own tables. Everything
is built once at import into DEFAULT_LEXICON and never mutated. Callers
that want a different vocabulary build their own Lexicon and pass it to
the detectors explicitly.

Strong-verb matching rule: a word matches a stem when it equals the stem
or the stem plus "d" / "ed" ("achieve" -> "achieved", "deliver" ->
"delivered"). Irregular and consonant-doubling pasts ("led", "planned")
are listed as their own stems.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


# ============================================================
# DATA STRUCTURES
# ============================================================

RULE_KINDS = ("filler", "jargon", "weak_verb", "slop")


@dataclass(frozen=True)
class PatternRule:
    """
    A single detection rule.

    `pattern` is a regex fragment matched case-insensitively between
    word boundaries. `weight` is how many units one match contributes
    to the detector's count.
    """
    name: str
    pattern: str
    kind: str
    weight: int = 1
    compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.kind not in RULE_KINDS:
            raise ValueError(f"Unknown rule kind: {self.kind}")
        object.__setattr__(
            self, "compiled", re.compile(rf"\b(?:{self.pattern})\b", re.IGNORECASE)
        )

    def find(self, text: str) -> list[str]:
        """Return every matched substring, in text order."""
        return [m.group(0) for m in self.compiled.finditer(text)]


@dataclass(frozen=True)
class Lexicon:
    """Read-only vocabulary shared by every detector call."""
    strong_verbs: frozenset[str]
    weak_verbs: tuple[PatternRule, ...]
    weak_openers: tuple[str, ...]
    filler_rules: tuple[PatternRule, ...]
    jargon_rules: tuple[PatternRule, ...]
    noun_stems: frozenset[str] = frozenset()
    strong_verb_re: re.Pattern = field(init=False, repr=False, compare=False)
    weak_opener_re: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Longest stems first so alternation never settles on a prefix.
        stems = sorted(self.strong_verbs, key=lambda s: (-len(s), s))
        object.__setattr__(
            self,
            "strong_verb_re",
            re.compile(
                r"\b(" + "|".join(re.escape(s) for s in stems) + r")(?:d|ed)?\b",
                re.IGNORECASE,
            ),
        )
        object.__setattr__(
            self,
            "weak_opener_re",
            re.compile(
                r"^\s*(?:" + "|".join(re.escape(w) for w in self.weak_openers) + r")\b",
                re.IGNORECASE,
            ),
        )

    def is_strong_verb(self, word: str) -> bool:
        """True if `word` is a stem, or a stem plus "d" / "ed"."""
        word = word.lower()
        if word in self.strong_verbs:
            return True
        if word.endswith("ed") and word[:-2] in self.strong_verbs:
            return True
        return word.endswith("d") and word[:-1] in self.strong_verbs

    def counts_in_body(self, match: str) -> bool:
        """Bare noun-like stems ("design", "pilot") only count when inflected."""
        return match.lower() not in self.noun_stems


# ============================================================
# STRONG ACTION VERBS
# ============================================================

_LEADERSHIP_VERBS = [
    "administer", "align", "appoint", "approve", "assign", "authorize",
    "chair", "champion", "coach", "command", "consolidate", "coordinate",
    "cultivate", "delegate", "direct", "empower", "enlist", "galvanize",
    "govern", "guide", "hire", "inspire", "led", "mentor", "mobilize",
    "moderate", "motivate", "orchestrate", "organize", "oversee", "oversaw",
    "preside", "prioritize", "rally", "recruit", "spearhead", "sponsor",
    "steer", "supervise", "unite", "navigate", "headed", "captain",
    "onboard", "train", "taught", "retain", "shepherd", "commission",
]

_ACHIEVEMENT_VERBS = [
    "accomplish", "achieve", "attain", "beat", "capture", "clinch",
    "complete", "deliver", "earn", "exceed", "outpace", "outperform",
    "outsold", "secure", "surpass", "won", "win", "realize", "reached",
    "obtain", "garner", "succeed", "prevail", "eclipse", "overcame",
    "conquer", "master", "closed", "landed",
]

_CREATION_VERBS = [
    "architect", "author", "build", "built", "conceive", "conceptualize",
    "construct", "create", "design", "develop", "devise", "engineer",
    "establish", "fashion", "forge", "formulate", "founded", "generate",
    "initiate", "innovate", "institute", "introduce", "invent", "launch",
    "originate", "pioneer", "produce", "prototype", "shape", "wrote",
    "rebuild", "rebuilt", "rewrote", "compose", "assemble", "incubate",
    "unveil", "shipped", "coded", "programmed", "drafted", "started",
]

_IMPROVEMENT_VERBS = [
    "accelerate", "advance", "amplify", "automate", "boost", "centralize",
    "convert", "cut", "decrease", "deepen", "digitize", "double",
    "elevate", "eliminate", "enhance", "enrich", "expand", "expedite",
    "extend", "fortify", "grow", "grew", "halve", "improve", "increase",
    "lowered", "maximize", "minimize", "modernize", "optimize", "overhaul",
    "raise", "rationalize", "redesign", "reduce", "refine", "reform",
    "reinvent", "remodel", "renovate", "reorganize", "replace",
    "restructure", "revamp", "revitalize", "revolutionize", "scale",
    "sharpen", "shorten", "simplified", "slash", "standardize",
    "strengthen", "streamline", "transform", "triple", "quadruple",
    "upgrade", "compress", "condense", "tighten", "stabilize", "unified",
    "reengineer", "retool", "refactor", "migrate", "transition",
    "multiply", "magnify", "widen", "broaden", "save", "recover",
    "trimmed", "lifted",
]

_ANALYSIS_VERBS = [
    "analyze", "assess", "audit", "benchmark", "calculate", "compare",
    "compute", "diagnose", "discover", "evaluate", "examine", "explore",
    "forecast", "identified", "inspect", "interpret", "investigate",
    "measure", "monitor", "pinpoint", "quantified", "researched",
    "reviewed", "surveyed", "tested", "tracked", "uncover", "validate",
    "verified", "detect", "determine", "estimate", "modeled", "profiled",
    "synthesize", "triage", "troubleshoot", "resolve", "solve", "decode",
    "mapped", "charted",
]

_COMMUNICATION_VERBS = [
    "advise", "advocate", "articulate", "briefed", "clarified",
    "collaborate", "communicate", "consult", "convince", "correspond",
    "counsel", "defend", "demonstrate", "documented", "edited", "educate",
    "influence", "inform", "instruct", "interviewed", "lectured",
    "lobbied", "mediate", "negotiate", "persuade", "pitched", "presented",
    "promote", "publicize", "publish", "reconcile", "recommend",
    "showcase", "translate", "spoke", "keynoted", "facilitate", "broker",
    "partnered", "convene", "hosted",
]

_FINANCIAL_VERBS = [
    "allocate", "appraise", "balanced", "budgeted", "capitalize",
    "funded", "finance", "invest", "monetize", "priced", "procure",
    "projected", "recoup", "reallocate", "refinance", "underwrite",
    "billed", "collect", "recapture", "sourced",
]

_SALES_VERBS = [
    "acquire", "penetrate", "prospect", "renew", "sell", "sold", "upsell",
    "cross-sell", "attract", "engage", "nurture", "positioned",
    "differentiate", "marketed", "branded", "activate", "reactivate",
    "targeted",
]

_TECHNICAL_VERBS = [
    "configure", "debug", "deploy", "install", "integrate", "implement",
    "maintain", "operate", "patched", "provision", "instrument",
    "containerize", "encrypt", "harden", "virtualize", "parallelize",
    "scripted", "released", "tune", "indexed", "cached", "sharded",
    "replicate", "decommission", "retire", "sunset",
]

_EXECUTION_VERBS = [
    "adapt", "applied", "arrange", "conduct", "contracted", "controlled",
    "dispatch", "drove", "enforce", "ensure", "execute", "fulfill",
    "manage", "mitigate", "perform", "pilot", "planned",
    "processed", "prevent", "protect", "pursue", "regulate", "restore",
    "ran", "scheduled", "supplied", "systematize", "undertook", "upheld",
    "enable", "equip", "exploit", "harness", "propelled", "spurred",
    "catalyze", "jumpstart", "kickstart", "rescue", "salvage", "revive",
    "resurrect", "certified", "diversified", "modified", "solidified",
    "specified", "qualified", "justified", "intensified", "rectified",
    "exemplified", "finished", "awarded",
]

# Stems that read as nouns in running text ("design team", "at scale").
# Past-tense forms still count everywhere; the bare form counts only as
# the opening word.
NOUN_STEMS: frozenset[str] = frozenset({
    "architect", "audit", "author", "benchmark", "captain", "champion",
    "coach", "design", "engineer", "forecast", "launch", "mentor", "pilot",
    "prototype", "scale", "shape", "sponsor", "sunset", "transition",
    "upgrade",
})

STRONG_VERBS: frozenset[str] = frozenset(
    v.lower()
    for group in (
        _LEADERSHIP_VERBS, _ACHIEVEMENT_VERBS, _CREATION_VERBS,
        _IMPROVEMENT_VERBS, _ANALYSIS_VERBS, _COMMUNICATION_VERBS,
        _FINANCIAL_VERBS, _SALES_VERBS, _TECHNICAL_VERBS, _EXECUTION_VERBS,
    )
    for v in group
)


# ============================================================
# WEAK VERBS & OPENERS
# ============================================================

WEAK_VERB_RULES: tuple[PatternRule, ...] = (
    PatternRule("was_responsible", r"was\s+responsible\s+for", "weak_verb"),
    PatternRule("responsible_for", r"(?<!was\s)responsible\s+for", "weak_verb"),
    PatternRule("worked_on", r"worked\s+on", "weak_verb"),
    PatternRule("participated_in", r"participated\s+in", "weak_verb"),
    PatternRule("involved_in", r"(?:was\s+)?involved\s+in", "weak_verb"),
    PatternRule("tasked_with", r"tasked\s+with", "weak_verb"),
    PatternRule("helped", r"help(?:ed|s)?", "weak_verb"),
    PatternRule("assisted", r"assist(?:ed|s)?", "weak_verb"),
    PatternRule("supported", r"supported", "weak_verb"),
    PatternRule("tried", r"tried|attempted", "weak_verb"),
    PatternRule("was", r"was(?!\s+(?:responsible|involved))", "weak_verb"),
    PatternRule("were", r"were", "weak_verb"),
    PatternRule("been", r"been", "weak_verb"),
    PatternRule("had", r"had", "weak_verb"),
)

WEAK_OPENERS: tuple[str, ...] = (
    "was", "were", "had", "helped", "help", "assisted", "assist",
    "worked", "participated", "responsible", "tasked", "involved",
    "tried", "attempted", "handled",
)


# ============================================================
# FILLER & JARGON RULES
# ============================================================

FILLER_RULES: tuple[PatternRule, ...] = (
    PatternRule("very", r"very", "filler"),
    PatternRule("really", r"really", "filler"),
    PatternRule("quite", r"quite", "filler"),
    PatternRule("somewhat", r"somewhat", "filler"),
    PatternRule("basically", r"basically", "filler"),
    PatternRule("actually", r"actually", "filler"),
    PatternRule("literally", r"literally", "filler"),
    PatternRule("essentially", r"essentially", "filler"),
    PatternRule("just", r"just", "filler"),
    PatternRule("simply", r"simply", "filler"),
    PatternRule("totally", r"totally", "filler"),
    PatternRule("thing", r"thing", "filler"),
    PatternRule("stuff", r"stuff", "filler"),
    PatternRule("something", r"something", "filler"),
    PatternRule("somehow", r"somehow", "filler"),
    PatternRule("in_order_to", r"in\s+order\s+to", "filler"),
    PatternRule("a_lot_of", r"a\s+lot\s+of|lots\s+of", "filler"),
    PatternRule("kind_of", r"kind\s+of|sort\s+of", "filler"),
    PatternRule("due_to_the_fact", r"due\s+to\s+the\s+fact\s+that", "filler", weight=2),
    PatternRule("at_this_point_in_time", r"at\s+this\s+point\s+in\s+time", "filler", weight=2),
)

JARGON_RULES: tuple[PatternRule, ...] = (
    PatternRule("synergy", r"synerg(?:y|ies|istic)", "jargon"),
    PatternRule("leverage", r"leverag(?:e|ed|es|ing)", "jargon"),
    PatternRule("paradigm", r"paradigm(?:\s+shift)?", "jargon"),
    PatternRule("best_in_class", r"best.in.class", "jargon"),
    PatternRule("world_class", r"world.class", "jargon"),
    PatternRule("move_the_needle", r"move\s+the\s+needle", "jargon"),
    PatternRule("circle_back", r"circle\s+back", "jargon"),
    PatternRule("touch_base", r"touch\s+base", "jargon"),
    PatternRule("deep_dive", r"deep\s+dive", "jargon"),
    PatternRule("low_hanging_fruit", r"low.hanging\s+fruit", "jargon"),
    PatternRule("think_outside_the_box", r"think(?:ing)?\s+outside\s+the\s+box", "jargon", weight=2),
    PatternRule("game_changer", r"game.chang(?:er|ing)", "jargon"),
    PatternRule("value_add", r"value.add(?:ed)?", "jargon"),
    PatternRule("bandwidth", r"bandwidth", "jargon"),
    PatternRule("disruptive", r"disrupt(?:ive|or)", "jargon"),
    PatternRule("thought_leader", r"thought\s+leader(?:ship)?", "jargon"),
    PatternRule("core_competency", r"core\s+competenc(?:y|ies)", "jargon"),
    PatternRule("holistic", r"holistic(?:ally)?", "jargon"),
    PatternRule("ecosystem", r"ecosystem", "jargon"),
    PatternRule("actionable_insights", r"actionable\s+insights?", "jargon"),
    PatternRule("next_generation", r"next.gen(?:eration)?", "jargon"),
    PatternRule("win_win", r"win.win", "jargon"),
)


# ============================================================
# SINGLETON: built once, never mutated
# ============================================================

DEFAULT_LEXICON = Lexicon(
    strong_verbs=STRONG_VERBS,
    weak_verbs=WEAK_VERB_RULES,
    weak_openers=WEAK_OPENERS,
    filler_rules=FILLER_RULES,
    jargon_rules=JARGON_RULES,
    noun_stems=NOUN_STEMS,
)
