"""
PowerScore Configuration

Central settings loaded from environment variables, plus the
calibration profiles that fix word-count bands and weak-verb floors.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ============================================================
# CALIBRATION PROFILES
# ============================================================

@dataclass(frozen=True)
class Calibration:
    """
    One scoring calibration. Exactly one profile is active per call.

    Word-count band:
      concise_min..concise_max  -> concise (full length points)
      < too_short_below         -> too short
      > too_long_above          -> too long
      anything else             -> borderline

    Weak-verb sub-check:
      points = max(weak_verb_floor, 5 - weak_verb_step * weak_verb_count)
    """
    name: str
    description: str
    concise_min: int
    concise_max: int
    too_short_below: int
    too_long_above: int
    weak_verb_step: int
    weak_verb_floor: int


# Sales paragraphs: 3-5 sentences of value proposition copy.
SALES = Calibration(
    name="sales",
    description="Sales / value-proposition paragraph (50-150 words)",
    concise_min=50,
    concise_max=150,
    too_short_below=20,
    too_long_above=200,
    weak_verb_step=1,
    weak_verb_floor=0,
)

# Resume bullets: one sentence, action verb first.
RESUME = Calibration(
    name="resume",
    description="Resume achievement bullet (8-25 words)",
    concise_min=8,
    concise_max=25,
    too_short_below=8,
    too_long_above=35,
    weak_verb_step=2,
    weak_verb_floor=3,
)

CALIBRATIONS: dict[str, Calibration] = {
    SALES.name: SALES,
    RESUME.name: RESUME,
}


def get_calibration(name: str) -> Calibration:
    """Look up a calibration profile by name."""
    try:
        return CALIBRATIONS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown calibration profile: {name!r} "
            f"(expected one of: {', '.join(sorted(CALIBRATIONS))})"
        ) from None


# ============================================================
# SETTINGS
# ============================================================

@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    VERSION: str = "1.0.0"
    RULESET_VERSION: str = "1.0.0"

    # --- Scoring ---
    CALIBRATION: str = os.getenv("POWERSCORE_CALIBRATION", "sales")
    STRICT_MODE: bool = _env_flag("POWERSCORE_STRICT", "true")
    MIN_CONTENT_LENGTH: int = int(os.getenv("POWERSCORE_MIN_LENGTH", "10"))

    # --- Slop deduction ---
    SLOP_DETECTION: bool = _env_flag("POWERSCORE_SLOP_DETECTION", "true")
    SLOP_DEDUCTION_CAP: int = int(os.getenv("POWERSCORE_SLOP_CAP", "5"))
    SLOP_DEDUCTION_RATE: float = float(os.getenv("POWERSCORE_SLOP_RATE", "0.6"))

    # --- Server ---
    HOST: str = os.getenv("POWERSCORE_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("POWERSCORE_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("POWERSCORE_CORS_ORIGINS", "*")

    @property
    def calibration(self) -> Calibration:
        return get_calibration(self.CALIBRATION)


settings = Settings()
