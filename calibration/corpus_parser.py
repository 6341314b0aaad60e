"""
Corpus Parser — Reads Labeled Power Statement Samples

Parses the simple text format used for calibration corpus files.
Each sample is a block of text preceded by metadata tags,
separated by '---' delimiters.

Format:
    ---
    label: excellent
    expected_min: 70
    expected_max: 100
    calibration: resume
    notes: Strong verb, two metrics, cadence

    The power statement goes here. It can span
    multiple lines.

    ---
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Labels a sample may carry, with the default expected total-score band.
LABEL_BANDS: dict[str, tuple[int, int]] = {
    "weak": (0, 49),
    "needs_metrics": (30, 74),
    "excellent": (70, 100),
}

_META_RE = re.compile(
    r"^(label|expected_min|expected_max|calibration|notes)\s*:\s*(.+)$",
    re.IGNORECASE,
)


@dataclass
class CalibrationSample:
    """A single labeled sample from the calibration corpus."""
    text: str
    label: str                    # weak, needs_metrics, excellent
    expected_min: int             # Inclusive lower bound on total_score
    expected_max: int             # Inclusive upper bound on total_score
    calibration: Optional[str]    # Profile to score with (None = configured default)
    notes: str                    # Annotator notes
    source_file: str = ""

    # Populated after engine evaluation
    engine_result: Optional[dict] = None


def parse_corpus(filepath: str | Path) -> list[CalibrationSample]:
    """
    Parse a calibration corpus file into a list of samples.

    Args:
        filepath: Path to the corpus text file.

    Returns:
        List of CalibrationSample objects.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Corpus file not found: {filepath}")

    content = filepath.read_text(encoding="utf-8")

    # Split on lines that are just --- (start of file, between blocks, end)
    blocks = re.split(r"(?:^|\n)\s*---\s*(?:\n|$)", content)

    samples = []
    for block in blocks:
        block = block.strip()
        if not block or block.startswith("#"):
            continue

        sample = _parse_block(block, source_file=filepath.name)
        if sample:
            samples.append(sample)

    return samples


def _parse_block(block: str, source_file: str = "") -> Optional[CalibrationSample]:
    """Parse a single sample block."""
    metadata = {}
    text_lines = []
    in_text = False

    for line in block.split("\n"):
        stripped = line.strip()
        if stripped.startswith("#"):
            continue

        if not in_text:
            match = _META_RE.match(stripped)
            if match:
                metadata[match.group(1).lower()] = match.group(2).strip()
            elif stripped:
                # First non-metadata, non-empty line starts the text
                in_text = True
                text_lines.append(line)
        else:
            text_lines.append(line)

    text = "\n".join(text_lines).strip()
    if not text:
        return None

    label = metadata.get("label", "unlabeled").lower()
    default_min, default_max = LABEL_BANDS.get(label, (0, 100))

    return CalibrationSample(
        text=text,
        label=label,
        expected_min=_int(metadata.get("expected_min"), default_min),
        expected_max=_int(metadata.get("expected_max"), default_max),
        calibration=metadata.get("calibration"),
        notes=metadata.get("notes", ""),
        source_file=source_file,
    )


def _int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def parse_all_corpora(corpus_dir: str | Path) -> list[CalibrationSample]:
    """Parse all .txt corpus files in a directory."""
    corpus_dir = Path(corpus_dir)
    samples = []
    for filepath in sorted(corpus_dir.glob("*.txt")):
        samples.extend(parse_corpus(filepath))
    return samples
