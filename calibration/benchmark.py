"""
Benchmark Runner — Expected-Band Pass Rate per Label

Runs the calibration corpus through the validator and compares each
total score against the band the annotator expected. Produces:

  1. Overall pass rate (score inside [expected_min, expected_max])
  2. Per-label average total score
  3. Per-dimension averages across the corpus
  4. Separation between "excellent" and "weak" averages
  5. Specific out-of-band samples for manual review

This is the tool that tells you whether the rubric still ranks
statements the way a reviewer would.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from powerscore.validator import DIMENSIONS, validate_power_statement
from calibration.corpus_parser import CalibrationSample, parse_all_corpora


@dataclass
class LabelMetrics:
    """Aggregate outcome for one label."""
    label: str
    samples: int = 0
    passed: int = 0
    score_sum: int = 0

    @property
    def pass_rate(self) -> float:
        return self.passed / self.samples if self.samples > 0 else 0.0

    @property
    def avg_score(self) -> float:
        return self.score_sum / self.samples if self.samples > 0 else 0.0


@dataclass
class BenchmarkResult:
    """Full benchmark output."""
    total_samples: int
    passed: int
    failed: int
    pass_rate: float
    label_metrics: dict[str, LabelMetrics]
    dimension_averages: dict[str, float]
    # Gap between excellent and weak averages (None if either is absent)
    separation: Optional[float]
    # Detailed results for review
    failures: list[dict]
    score_pairs: list[dict]


def _is_pass(sample: CalibrationSample, total: int) -> bool:
    return sample.expected_min <= total <= sample.expected_max


def run_benchmark(
    corpus_dir: str | Path = "calibration/corpus",
    calibration: Optional[str] = None,
) -> BenchmarkResult:
    """
    Run the full calibration benchmark.

    1. Parse all corpus files
    2. Score each sample (its own calibration tag wins over `calibration`)
    3. Compare totals against the expected band
    4. Compute metrics

    Args:
        corpus_dir: Path to directory containing corpus .txt files.
        calibration: Profile used for samples that do not name one.

    Returns:
        BenchmarkResult with full metrics.
    """
    samples = parse_all_corpora(corpus_dir)

    if not samples:
        raise ValueError(f"No samples found in {corpus_dir}")

    labels: dict[str, LabelMetrics] = {}
    dimension_sums = {name: 0 for name in DIMENSIONS}
    failures = []
    score_pairs = []

    for sample in samples:
        result = validate_power_statement(
            sample.text,
            calibration=sample.calibration or calibration,
        )
        total = result.total_score
        sample.engine_result = result.to_dict()

        for name, dim in result.dimensions().items():
            dimension_sums[name] += dim.score

        passed = _is_pass(sample, total)
        lm = labels.setdefault(sample.label, LabelMetrics(label=sample.label))
        lm.samples += 1
        lm.score_sum += total
        if passed:
            lm.passed += 1

        score_pairs.append({
            "text": sample.text[:100],
            "label": sample.label,
            "total_score": total,
            "expected": [sample.expected_min, sample.expected_max],
            "passed": passed,
        })

        if not passed:
            failures.append({
                "label": sample.label,
                "text": sample.text[:200],
                "total_score": total,
                "expected_min": sample.expected_min,
                "expected_max": sample.expected_max,
                "source_file": sample.source_file,
                "notes": sample.notes,
                "scores": {name: dim.score for name, dim in result.dimensions().items()},
            })

    total_passed = sum(lm.passed for lm in labels.values())

    separation = None
    if "excellent" in labels and "weak" in labels:
        separation = round(labels["excellent"].avg_score - labels["weak"].avg_score, 1)

    return BenchmarkResult(
        total_samples=len(samples),
        passed=total_passed,
        failed=len(samples) - total_passed,
        pass_rate=round(total_passed / len(samples), 4),
        label_metrics=labels,
        dimension_averages={
            name: round(total / len(samples), 1) for name, total in dimension_sums.items()
        },
        separation=separation,
        failures=failures,
        score_pairs=score_pairs,
    )


def format_report(result: BenchmarkResult) -> str:
    """Format benchmark results as a human-readable report."""
    lines = [
        "=" * 60,
        "POWERSCORE CALIBRATION REPORT",
        "=" * 60,
        "",
        f"Samples: {result.total_samples} "
        f"({result.passed} in band, {result.failed} out of band)",
        f"Pass rate: {result.pass_rate:.1%}",
        "",
        "--- PER-LABEL BREAKDOWN ---",
        f"{'Label':<20} {'Samples':>7} {'Passed':>7} {'Rate':>6} {'Avg':>6}",
        "-" * 50,
    ]

    for lm in sorted(result.label_metrics.values(), key=lambda m: m.label):
        lines.append(
            f"{lm.label:<20} {lm.samples:>7} {lm.passed:>7} "
            f"{lm.pass_rate:>5.0%} {lm.avg_score:>6.1f}"
        )

    lines.extend(["", "--- DIMENSION AVERAGES (out of 25) ---"])
    for name, avg in result.dimension_averages.items():
        lines.append(f"{name.capitalize():<12} {avg:>5.1f}")

    if result.separation is not None:
        lines.extend([
            "",
            "--- SEPARATION ---",
            f"Excellent minus weak: {result.separation}",
            f"  {'GOOD' if result.separation >= 30 else 'NEEDS TUNING'}"
            f" (target: >=30 point gap)",
        ])

    if result.failures:
        lines.extend(["", "--- OUT OF BAND ---"])
        for f in result.failures[:10]:
            lines.append(
                f"  [{f['label']}] {f['total_score']} not in "
                f"{f['expected_min']}-{f['expected_max']}: {f['text'][:70]}..."
            )
            if f.get("notes"):
                lines.append(f"    Notes: {f['notes']}")

    lines.extend(["", "=" * 60])
    return "\n".join(lines)


def save_report(result: BenchmarkResult, output_dir: str | Path = "calibration/reports"):
    """Save benchmark results as both human-readable report and JSON."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / "calibration_report.txt"
    report_path.write_text(format_report(result), encoding="utf-8")

    json_data = {
        "total_samples": result.total_samples,
        "passed": result.passed,
        "failed": result.failed,
        "pass_rate": result.pass_rate,
        "separation": result.separation,
        "per_label": {
            label: {
                "samples": lm.samples,
                "passed": lm.passed,
                "pass_rate": lm.pass_rate,
                "avg_score": round(lm.avg_score, 1),
            }
            for label, lm in result.label_metrics.items()
        },
        "dimension_averages": result.dimension_averages,
        "failures": result.failures,
        "score_pairs": result.score_pairs,
    }
    json_path = output_dir / "calibration_report.json"
    json_path.write_text(json.dumps(json_data, indent=2), encoding="utf-8")

    return report_path, json_path
