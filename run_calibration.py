#!/usr/bin/env python3
"""
run_calibration.py — Run the full calibration pipeline.

Usage:
    python run_calibration.py                        # Full run
    python run_calibration.py --corpus-dir path/     # Custom corpus location
    python run_calibration.py --calibration resume   # Default profile for untagged samples
    python run_calibration.py --json                 # Output JSON only (for CI)
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from calibration.corpus_parser import parse_all_corpora
from calibration.benchmark import run_benchmark, format_report, save_report

DEFAULT_MIN_PASS_RATE = 0.8


def main():
    parser = argparse.ArgumentParser(description="PowerScore Calibration Runner")
    parser.add_argument(
        "--corpus-dir",
        default="calibration/corpus",
        help="Path to corpus directory (default: calibration/corpus)",
    )
    parser.add_argument(
        "--calibration",
        default=None,
        help="Profile for samples without a calibration tag (default: configured profile)",
    )
    parser.add_argument(
        "--output-dir",
        default="calibration/reports",
        help="Directory for output reports (default: calibration/reports)",
    )
    parser.add_argument(
        "--min-pass-rate",
        type=float,
        default=DEFAULT_MIN_PASS_RATE,
        help=f"Exit 2 below this pass rate (default: {DEFAULT_MIN_PASS_RATE})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON only (for CI/automation)",
    )
    args = parser.parse_args()

    # Step 1: Check corpus
    corpus_dir = Path(args.corpus_dir)
    if not corpus_dir.exists():
        print(f"Error: Corpus directory not found: {corpus_dir}")
        sys.exit(1)

    samples = parse_all_corpora(corpus_dir)
    if not samples:
        print(f"Error: No samples found in {corpus_dir}")
        print("Add labeled samples to calibration/corpus/power_statements.txt")
        sys.exit(1)

    if not args.json:
        print(f"Loaded {len(samples)} samples from {corpus_dir}")

    # Step 2: Run benchmark
    try:
        result = run_benchmark(corpus_dir=corpus_dir, calibration=args.calibration)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Step 3: Output
    report_path, json_path = save_report(result, args.output_dir)
    if args.json:
        print(json.dumps(json.loads(json_path.read_text()), indent=2))
    else:
        print(format_report(result))
        print(f"\nReport saved to: {report_path}")
        print(f"JSON saved to:   {json_path}")

    # Step 4: Exit code for CI
    if result.pass_rate < args.min_pass_rate:
        if not args.json:
            print(f"\nPass rate {result.pass_rate:.1%} below {args.min_pass_rate:.0%}, calibration failing")
        sys.exit(2)

    sys.exit(0)


if __name__ == "__main__":
    main()
