"""
Tests for the calibration framework.

Tests cover:
  - Corpus parser (format parsing, label bands, edge cases)
  - Benchmark runner (pass rate, per-label and per-dimension metrics)
  - Report generation
"""

import json
import textwrap
from pathlib import Path

import pytest

from calibration.corpus_parser import (
    LABEL_BANDS,
    _parse_block,
    parse_all_corpora,
    parse_corpus,
)
from calibration.benchmark import (
    LabelMetrics,
    format_report,
    run_benchmark,
    save_report,
)

# Absolute path to the seed corpus (works regardless of CWD)
REPO_ROOT = Path(__file__).resolve().parent.parent
SEED_CORPUS = REPO_ROOT / "calibration" / "corpus"

EXCELLENT = "Led a team of 8 engineers to cut deployment time 75% in Q1 2025, saving $500K annually."


def _write(path: Path, body: str) -> Path:
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


# ============================================================
# Corpus Parser Tests
# ============================================================

class TestCorpusParser:

    def test_parse_single_sample(self, tmp_path):
        corpus = _write(tmp_path / "test.txt", f"""\
            ---
            label: excellent
            expected_min: 90
            expected_max: 100
            calibration: resume
            notes: test note

            {EXCELLENT}

            ---
        """)
        samples = parse_corpus(corpus)
        assert len(samples) == 1
        s = samples[0]
        assert s.label == "excellent"
        assert s.expected_min == 90
        assert s.expected_max == 100
        assert s.calibration == "resume"
        assert s.notes == "test note"
        assert s.text == EXCELLENT
        assert s.source_file == "test.txt"

    def test_label_default_band(self, tmp_path):
        corpus = _write(tmp_path / "test.txt", """\
            ---
            label: weak

            Helped the team with various things.
            ---
        """)
        s = parse_corpus(corpus)[0]
        assert (s.expected_min, s.expected_max) == LABEL_BANDS["weak"]
        assert s.calibration is None

    def test_unlabeled_defaults(self):
        s = _parse_block("Just a statement with no metadata.")
        assert s.label == "unlabeled"
        assert (s.expected_min, s.expected_max) == (0, 100)
        assert s.notes == ""

    def test_malformed_bound_falls_back(self):
        s = _parse_block("label: excellent\nexpected_min: high\n\nShipped it.")
        assert s.expected_min == LABEL_BANDS["excellent"][0]

    def test_parse_multiple_samples(self, tmp_path):
        corpus = _write(tmp_path / "test.txt", """\
            ---
            label: weak

            First statement.
            ---
            label: excellent

            Second statement.
            ---
        """)
        samples = parse_corpus(corpus)
        assert [s.label for s in samples] == ["weak", "excellent"]

    def test_skip_comments(self, tmp_path):
        corpus = _write(tmp_path / "test.txt", """\
            # File header comment
            ---
            label: weak
            # annotator aside

            Statement text.
            ---
        """)
        samples = parse_corpus(corpus)
        assert len(samples) == 1
        assert samples[0].text == "Statement text."

    def test_multiline_text(self, tmp_path):
        corpus = _write(tmp_path / "test.txt", """\
            ---
            label: excellent
            calibration: sales

            Line one of the paragraph.
            Line two of the paragraph.
            ---
        """)
        s = parse_corpus(corpus)[0]
        assert "Line one" in s.text and "Line two" in s.text

    def test_empty_file(self, tmp_path):
        corpus = _write(tmp_path / "empty.txt", "")
        assert parse_corpus(corpus) == []

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            parse_corpus("/nonexistent/corpus.txt")

    def test_parse_all_corpora(self, tmp_path):
        _write(tmp_path / "a.txt", "---\nlabel: weak\n\nOne.\n---\n")
        _write(tmp_path / "b.txt", "---\nlabel: weak\n\nTwo.\n---\n")
        _write(tmp_path / "ignored.md", "---\nlabel: weak\n\nThree.\n---\n")
        samples = parse_all_corpora(tmp_path)
        assert [s.text for s in samples] == ["One.", "Two."]


# ============================================================
# Benchmark Tests
# ============================================================

class TestBenchmark:

    def _corpus(self, tmp_path) -> Path:
        _write(tmp_path / "corpus.txt", f"""\
            ---
            label: excellent
            calibration: resume

            {EXCELLENT}
            ---
            label: weak
            calibration: sales

            Helped the team with various things.
            ---
            label: excellent
            expected_min: 99
            calibration: resume
            notes: deliberately unreachable

            {EXCELLENT}
            ---
        """)
        return tmp_path

    def test_pass_rate(self, tmp_path):
        result = run_benchmark(corpus_dir=self._corpus(tmp_path))
        assert result.total_samples == 3
        assert result.passed == 2
        assert result.failed == 1
        assert result.pass_rate == pytest.approx(2 / 3, abs=0.001)

    def test_label_metrics(self, tmp_path):
        result = run_benchmark(corpus_dir=self._corpus(tmp_path))
        excellent = result.label_metrics["excellent"]
        assert excellent.samples == 2
        assert excellent.avg_score == 95
        assert result.label_metrics["weak"].avg_score == 36
        assert result.separation == 59.0

    def test_failures_recorded(self, tmp_path):
        result = run_benchmark(corpus_dir=self._corpus(tmp_path))
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert failure["total_score"] == 95
        assert failure["expected_min"] == 99
        assert failure["notes"] == "deliberately unreachable"
        assert set(failure["scores"]) == {"clarity", "impact", "action", "specificity"}

    def test_dimension_averages(self, tmp_path):
        result = run_benchmark(corpus_dir=self._corpus(tmp_path))
        assert set(result.dimension_averages) == {"clarity", "impact", "action", "specificity"}
        assert all(0 <= v <= 25 for v in result.dimension_averages.values())

    def test_empty_corpus_raises(self, tmp_path):
        with pytest.raises(ValueError):
            run_benchmark(corpus_dir=tmp_path)

    def test_label_metrics_zero_samples(self):
        m = LabelMetrics(label="weak")
        assert m.pass_rate == 0.0
        assert m.avg_score == 0.0

    def test_report_format(self, tmp_path):
        report = format_report(run_benchmark(corpus_dir=self._corpus(tmp_path)))
        assert "POWERSCORE CALIBRATION REPORT" in report
        assert "PER-LABEL BREAKDOWN" in report
        assert "DIMENSION AVERAGES" in report
        assert "OUT OF BAND" in report

    def test_save_report(self, tmp_path):
        result = run_benchmark(corpus_dir=self._corpus(tmp_path))
        out = tmp_path / "reports"
        txt_path, json_path = save_report(result, out)
        assert txt_path.exists()
        data = json.loads(json_path.read_text())
        assert data["total_samples"] == 3
        assert "per_label" in data
        assert "dimension_averages" in data


class TestSeedCorpus:

    def test_seed_corpus_parses(self):
        samples = parse_all_corpora(SEED_CORPUS)
        assert len(samples) >= 6
        assert {s.label for s in samples} >= {"weak", "needs_metrics", "excellent"}

    def test_excellent_outscores_weak(self):
        result = run_benchmark(corpus_dir=SEED_CORPUS)
        assert result.separation is not None
        assert result.separation > 0
