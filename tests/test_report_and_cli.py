"""
Tests for the JSON report helpers and the command-line entry point.
"""
import csv
import json

from cv_analysis import cli
from cv_analysis.cli import main
from cv_analysis.models import (
  AnalysisOutcome,
  AnalyzerFailure,
  CvSectionName,
  CvSuggestion,
  CvSuggestionCategory,
  SuggestionPriority,
)
from cv_analysis.report import build_report, dedupe_suggestions, summarize_suggestions


def _s(section, category, priority, text=None):
  return CvSuggestion(section=section, category=category, priority=priority, reasoning="because", original_text=text)


def test_dedupe_keeps_first_occurrence():
  a = _s(CvSectionName.EXPERIENCE, CvSuggestionCategory.CLARITY, SuggestionPriority.MEDIUM, "x")
  b = _s(CvSectionName.EXPERIENCE, CvSuggestionCategory.IMPACT, SuggestionPriority.MEDIUM, "x")
  assert dedupe_suggestions([a, b, a]) == [a, b]


def test_summary_counts():
  suggestions = [
    _s(CvSectionName.CONTACT, CvSuggestionCategory.COMPLETENESS, SuggestionPriority.HIGH),
    _s(CvSectionName.EXPERIENCE, CvSuggestionCategory.IMPACT, SuggestionPriority.MEDIUM, "a"),
    _s(CvSectionName.EXPERIENCE, CvSuggestionCategory.QUANTIFICATION, SuggestionPriority.MEDIUM, "a"),
  ]

  summary = summarize_suggestions(suggestions)

  assert summary["total_suggestions"] == 3
  assert summary["high_priority"] == 1
  assert summary["by_section"] == {"CONTACT": 1, "EXPERIENCE": 2}
  assert summary["by_priority"] == {"HIGH": 1, "MEDIUM": 2}


def test_report_is_json_ready(make_parsed, sample_cv_text):
  parsed = make_parsed(text=sample_cv_text)
  outcome = AnalysisOutcome(
    suggestions=[_s(CvSectionName.GENERAL, CvSuggestionCategory.ATS, SuggestionPriority.LOW)],
    failures=[AnalyzerFailure(analyzer="analyze_ats", error="RuntimeError: boom")],
  )

  report = build_report(parsed, outcome, source="cv.pdf")

  assert report["degraded"] is True
  assert report["document"]["word_count"] == parsed.word_count
  assert report["summary"]["total_suggestions"] == 1
  json.dumps(report)


def test_cli_writes_report_and_csv(tmp_path, make_docx):
  cv = tmp_path / "cv.docx"
  cv.write_bytes(make_docx(["EXPERIENCE", "Managed deployment pipeline"]))
  out = tmp_path / "report.json"
  log = tmp_path / "runs.csv"

  assert main([str(cv), "--out", str(out), "--log-csv", str(log)]) == 0

  report = json.loads(out.read_text(encoding="utf-8"))
  assert report["document"]["sections"][0]["title"] == "Experience"
  categories = {s["category"] for s in report["suggestions"]}
  assert {"IMPACT", "QUANTIFICATION"} <= categories

  with log.open(encoding="utf-8", newline="") as f:
    rows = list(csv.DictReader(f))
  assert len(rows) == 1
  assert rows[0]["mime_type"].endswith("wordprocessingml.document")


def test_cli_unknown_extension(tmp_path, capsys):
  cv = tmp_path / "cv.txt"
  cv.write_text("EXPERIENCE\n", encoding="utf-8")

  assert main([str(cv)]) == 2
  assert "--mime-type" in capsys.readouterr().err


def test_cli_unsupported_declared_type(tmp_path, capsys):
  cv = tmp_path / "cv.txt"
  cv.write_text("EXPERIENCE\n", encoding="utf-8")

  assert main([str(cv), "--mime-type", "text/plain"]) == 2
  assert "text/plain" in capsys.readouterr().err


def test_cli_malformed_pdf(tmp_path, capsys):
  cv = tmp_path / "cv.pdf"
  cv.write_bytes(b"not a pdf")

  assert main([str(cv), "--dry-run"]) == 2
  assert "Failed to parse PDF" in capsys.readouterr().err


def test_cli_reads_packaged_vocabulary(tmp_path, make_docx, monkeypatch, capsys):
  vocab = tmp_path / "vocabulary.yaml"
  vocab.write_text("generic_phrases:\n  - backend\n", encoding="utf-8")
  monkeypatch.setattr(cli, "DEFAULT_VOCABULARY_PATH", vocab)
  cv = tmp_path / "cv.docx"
  cv.write_bytes(make_docx(["EXPERIENCE", "Built backend services, cutting latency by 30%"]))

  assert main([str(cv), "--dry-run"]) == 0

  report = json.loads(capsys.readouterr().out)
  clarity = [s for s in report["suggestions"] if s["category"] == "CLARITY"]
  assert [s["original_text"] for s in clarity] == ["Built backend services, cutting latency by 30%"]
  assert '"backend"' in clarity[0]["reasoning"]


def test_frozen_models_are_hashable(make_parsed, sample_cv_text):
  parsed = make_parsed(text=sample_cv_text)
  parsed.metadata["mime_type"] = "application/pdf"
  assert hash(parsed) == hash(make_parsed(text=sample_cv_text))

  s = CvSuggestion(
    section=CvSectionName.EXPERIENCE,
    category=CvSuggestionCategory.IMPACT,
    priority=SuggestionPriority.HIGH,
    reasoning="because",
    improvement_metrics={"clarity": 1},
    specific_improvements=["lead with the result"],
  )
  assert len({s, s}) == 1
