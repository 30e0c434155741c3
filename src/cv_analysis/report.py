from __future__ import annotations

from typing import Iterable

from .models import AnalysisOutcome, CvSuggestion, ParsedCvData, SuggestionPriority


def dedupe_suggestions(suggestions: Iterable[CvSuggestion]) -> list[CvSuggestion]:
  seen: set[tuple] = set()
  unique: list[CvSuggestion] = []
  for s in suggestions:
    key = (s.section, s.category, s.original_text, (s.suggested_text or "")[:100])
    if key in seen:
      continue
    seen.add(key)
    unique.append(s)
  return unique


def _count(values: Iterable[str]) -> dict[str, int]:
  out: dict[str, int] = {}
  for v in values:
    out[v] = out.get(v, 0) + 1
  return out


def summarize_suggestions(suggestions: list[CvSuggestion]) -> dict:
  return {
    "total_suggestions": len(suggestions),
    "high_priority": sum(1 for s in suggestions if s.priority is SuggestionPriority.HIGH),
    "by_priority": _count(s.priority.value for s in suggestions),
    "by_category": _count(s.category.value for s in suggestions),
    "by_section": _count(s.section.value for s in suggestions),
  }


def build_report(parsed: ParsedCvData, outcome: AnalysisOutcome, *, source: str | None = None) -> dict:
  suggestions = dedupe_suggestions(outcome.suggestions)
  return {
    "source": source,
    "document": {
      "metadata": dict(parsed.metadata),
      "character_count": parsed.character_count,
      "word_count": parsed.word_count,
      "line_count": parsed.line_count,
      "sections": [s.to_dict() for s in parsed.sections],
    },
    "summary": summarize_suggestions(suggestions),
    "suggestions": [s.to_dict() for s in suggestions],
    "failures": [{"analyzer": f.analyzer, "error": f.error} for f in outcome.failures],
    "degraded": outcome.degraded,
  }
