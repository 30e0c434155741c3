from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CvSectionName(str, Enum):
  EXPERIENCE = "EXPERIENCE"
  SKILLS = "SKILLS"
  EDUCATION = "EDUCATION"
  SUMMARY = "SUMMARY"
  ACHIEVEMENTS = "ACHIEVEMENTS"
  FORMATTING = "FORMATTING"
  ATS_OPTIMIZATION = "ATS_OPTIMIZATION"
  PROJECTS = "PROJECTS"
  CERTIFICATIONS = "CERTIFICATIONS"
  AWARDS = "AWARDS"
  REFERENCES = "REFERENCES"
  CONTACT = "CONTACT"
  GENERAL = "GENERAL"


class CvSuggestionCategory(str, Enum):
  IMPACT = "IMPACT"
  CLARITY = "CLARITY"
  QUANTIFICATION = "QUANTIFICATION"
  KEYWORDS = "KEYWORDS"
  FORMATTING = "FORMATTING"
  ORGANIZATION = "ORGANIZATION"
  COMPLETENESS = "COMPLETENESS"
  ATS = "ATS"


class SuggestionPriority(str, Enum):
  HIGH = "HIGH"
  MEDIUM = "MEDIUM"
  LOW = "LOW"


@dataclass(frozen=True)
class CvSection:
  title: str | None                 # None = untitled leading block (contact info etc.)
  content: tuple[str, ...] = ()

  def to_dict(self) -> dict:
    return {"title": self.title, "content": list(self.content)}


@dataclass(frozen=True)
class ParsedCvData:
  sections: tuple[CvSection, ...]
  full_text: str                    # extracted text before segmentation
  metadata: dict = field(default_factory=dict, hash=False)  # still compared, not hashed

  @property
  def is_empty(self) -> bool:
    return not self.full_text

  @property
  def character_count(self) -> int:
    return len(self.full_text)

  @property
  def word_count(self) -> int:
    return len(self.full_text.split())

  @property
  def line_count(self) -> int:
    return len(self.full_text.splitlines())

  def to_dict(self) -> dict:
    return {
      "sections": [s.to_dict() for s in self.sections],
      "full_text": self.full_text,
      "metadata": dict(self.metadata),
    }


@dataclass(frozen=True)
class CvSuggestion:
  section: CvSectionName
  category: CvSuggestionCategory
  priority: SuggestionPriority
  reasoning: str
  original_text: str | None = None
  suggested_text: str | None = None
  # part of the contract, not filled by the built-in analyzers
  improvement_metrics: dict | None = field(default=None, hash=False)
  specific_improvements: list[str] | None = field(default=None, hash=False)

  def to_dict(self) -> dict:
    return {
      "section": self.section.value,
      "category": self.category.value,
      "priority": self.priority.value,
      "reasoning": self.reasoning,
      "original_text": self.original_text,
      "suggested_text": self.suggested_text,
      "improvement_metrics": self.improvement_metrics,
      "specific_improvements": self.specific_improvements,
    }


@dataclass(frozen=True)
class AnalyzerFailure:
  analyzer: str
  error: str


@dataclass
class AnalysisOutcome:
  suggestions: list[CvSuggestion] = field(default_factory=list)
  failures: list[AnalyzerFailure] = field(default_factory=list)

  @property
  def degraded(self) -> bool:
    return bool(self.failures)

  def to_dict(self) -> dict:
    return {
      "suggestions": [s.to_dict() for s in self.suggestions],
      "failures": [{"analyzer": f.analyzer, "error": f.error} for f in self.failures],
      "degraded": self.degraded,
    }
