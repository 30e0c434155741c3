from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


FAILURE_MODES = ("discard_all", "partial")

# order matters: the first phrase found on a line is the one reported
DEFAULT_GENERIC_PHRASES = [
  "responsible for",
  "duties included",
  "worked on",
  "involved in",
  "assisted with",
  "team player",
  "hard worker",
  "results-oriented",
  "detail-oriented",
]

DEFAULT_WEAK_ACTION_VERBS = [
  "worked on",
  "responsible for",
  "assisted",
  "helped",
  "managed",
  "handled",
  "participated in",
  "involved in",
  "tasked with",
  "supported",
]

DEFAULT_SECTION_HEADERS = [
  "summary", "professional summary", "objective", "profile", "about me",
  "experience", "work experience", "professional experience", "employment history", "work history",
  "education",
  "skills", "technical skills", "core competencies",
  "projects",
  "certifications", "certificates",
  "awards", "honors", "achievements",
  "references",
  "contact", "contact information",
  "languages", "interests", "publications", "volunteer experience",
]

DEFAULT_REQUIRED_SECTIONS = ["EXPERIENCE", "EDUCATION", "SKILLS"]


@dataclass
class AnalysisConfig:
  # orchestration
  failure_mode: str = "discard_all"
  analyzer_timeout_seconds: float | None = 10.0

  # ats checklist
  required_sections: list[str] = field(default_factory=lambda: list(DEFAULT_REQUIRED_SECTIONS))
  min_words: int = 200
  max_words: int = 1000

  # formatting
  max_line_length: int = 240

  # vocabularies (lists, not sets: first match wins)
  generic_phrases: list[str] = field(default_factory=lambda: list(DEFAULT_GENERIC_PHRASES))
  weak_action_verbs: list[str] = field(default_factory=lambda: list(DEFAULT_WEAK_ACTION_VERBS))
  section_headers: list[str] = field(default_factory=lambda: list(DEFAULT_SECTION_HEADERS))

  @property
  def partial_results(self) -> bool:
    return self.failure_mode == "partial"


def _validate(cfg: AnalysisConfig) -> AnalysisConfig:
  if cfg.failure_mode not in FAILURE_MODES:
    raise ValueError(f"failure_mode must be one of {', '.join(FAILURE_MODES)}, got {cfg.failure_mode!r}")
  if cfg.analyzer_timeout_seconds is not None and cfg.analyzer_timeout_seconds <= 0:
    cfg.analyzer_timeout_seconds = None
  if cfg.min_words > cfg.max_words:
    raise ValueError(f"min_words ({cfg.min_words}) is greater than max_words ({cfg.max_words})")
  return cfg


def load_config(path: Path | None, base: AnalysisConfig | None = None) -> AnalysisConfig:
  cfg = base or AnalysisConfig()

  if path is None:
    return cfg

  if not path.exists():
    raise FileNotFoundError(f"Config not found: {path}")

  data = tomllib.loads(path.read_text(encoding="utf-8")) or {}

  analysis = data.get("analysis") or {}
  ats = data.get("ats") or {}
  formatting = data.get("formatting") or {}
  terms = data.get("terms") or {}

  cfg.failure_mode = str(analysis.get("failure_mode", cfg.failure_mode))
  if "analyzer_timeout_seconds" in analysis:
    # TOML has no null; 0 disables the timeout
    cfg.analyzer_timeout_seconds = float(analysis["analyzer_timeout_seconds"])

  cfg.required_sections = [str(s).upper() for s in ats.get("required_sections", cfg.required_sections)]
  cfg.min_words = int(ats.get("min_words", cfg.min_words))
  cfg.max_words = int(ats.get("max_words", cfg.max_words))

  cfg.max_line_length = int(formatting.get("max_line_length", cfg.max_line_length))

  if "generic_phrases" in terms:
    cfg.generic_phrases = list(terms["generic_phrases"])
  if "weak_action_verbs" in terms:
    cfg.weak_action_verbs = list(terms["weak_action_verbs"])
  if "section_headers" in terms:
    cfg.section_headers = list(terms["section_headers"])

  return _validate(cfg)
