from __future__ import annotations

from pathlib import Path
import yaml

from ..analysis_config import AnalysisConfig


VOCABULARY_GROUPS = ("generic_phrases", "weak_action_verbs", "section_headers")

DEFAULT_VOCABULARY_PATH = Path(__file__).resolve().parent / "vocabulary.yaml"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "cv_analysis.toml"


def load_vocabulary(path: Path) -> dict[str, list[str]]:
  if not path.exists():
    raise FileNotFoundError(f"Vocabulary file not found: {path}")

  data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

  out: dict[str, list[str]] = {}

  for group, words in data.items():
    if group not in VOCABULARY_GROUPS or not isinstance(words, list):
      continue
    cleaned: list[str] = []
    for w in words:
      if isinstance(w, str) and w.strip():
        w2 = w.strip().lower()
        if w2 not in cleaned:
          cleaned.append(w2)
    out[group] = cleaned

  return out


def apply_vocabulary(cfg: AnalysisConfig, vocab: dict[str, list[str]]) -> AnalysisConfig:
  # groups missing from the file keep the config's lists
  if "generic_phrases" in vocab:
    cfg.generic_phrases = list(vocab["generic_phrases"])
  if "weak_action_verbs" in vocab:
    cfg.weak_action_verbs = list(vocab["weak_action_verbs"])
  if "section_headers" in vocab:
    cfg.section_headers = list(vocab["section_headers"])
  return cfg
