"""
Tests for TOML config loading and the YAML vocabulary.
"""
from pathlib import Path

import pytest

from cv_analysis.analysis_config import (
  DEFAULT_GENERIC_PHRASES,
  DEFAULT_SECTION_HEADERS,
  DEFAULT_WEAK_ACTION_VERBS,
  AnalysisConfig,
  load_config,
)
from cv_analysis.config.vocabulary import (
  DEFAULT_CONFIG_PATH,
  DEFAULT_VOCABULARY_PATH,
  apply_vocabulary,
  load_vocabulary,
)


def test_defaults():
  cfg = load_config(None)
  assert cfg.failure_mode == "discard_all"
  assert not cfg.partial_results
  assert cfg.analyzer_timeout_seconds == 10.0
  assert cfg.generic_phrases == DEFAULT_GENERIC_PHRASES


def test_shipped_config_matches_defaults():
  cfg = load_config(DEFAULT_CONFIG_PATH)
  default = AnalysisConfig()
  assert cfg.failure_mode == default.failure_mode
  assert cfg.required_sections == default.required_sections
  assert cfg.max_line_length == default.max_line_length


def test_shipped_vocabulary_matches_defaults():
  vocab = load_vocabulary(DEFAULT_VOCABULARY_PATH)
  assert vocab["generic_phrases"] == DEFAULT_GENERIC_PHRASES
  assert vocab["weak_action_verbs"] == DEFAULT_WEAK_ACTION_VERBS
  assert vocab["section_headers"] == DEFAULT_SECTION_HEADERS


def test_load_config_overrides(tmp_path: Path):
  path = tmp_path / "cfg.toml"
  path.write_text(
    '[analysis]\nfailure_mode = "partial"\nanalyzer_timeout_seconds = 0\n'
    '[ats]\nrequired_sections = ["experience"]\nmin_words = 50\n'
    '[terms]\ngeneric_phrases = ["go-getter"]\n',
    encoding="utf-8",
  )

  cfg = load_config(path)

  assert cfg.partial_results
  assert cfg.analyzer_timeout_seconds is None
  assert cfg.required_sections == ["EXPERIENCE"]
  assert cfg.min_words == 50
  assert cfg.generic_phrases == ["go-getter"]
  assert cfg.weak_action_verbs == DEFAULT_WEAK_ACTION_VERBS


def test_load_config_missing_file(tmp_path: Path):
  with pytest.raises(FileNotFoundError):
    load_config(tmp_path / "nope.toml")


def test_load_config_rejects_unknown_failure_mode(tmp_path: Path):
  path = tmp_path / "cfg.toml"
  path.write_text('[analysis]\nfailure_mode = "retry"\n', encoding="utf-8")
  with pytest.raises(ValueError):
    load_config(path)


def test_vocabulary_file(tmp_path: Path):
  path = tmp_path / "vocab.yaml"
  path.write_text(
    "generic_phrases:\n  - Go-Getter\n  - go-getter\n  - ''\nunrelated:\n  - x\n",
    encoding="utf-8",
  )

  vocab = load_vocabulary(path)
  assert vocab == {"generic_phrases": ["go-getter"]}

  cfg = apply_vocabulary(AnalysisConfig(), vocab)
  assert cfg.generic_phrases == ["go-getter"]
  assert cfg.section_headers == DEFAULT_SECTION_HEADERS


def test_vocabulary_missing_file(tmp_path: Path):
  with pytest.raises(FileNotFoundError):
    load_vocabulary(tmp_path / "nope.yaml")


def test_load_config_on_top_of_vocabulary(tmp_path: Path):
  base = apply_vocabulary(AnalysisConfig(), {"generic_phrases": ["synergy"], "weak_action_verbs": ["did"]})
  path = tmp_path / "cfg.toml"
  path.write_text('[terms]\nweak_action_verbs = ["made"]\n', encoding="utf-8")

  cfg = load_config(path, base=base)

  assert cfg.generic_phrases == ["synergy"]
  assert cfg.weak_action_verbs == ["made"]
