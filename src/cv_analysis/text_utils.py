from __future__ import annotations

import re
from typing import Iterable


BULLET_GLYPHS = ("*", "-", "•")

_METRIC_RE = re.compile(r"(\$?\d[\d,]*)(\.\d+)?\s*(%|k|m|b|arr|mrr)?\b", re.IGNORECASE)
_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"(\+?\d[\d \t().-]{7,}\d)")
_BULLET_RE = re.compile(r"^\s*(•|[*\-](?=\s))\s*")


def normalize_text(s: str) -> str:
  s = s.lower()
  s = s.replace("–", "-").replace("—", "-")
  return s


def bullet_glyph(line: str) -> str | None:
  m = _BULLET_RE.match(line)
  return m.group(1) if m else None


def strip_bullet(line: str) -> str:
  return _BULLET_RE.sub("", line, count=1).strip()


def starts_with_phrase(line: str, phrases: Iterable[str]) -> str | None:
  """Return the first phrase the line opens with (bullet glyph ignored), or None."""
  t = normalize_text(strip_bullet(line))
  for p in phrases:
    p2 = normalize_text(p).strip()
    if not p2:
      continue
    if t == p2 or (t.startswith(p2) and not t[len(p2)].isalnum()):
      return p
  return None


def first_phrase_hit(text: str, phrases: Iterable[str]) -> str | None:
  t = normalize_text(text)
  for p in phrases:
    p2 = normalize_text(p).strip()
    if p2 and p2 in t:
      return p
  return None


def has_metric(text: str) -> bool:
  return bool(_METRIC_RE.search(text))


def has_email(text: str) -> bool:
  return bool(_EMAIL_RE.search(text))


def has_phone(text: str) -> bool:
  return any(sum(ch.isdigit() for ch in m.group(0)) >= 9 for m in _PHONE_RE.finditer(text))
