from __future__ import annotations

import re
from typing import Iterable

from .analysis_config import DEFAULT_SECTION_HEADERS
from .models import CvSection, CvSectionName


KNOWN_SECTION_HEADERS: tuple[str, ...] = tuple(DEFAULT_SECTION_HEADERS)

# short shouty line: "WORK HISTORY", "SKILLS & TOOLS:"
_GENERIC_HEADER_RE = re.compile(r"^[A-Z][A-Z \t&\-]{3,30}:?$")
_WS_RE = re.compile(r"\s+")

# exact (lowercased) title -> enum tag
_TITLE_ALIASES: dict[str, CvSectionName] = {
  "experience": CvSectionName.EXPERIENCE,
  "work experience": CvSectionName.EXPERIENCE,
  "professional experience": CvSectionName.EXPERIENCE,
  "employment history": CvSectionName.EXPERIENCE,
  "work history": CvSectionName.EXPERIENCE,
  "employment": CvSectionName.EXPERIENCE,
  "volunteer experience": CvSectionName.EXPERIENCE,
  "skills": CvSectionName.SKILLS,
  "technical skills": CvSectionName.SKILLS,
  "core competencies": CvSectionName.SKILLS,
  "languages": CvSectionName.SKILLS,
  "education": CvSectionName.EDUCATION,
  "summary": CvSectionName.SUMMARY,
  "professional summary": CvSectionName.SUMMARY,
  "objective": CvSectionName.SUMMARY,
  "profile": CvSectionName.SUMMARY,
  "about me": CvSectionName.SUMMARY,
  "about": CvSectionName.SUMMARY,
  "achievements": CvSectionName.ACHIEVEMENTS,
  "accomplishments": CvSectionName.ACHIEVEMENTS,
  "projects": CvSectionName.PROJECTS,
  "certifications": CvSectionName.CERTIFICATIONS,
  "certificates": CvSectionName.CERTIFICATIONS,
  "licenses": CvSectionName.CERTIFICATIONS,
  "awards": CvSectionName.AWARDS,
  "honors": CvSectionName.AWARDS,
  "references": CvSectionName.REFERENCES,
  "contact": CvSectionName.CONTACT,
  "contact information": CvSectionName.CONTACT,
  "personal information": CvSectionName.CONTACT,
}

# fallback when the exact lookup misses; checked in order
_TITLE_KEYWORDS: tuple[tuple[str, CvSectionName], ...] = (
  ("experience", CvSectionName.EXPERIENCE),
  ("employment", CvSectionName.EXPERIENCE),
  ("project", CvSectionName.PROJECTS),
  ("education", CvSectionName.EDUCATION),
  ("academic", CvSectionName.EDUCATION),
  ("skill", CvSectionName.SKILLS),
  ("competenc", CvSectionName.SKILLS),
  ("certif", CvSectionName.CERTIFICATIONS),
  ("award", CvSectionName.AWARDS),
  ("honor", CvSectionName.AWARDS),
  ("achievement", CvSectionName.ACHIEVEMENTS),
  ("accomplishment", CvSectionName.ACHIEVEMENTS),
  ("summary", CvSectionName.SUMMARY),
  ("objective", CvSectionName.SUMMARY),
  ("profile", CvSectionName.SUMMARY),
  ("reference", CvSectionName.REFERENCES),
  ("contact", CvSectionName.CONTACT),
)


def _header_key(line: str) -> str:
  s = line.strip()
  if s.endswith(":"):
    s = s[:-1]
  return _WS_RE.sub(" ", s).strip()


def is_section_header(line: str, known_headers: Iterable[str] | None = None) -> bool:
  s = line.strip()
  if not s:
    return False

  headers = KNOWN_SECTION_HEADERS if known_headers is None else known_headers
  key = _header_key(s).lower()
  if key and key in {h.strip().lower() for h in headers}:
    return True

  return bool(_GENERIC_HEADER_RE.match(s))


def normalize_header(line: str) -> str:
  return _header_key(line).title()


def structure_text_into_sections(text: str, known_headers: Iterable[str] | None = None) -> list[CvSection]:
  """Split extracted CV text into titled sections.

  Line oriented and heuristic: a header line opens a new section and is not
  part of its content; lines before the first header land in an untitled
  section. Sections left without content are dropped. If nothing survives,
  every non-blank line goes into one untitled section.
  """
  if not text or not text.strip():
    return []

  headers = list(KNOWN_SECTION_HEADERS if known_headers is None else known_headers)

  sections: list[CvSection] = []
  title: str | None = None
  content: list[str] = []
  is_open = False

  def close() -> None:
    if is_open and content:
      sections.append(CvSection(title=title, content=tuple(content)))

  non_blank: list[str] = []
  for raw in text.splitlines():
    line = raw.strip()
    if not line:
      continue
    non_blank.append(line)

    if is_section_header(line, headers):
      close()
      title = normalize_header(line)
      content = []
      is_open = True
      continue

    if not is_open:
      title = None
      content = []
      is_open = True
    content.append(line)

  close()

  if not sections:
    return [CvSection(title=None, content=tuple(non_blank))]
  return sections


def section_name_for_title(title: str | None) -> CvSectionName:
  """Map a free-text section title onto the closed section enum (GENERAL if unknown)."""
  if not title:
    return CvSectionName.GENERAL

  key = _header_key(title).lower()
  if key in _TITLE_ALIASES:
    return _TITLE_ALIASES[key]

  for needle, name in _TITLE_KEYWORDS:
    if needle in key:
      return name
  return CvSectionName.GENERAL
