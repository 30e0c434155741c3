from __future__ import annotations

from typing import Callable

from ..analysis_config import AnalysisConfig
from ..models import (
  CvSectionName,
  CvSuggestion,
  CvSuggestionCategory,
  ParsedCvData,
  SuggestionPriority,
)
from ..sections import section_name_for_title
from ..text_utils import has_email, has_phone


AtsCheck = Callable[[ParsedCvData, AnalysisConfig], list[CvSuggestion]]


def check_has_headers(data: ParsedCvData, cfg: AnalysisConfig) -> list[CvSuggestion]:
  if any(s.title for s in data.sections):
    return []
  return [CvSuggestion(
    section=CvSectionName.ATS_OPTIMIZATION,
    category=CvSuggestionCategory.ORGANIZATION,
    priority=SuggestionPriority.MEDIUM,
    reasoning=(
      "No section headers were detected. Applicant tracking systems rely on standard headers "
      "such as 'Experience', 'Education' and 'Skills' to read a CV; add them on their own lines."
    ),
  )]


def check_required_sections(data: ParsedCvData, cfg: AnalysisConfig) -> list[CvSuggestion]:
  present = {section_name_for_title(s.title) for s in data.sections if s.title}
  out: list[CvSuggestion] = []
  for required in cfg.required_sections:
    try:
      name = CvSectionName(required.upper())
    except ValueError:
      continue
    if name in present:
      continue
    label = name.value.replace("_", " ").title()
    out.append(CvSuggestion(
      section=name,
      category=CvSuggestionCategory.COMPLETENESS,
      priority=SuggestionPriority.HIGH,
      reasoning=(
        f"Your CV is missing a {label} section. Applicant tracking systems look for it "
        "explicitly, so add it under a clearly labelled header."
      ),
    ))
  return out


def check_contact_details(data: ParsedCvData, cfg: AnalysisConfig) -> list[CvSuggestion]:
  out: list[CvSuggestion] = []
  if not has_email(data.full_text):
    out.append(CvSuggestion(
      section=CvSectionName.CONTACT,
      category=CvSuggestionCategory.COMPLETENESS,
      priority=SuggestionPriority.HIGH,
      reasoning="No email address was found. Put a professional email address in the contact block at the top.",
    ))
  if not has_phone(data.full_text):
    out.append(CvSuggestion(
      section=CvSectionName.CONTACT,
      category=CvSuggestionCategory.COMPLETENESS,
      priority=SuggestionPriority.HIGH,
      reasoning="No phone number was found. Add one to the contact block so recruiters can reach you.",
    ))
  return out


def check_length(data: ParsedCvData, cfg: AnalysisConfig) -> list[CvSuggestion]:
  words = data.word_count
  if words < cfg.min_words:
    return [CvSuggestion(
      section=CvSectionName.ATS_OPTIMIZATION,
      category=CvSuggestionCategory.ATS,
      priority=SuggestionPriority.MEDIUM,
      reasoning=(
        f"Your CV has only {words} words. Aim for at least {cfg.min_words}: "
        "too little text gives screening systems few keywords to match."
      ),
    )]
  if words > cfg.max_words:
    return [CvSuggestion(
      section=CvSectionName.ATS_OPTIMIZATION,
      category=CvSuggestionCategory.ATS,
      priority=SuggestionPriority.LOW,
      reasoning=(
        f"Your CV has {words} words. Consider trimming it below {cfg.max_words} "
        "so the most relevant experience stands out."
      ),
    )]
  return []


ATS_CHECKS: tuple[AtsCheck, ...] = (
  check_has_headers,
  check_required_sections,
  check_contact_details,
  check_length,
)


async def analyze_ats(data: ParsedCvData, cfg: AnalysisConfig | None = None) -> list[CvSuggestion]:
  """Run the ATS compatibility checklist over the whole document."""
  cfg = cfg or AnalysisConfig()
  if data.is_empty:
    return []

  out: list[CvSuggestion] = []
  for check in ATS_CHECKS:
    out.extend(check(data, cfg))
  return out
