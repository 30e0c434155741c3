from __future__ import annotations

from ..analysis_config import AnalysisConfig
from ..models import (
  CvSectionName,
  CvSuggestion,
  CvSuggestionCategory,
  ParsedCvData,
  SuggestionPriority,
)
from ..sections import section_name_for_title
from ..text_utils import first_phrase_hit


async def analyze_content(data: ParsedCvData, cfg: AnalysisConfig | None = None) -> list[CvSuggestion]:
  """Flag generic filler phrases in experience bullets (one suggestion per line)."""
  cfg = cfg or AnalysisConfig()
  out: list[CvSuggestion] = []

  for section in data.sections:
    if section_name_for_title(section.title) is not CvSectionName.EXPERIENCE:
      continue

    for line in section.content:
      phrase = first_phrase_hit(line, cfg.generic_phrases)
      if phrase is None:
        continue
      out.append(CvSuggestion(
        section=CvSectionName.EXPERIENCE,
        category=CvSuggestionCategory.CLARITY,
        priority=SuggestionPriority.MEDIUM,
        original_text=line,
        reasoning=(
          f'The phrase "{phrase}" is generic and says little about what you achieved. '
          "Replace it with a strong action verb (e.g. led, built, delivered) that shows your contribution."
        ),
      ))

  return out
