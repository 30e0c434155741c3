from __future__ import annotations

from ..analysis_config import AnalysisConfig
from ..models import (
  CvSection,
  CvSuggestion,
  CvSuggestionCategory,
  ParsedCvData,
  SuggestionPriority,
)
from ..sections import section_name_for_title
from ..text_utils import BULLET_GLYPHS, bullet_glyph


def _glyphs_used(section: CvSection) -> list[str]:
  used: list[str] = []
  for line in section.content:
    g = bullet_glyph(line)
    if g is not None and g not in used:
      used.append(g)
  return [g for g in BULLET_GLYPHS if g in used]


async def analyze_formatting(data: ParsedCvData, cfg: AnalysisConfig | None = None) -> list[CvSuggestion]:
  cfg = cfg or AnalysisConfig()
  out: list[CvSuggestion] = []

  for section in data.sections:
    name = section_name_for_title(section.title)
    label = section.title or "opening"

    glyphs = _glyphs_used(section)
    if len(glyphs) > 1:
      out.append(CvSuggestion(
        section=name,
        category=CvSuggestionCategory.FORMATTING,
        priority=SuggestionPriority.LOW,
        reasoning=(
          f"The {label} section mixes bullet styles ({' '.join(repr(g) for g in glyphs)}). "
          "Use a single bullet character throughout the section for a consistent look."
        ),
      ))

    for line in section.content:
      if len(line) > cfg.max_line_length:
        out.append(CvSuggestion(
          section=name,
          category=CvSuggestionCategory.CLARITY,
          priority=SuggestionPriority.LOW,
          original_text=line,
          reasoning=(
            f"This line is {len(line)} characters long. Split it into shorter bullets "
            f"(under {cfg.max_line_length} characters) so recruiters can scan it quickly."
          ),
        ))

  return out
