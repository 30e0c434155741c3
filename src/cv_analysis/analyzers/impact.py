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
from ..text_utils import has_metric, starts_with_phrase


_SCOPED_SECTIONS = (CvSectionName.EXPERIENCE, CvSectionName.PROJECTS)


async def analyze_impact(data: ParsedCvData, cfg: AnalysisConfig | None = None) -> list[CvSuggestion]:
  """Weak opening verbs and missing metrics in experience/project lines.

  The two checks are independent, so a line like "Managed deployment
  pipeline" gets both an IMPACT and a QUANTIFICATION suggestion. The metric
  check runs on every line in scope, not only on achievement-like ones.
  """
  cfg = cfg or AnalysisConfig()
  out: list[CvSuggestion] = []

  for section in data.sections:
    name = section_name_for_title(section.title)
    if name not in _SCOPED_SECTIONS:
      continue

    for line in section.content:
      verb = starts_with_phrase(line, cfg.weak_action_verbs)
      if verb is not None:
        out.append(CvSuggestion(
          section=name,
          category=CvSuggestionCategory.IMPACT,
          priority=SuggestionPriority.MEDIUM,
          original_text=line,
          reasoning=(
            f'"{verb}" is a weak opening verb. Start with a stronger action verb '
            "(e.g. spearheaded, optimized, launched) to show ownership and impact."
          ),
        ))

      if not has_metric(line):
        out.append(CvSuggestion(
          section=name,
          category=CvSuggestionCategory.QUANTIFICATION,
          priority=SuggestionPriority.MEDIUM,
          original_text=line,
          reasoning=(
            "This line has no measurable result. Add a number, percentage or amount "
            "(e.g. 'cut build time by 30%', 'served 10,000 users') to quantify the impact."
          ),
        ))

  return out
