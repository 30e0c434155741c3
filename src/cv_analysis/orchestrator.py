from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from typing import Awaitable, Callable, Sequence

from .analysis_config import AnalysisConfig
from .analyzers.ats import analyze_ats
from .analyzers.content import analyze_content
from .analyzers.formatting import analyze_formatting
from .analyzers.impact import analyze_impact
from .models import AnalysisOutcome, AnalyzerFailure, CvSuggestion, ParsedCvData

logger = logging.getLogger(__name__)


Analyzer = Callable[[ParsedCvData], Awaitable[list[CvSuggestion]]]

# registration order = aggregation order
DEFAULT_ANALYZERS = (
  ("ats", analyze_ats),
  ("formatting", analyze_formatting),
  ("content", analyze_content),
  ("impact", analyze_impact),
)
DEFAULT_ANALYZER_NAMES = tuple(name for name, _ in DEFAULT_ANALYZERS)


def build_analyzers(cfg: AnalysisConfig | None = None) -> list[Analyzer]:
  cfg = cfg or AnalysisConfig()
  return [functools.partial(fn, cfg=cfg) for _, fn in DEFAULT_ANALYZERS]


def analyzer_name(analyzer: Analyzer) -> str:
  fn = analyzer.func if isinstance(analyzer, functools.partial) else analyzer
  return getattr(fn, "__name__", None) or type(fn).__name__


def _run_in_thread(analyzer: Analyzer, data: ParsedCvData) -> list[CvSuggestion]:
  result = analyzer(data)
  if inspect.iscoroutine(result):
    result = asyncio.run(result)
  return list(result)


async def _run_one(analyzer: Analyzer, data: ParsedCvData, timeout: float | None) -> list[CvSuggestion]:
  if not timeout or timeout <= 0:
    return list(await analyzer(data))
  # the built-in analyzers never await, so wait_for can only give up on them
  # when they run in a worker thread
  return await asyncio.wait_for(asyncio.to_thread(_run_in_thread, analyzer, data), timeout)


async def analyze_cv_detailed(
  data: ParsedCvData,
  analyzers: Sequence[Analyzer] | None = None,
  cfg: AnalysisConfig | None = None,
) -> AnalysisOutcome:
  """Run every analyzer concurrently and collect their suggestions.

  Analyzer errors (timeouts included) never escape. With
  failure_mode="discard_all" one failure empties the whole result; with
  "partial" the suggestions of the analyzers that succeeded are kept.
  The failures are listed on the outcome either way.
  """
  cfg = cfg or AnalysisConfig()
  if analyzers is None:
    analyzers = build_analyzers(cfg)

  results = await asyncio.gather(
    *(_run_one(a, data, cfg.analyzer_timeout_seconds) for a in analyzers),
    return_exceptions=True,
  )

  outcome = AnalysisOutcome()
  for analyzer, result in zip(analyzers, results):
    name = analyzer_name(analyzer)
    if isinstance(result, BaseException):
      if isinstance(result, TimeoutError):
        error = f"timed out after {cfg.analyzer_timeout_seconds}s"
      else:
        error = f"{type(result).__name__}: {result}"
      logger.error(f"Analyzer {name} failed: {error}")
      outcome.failures.append(AnalyzerFailure(analyzer=name, error=error))
      continue
    logger.debug(f"Analyzer {name} returned {len(result)} suggestions")
    outcome.suggestions.extend(result)

  if outcome.failures and not cfg.partial_results:
    logger.error(f"Discarding all suggestions: {len(outcome.failures)} analyzer(s) failed")
    outcome.suggestions = []

  return outcome


async def analyze_cv(
  data: ParsedCvData,
  analyzers: Sequence[Analyzer] | None = None,
  cfg: AnalysisConfig | None = None,
) -> list[CvSuggestion]:
  outcome = await analyze_cv_detailed(data, analyzers, cfg)
  return outcome.suggestions


def analyze_cv_detailed_sync(
  data: ParsedCvData,
  analyzers: Sequence[Analyzer] | None = None,
  cfg: AnalysisConfig | None = None,
) -> AnalysisOutcome:
  return asyncio.run(analyze_cv_detailed(data, analyzers, cfg))


def analyze_cv_sync(
  data: ParsedCvData,
  analyzers: Sequence[Analyzer] | None = None,
  cfg: AnalysisConfig | None = None,
) -> list[CvSuggestion]:
  return analyze_cv_detailed_sync(data, analyzers, cfg).suggestions
