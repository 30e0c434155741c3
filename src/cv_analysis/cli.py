from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from .analysis_config import AnalysisConfig, load_config
from .config.vocabulary import DEFAULT_CONFIG_PATH, DEFAULT_VOCABULARY_PATH, apply_vocabulary, load_vocabulary
from .dispatch import mime_type_for_path, parse_cv, supported_mime_types
from .errors import CvParsingError
from .orchestrator import analyze_cv_detailed_sync
from .report import build_report
from .run_log import append_csv_row, report_row

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
  ap = argparse.ArgumentParser(description="Parse a CV (PDF/DOCX) and print improvement suggestions as JSON")
  ap.add_argument("cv", help="Path to the CV file (.pdf or .docx)")
  ap.add_argument("--mime-type", default=None, help="Declared MIME type (default: guessed from the file extension)")
  ap.add_argument("--config", default=None, help="Optional TOML config")
  ap.add_argument("--vocabulary", default=None, help="Optional YAML phrase lists (generic_phrases, weak_action_verbs, section_headers)")
  ap.add_argument("--out", default=None, help="Write the JSON report here instead of stdout")

  ap.add_argument("--partial", action="store_true", help="Keep suggestions from analyzers that succeeded when another one fails")
  ap.add_argument("--timeout", type=float, default=None, help="Per-analyzer timeout in seconds (0 disables)")

  ap.add_argument("--log-csv", default=None, help="Append a row to this CSV file each run")
  ap.add_argument("--dry-run", action="store_true", help="Analyze but write no files")
  ap.add_argument("-v", "--verbose", action="store_true")
  return ap


def main(argv: list[str] | None = None) -> int:
  args = build_argparser().parse_args(argv)

  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )

  cv_path = Path(args.cv)
  if not cv_path.exists():
    raise FileNotFoundError(f"CV not found: {cv_path}")

  # ---- config ----
  # phrase lists: packaged yaml first, then [terms] from the TOML, then --vocabulary
  cfg = apply_vocabulary(AnalysisConfig(), load_vocabulary(DEFAULT_VOCABULARY_PATH))
  cfg_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
  cfg = load_config(cfg_path if cfg_path.exists() else None, base=cfg)
  if args.vocabulary:
    cfg = apply_vocabulary(cfg, load_vocabulary(Path(args.vocabulary)))
  if args.partial:
    cfg.failure_mode = "partial"
  if args.timeout is not None:
    cfg.analyzer_timeout_seconds = args.timeout if args.timeout > 0 else None

  mime_type = args.mime_type or mime_type_for_path(cv_path)
  if mime_type is None:
    sys.stderr.write(
      f"Cannot guess the MIME type of {cv_path.name}; pass --mime-type "
      f"(supported: {', '.join(supported_mime_types())})\n"
    )
    return 2

  # ---- parse + analyze ----
  try:
    parsed = parse_cv(cv_path.read_bytes(), mime_type, known_headers=cfg.section_headers)
  except CvParsingError as e:
    sys.stderr.write(f"{e}\n")
    return 2

  outcome = analyze_cv_detailed_sync(parsed, cfg=cfg)
  report = build_report(parsed, outcome, source=str(cv_path))
  out_json = json.dumps(report, indent=2, ensure_ascii=False)

  if args.out and not args.dry_run:
    Path(args.out).write_text(out_json + "\n", encoding="utf-8")
    logger.info(f"Report written to {args.out}")
  else:
    print(out_json)

  if args.log_csv and not args.dry_run:
    row = report_row(
      timestamp=datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
      source=str(cv_path),
      mime_type=mime_type,
      report=report,
    )
    append_csv_row(Path(args.log_csv), list(row.keys()), row)

  return 0


if __name__ == "__main__":
  raise SystemExit(main())
