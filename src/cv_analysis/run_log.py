# one CSV row per CLI run

from __future__ import annotations

from pathlib import Path


def append_csv_row(csv_path: Path, header: list[str], row: dict) -> None:
  csv_path.parent.mkdir(parents=True, exist_ok=True)
  exists = csv_path.exists() and csv_path.stat().st_size > 0
  with csv_path.open("a", encoding="utf-8", newline="") as f:
    if not exists:
      f.write(",".join(header) + "\n")
    values: list[str] = []
    for h in header:
      v = str(row.get(h, ""))
      if any(ch in v for ch in [",", '"', "\n", "\r"]):
        v = '"' + v.replace('"', '""') + '"'
      values.append(v)
    f.write(",".join(values) + "\n")


def report_row(*, timestamp: str, source: str, mime_type: str, report: dict) -> dict:
  summary = report.get("summary", {})
  return {
    "timestamp": timestamp,
    "source": source,
    "mime_type": mime_type,
    "sections": str(len(report.get("document", {}).get("sections", []))),
    "words": str(report.get("document", {}).get("word_count", 0)),
    "suggestions_total": str(summary.get("total_suggestions", 0)),
    "high_priority": str(summary.get("high_priority", 0)),
    "degraded": str(report.get("degraded", False)),
    "failed_analyzers": "; ".join(f.get("analyzer", "") for f in report.get("failures", [])),
  }
