from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class ExtractedText:
  text: str
  metadata: dict = field(default_factory=dict)   # e.g. {"page_count": 2}
