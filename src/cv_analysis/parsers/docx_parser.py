from __future__ import annotations

import logging
from io import BytesIO

import docx
from docx.table import Table

from ..errors import ParsingLibraryError
from .types import ExtractedText

logger = logging.getLogger(__name__)


def _table_lines(table: Table) -> list[str]:
  lines: list[str] = []
  for row in table.rows:
    seen: list[str] = []
    for cell in row.cells:
      # merged cells come back once per grid column
      t = cell.text.strip()
      if t and t not in seen:
        seen.append(t)
    lines.extend(seen)
  return lines


def extract_docx_text(buffer: bytes) -> ExtractedText:
  """Extract DOCX body text in document order; table cells are read row by row where the table sits."""
  if not buffer:
    logger.error("DOCX parsing: buffer is empty")
    raise ParsingLibraryError("DOCX buffer is empty or invalid. Cannot parse empty file.")

  lines: list[str] = []
  paragraph_count = 0
  table_count = 0
  try:
    document = docx.Document(BytesIO(buffer))
    for block in document.iter_inner_content():
      if isinstance(block, Table):
        table_count += 1
        lines.extend(_table_lines(block))
      else:
        paragraph_count += 1
        lines.append(block.text)
  except Exception as err:
    logger.error(f"Error extracting text from DOCX: {err}")
    raise ParsingLibraryError(f"Failed to parse DOCX: {err}", err) from err

  text = "\n".join(lines)
  logger.info(f"Extracted {len(text)} characters from DOCX ({paragraph_count} paragraphs, {table_count} tables)")
  return ExtractedText(text=text, metadata={"paragraph_count": paragraph_count})
