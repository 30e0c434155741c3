from __future__ import annotations

import logging

import fitz  # PyMuPDF

from ..errors import ParsingLibraryError
from .types import ExtractedText

logger = logging.getLogger(__name__)


def extract_pdf_text(buffer: bytes) -> ExtractedText:
  """Extract plain text from a PDF buffer, one page after another."""
  if not buffer:
    logger.error("PDF parsing: buffer is empty")
    raise ParsingLibraryError("PDF buffer is empty or invalid. Cannot parse empty file.")

  try:
    with fitz.open(stream=buffer, filetype="pdf") as doc:
      page_texts = [page.get_text() for page in doc]
  except Exception as err:
    logger.error(f"Error extracting text from PDF: {err}")
    raise ParsingLibraryError(f"Failed to parse PDF: {err}", err) from err

  text = "\n".join(t.rstrip("\n") for t in page_texts)
  logger.info(f"Extracted {len(text)} characters from {len(page_texts)} PDF pages")
  return ExtractedText(text=text, metadata={"page_count": len(page_texts)})
