from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Iterable

from .errors import UnsupportedFormatError
from .models import ParsedCvData
from .parsers.docx_parser import extract_docx_text
from .parsers.pdf_parser import extract_pdf_text
from .parsers.types import ExtractedText
from .sections import structure_text_into_sections

logger = logging.getLogger(__name__)


PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# exact match on the declared type; the content is never sniffed
TEXT_EXTRACTORS: dict[str, Callable[[bytes], ExtractedText]] = {
  PDF_MIME_TYPE: extract_pdf_text,
  DOCX_MIME_TYPE: extract_docx_text,
}

_EXTENSION_MIME_TYPES = {
  ".pdf": PDF_MIME_TYPE,
  ".docx": DOCX_MIME_TYPE,
}


def supported_mime_types() -> list[str]:
  return list(TEXT_EXTRACTORS.keys())


def mime_type_for_path(path: Path) -> str | None:
  return _EXTENSION_MIME_TYPES.get(Path(path).suffix.lower())


def extract_text(buffer: bytes, mime_type: str) -> ExtractedText:
  extractor = TEXT_EXTRACTORS.get(mime_type)
  if extractor is None:
    logger.error(f"Unsupported MIME type for parsing: {mime_type}")
    raise UnsupportedFormatError(mime_type)
  return extractor(buffer)


def parse_cv(buffer: bytes, mime_type: str, *, known_headers: Iterable[str] | None = None) -> ParsedCvData:
  """Extract text for the declared MIME type and split it into sections.

  Raises UnsupportedFormatError for an unregistered type and
  ParsingLibraryError when the decoder fails. A document without any text
  is not an error: it comes back with no sections and an empty full_text.
  """
  logger.info(f"Parsing CV ({len(buffer)} bytes, {mime_type})")
  extracted = extract_text(buffer, mime_type)
  metadata = {"mime_type": mime_type, **extracted.metadata}

  if not extracted.text.strip():
    logger.warning("No text extracted; returning empty document")
    return ParsedCvData(sections=(), full_text="", metadata=metadata)

  sections = structure_text_into_sections(extracted.text, known_headers)
  logger.info(f"Structured {len(extracted.text)} characters into {len(sections)} sections")
  return ParsedCvData(sections=tuple(sections), full_text=extracted.text, metadata=metadata)


async def parse_cv_async(buffer: bytes, mime_type: str, *, known_headers: Iterable[str] | None = None) -> ParsedCvData:
  # decoding is the only blocking step; keep it off the event loop
  return await asyncio.to_thread(parse_cv, buffer, mime_type, known_headers=known_headers)
