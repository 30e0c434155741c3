from __future__ import annotations


class CvParsingError(Exception):
  pass


class UnsupportedFormatError(CvParsingError):
  def __init__(self, mime_type: str):
    self.mime_type = mime_type
    super().__init__(f"Unsupported file type: {mime_type}")


class ParsingLibraryError(CvParsingError):
  """Raised when the underlying PDF/DOCX decoder fails.

  Raise it with ``raise ParsingLibraryError(...) from err`` so the cause
  chain survives; ``original_error`` keeps a direct handle as well.
  """

  def __init__(self, message: str, original_error: BaseException | None = None):
    self.original_error = original_error
    super().__init__(message)
