"""
Shared pytest fixtures: in-memory PDF/DOCX builders and sample CV text.
"""
from io import BytesIO

import docx
import fitz
import pytest

from cv_analysis.models import CvSection, ParsedCvData
from cv_analysis.sections import structure_text_into_sections


SAMPLE_CV_TEXT = """Jane Doe
jane.doe@example.com | +1 415 555 0132
EXPERIENCE
Responsible for backend systems
Increased throughput by 40%
EDUCATION
BS Computer Science, 2020
"""


@pytest.fixture
def sample_cv_text() -> str:
  return SAMPLE_CV_TEXT


@pytest.fixture
def make_pdf():
  """Build a PDF with one page per list of lines."""
  def _make(*pages: list[str]) -> bytes:
    doc = fitz.open()
    for lines in pages:
      page = doc.new_page()
      if lines:
        page.insert_text((72, 72), "\n".join(lines), fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data
  return _make


@pytest.fixture
def make_docx():
  """Build a DOCX with one paragraph per string in ``lines``.

  A list of rows inside ``lines`` becomes a table at that position;
  ``table_rows`` appends one more table after the paragraphs.
  """
  def add_table(document, rows: list[list[str]]) -> None:
    table = document.add_table(rows=len(rows), cols=len(rows[0]))
    for r, row in enumerate(rows):
      for c, value in enumerate(row):
        table.cell(r, c).text = value

  def _make(lines: list, table_rows: list[list[str]] | None = None) -> bytes:
    document = docx.Document()
    for line in lines:
      if isinstance(line, list):
        add_table(document, line)
      else:
        document.add_paragraph(line)
    if table_rows:
      add_table(document, table_rows)
    buf = BytesIO()
    document.save(buf)
    return buf.getvalue()
  return _make


@pytest.fixture
def make_parsed():
  """ParsedCvData from plain text, or from explicit (title, lines) pairs."""
  def _make(text: str | None = None, sections: list[tuple[str | None, list[str]]] | None = None) -> ParsedCvData:
    if sections is not None:
      built = tuple(CvSection(title=t, content=tuple(lines)) for t, lines in sections)
      full = "\n".join(
        line for t, lines in sections for line in ([t] if t else []) + list(lines)
      )
      return ParsedCvData(sections=built, full_text=full)
    text = text or ""
    return ParsedCvData(sections=tuple(structure_text_into_sections(text)), full_text=text)
  return _make
