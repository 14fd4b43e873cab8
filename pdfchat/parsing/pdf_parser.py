"""PDF parsing module using pypdf.

Extracts page-separated text from PDF files with validation.
"""

import io
import logging

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"
PDF_CONTENT_TYPE = "application/pdf"


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Text of all pages, each prefixed with its page number.
        pages: Total number of pages in the document.
    """

    text: str
    pages: int = Field(ge=0)


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def is_pdf(content_type: str | None) -> bool:
    """Return True when the declared MIME type is PDF."""
    if not content_type:
        return False
    return content_type.split(";")[0].strip().lower() == PDF_CONTENT_TYPE


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _page_text(page, number: int) -> str:
    # one line per page, text items space-separated
    try:
        text = page.extract_text() or ""
    except Exception as e:
        logger.warning(f"Failed to extract text from page {number}: {e}")
        return ""
    return " ".join(text.split("\n"))


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Pages are emitted in order as ``"\\n\\nPage {i}:\\n{text}"`` so the model
    can tell where each page starts.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with extracted text and page count.

    Raises:
        PDFParseError: If the file is empty, not a PDF, corrupt, or has no pages.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if pages == 0:
        raise PDFParseError("PDF contains no pages")

    page_texts = [
        _page_text(page, number) for number, page in enumerate(reader.pages, start=1)
    ]
    text = "".join(
        f"\n\nPage {number}:\n{page_text}"
        for number, page_text in enumerate(page_texts, start=1)
    )

    if not any(page_text.strip() for page_text in page_texts):
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=pages)
