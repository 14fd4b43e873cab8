"""PDF upload endpoint for text extraction.

Handles file upload, validation and parsing. Returns the page-labelled text
so API clients can attach it to their next chat turn.
"""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, UploadFile, status

from pdfchat.models.schemas import PDFUploadResponse
from pdfchat.parsing.pdf_parser import PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(file: UploadFile) -> PDFUploadResponse:
    """Upload a PDF and extract its text.

    Args:
        file: The uploaded PDF file (multipart/form-data).

    Returns:
        PDFUploadResponse with filename, page count and extracted text.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
    """
    filename = _validate_file_extension(file.filename)
    content = await file.read()

    try:
        pdf_content = await asyncio.to_thread(parse_pdf, content)
    except PDFParseError as e:
        logger.warning(f"PDF parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    logger.info(f"Extracted text from PDF: {filename} ({pdf_content.pages} pages)")
    return PDFUploadResponse(
        filename=filename,
        pages=pdf_content.pages,
        text=pdf_content.text,
    )
