"""PDF text extraction for chat attachments.

Turns an uploaded PDF into one flat, page-labelled text block that is
appended to the next outgoing user turn.
"""

from pdfchat.parsing.pdf_parser import PDFContent, PDFParseError, is_pdf, parse_pdf

__all__ = ["PDFContent", "PDFParseError", "is_pdf", "parse_pdf"]
