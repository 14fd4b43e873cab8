"""FastAPI endpoints for the chat widget.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Completion relay (holds the Gemini API key)
    - POST /upload/pdf: PDF text extraction
"""

from pdfchat.api.app import app, create_app

__all__ = ["app", "create_app"]
