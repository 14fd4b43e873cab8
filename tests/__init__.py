"""Test package for PDF Chat.

Structure:
    - unit/: Parser, store, composer, controller, clients and formatting
    - integration/: FastAPI routes and the page-to-relay flow over ASGI

No network access: the Gemini endpoint is replaced with httpx.MockTransport
and PDFs are built in memory. Leverages pytest with pytest-check for soft
assertions.
"""
