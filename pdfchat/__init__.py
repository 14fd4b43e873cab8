"""PDF Chat - a Gemini chat widget with PDF attachments.

Combines FastAPI for the completion relay, NiceGUI for the page, httpx for
outbound calls, pypdf for text extraction and Pydantic for validation.

Components:
    - api: Relay and upload endpoints
    - chat: Conversation store, request composer and controller
    - llm: Gemini client and its configuration
    - parsing: PDF text extraction
    - ui: Chat page
    - models: Request/response schemas
"""

__version__ = "0.1.0"
