"""Integration tests for components working together.

Coverage:
    - POST /chat relay with a mocked upstream
    - POST /upload/pdf with generated PDFs
    - Controller -> RelayClient -> FastAPI -> GeminiClient over ASGI
"""
