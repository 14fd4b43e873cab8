"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: PDF validation and page-labelled text extraction
    - chat/: Store invariants, request composition, send and upload flows
    - llm/ and ui/relay: Response decoding and error mapping
    - ui/formatting: Markdown rendering and per-message isolation
"""
