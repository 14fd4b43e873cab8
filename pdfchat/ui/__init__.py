"""NiceGUI interface - thin presentation layer over the chat controller.

Responsibilities:
    - Message list with markdown rendering, one isolated slot per message
    - Typing indicator while a completion is outstanding
    - PDF attachment control and upload acknowledgement
    - Accent-cycling send button

Completion requests go through the relay endpoint; this package never
holds the API key.
"""
