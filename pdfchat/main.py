"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat page.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles the relay and upload routes, NiceGUI serves the page.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from pdfchat.api.app import create_app
    from pdfchat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="PDF Chat",
        favicon="⌬",
        dark=True,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "pdfchat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run FastAPI and NiceGUI as separate processes.

    FastAPI on PORT (default 8000), NiceGUI on port 8080. The page reaches
    the relay through API_BASE_URL, which defaults to the FastAPI port.
    """
    import subprocess
    import time

    port = os.getenv("PORT", "8000")
    ui_env = {**os.environ}
    ui_env.setdefault("API_BASE_URL", f"http://localhost:{port}")

    logger.info(f"Starting FastAPI on http://localhost:{port}")
    logger.info("Starting NiceGUI on http://localhost:8080")

    api_proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "pdfchat.api.app:app",
            "--host",
            os.getenv("HOST", "0.0.0.0"),
            "--port",
            port,
        ]
    )
    ui_proc = subprocess.Popen([sys.executable, "-m", "pdfchat.ui.chat_page"], env=ui_env)

    try:
        while api_proc.poll() is None and ui_proc.poll() is None:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        for proc in (api_proc, ui_proc):
            proc.terminate()
            proc.wait()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run FastAPI and NiceGUI on different ports.
    Default is integrated mode (both on port 8000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting PDF Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
