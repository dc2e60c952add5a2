"""
HTTP Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the API settings.
"""

import uvicorn

from src.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
