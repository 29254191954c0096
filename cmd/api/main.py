"""
FastAPI Service - Main entry point for the IoC Demo API.
"""

from core.config import get_settings
from core.logger import logger

# uvicorn builds the app through the create_app factory
# Run with: PYTHONPATH=. python cmd/api/main.py
if __name__ == "__main__":
    import os
    import sys

    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Reload: {settings.api_reload}")

    # uvicorn's reload subprocess needs the project root importable
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)
    current_pythonpath = os.environ.get("PYTHONPATH", "")
    if project_root not in current_pythonpath:
        os.environ["PYTHONPATH"] = (
            f"{project_root}:{current_pythonpath}" if current_pythonpath else project_root
        )

    uvicorn.run(
        "internal.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
