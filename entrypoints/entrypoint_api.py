#!/usr/bin/env python3
# entrypoint_api.py
"""
Entry point for the marketplace REST API.
Port: 8000
"""

import asyncio
import sys
from pathlib import Path

# Project root on the path
sys.path.insert(0, str(Path(__file__).parent.parent.resolve()))

import uvicorn

from eshop.config import settings
from eshop.common.logger import setup_logging, log_info
from eshop.common.constants import TypeMsg
from main import install_exception_hooks


async def main() -> None:
    """Runs the API."""
    setup_logging()
    install_exception_hooks()
    await log_info(
        f"Starting API on port {settings.deployment.API_PORT}",
        type_msg=TypeMsg.INFO,
    )

    config = uvicorn.Config(
        "eshop.services.api.app:app",
        host=settings.deployment.API_HOST,
        port=settings.deployment.API_PORT,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
