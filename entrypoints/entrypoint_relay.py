#!/usr/bin/env python3
# entrypoint_relay.py
"""
Entry point for the chat relay.
Port: 4000
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
    """Runs the relay."""
    setup_logging()
    install_exception_hooks()
    await log_info(
        f"Starting relay on port {settings.deployment.RELAY_PORT}",
        type_msg=TypeMsg.INFO,
    )

    config = uvicorn.Config(
        "eshop.services.relay.app:app",
        host=settings.deployment.RELAY_HOST,
        port=settings.deployment.RELAY_PORT,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
