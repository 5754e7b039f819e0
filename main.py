#!/usr/bin/env python3
# main.py
"""
Main entry point for the eshop backend.
Starts the REST API, the chat relay, or both, depending on the mode.
"""

from __future__ import annotations

import asyncio
import signal
import sys
from typing import Any

import uvicorn

from eshop.config import settings
from eshop.common.logger import setup_logging, get_logger, log_info, log_error
from eshop.common.constants import TypeMsg

MODES = ("all", "api", "relay")

# Global shutdown flag
_shutdown_event: asyncio.Event | None = None
_running_tasks: list[asyncio.Task] = []


# === SAFETY NETS ===

def _handle_uncaught_exception(exc_type, exc_value, exc_traceback) -> None:
    """sys.excepthook: logs the fault and exits with status 1."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    get_logger().critical(
        f"Uncaught exception: {exc_value}",
        exc_info=(exc_type, exc_value, exc_traceback),
    )
    sys.exit(1)


def _handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """Event loop exception handler: logs the fault and stops the process."""
    exc = context.get("exception")
    message = context.get("message", "Unhandled error in event loop")

    get_logger().critical(
        f"Event loop error: {message}",
        exc_info=(type(exc), exc, exc.__traceback__) if exc else None,
    )
    loop.stop()
    sys.exit(1)


def install_exception_hooks() -> None:
    sys.excepthook = _handle_uncaught_exception
    asyncio.get_running_loop().set_exception_handler(_handle_loop_exception)


def setup_signal_handlers() -> None:
    """Installs SIGINT/SIGTERM handlers for graceful shutdown."""
    global _shutdown_event
    _shutdown_event = asyncio.Event()

    def signal_handler(sig: int) -> None:
        if _shutdown_event and not _shutdown_event.is_set():
            print(f"\nStop signal received (sig={sig}), shutting down...")
            _shutdown_event.set()
            for task in _running_tasks:
                if not task.done():
                    task.cancel()

    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, lambda s=sig: signal_handler(s))
    except NotImplementedError:
        # Windows has no add_signal_handler
        signal.signal(signal.SIGINT, lambda s, f: signal_handler(s))
        signal.signal(signal.SIGTERM, lambda s, f: signal_handler(s))


# === SERVERS ===

async def _serve(name: str, app_path: str, host: str, port: int) -> None:
    await log_info(f"Starting {name} on {host}:{port}...", type_msg=TypeMsg.INFO)

    config = uvicorn.Config(
        app_path,
        host=host,
        port=port,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    # Signals are handled here, not by uvicorn
    server.install_signal_handlers = lambda: None
    try:
        await server.serve()
    except asyncio.CancelledError:
        await log_info(f"{name}: graceful shutdown", type_msg=TypeMsg.DEBUG)
        server.should_exit = True
        await server.shutdown()


async def run_api() -> None:
    """Starts the marketplace REST API."""
    await _serve(
        "API",
        "eshop.services.api.app:app",
        settings.deployment.API_HOST,
        settings.deployment.API_PORT,
    )


async def run_relay() -> None:
    """Starts the chat relay."""
    await _serve(
        "relay",
        "eshop.services.relay.app:app",
        settings.deployment.RELAY_HOST,
        settings.deployment.RELAY_PORT,
    )


async def main(mode: str | None = None) -> None:
    """
    Runs the selected components until they stop or a signal arrives.

    Args:
        mode: all | api | relay. Falls back to COMPONENT_MODE.
    """
    global _running_tasks

    setup_logging()
    install_exception_hooks()
    setup_signal_handlers()

    mode = mode or settings.system.COMPONENT_MODE
    await log_info(
        f"{settings.system.PROJECT_NAME} v{settings.system.VERSION} starting in '{mode}' mode",
        type_msg=TypeMsg.INFO,
    )

    match mode:
        case "api":
            _running_tasks = [asyncio.create_task(run_api())]
        case "relay":
            _running_tasks = [asyncio.create_task(run_relay())]
        case "all":
            _running_tasks = [
                asyncio.create_task(run_api()),
                asyncio.create_task(run_relay()),
            ]
        case _:
            await log_error(f"Unknown mode: {mode}")
            return

    try:
        await asyncio.gather(*_running_tasks)
    except asyncio.CancelledError:
        await log_info("Task cancelled, shutting down", type_msg=TypeMsg.INFO)
    finally:
        for task in _running_tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*_running_tasks, return_exceptions=True)
        _running_tasks.clear()
        await log_info("Application stopped", type_msg=TypeMsg.INFO)


def print_usage() -> None:
    print(f"""
eshop {settings.system.VERSION}: marketplace backend

Usage:
    python main.py [mode]

Modes:
    api      REST API (:{settings.deployment.API_PORT})
    relay    chat relay (:{settings.deployment.RELAY_PORT})
    all      both in one process

Without a mode, COMPONENT_MODE from the environment or config.json is used.
    """)


if __name__ == "__main__":
    mode = None

    if len(sys.argv) > 1:
        arg = sys.argv[1].lower()
        if arg in ("--help", "-h"):
            print_usage()
            sys.exit(0)
        elif arg in MODES:
            mode = arg
        else:
            print(f"Error: unknown mode '{arg}'")
            print_usage()
            sys.exit(1)

    try:
        asyncio.run(main(mode))
    except KeyboardInterrupt:
        pass
