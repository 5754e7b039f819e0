#!/usr/bin/env python3
# entrypoint_all.py
"""
Entry point that runs the API and the relay in one container.
Meant for development and simple deployments.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

from main import main


if __name__ == "__main__":
    print("Starting api + relay...")
    print("Press Ctrl+C to stop")

    try:
        asyncio.run(main(mode="all"))
    except KeyboardInterrupt:
        print("\nStop signal received, shutting down...")
    finally:
        print("All components stopped")
