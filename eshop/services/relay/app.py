# eshop/services/relay/app.py
"""
FastAPI application for the chat relay.

WebSocket endpoints:
- /ws: one socket per client, JSON frames {"event", "data"}

REST endpoints:
- GET /        greeting
- GET /health  health check
- GET /stats   connection counters
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from eshop.common.constants import TypeMsg
from eshop.common.logger import log_debug, log_error, log_info
from eshop.config import settings
from eshop.services.relay.connection_manager import ConnectionManager
from eshop.services.relay.registry import SessionRegistry
from eshop.services.relay.relay import ChatRelay
from eshop.shared.models.common import HealthStatus

SERVICE_NAME = "relay"
_started_at = time.monotonic()

manager = ConnectionManager()
relay = ChatRelay(SessionRegistry(), manager)


# === MODELS ===

class StatsResponse(BaseModel):
    """Relay counters."""
    active_connections: int
    total_connections_ever: int
    total_messages_sent: int
    online_users: int
    buffered_messages: int


# === LIFESPAN ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    await log_info("Starting chat relay...", type_msg=TypeMsg.INFO)
    yield
    await log_info("Shutting down chat relay...", type_msg=TypeMsg.INFO)


# === APP ===

app = FastAPI(
    title="eshop relay",
    description="In-memory presence directory and chat relay over WebSockets.",
    version=settings.system.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.deployment.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_class=PlainTextResponse)
async def index() -> str:
    return "Hello world from socket server!"


@app.get("/health", response_model=HealthStatus, tags=["Health"])
async def health_check() -> HealthStatus:
    return HealthStatus(
        service=SERVICE_NAME,
        status="healthy",
        version=settings.system.VERSION,
        uptime_seconds=round(time.monotonic() - _started_at, 2),
    )


@app.get("/stats", response_model=StatsResponse, tags=["Stats"])
async def get_stats() -> StatsResponse:
    return StatsResponse(**manager.get_stats(), **relay.get_stats())


# === WEBSOCKET ===

@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """
    Chat socket. The client announces itself with
    {"event": "addUser", "data": "<userId>"}.
    """
    connection_id = await manager.connect(websocket)
    await log_info(f"Relay connection opened: {connection_id}", type_msg=TypeMsg.DEBUG)

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text")
            if raw is None:
                await log_debug(f"Relay connection {connection_id}: binary frame ignored")
                continue
            await relay.handle_frame(connection_id, raw)
    except WebSocketDisconnect:
        pass
    except Exception as e:
        await log_error(f"Relay connection {connection_id} failed: {e}", exc_info=True)
    finally:
        await manager.disconnect(connection_id)
        await relay.remove_connection(connection_id)
        await log_info(f"Relay connection closed: {connection_id}", type_msg=TypeMsg.DEBUG)
