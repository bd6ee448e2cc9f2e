"""
Keep-alive web server.
Exposes health and registered-command endpoints.
"""

import asyncio
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from bot.database import is_connected
from utils.logger import get_logger

logger = get_logger("KeepAlive")

# Track bot status
_bot_status: Dict[str, Any] = {
    "status": "starting",
    "discord_connected": False,
    "ready_at": None,
}

_registry: Optional[Any] = None


def update_bot_status(**kwargs) -> None:
    """Update bot status for health endpoint."""
    _bot_status.update(kwargs)


def attach_registry(registry: Any) -> None:
    """Expose a command registry on the /commands endpoint."""
    global _registry
    _registry = registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info("Keep-alive server starting...")
    yield
    logger.info("Keep-alive server shutting down...")


app = FastAPI(
    title="Orion",
    description="Command router keep-alive server",
    version="1.0.0",
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Orion",
        "version": "1.0.0",
        "status": _bot_status.get("status", "unknown"),
    }


@app.get("/health")
async def health():
    """Health check endpoint for monitoring."""
    database_ok = is_connected()
    discord_ok = bool(_bot_status.get("discord_connected"))
    ready_at = _bot_status.get("ready_at")
    uptime = int(time.monotonic() - ready_at) if ready_at is not None else 0

    status = "healthy" if discord_ok else "degraded"

    return JSONResponse(
        status_code=200 if status == "healthy" else 503,
        content={
            "status": status,
            "discord": "connected" if discord_ok else "disconnected",
            "database": "connected" if database_ok else "disconnected",
            "uptime": uptime,
            "commands": len(_registry) if _registry is not None else 0,
        },
    )


@app.get("/commands")
async def list_commands():
    """List the registered commands."""
    commands: List[Dict[str, Any]] = []
    if _registry is not None:
        for container in _registry.get_all():
            commands.append({
                "name": container.name,
                "category": container.category.name,
                "prefix": container.default_prefix,
                "triggers": list(container.triggers),
                "priority": container.priority.name,
            })

    commands.sort(key=lambda c: (c["category"], c["name"]))
    return {"count": len(commands), "commands": commands}


async def start_server(host: str, port: int) -> None:
    """Start the keep-alive server."""
    import uvicorn

    config_uvicorn = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level="warning",
        access_log=False,
    )
    server = uvicorn.Server(config_uvicorn)

    logger.info(f"Keep-alive server listening on port {port}")
    await server.serve()


def run_server(host: str, port: int) -> asyncio.Task:
    """Run server in background task."""
    return asyncio.create_task(start_server(host, port))
