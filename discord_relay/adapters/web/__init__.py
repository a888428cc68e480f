"""Web adapters — FastAPI app and routes."""

from discord_relay.adapters.web.routes import relay_router
from discord_relay.adapters.web.server import app, create_app

__all__ = ["app", "create_app", "relay_router"]
