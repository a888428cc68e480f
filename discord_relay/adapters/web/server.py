"""FastAPI application factory and Discord client lifecycle."""

import asyncio
import sys
from typing import Optional

import discord
from fastapi import FastAPI

from discord_relay.adapters.web.routes import relay_router
from discord_relay.ports.outbound import ChatPort


def _log(msg: str):
    print(msg, file=sys.stderr)


def create_app(
    chat: Optional[ChatPort] = None,
    bot: Optional[discord.Client] = None,
    token: str = "",
) -> FastAPI:
    """Build the HTTP app.

    ``chat`` is exposed to routes through ``app.state.chat``. When ``bot``
    and ``token`` are given, the bot is started as a background task on
    startup and closed on shutdown.
    """
    app = FastAPI(title="Discord Relay")
    app.include_router(relay_router)
    app.state.chat = chat
    app.state.bot = bot
    app.state.bot_task = None

    @app.on_event("startup")
    async def startup_event():
        if bot is None or not token:
            _log("Discord bot not configured (set DISCORD_TOKEN in .env)")
            return

        _log("Starting Discord bot...")

        async def _start_discord():
            try:
                await bot.start(token)
            except Exception as e:
                _log(f"Discord bot failed to start: {e}")

        app.state.bot_task = asyncio.create_task(_start_discord())

    @app.on_event("shutdown")
    async def shutdown_event():
        if bot is not None and not bot.is_closed():
            await bot.close()
        task = app.state.bot_task
        if task is not None and not task.done():
            task.cancel()
        _log("Discord bot stopped")

    return app


app = create_app()
