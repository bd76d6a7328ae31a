"""
Handler des messages : transmet les commandes `,vc` au dispatcher.
"""
from __future__ import annotations

import logging
import discord

from core.dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


def setup(bot: discord.Client, dispatcher: CommandDispatcher):
    @bot.event
    async def on_message(message: discord.Message):
        try:
            await dispatcher.handle_message(message)
        except Exception:  # noqa: BLE001
            logger.exception("Erreur traitement message %s", message.id)
