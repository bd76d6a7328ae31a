"""
Commande `,vc lock` : bascule verrouillé / déverrouillé.
"""
from __future__ import annotations

import logging

import discord

from core.dispatcher import CommandContext
from views import temp_voice as texts

logger = logging.getLogger(__name__)


async def lock(ctx: CommandContext):
    locked = ctx.record.toggle_lock()
    logger.info("Salon %s %s par %s", ctx.channel.id, "verrouillé" if locked else "déverrouillé", ctx.member.id)
    await ctx.reply(texts.msg_locked() if locked else texts.msg_unlocked())


def register(bot: discord.Client):
    bot.vc_commands.add_command("lock", lock, failure_message=texts.msg_lock_failed)

__all__ = ["register"]
