"""
Commande `,vc transfer <cible>`.

La cible doit être connectée au salon. Étapes, sans rollback si l'une échoue :
1. owner_id -> cible
2. retrait du bundle propriétaire de l'ancien owner, ajout au nouveau
3. renommage du salon
"""
from __future__ import annotations

import logging

import discord

from core.dispatcher import CommandContext
from core.permissions import grant_owner, revoke_owner
from core.temp_voice.protocols import current_channel_id
from core.temp_voice.resolver import resolve_member
from views import temp_voice as texts

logger = logging.getLogger(__name__)


async def transfer(ctx: CommandContext):
    if not ctx.args:
        await ctx.reply(texts.msg_usage("transfer", "transfer ownership to"))
        return
    target = await resolve_member(ctx.guild, ctx.args[0])
    if target is None:
        await ctx.reply(texts.msg_user_not_found())
        return
    if target.id == ctx.member.id:
        await ctx.reply(texts.msg_cannot_transfer_self())
        return
    if current_channel_id(target) != ctx.channel.id:
        await ctx.reply(texts.msg_target_not_in_channel())
        return

    old_owner = ctx.member
    ctx.record.owner_id = target.id
    await revoke_owner(ctx.channel, old_owner, reason="Temporary channel ownership transfer cleanup")
    await grant_owner(ctx.channel, target, reason="Temporary channel ownership transfer")
    await ctx.channel.edit(name=texts.fmt_channel_name(target.display_name))
    logger.info("Transfert de propriété du salon %s: %s -> %s", ctx.channel.id, old_owner.id, target.id)
    await ctx.reply(texts.msg_transferred(target.display_name))


def register(bot: discord.Client):
    bot.vc_commands.add_command("transfer", transfer, failure_message=texts.msg_transfer_failed)

__all__ = ["register"]
