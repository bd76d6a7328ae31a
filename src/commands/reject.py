"""
Commande `,vc reject <cible>`.

Bannit la cible du salon (retirée des autorisés) et la déconnecte si elle
s'y trouve actuellement.
"""
from __future__ import annotations

import discord

from core.dispatcher import CommandContext
from core.temp_voice.protocols import current_channel_id
from core.temp_voice.resolver import resolve_member
from views import temp_voice as texts


async def reject(ctx: CommandContext):
    if not ctx.args:
        await ctx.reply(texts.msg_usage("reject", "reject"))
        return
    target = await resolve_member(ctx.guild, ctx.args[0])
    if target is None:
        await ctx.reply(texts.msg_user_not_found())
        return
    if target.id == ctx.member.id:
        await ctx.reply(texts.msg_cannot_reject_self())
        return

    ctx.record.reject(target.id)
    if current_channel_id(target) == ctx.channel.id:
        await target.move_to(None, reason="Rejected from voice channel")
    await ctx.reply(texts.msg_rejected(target.display_name))


def register(bot: discord.Client):
    bot.vc_commands.add_command("reject", reject, failure_message=texts.msg_reject_failed)

__all__ = ["register"]
