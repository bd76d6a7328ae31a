"""
Commande `,vc permit <cible>`.

Autorise la cible même si le salon est verrouillé et lève un éventuel rejet.
Pas de contrôle sur soi-même : se permettre est sans effet.
"""
from __future__ import annotations

import discord

from core.dispatcher import CommandContext
from core.temp_voice.resolver import resolve_member
from views import temp_voice as texts


async def permit(ctx: CommandContext):
    if not ctx.args:
        await ctx.reply(texts.msg_usage("permit", "permit"))
        return
    target = await resolve_member(ctx.guild, ctx.args[0])
    if target is None:
        await ctx.reply(texts.msg_user_not_found())
        return
    ctx.record.permit(target.id)
    await ctx.reply(texts.msg_permitted(target.display_name))


def register(bot: discord.Client):
    bot.vc_commands.add_command("permit", permit, failure_message=texts.msg_permit_failed)

__all__ = ["register"]
