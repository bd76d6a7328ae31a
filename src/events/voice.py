"""
Handlers vocaux : création / suppression des salons temporaires et contrôle
d'accès.

Toute erreur (déconnexion refusée, API indisponible...) est loggée ici pour
qu'un événement défaillant ne bloque pas les suivants.
"""
from __future__ import annotations

import logging
import discord

from core.temp_voice.manager import TempVoiceManager

logger = logging.getLogger(__name__)


def setup(bot: discord.Client, manager: TempVoiceManager):
    @bot.event
    async def on_voice_state_update(member: discord.Member, before: discord.VoiceState, after: discord.VoiceState):
        try:
            await manager.handle_voice_state_update(member, before, after)
        except Exception:  # noqa: BLE001
            logger.exception("Erreur voice_state_update pour %s", member.id)

    @bot.event
    async def on_guild_channel_delete(channel: discord.abc.GuildChannel):
        try:
            manager.handle_channel_delete(channel)
        except Exception:  # noqa: BLE001
            logger.exception("Erreur guild_channel_delete pour %s", channel.id)
