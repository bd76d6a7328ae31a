from __future__ import annotations

import logging
from typing import Optional

import discord

from core import config
from core.permissions import owner_overwrite
from views import temp_voice as texts
from .access import JoinVerdict, evaluate_join
from .models import TempChannelRegistry
from .protocols import MemberLike

logger = logging.getLogger(__name__)


async def notify(user: MemberLike, content: str) -> None:
    """Envoie un DM sans se soucier du résultat.

    Un échec (DM fermés, utilisateur bloquant le bot...) est journalisé puis
    ignoré : ni retry, ni remontée vers le propriétaire du salon.
    """
    try:
        await user.send(content)
    except Exception:  # noqa: BLE001
        logger.debug("Impossible d'envoyer un DM à %s", user.id, exc_info=True)


class TempVoiceManager:
    """Coordonne le cycle de vie des salons temporaires.

    Responsabilités:
        - Création d'un salon personnel à l'entrée dans le lobby.
        - Suppression du salon quand il se vide.
        - Contrôle d'accès (lock / reject) à chaque arrivée dans un salon suivi.
    """

    def __init__(self, registry: TempChannelRegistry, lobby_name: str = config.LOBBY_CHANNEL_NAME):
        self.registry = registry
        self.lobby_name = lobby_name

    def is_lobby(self, channel) -> bool:
        return channel is not None and channel.name == self.lobby_name

    # ---------- cycle de vie ----------
    async def create_temp_channel(self, member: discord.Member, lobby_channel: discord.VoiceChannel):
        guild = member.guild
        name = texts.fmt_channel_name(member.display_name)
        try:
            new_channel = await guild.create_voice_channel(
                name,
                category=lobby_channel.category,
                overwrites={member: owner_overwrite()},
                reason=f"Temporary channel for {member.id}",
            )
        except Exception:  # noqa: BLE001
            logger.exception("Echec création salon temporaire pour %s", member.id)
            return None

        self.registry.create(new_channel.id, member.id)
        try:
            await member.move_to(new_channel, reason="Move to temporary channel")
        except Exception:  # noqa: BLE001
            logger.exception("Echec déplacement de %s vers %s", member.id, new_channel.id)
            # Personne n'y entrera : aucun événement ne déclencherait la suppression
            if await self.delete_if_empty(new_channel):
                return None
        logger.info("Salon temporaire créé %s (%s) pour %s", new_channel.name, new_channel.id, member.display_name)
        return new_channel

    async def delete_temp_channel(self, channel) -> None:
        try:
            await channel.delete(reason="Temporary channel cleanup")
            logger.info("Salon temporaire supprimé %s (vide)", channel.id)
        except Exception:  # noqa: BLE001
            logger.exception("Echec suppression salon temporaire %s", channel.id)
        finally:
            # Retiré même en cas d'échec : le salon devient un orphelin non suivi
            self.registry.remove(channel.id)

    async def delete_if_empty(self, channel) -> bool:
        if channel.id not in self.registry:
            return False
        if channel.members:
            return False
        await self.delete_temp_channel(channel)
        return True

    # ---------- contrôle d'accès ----------
    async def enforce_access(self, member: MemberLike, channel) -> JoinVerdict:
        record = self.registry.get(channel.id)
        if record is None:
            return JoinVerdict.ADMIT
        verdict = evaluate_join(record, member.id)
        if verdict is JoinVerdict.LOCKED:
            await member.move_to(None, reason="Channel is locked")
            await notify(member, texts.msg_dm_locked())
            logger.info("%s déconnecté de %s (verrouillé)", member.id, channel.id)
        elif verdict is JoinVerdict.REJECTED:
            await member.move_to(None, reason="Rejected from this channel")
            await notify(member, texts.msg_dm_rejected())
            logger.info("%s déconnecté de %s (rejeté)", member.id, channel.id)
        return verdict

    # ---------- événements ----------
    async def handle_voice_state_update(self, member: discord.Member, before: discord.VoiceState, after: discord.VoiceState):
        before_channel = before.channel
        after_channel = after.channel
        if before_channel is not None and after_channel is not None and before_channel.id == after_channel.id:
            # mute / deafen / stream : pas de changement de salon
            return
        if after_channel is not None and self.is_lobby(after_channel):
            await self.create_temp_channel(member, after_channel)
        if before_channel is not None:
            await self.delete_if_empty(before_channel)
        if after_channel is not None and after_channel.id in self.registry:
            await self.enforce_access(member, after_channel)

    def handle_channel_delete(self, channel: discord.abc.GuildChannel) -> Optional[int]:
        if self.registry.remove(channel.id) is not None:
            logger.info("Salon temporaire supprimé manuellement %s -> record purgé", channel.id)
            return channel.id
        return None


__all__ = ["TempVoiceManager", "notify"]
