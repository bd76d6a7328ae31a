"""
Dispatcher des commandes texte `,vc <commande> [args...]`.

Séquence pour chaque message :
1. Ignore les bots, les DM et les messages sans préfixe
2. Préconditions (dans l'ordre) : membre en vocal, salon temporaire suivi,
   membre propriétaire du salon ; chaque échec répond et s'arrête
3. Sélection de la commande (insensible à la casse) puis exécution dans une
   barrière d'erreur : toute exception est loggée et convertie en réponse
   générique, sans rollback de l'état déjà modifié
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

import discord

from core import config
from core.temp_voice.models import TempChannelRecord, TempChannelRegistry
from views import temp_voice as texts

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    message: discord.Message
    member: discord.Member
    guild: discord.Guild
    channel: discord.VoiceChannel
    record: TempChannelRecord
    args: List[str] = field(default_factory=list)

    async def reply(self, content: str):
        return await self.message.reply(content)


Handler = Callable[[CommandContext], Awaitable[None]]


@dataclass
class _Command:
    name: str
    handler: Handler
    failure_message: Callable[[], str]


def parse_command(content: str, prefix: str = config.COMMAND_PREFIX) -> Optional[tuple[str, List[str]]]:
    """Découpe un message préfixé en (commande, args) ; None si pas de préfixe."""
    if not content.startswith(prefix):
        return None
    tokens = content[len(prefix):].split()
    if not tokens:
        return "", []
    return tokens[0].lower(), tokens[1:]


class CommandDispatcher:
    def __init__(self, registry: TempChannelRegistry, prefix: str = config.COMMAND_PREFIX):
        self.registry = registry
        self.prefix = prefix
        self._commands: Dict[str, _Command] = {}

    def add_command(self, name: str, handler: Handler, *, failure_message: Callable[[], str]):
        self._commands[name.lower()] = _Command(name.lower(), handler, failure_message)
        logger.debug("Commande ,vc enregistrée: %s", name)

    @property
    def command_names(self) -> List[str]:
        return list(self._commands)

    async def handle_message(self, message: discord.Message) -> bool:
        """Traite un message ; renvoie True si le message était une commande `,vc`."""
        if message.author.bot or message.guild is None:
            return False
        parsed = parse_command(message.content, self.prefix)
        if parsed is None:
            return False
        name, args = parsed

        member = message.author
        voice = getattr(member, "voice", None)
        channel = voice.channel if voice is not None else None
        if channel is None:
            await message.reply(texts.msg_not_in_voice())
            return True
        record = self.registry.get(channel.id)
        if record is None:
            await message.reply(texts.msg_not_temp_channel())
            return True
        if not record.is_owner(member.id):
            await message.reply(texts.msg_not_owner())
            return True

        command = self._commands.get(name)
        if command is None:
            await message.reply(texts.msg_unknown_command())
            return True

        ctx = CommandContext(message=message, member=member, guild=message.guild, channel=channel, record=record, args=args)
        try:
            await command.handler(ctx)
        except Exception:  # noqa: BLE001
            logger.exception("Erreur commande ,vc %s (salon %s)", command.name, channel.id)
            try:
                await message.reply(command.failure_message())
            except Exception:  # noqa: BLE001
                logger.exception("Impossible de répondre à la commande %s", command.name)
        return True


__all__ = ["CommandDispatcher", "CommandContext", "parse_command"]
