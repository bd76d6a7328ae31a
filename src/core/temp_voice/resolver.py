"""
Résolution d'un argument libre de commande vers un membre de la guilde.

Ordre :
1. Mention `<@123>` ou `<@!123>` -> lookup par id
2. Suite de chiffres -> lookup par id
3. Sinon -> liste complète des membres, comparaison insensible à la casse
   sur le username puis le display name (premier match)

Le fallback par nom récupère tous les membres via l'API : potentiellement
lent, sans timeout propre (celui de discord.py s'applique).
"""
from __future__ import annotations

import logging
import re
from typing import Optional

import discord

logger = logging.getLogger(__name__)

MENTION_RE = re.compile(r"^<@!?(\d+)>$")
DIGITS_RE = re.compile(r"^\d+$")


async def _lookup_by_id(guild: discord.Guild, user_id: int) -> Optional[discord.Member]:
    member = guild.get_member(user_id)
    if member is not None:
        return member
    try:
        return await guild.fetch_member(user_id)
    except discord.HTTPException:
        logger.debug("Membre %s introuvable dans la guilde %s", user_id, guild.id)
        return None


async def resolve_member(guild: discord.Guild, token: str) -> Optional[discord.Member]:
    match = MENTION_RE.match(token)
    if match:
        return await _lookup_by_id(guild, int(match.group(1)))
    if DIGITS_RE.match(token):
        return await _lookup_by_id(guild, int(token))

    wanted = token.lower()
    async for member in guild.fetch_members(limit=None):
        if member.name.lower() == wanted or member.display_name.lower() == wanted:
            return member
    return None


__all__ = ["resolve_member", "MENTION_RE"]
