"""
Permissions propriétaire des salons temporaires.

Le propriétaire reçoit, sur son salon uniquement, un overwrite explicite :
- manage_channels
- move_members
- mute_members
- deafen_members

Lors d'un transfert, ces quatre champs repassent à `None` (neutre) pour
l'ancien propriétaire ; les autres champs de son overwrite sont conservés.
"""
from __future__ import annotations

from typing import Optional

import discord

OWNER_PERMISSIONS = ("manage_channels", "move_members", "mute_members", "deafen_members")


def owner_overwrite(base: Optional[discord.PermissionOverwrite] = None) -> discord.PermissionOverwrite:
    overwrite = base if base is not None else discord.PermissionOverwrite()
    overwrite.update(**{perm: True for perm in OWNER_PERMISSIONS})
    return overwrite


def strip_owner_overwrite(overwrite: discord.PermissionOverwrite) -> Optional[discord.PermissionOverwrite]:
    """Retire le bundle propriétaire ; renvoie None si l'overwrite devient vide."""
    overwrite.update(**{perm: None for perm in OWNER_PERMISSIONS})
    if overwrite.is_empty():
        return None
    return overwrite


async def grant_owner(channel: discord.abc.GuildChannel, member: discord.abc.Snowflake, *, reason: str) -> None:
    overwrite = owner_overwrite(channel.overwrites_for(member))
    await channel.set_permissions(member, overwrite=overwrite, reason=reason)


async def revoke_owner(channel: discord.abc.GuildChannel, member: discord.abc.Snowflake, *, reason: str) -> None:
    overwrite = strip_owner_overwrite(channel.overwrites_for(member))
    await channel.set_permissions(member, overwrite=overwrite, reason=reason)


__all__ = ["OWNER_PERMISSIONS", "owner_overwrite", "strip_owner_overwrite", "grant_owner", "revoke_owner"]
