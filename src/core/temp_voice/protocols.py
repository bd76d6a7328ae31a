"""Interfaces minimales des objets discord.py lus par les salons temporaires.

Seuls les champs réellement utilisés sont déclarés ; `discord.Member`,
`discord.VoiceChannel`, etc. les satisfont structurellement.
"""
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence


class ChannelLike(Protocol):
    id: int
    name: str

    @property
    def members(self) -> Sequence[Any]: ...

    @property
    def category(self) -> Any: ...

    async def delete(self, *, reason: Optional[str] = None) -> None: ...


class VoiceStateLike(Protocol):
    @property
    def channel(self) -> Optional[ChannelLike]: ...


class MemberLike(Protocol):
    id: int
    name: str

    @property
    def display_name(self) -> str: ...

    @property
    def voice(self) -> Optional[VoiceStateLike]: ...

    async def move_to(self, channel: Optional[Any], *, reason: Optional[str] = None) -> None: ...

    async def send(self, content: Optional[str] = None, **kwargs: Any) -> Any: ...


def current_channel_id(member: MemberLike) -> Optional[int]:
    voice = member.voice
    if voice is None or voice.channel is None:
        return None
    return voice.channel.id


__all__ = ["ChannelLike", "VoiceStateLike", "MemberLike", "current_channel_id"]
