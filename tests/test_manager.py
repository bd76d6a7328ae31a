import logging
from unittest.mock import AsyncMock

import discord
import pytest

from core.permissions import OWNER_PERMISSIONS
from core.temp_voice.access import JoinVerdict
from core.temp_voice.manager import notify
from tests.factories import CATEGORY, FakeVoiceState, http_error
from views import temp_voice as texts


@pytest.mark.asyncio
async def test_joining_lobby_creates_owned_channel(manager, switch, guild, lobby):
    alice = guild.member(1, "alice", "Alice")
    await switch(alice, lobby)

    assert len(guild.created) == 1
    created = guild.created[0]
    assert created["name"] == "Alice's Channel"
    assert created["category"] is CATEGORY
    overwrite = created["overwrites"][alice]
    for perm in OWNER_PERMISSIONS:
        assert getattr(overwrite, perm) is True

    channel = alice.voice.channel
    assert channel.name == "Alice's Channel"
    record = manager.registry.get(channel.id)
    assert record.owner_id == alice.id
    assert record.locked is False
    assert not record.rejected_users and not record.permitted_users


@pytest.mark.asyncio
async def test_switching_into_lobby_also_creates_channel(manager, switch, guild, lobby):
    general = guild.voice_channel("General")
    alice = guild.member(1, "alice")
    alice.place(general)
    await switch(alice, lobby)
    assert len(manager.registry) == 1


@pytest.mark.asyncio
async def test_creation_failure_leaves_member_in_lobby(manager, switch, guild, lobby, caplog):
    guild.create_fails = True
    alice = guild.member(1, "alice")
    with caplog.at_level(logging.ERROR):
        await switch(alice, lobby)
    assert len(manager.registry) == 0
    assert alice.voice.channel is lobby
    assert "Echec création salon temporaire" in caplog.text


@pytest.mark.asyncio
async def test_same_channel_update_is_ignored(manager, guild, lobby):
    alice = guild.member(1, "alice")
    alice.place(lobby)
    await manager.handle_voice_state_update(alice, FakeVoiceState(lobby), FakeVoiceState(lobby))
    assert guild.created == []


@pytest.mark.asyncio
async def test_channel_deleted_when_last_member_leaves(manager, switch, guild, owned_room):
    alice, channel, _ = await owned_room()
    bob = guild.member(2, "bob")
    await switch(bob, channel)

    await switch(alice, None)
    assert channel.id in manager.registry
    assert not channel.deleted

    await switch(bob, None)
    assert channel.deleted
    assert channel.delete_calls == ["Temporary channel cleanup"]
    assert channel.id not in manager.registry


@pytest.mark.asyncio
async def test_switching_out_empties_and_deletes(manager, switch, guild, owned_room):
    alice, channel, _ = await owned_room()
    general = guild.voice_channel("General")
    await switch(alice, general)
    assert channel.deleted
    assert len(manager.registry) == 0


@pytest.mark.asyncio
async def test_failed_delete_still_removes_record(manager, switch, owned_room, caplog):
    alice, channel, _ = await owned_room()
    channel.delete_fails = True
    with caplog.at_level(logging.ERROR):
        await switch(alice, None)
    assert channel.id not in manager.registry
    assert "Echec suppression salon temporaire" in caplog.text


@pytest.mark.asyncio
async def test_double_delete_is_harmless(manager, owned_room):
    alice, channel, _ = await owned_room()
    alice.place(None)
    await manager.delete_temp_channel(channel)
    await manager.delete_temp_channel(channel)
    assert channel.delete_calls == ["Temporary channel cleanup", "Temporary channel cleanup"]
    assert len(manager.registry) == 0


@pytest.mark.asyncio
async def test_leaving_untracked_channel_does_nothing(manager, switch, guild):
    general = guild.voice_channel("General")
    bob = guild.member(2, "bob")
    bob.place(general)
    await switch(bob, None)
    assert not general.deleted


@pytest.mark.asyncio
async def test_locked_channel_disconnects_stranger(manager, switch, guild, owned_room):
    alice, channel, record = await owned_room()
    record.toggle_lock()
    bob = guild.member(2, "bob")
    await switch(bob, channel)

    assert bob.disconnects == ["Channel is locked"]
    assert bob.voice is None
    assert bob.dms == [texts.msg_dm_locked()]
    assert alice in channel.members
    assert not channel.deleted


@pytest.mark.asyncio
async def test_rejected_user_disconnected_even_when_unlocked(manager, switch, guild, owned_room):
    _, channel, record = await owned_room()
    bob = guild.member(2, "bob")
    record.reject(bob.id)
    await switch(bob, channel)
    assert bob.disconnects == ["Rejected from this channel"]
    assert bob.dms == [texts.msg_dm_rejected()]


@pytest.mark.asyncio
async def test_permitted_user_admitted_while_locked(manager, switch, guild, owned_room):
    _, channel, record = await owned_room()
    record.toggle_lock()
    bob = guild.member(2, "bob")
    record.permit(bob.id)
    await switch(bob, channel)
    assert bob.disconnects == []
    assert bob in channel.members


@pytest.mark.asyncio
async def test_dm_failure_is_swallowed(manager, switch, guild, owned_room):
    _, channel, record = await owned_room()
    record.toggle_lock()
    bob = guild.member(2, "bob", dm_fails=True)
    await switch(bob, channel)
    assert bob.disconnects == ["Channel is locked"]
    assert bob.dms == []


@pytest.mark.asyncio
async def test_enforce_access_on_untracked_channel_admits(manager, guild):
    general = guild.voice_channel("General")
    bob = guild.member(2, "bob")
    assert await manager.enforce_access(bob, general) is JoinVerdict.ADMIT


@pytest.mark.asyncio
async def test_notify_ignores_failures(guild):
    bob = guild.member(2, "bob", dm_fails=True)
    assert await notify(bob, "hello") is None


@pytest.mark.asyncio
async def test_manual_channel_delete_drops_record(manager, owned_room, guild):
    _, channel, _ = await owned_room()
    assert manager.handle_channel_delete(channel) == channel.id
    assert channel.id not in manager.registry
    assert manager.handle_channel_delete(guild.voice_channel("Other")) is None


@pytest.mark.asyncio
async def test_failed_move_into_new_channel_deletes_it(manager, switch, guild, lobby, caplog):
    alice = guild.member(1, "alice", "Alice")
    alice.move_to = AsyncMock(side_effect=http_error(discord.HTTPException, 400, "Target user is not connected"))

    with caplog.at_level(logging.ERROR):
        await switch(alice, lobby)

    assert len(guild.created) == 1
    assert len(manager.registry) == 0
    assert alice.voice.channel is lobby
    assert "Echec déplacement" in caplog.text
    assert [c.name for c in guild.channels] == ["JTC"]


@pytest.mark.asyncio
async def test_failed_move_keeps_channel_someone_already_joined(manager, guild, lobby):
    alice = guild.member(1, "alice", "Alice")
    bob = guild.member(2, "bob")

    async def refuse_and_let_bob_in(channel, *, reason=None):
        bob.place(channel)
        raise http_error(discord.HTTPException, 400, "Target user is not connected")

    alice.move_to = refuse_and_let_bob_in
    alice.place(lobby)
    channel = await manager.create_temp_channel(alice, lobby)

    assert channel is not None and not channel.deleted
    assert manager.registry.get(channel.id).owner_id == alice.id
