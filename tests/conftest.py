import sys
from pathlib import Path

import pytest

# Ensure src/ is importable even when pytest is not started from the
# project root (pyproject's pythonpath covers the usual case).
SRC_ROOT = Path(__file__).parent.parent.resolve() / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from core.dispatcher import CommandDispatcher  # noqa: E402
from core.temp_voice.manager import TempVoiceManager  # noqa: E402
from core.temp_voice.models import TempChannelRegistry  # noqa: E402
from commands import lock, permit, reject, transfer  # noqa: E402
from tests.factories import CATEGORY, FakeGuild, FakeVoiceState  # noqa: E402


@pytest.fixture
def registry():
    return TempChannelRegistry()


@pytest.fixture
def manager(registry):
    return TempVoiceManager(registry, lobby_name="JTC")


@pytest.fixture
def dispatcher(registry):
    dispatcher = CommandDispatcher(registry)
    bot = type("BotStub", (), {"vc_commands": dispatcher})()
    for module in (reject, lock, permit, transfer):
        module.register(bot)
    return dispatcher


@pytest.fixture
def guild():
    return FakeGuild()


@pytest.fixture
def lobby(guild):
    return guild.voice_channel("JTC", category=CATEGORY)


@pytest.fixture
def switch(manager):
    """Moves a member like a user would and feeds the resulting voice event to the manager."""

    async def _switch(member, channel):
        before = FakeVoiceState(member.voice.channel if member.voice else None)
        member.place(channel)
        await manager.handle_voice_state_update(member, before, FakeVoiceState(channel))

    return _switch


@pytest.fixture
def owned_room(manager, switch, guild, lobby):
    """Creates Alice's temporary channel through the lobby and returns (alice, channel, record)."""

    async def _owned_room():
        alice = guild.member(1, "alice", "Alice")
        await switch(alice, lobby)
        channel = alice.voice.channel
        return alice, channel, manager.registry.get(channel.id)

    return _owned_room
