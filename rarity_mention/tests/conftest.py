"""Pytest fixtures for mentionable ids and models."""

import pytest

from rarity_mention import (
    CategoryChannel,
    ChannelId,
    Emoji,
    Group,
    GuildId,
    Member,
    PrivateChannel,
    TextChannel,
    User,
    UserId,
    VoiceChannel,
)


@pytest.fixture
def user():
    """Fixture providing a plain user."""
    return User(id=UserId(123), name="Test User")


@pytest.fixture
def member(user):
    """Fixture providing the test user as a member of guild 1."""
    return Member(guild_id=GuildId(1), user=user, nick="tester")


@pytest.fixture
def static_emoji():
    return Emoji(id=321, name="blob")


@pytest.fixture
def animated_emoji():
    return Emoji(id=654, name="blobdance", animated=True)


@pytest.fixture(
    params=[
        lambda: TextChannel(id=789, guild_id=1, name="general", topic="hello"),
        lambda: VoiceChannel(id=789, guild_id=1, name="voice"),
        lambda: CategoryChannel(id=789, guild_id=1, name="text channels"),
        lambda: PrivateChannel(id=789, recipients=(User(id=123),)),
        lambda: Group(id=789, name="friends", owner_id=123),
    ],
    ids=["text", "voice", "category", "private", "group"],
)
def channel(request):
    """Fixture providing every kind of channel, all with id 789."""
    return request.param()


@pytest.fixture
def channel_id():
    return ChannelId(789)
