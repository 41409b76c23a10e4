"""Pytest configuration and fixtures for mentionkit tests."""

import pytest

from mentionkit import (
    CategoryChannel,
    Channel,
    CurrentUser,
    Emoji,
    Group,
    GuildChannel,
    Member,
    PrivateChannel,
    TextChannel,
    User,
    VoiceChannel,
)


@pytest.fixture
def user():
    """A regular user with ID 456."""
    return User(id=456, name="rarity", discriminator="0001")


@pytest.fixture
def current_user():
    """The authenticated bot user."""
    return CurrentUser(id=321, name="mentionbot", bot=True, verified=True)


@pytest.fixture
def member(user):
    """A guild member wrapping the user fixture."""
    return Member(user=user, guild_id=1000, nick="Rarity", roles=[11, 12])


@pytest.fixture
def emoji():
    """A custom guild emoji."""
    return Emoji(id=555, name="sparkle", roles=[11])


@pytest.fixture
def text_channel():
    """A guild text channel with ID 789."""
    return TextChannel(id=789, guild_id=1000, name="general", topic="hello")


@pytest.fixture
def voice_channel():
    """A guild voice channel."""
    return VoiceChannel(id=790, guild_id=1000, name="Lounge")


@pytest.fixture
def category_channel():
    """A guild category channel."""
    return CategoryChannel(id=791, guild_id=1000, name="Text Channels")


@pytest.fixture
def group(user):
    """A group DM owned by the user fixture."""
    return Group(id=900, name="friends", owner_id=456, recipients=[user])


@pytest.fixture
def private_channel(user):
    """A one-to-one DM with the user fixture."""
    return PrivateChannel(id=901, recipients=[user])


@pytest.fixture
def all_records(
    user,
    current_user,
    member,
    emoji,
    text_channel,
    voice_channel,
    category_channel,
    group,
    private_channel,
):
    """One instance of every record type, unions included."""
    return [
        user,
        current_user,
        member,
        emoji,
        text_channel,
        voice_channel,
        category_channel,
        group,
        private_channel,
        GuildChannel(text_channel),
        GuildChannel(voice_channel),
        GuildChannel(category_channel),
        Channel(group),
        Channel(private_channel),
        Channel(GuildChannel(text_channel)),
    ]
