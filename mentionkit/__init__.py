"""mentionkit: render Discord mentions for identifiers and records.

Create a mention for a user ID and format it into a message::

    from mentionkit import UserId, mention

    message = f"Hey there, {mention(UserId(123))}!"  # "Hey there, <@123>!"

Channels, roles, emojis, users and guild members are supported, as are the
matching discord.py models.
"""

from mentionkit.adapters import discord_py  # noqa: F401  registers discord.py models
from mentionkit.constants import MentionKind, MentionTemplate
from mentionkit.domain import ChannelId, EmojiId, RoleId, Snowflake, UserId
from mentionkit.exceptions import (
    IdentifierTypeError,
    InvalidIdentifierError,
    MentionException,
    UnsupportedMentionTargetError,
)
from mentionkit.format import MentionFormat
from mentionkit.dispatch import (
    is_mentionable,
    mention,
    register_mentionable,
    resolve_channel_id,
)
from mentionkit.models import (
    CategoryChannel,
    Channel,
    CurrentUser,
    Emoji,
    Group,
    GuildChannel,
    Member,
    Mentionable,
    PrivateChannel,
    TextChannel,
    User,
    VoiceChannel,
)

__all__ = [
    # Identifiers
    "ChannelId",
    "EmojiId",
    "RoleId",
    "Snowflake",
    "UserId",
    # Records
    "CategoryChannel",
    "Channel",
    "CurrentUser",
    "Emoji",
    "Group",
    "GuildChannel",
    "Member",
    "Mentionable",
    "PrivateChannel",
    "TextChannel",
    "User",
    "VoiceChannel",
    # Formatting
    "MentionFormat",
    "MentionKind",
    "MentionTemplate",
    "is_mentionable",
    "mention",
    "register_mentionable",
    "resolve_channel_id",
    # Exceptions
    "IdentifierTypeError",
    "InvalidIdentifierError",
    "MentionException",
    "UnsupportedMentionTargetError",
]
