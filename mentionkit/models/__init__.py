"""Discord records that carry a mentionable identifier.

Identifier fields accept raw ints (or decimal strings) and are normalized to
the matching identifier type from :mod:`mentionkit.domain`.
"""

from .base import Mentionable
from .channel import (
    CategoryChannel,
    Channel,
    Group,
    GuildChannel,
    PrivateChannel,
    TextChannel,
    VoiceChannel,
)
from .guild import Emoji, Member
from .user import CurrentUser, User

__all__ = [
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
]
