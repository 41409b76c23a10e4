"""Domain value objects for mentionkit.

Each identifier type is tagged with the kind of entity it names, so a
channel ID can never be mentioned as a user or a role.
"""

from mentionkit.constants import MentionKind

from .channel import ChannelId
from .emoji import EmojiId
from .role import RoleId
from .snowflake import Snowflake
from .user import UserId

__all__ = [
    "ChannelId",
    "EmojiId",
    "MentionKind",
    "RoleId",
    "Snowflake",
    "UserId",
]
