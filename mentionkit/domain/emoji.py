"""Emoji value objects."""

from mentionkit.constants import MentionKind
from mentionkit.domain.snowflake import Snowflake


class EmojiId(Snowflake):
    """A strongly-typed custom emoji identifier. Mentions as ``<:emoji:ID>``."""

    __slots__ = ()

    kind = MentionKind.EMOJI
