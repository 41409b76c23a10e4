"""Channel value objects."""

from mentionkit.constants import MentionKind
from mentionkit.domain.snowflake import Snowflake


class ChannelId(Snowflake):
    """A strongly-typed Discord channel identifier.

    Covers every channel flavour: guild text, voice and category channels,
    group DMs and private channels. Mentions as ``<#ID>``.
    """

    __slots__ = ()

    kind = MentionKind.CHANNEL
