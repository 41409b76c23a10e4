"""Role value objects."""

from mentionkit.constants import MentionKind
from mentionkit.domain.snowflake import Snowflake


class RoleId(Snowflake):
    """A strongly-typed Discord guild role identifier. Mentions as ``<@&ID>``."""

    __slots__ = ()

    kind = MentionKind.ROLE
