"""User-related value objects."""

from mentionkit.constants import MentionKind
from mentionkit.domain.snowflake import Snowflake


class UserId(Snowflake):
    """A strongly-typed Discord user identifier.

    Guild members are mentioned through the ID of the user they wrap.
    Mentions as ``<@ID>``.
    """

    __slots__ = ()

    kind = MentionKind.USER
