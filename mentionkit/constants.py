"""Constants for mentionkit.

This module centralizes the mention templates and identifier bounds used
throughout the package.
"""

from enum import Enum


# =============================================================================
# Entity Kinds
# =============================================================================


class MentionKind(str, Enum):
    """Kinds of entity that can be mentioned."""

    CHANNEL = "channel"
    EMOJI = "emoji"
    ROLE = "role"
    USER = "user"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Mention Templates
# =============================================================================


class MentionTemplate:
    """Mention syntax per entity kind. ``{id}`` is replaced by the decimal ID."""

    CHANNEL = "<#{id}>"
    EMOJI = "<:emoji:{id}>"
    ROLE = "<@&{id}>"
    USER = "<@{id}>"

    @classmethod
    def for_kind(cls, kind: MentionKind) -> str:
        """Return the template for an entity kind."""
        return getattr(cls, kind.name)


# =============================================================================
# Identifier Bounds
# =============================================================================


class SnowflakeLimit:
    """Discord snowflakes are unsigned 64-bit integers."""

    MIN = 0
    MAX = 2**64 - 1
