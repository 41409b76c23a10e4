"""Guild-scoped records: members and custom emojis."""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from mentionkit.domain import EmojiId, RoleId
from mentionkit.models.base import Mentionable, set_id, set_tuple
from mentionkit.models.user import User


@dataclass(frozen=True, slots=True)
class Member(Mentionable):
    """A user's membership in a guild.

    A member has no identifier of its own; mentioning it mentions the
    embedded :class:`User`.
    """

    user: User
    guild_id: Optional[int] = None
    nick: Optional[str] = None
    roles: Sequence[Union[RoleId, int]] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.user, User):
            raise TypeError(f"Member.user must be a User, got {type(self.user).__name__}")
        set_tuple(self, "roles", RoleId)


@dataclass(frozen=True, slots=True)
class Emoji(Mentionable):
    """A custom guild emoji."""

    id: Union[EmojiId, int]
    name: str = ""
    animated: bool = False
    roles: Sequence[Union[RoleId, int]] = ()

    def __post_init__(self) -> None:
        set_id(self, "id", EmojiId)
        set_tuple(self, "roles", RoleId)
