"""User records."""

from dataclasses import dataclass
from typing import Union

from mentionkit.domain import UserId
from mentionkit.models.base import Mentionable, set_id


@dataclass(frozen=True, slots=True)
class User(Mentionable):
    """A Discord user as seen by other users."""

    id: Union[UserId, int]
    name: str = ""
    discriminator: str = "0"
    bot: bool = False

    def __post_init__(self) -> None:
        set_id(self, "id", UserId)


@dataclass(frozen=True, slots=True)
class CurrentUser(Mentionable):
    """The user the client is authenticated as."""

    id: Union[UserId, int]
    name: str = ""
    discriminator: str = "0"
    bot: bool = False
    mfa_enabled: bool = False
    verified: bool = False

    def __post_init__(self) -> None:
        set_id(self, "id", UserId)
