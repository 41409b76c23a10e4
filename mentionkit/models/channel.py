"""Channel records and the unions that group them."""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from mentionkit.domain import ChannelId, UserId
from mentionkit.models.base import Mentionable, set_id, set_optional_id, set_tuple
from mentionkit.models.user import User


# =============================================================================
# Guild Channels
# =============================================================================


@dataclass(frozen=True, slots=True)
class CategoryChannel(Mentionable):
    """A guild category grouping other channels."""

    id: Union[ChannelId, int]
    guild_id: Optional[int] = None
    name: str = ""
    position: int = 0

    def __post_init__(self) -> None:
        set_id(self, "id", ChannelId)


@dataclass(frozen=True, slots=True)
class TextChannel(Mentionable):
    """A guild text channel."""

    id: Union[ChannelId, int]
    guild_id: Optional[int] = None
    name: str = ""
    position: int = 0
    topic: Optional[str] = None
    nsfw: bool = False

    def __post_init__(self) -> None:
        set_id(self, "id", ChannelId)


@dataclass(frozen=True, slots=True)
class VoiceChannel(Mentionable):
    """A guild voice channel."""

    id: Union[ChannelId, int]
    guild_id: Optional[int] = None
    name: str = ""
    position: int = 0
    bitrate: int = 64000
    user_limit: Optional[int] = None

    def __post_init__(self) -> None:
        set_id(self, "id", ChannelId)


GuildChannelVariant = Union[CategoryChannel, TextChannel, VoiceChannel]
_GUILD_CHANNEL_TYPES = (CategoryChannel, TextChannel, VoiceChannel)


@dataclass(frozen=True, slots=True)
class GuildChannel(Mentionable):
    """Any channel belonging to a guild: category, text or voice."""

    channel: GuildChannelVariant

    def __post_init__(self) -> None:
        if not isinstance(self.channel, _GUILD_CHANNEL_TYPES):
            raise TypeError(
                f"GuildChannel cannot hold {type(self.channel).__name__}"
            )

    @property
    def id(self) -> ChannelId:
        return self.channel.id


# =============================================================================
# Direct Message Channels
# =============================================================================


@dataclass(frozen=True, slots=True)
class Group(Mentionable):
    """A group DM between several users."""

    id: Union[ChannelId, int]
    name: Optional[str] = None
    owner_id: Optional[Union[UserId, int]] = None
    recipients: Sequence[User] = ()

    def __post_init__(self) -> None:
        set_id(self, "id", ChannelId)
        set_optional_id(self, "owner_id", UserId)
        set_tuple(self, "recipients")


@dataclass(frozen=True, slots=True)
class PrivateChannel(Mentionable):
    """A one-to-one DM channel."""

    id: Union[ChannelId, int]
    recipients: Sequence[User] = ()

    def __post_init__(self) -> None:
        set_id(self, "id", ChannelId)
        set_tuple(self, "recipients")


# =============================================================================
# Any Channel
# =============================================================================


ChannelVariant = Union[Group, GuildChannel, PrivateChannel]
_CHANNEL_TYPES = (Group, GuildChannel, PrivateChannel)


@dataclass(frozen=True, slots=True)
class Channel(Mentionable):
    """Any channel: a group DM, a guild channel or a private channel.

    A bare category, text or voice channel is wrapped in a
    :class:`GuildChannel` first.
    """

    channel: ChannelVariant

    def __post_init__(self) -> None:
        if isinstance(self.channel, _GUILD_CHANNEL_TYPES):
            object.__setattr__(self, "channel", GuildChannel(self.channel))
        elif not isinstance(self.channel, _CHANNEL_TYPES):
            raise TypeError(f"Channel cannot hold {type(self.channel).__name__}")

    @property
    def id(self) -> ChannelId:
        return self.channel.id
