"""Mention formatting for identifiers and Discord records.

:func:`mention` picks the identifier out of whatever it is given and wraps it
in a :class:`~mentionkit.format.MentionFormat`::

    >>> str(mention(ChannelId(123)))
    '<#123>'
    >>> str(mention(Member(User(456))))
    '<@456>'

Supported types are registered with a single-dispatch table. Further types,
such as another library's models, are added with :func:`register_mentionable`.
"""

import functools
import logging
from typing import Any, Callable, TypeVar, Union, overload

from mentionkit.domain import ChannelId, EmojiId, RoleId, Snowflake, UserId
from mentionkit.exceptions import UnsupportedMentionTargetError
from mentionkit.format import MentionFormat
from mentionkit.models import (
    CategoryChannel,
    Channel,
    CurrentUser,
    Emoji,
    Group,
    GuildChannel,
    Member,
    PrivateChannel,
    TextChannel,
    User,
    VoiceChannel,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ChannelTarget = Union[
    ChannelId,
    Channel,
    GuildChannel,
    Group,
    PrivateChannel,
    CategoryChannel,
    TextChannel,
    VoiceChannel,
]
EmojiTarget = Union[EmojiId, Emoji]
RoleTarget = RoleId
UserTarget = Union[UserId, User, CurrentUser, Member]


@functools.singledispatch
def _to_mention(target: Any) -> MentionFormat:
    logger.warning("No mention extractor registered for %s", type(target).__qualname__)
    raise UnsupportedMentionTargetError(target)


@overload
def mention(target: ChannelTarget) -> MentionFormat[ChannelId]: ...


@overload
def mention(target: EmojiTarget) -> MentionFormat[EmojiId]: ...


@overload
def mention(target: RoleTarget) -> MentionFormat[RoleId]: ...


@overload
def mention(target: UserTarget) -> MentionFormat[UserId]: ...


def mention(target: Any) -> MentionFormat:
    """Mention a resource, such as a channel, emoji, role, user or member.

    Args:
        target: An identifier, or a record carrying one.

    Returns:
        A formatter that renders the mention through ``str()``.

    Raises:
        UnsupportedMentionTargetError: If no extractor is registered for
            the type of ``target``.
    """
    return _to_mention(target)


def register_mentionable(cls: type[T], extract: Callable[[T], Snowflake]) -> None:
    """Teach :func:`mention` to handle ``cls``.

    Args:
        cls: The type to register. Subclasses are covered unless they are
            registered separately.
        extract: Returns the identifier to mention for an instance of ``cls``.
    """

    def _from_extractor(target: T) -> MentionFormat:
        return MentionFormat(extract(target))

    _to_mention.register(cls, _from_extractor)


def is_mentionable(target: Any) -> bool:
    """Return whether :func:`mention` accepts ``target``."""
    return _to_mention.dispatch(target.__class__) is not _to_mention.registry[object]


def resolve_channel_id(channel: Union[Channel, GuildChannel]) -> ChannelId:
    """Return the identifier of whichever variant a channel union holds."""
    inner = channel.channel
    if isinstance(inner, GuildChannel):
        inner = inner.channel
    return inner.id


def _identity(target: Snowflake) -> Snowflake:
    return target


def _own_id(target: Any) -> Snowflake:
    return target.id


def _member_user_id(member: Member) -> UserId:
    return member.user.id


for _id_type in (ChannelId, EmojiId, RoleId, UserId):
    register_mentionable(_id_type, _identity)

for _record_type in (
    CategoryChannel,
    TextChannel,
    VoiceChannel,
    Group,
    PrivateChannel,
    User,
    CurrentUser,
    Emoji,
):
    register_mentionable(_record_type, _own_id)

register_mentionable(Channel, resolve_channel_id)
register_mentionable(GuildChannel, resolve_channel_id)
register_mentionable(Member, _member_user_id)
