"""Mention wrapper rendered into Discord mention syntax."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from mentionkit.constants import MentionKind, MentionTemplate

if TYPE_CHECKING:
    from mentionkit.domain.snowflake import Snowflake

IdT = TypeVar("IdT", bound="Snowflake")


@dataclass(frozen=True, slots=True)
class MentionFormat(Generic[IdT]):
    """Formatter for mentioning a resource by its identifier.

    Instances are produced by :func:`mentionkit.mention` and render through
    ``str()`` or an f-string::

        >>> str(mention(UserId(123)))
        '<@123>'
        >>> f"Hey there, {mention(UserId(123))}!"
        'Hey there, <@123>!'

    Two wrappers are equal when they hold the same kind of identifier with
    the same value.
    """

    id: IdT

    @property
    def kind(self) -> MentionKind:
        return self.id.kind

    def __str__(self) -> str:
        return MentionTemplate.for_kind(self.id.kind).format(id=self.id.value)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
