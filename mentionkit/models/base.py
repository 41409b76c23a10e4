"""Shared pieces of the frozen model dataclasses."""

from typing import Any, Iterable, Optional

from mentionkit.domain import Snowflake
from mentionkit.format import MentionFormat


class Mentionable:
    """Mixin giving a record a ``mention()`` method.

    Delegates to :func:`mentionkit.mention`, which knows which identifier
    field each record type exposes.
    """

    __slots__ = ()

    def mention(self) -> MentionFormat:
        from mentionkit.dispatch import mention

        return mention(self)


def set_id(obj: Any, field_name: str, id_type: type[Snowflake]) -> None:
    """Normalize a raw int or string field into ``id_type`` on a frozen dataclass."""
    object.__setattr__(obj, field_name, id_type.from_raw(getattr(obj, field_name)))


def set_optional_id(obj: Any, field_name: str, id_type: type[Snowflake]) -> None:
    value: Optional[Any] = getattr(obj, field_name)
    if value is not None:
        object.__setattr__(obj, field_name, id_type.from_raw(value))


def set_tuple(obj: Any, field_name: str, item_type: Optional[type[Snowflake]] = None) -> None:
    """Freeze a sequence field into a tuple, coercing items to ``item_type`` if given."""
    items: Iterable[Any] = getattr(obj, field_name)
    if item_type is not None:
        items = (item_type.from_raw(item) for item in items)
    object.__setattr__(obj, field_name, tuple(items))
