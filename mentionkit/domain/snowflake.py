"""Base value object for Discord identifiers."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeVar, Union

from mentionkit.constants import MentionKind, SnowflakeLimit
from mentionkit.exceptions import IdentifierTypeError, InvalidIdentifierError
from mentionkit.format import MentionFormat

if TYPE_CHECKING:
    SnowflakeT = TypeVar("SnowflakeT", bound="Snowflake")

_MAX_DIGITS = len(str(SnowflakeLimit.MAX))


@dataclass(frozen=True, slots=True)
class Snowflake:
    """A Discord identifier: an unsigned 64-bit integer.

    Subclasses tag the value with the kind of entity it names. Identifiers
    of different kinds never compare equal, even with the same value.
    """

    kind: ClassVar[MentionKind]

    value: int

    def __post_init__(self) -> None:
        name = type(self).__name__
        # bool is an int subclass but never a valid identifier
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise IdentifierTypeError(
                f"{name} must be an integer, got {type(self.value).__name__}"
            )
        if not SnowflakeLimit.MIN <= self.value <= SnowflakeLimit.MAX:
            raise InvalidIdentifierError(
                f"{name} must be between {SnowflakeLimit.MIN} and {SnowflakeLimit.MAX}",
                {"value": self.value},
            )

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_raw(cls: "type[SnowflakeT]", value: Union[int, str, "Snowflake"]) -> "SnowflakeT":
        """Create an identifier from an int, a decimal string or an identifier of this kind."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if len(value) > _MAX_DIGITS:
                raise InvalidIdentifierError(
                    f"{cls.__name__} has too many digits", {"digits": len(value)}
                )
            if not (value.isascii() and value.isdigit()):
                raise InvalidIdentifierError(
                    f"{cls.__name__} must be numeric, got {value!r}"
                )
            return cls(int(value))
        return cls(value)

    def mention(self) -> MentionFormat:
        """Mention the entity named by this identifier."""
        from mentionkit.dispatch import mention

        return mention(self)
