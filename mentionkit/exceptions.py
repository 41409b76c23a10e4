"""Custom exceptions for mentionkit."""

from typing import Any, Optional


class MentionException(Exception):
    """Base exception for all mentionkit errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidIdentifierError(MentionException, ValueError):
    """Exception raised when an identifier value is out of range or unparsable."""

    pass


class IdentifierTypeError(MentionException, TypeError):
    """Exception raised when an identifier is built from a non-integer value."""

    pass


class UnsupportedMentionTargetError(MentionException, TypeError):
    """Exception raised when asked to mention a type with no registered extractor."""

    def __init__(self, target: Any):
        self.target_type = type(target)
        super().__init__(
            f"Cannot mention object of type {self.target_type.__name__}",
            {"type": self.target_type.__qualname__},
        )
