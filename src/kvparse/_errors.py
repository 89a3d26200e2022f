"""
Error taxonomy for key=value line parsing.

Every error pins the character offset where the fault was detected and,
where one had been read, the key involved.
"""

from typing import TypeAlias

Position: TypeAlias = int


class KeyValueParseError(ValueError):
    """
    Handles parsing failures with precise position and key information.

    Base class of every fault raised while scanning a line; carries the
    source text so callers can point at the offending character.
    """

    default_msg = "Malformed key=value input"

    def __init__(
        self,
        msg: str | None = None,
        doc: str = "",
        position: Position = 0,
        key: str | None = None,
    ) -> None:
        if msg is None:
            msg = self.default_msg
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(position, int) or position < 0:
            raise ValueError("position must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.position = position
        self.key = key

        detail = f"{msg} at position {position}"
        if key is not None:
            detail += f" (key {key!r})"
        super().__init__(detail)


class MissingKeyError(KeyValueParseError):
    """A pair starts with something other than a key character."""

    default_msg = "Expecting key"


class MissingAssignmentOperatorError(KeyValueParseError):
    """A key is followed by something other than '='."""

    default_msg = "Expecting '=' after key"


class MissingValueError(KeyValueParseError):
    default_msg = "Expecting value after '='"


class MissingEndQuoteError(KeyValueParseError):
    """
    Input ended inside a quoted value.

    position is the last character read; quote_position is the offset of
    the opening quote that was never closed.
    """

    default_msg = "Unterminated quoted value"

    def __init__(
        self,
        msg: str | None = None,
        doc: str = "",
        position: Position = 0,
        key: str | None = None,
        quote_position: Position | None = None,
    ) -> None:
        super().__init__(msg, doc, position, key)
        self.quote_position = quote_position


class IncompleteKeyValuePairError(KeyValueParseError):
    """Input ended before the pair's '=' was seen."""

    default_msg = "Incomplete key=value pair"


class InvalidKeyError(KeyValueParseError):
    """Strict mode only: the key is not on the allow-list."""

    default_msg = "Key not allowed"


__all__ = [
    "IncompleteKeyValuePairError",
    "InvalidKeyError",
    "KeyValueParseError",
    "MissingAssignmentOperatorError",
    "MissingEndQuoteError",
    "MissingKeyError",
    "MissingValueError",
    "Position",
]
