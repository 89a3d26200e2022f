"""
Character-by-character state machine for key=value lines.

Each lexical state owns a handler that consumes one character, mutates the
ParseContext and returns the next state. End-of-input is resolved by
finish(), which closes a pending pair or raises.
"""

from collections.abc import Callable
from enum import Enum
from typing import TypeAlias

from ._context import CommitPolicy
from ._context import ParseContext
from ._errors import IncompleteKeyValuePairError
from ._errors import MissingAssignmentOperatorError
from ._errors import MissingEndQuoteError
from ._errors import MissingKeyError
from ._errors import MissingValueError
from ._profile import ProfileContext

QUOTE = '"'
ASSIGN = "="


class ParseState(Enum):
    """Lexical states of the scanner; exactly one is current at a time."""

    SEEK_KEY = "seek_key"
    IN_KEY = "in_key"
    SEEK_EQUALS = "seek_equals"
    SEEK_VALUE = "seek_value"
    IN_UNQUOTED_VALUE = "in_unquoted_value"
    IN_QUOTED_VALUE = "in_quoted_value"
    AFTER_QUOTED_VALUE = "after_quoted_value"


Handler: TypeAlias = Callable[[ParseContext, str], ParseState]


def is_key_char(char: str) -> bool:
    """Letters, digits and underscore may appear in a key."""
    return char.isalnum() or char == "_"


def _seek_key(context: ParseContext, char: str) -> ParseState:
    if char.isspace():
        return ParseState.SEEK_KEY
    if is_key_char(char):
        context.append_to_key(char)
        return ParseState.IN_KEY
    raise MissingKeyError(doc=context.text, position=context.position)


def _in_key(context: ParseContext, char: str) -> ParseState:
    if is_key_char(char):
        context.append_to_key(char)
        return ParseState.IN_KEY
    if char.isspace():
        return ParseState.SEEK_EQUALS
    if char == ASSIGN:
        return ParseState.SEEK_VALUE
    raise MissingAssignmentOperatorError(
        doc=context.text, position=context.position, key=context.key
    )


def _seek_equals(context: ParseContext, char: str) -> ParseState:
    if char.isspace():
        return ParseState.SEEK_EQUALS
    if char == ASSIGN:
        return ParseState.SEEK_VALUE
    raise MissingAssignmentOperatorError(
        doc=context.text, position=context.position, key=context.key
    )


def _seek_value(context: ParseContext, char: str) -> ParseState:
    if char.isspace():
        return ParseState.SEEK_VALUE
    if char == QUOTE:
        context.quote_start = context.position
        return ParseState.IN_QUOTED_VALUE
    # '=' here follows the pair's own '=', so it starts the value
    context.append_to_value(char)
    return ParseState.IN_UNQUOTED_VALUE


def _in_unquoted_value(context: ParseContext, char: str) -> ParseState:
    if char.isspace():
        context.commit_pair()
        return ParseState.SEEK_KEY
    context.append_to_value(char)
    return ParseState.IN_UNQUOTED_VALUE


def _in_quoted_value(context: ParseContext, char: str) -> ParseState:
    if char == QUOTE:
        context.commit_pair()
        return ParseState.AFTER_QUOTED_VALUE
    context.append_to_value(char)
    return ParseState.IN_QUOTED_VALUE


def _after_quoted_value(context: ParseContext, char: str) -> ParseState:
    if char.isspace():
        return ParseState.SEEK_KEY
    # No separator after the closing quote: the next key starts right here
    return _seek_key(context, char)


HANDLERS: dict[ParseState, Handler] = {
    ParseState.SEEK_KEY: _seek_key,
    ParseState.IN_KEY: _in_key,
    ParseState.SEEK_EQUALS: _seek_equals,
    ParseState.SEEK_VALUE: _seek_value,
    ParseState.IN_UNQUOTED_VALUE: _in_unquoted_value,
    ParseState.IN_QUOTED_VALUE: _in_quoted_value,
    ParseState.AFTER_QUOTED_VALUE: _after_quoted_value,
}


def step(state: ParseState, context: ParseContext, char: str) -> ParseState:
    """Applies the transition for one character and returns the next state."""
    return HANDLERS[state](context, char)


def finish(state: ParseState, context: ParseContext) -> None:
    """
    Resolves end-of-input for the current state.

    Errors raised here report the position of the last consumed character.
    """
    if state in (ParseState.SEEK_KEY, ParseState.AFTER_QUOTED_VALUE):
        return
    if state == ParseState.IN_UNQUOTED_VALUE:
        context.commit_pair()
        return

    text, pos, key = context.text, context.position, context.key
    if state in (ParseState.IN_KEY, ParseState.SEEK_EQUALS):
        raise IncompleteKeyValuePairError(doc=text, position=pos, key=key)
    if state == ParseState.SEEK_VALUE:
        raise MissingValueError(doc=text, position=pos, key=key)
    raise MissingEndQuoteError(
        doc=text, position=pos, key=key, quote_position=context.quote_start
    )


def run(text: str, policy: CommitPolicy | None = None) -> ParseContext:
    """
    Scans text to completion and returns the populated context.

    Any malformed input aborts immediately with a KeyValueParseError
    subclass; no partial result escapes.
    """
    with ProfileContext("parse_line") as profile:
        context = ParseContext(text, policy)
        state = ParseState.SEEK_KEY
        for position, char in enumerate(text):
            context.position = position
            state = step(state, context, char)
        finish(state, context)
        profile.record(len(text), len(context.pairs))
        return context


__all__ = [
    "HANDLERS",
    "ParseState",
    "finish",
    "is_key_char",
    "run",
    "step",
]
