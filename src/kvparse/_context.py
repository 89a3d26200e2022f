"""
Per-parse scan state and the policies that commit finished pairs.

A ParseContext is the only writer of the result mapping. How a pair is
committed is decided by a CommitPolicy chosen when the parser is built:
PermissiveCommit stores everything, StrictCommit checks an allow-list first.
"""

from dataclasses import dataclass
from dataclasses import field
from typing import Protocol

from ._errors import InvalidKeyError
from ._errors import Position


class CommitPolicy(Protocol):
    """Decides whether the context's buffered pair may be stored."""

    def commit_pair(self, context: "ParseContext") -> None: ...


@dataclass(frozen=True)
class PermissiveCommit:
    """Accepts every syntactically valid pair."""

    def commit_pair(self, context: "ParseContext") -> None:
        context.store_pair()


@dataclass(frozen=True)
class StrictCommit:
    """
    Accepts only keys found in an allow-list.

    Matching lowercases both sides unless case_sensitive is set. An empty
    allow-list rejects every key.
    """

    allowed_keys: tuple[str, ...] = ()
    case_sensitive: bool = False
    _lookup: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        keys = self.allowed_keys
        if not self.case_sensitive:
            keys = tuple(k.lower() for k in keys)
        object.__setattr__(self, "_lookup", frozenset(keys))

    def allows(self, key: str) -> bool:
        """Returns True if key is on the allow-list."""
        if not self.case_sensitive:
            key = key.lower()
        return key in self._lookup

    def commit_pair(self, context: "ParseContext") -> None:
        if not self.allows(context.key):
            raise InvalidKeyError(
                doc=context.text, position=context.key_start, key=context.key
            )
        context.store_pair()


class ParseContext:
    """
    Mutable scan state for a single parse call.

    Tracks the position being consumed, the key and value accumulated for
    the pair under construction, and the pairs committed so far. Never
    reused across calls.
    """

    def __init__(self, text: str, policy: CommitPolicy | None = None):
        self.text = text
        self.policy: CommitPolicy = policy or PermissiveCommit()
        self.position: Position = 0
        self.key = ""
        self.value = ""
        self.key_start: Position = 0
        self.quote_start: Position = 0
        self.parsed: dict[str, str] = {}
        self.pairs: list[tuple[str, str]] = []

    def __len__(self) -> int:
        return len(self.parsed)

    def append_to_key(self, char: str) -> None:
        """Appends a character to the key, noting where the key began."""
        if not self.key:
            self.key_start = self.position
        self.key += char

    def append_to_value(self, char: str) -> None:
        self.value += char

    def reset_keys_and_values(self) -> None:
        self.key = ""
        self.value = ""

    def commit_pair(self) -> None:
        """Hands the buffered pair to the commit policy."""
        self.policy.commit_pair(self)

    def store_pair(self) -> None:
        """Writes the buffered pair into the result and clears the buffers."""
        self.parsed[self.key] = self.value
        self.pairs.append((self.key, self.value))
        self.reset_keys_and_values()


__all__ = [
    "CommitPolicy",
    "ParseContext",
    "PermissiveCommit",
    "StrictCommit",
]
