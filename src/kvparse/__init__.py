"""
Parser and encoder for single-line key=value records.

Turns header- and config-style lines such as
``name=Alice age=30 city="New York"`` into ordered mappings, with precise
position-tagged errors on malformed input and an optional strict mode that
only admits keys from an allow-list.
"""

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO
from typing import Any

from ._context import CommitPolicy
from ._context import ParseContext
from ._context import PermissiveCommit
from ._context import StrictCommit
from ._engine import ParseState
from ._engine import is_key_char
from ._engine import run
from ._errors import IncompleteKeyValuePairError
from ._errors import InvalidKeyError
from ._errors import KeyValueParseError
from ._errors import MissingAssignmentOperatorError
from ._errors import MissingEndQuoteError
from ._errors import MissingKeyError
from ._errors import MissingValueError
from ._errors import Position
from ._profile import HotPathStats
from ._profile import ProfileContext
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats

__version__ = "0.1.0"

# Type aliases for domain concepts
ParsedPairs = dict[str, str]
PairsHook = Callable[[list[tuple[str, str]]], Any] | None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    Supplying allowed_keys switches the parser to strict mode. The
    allow-list is normalised to a tuple so it can be shared safely.
    """

    allowed_keys: tuple[str, ...] | None = None
    case_sensitive: bool = False
    pairs_hook: PairsHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.case_sensitive, bool):
            raise TypeError("case_sensitive must be a boolean")
        if self.allowed_keys is not None:
            if isinstance(self.allowed_keys, str):
                raise TypeError("allowed_keys must be an iterable of str")
            keys = tuple(self.allowed_keys)
            if not all(isinstance(k, str) for k in keys):
                raise TypeError("allowed_keys must contain only str")
            object.__setattr__(self, "allowed_keys", keys)
        if self.pairs_hook is not None and not callable(self.pairs_hook):
            raise TypeError("pairs_hook must be callable")

    @property
    def strict(self) -> bool:
        return self.allowed_keys is not None

    def commit_policy(self) -> CommitPolicy:
        """Builds the commit policy matching this configuration."""
        if self.allowed_keys is None:
            return PermissiveCommit()
        return StrictCommit(self.allowed_keys, self.case_sensitive)


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures encoding behavior with immutable settings.

    The default output is the canonical form, every value quoted.
    """

    sort_keys: bool = False
    skipkeys: bool = False
    quote_values: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")
        if not isinstance(self.quote_values, bool):
            raise TypeError("quote_values must be a boolean")


class Parser:
    """
    Parses key=value lines into ordered mappings.

    Holds only immutable configuration; each call to parse() builds its own
    ParseContext, so one instance may be reused freely.
    """

    def __init__(self, config: ParseConfig | None = None, **kwargs: Any):
        if config is None:
            config = ParseConfig(**kwargs)
        elif kwargs:
            raise TypeError("pass either config or keyword options, not both")
        self.config = config
        self.policy = config.commit_policy()

    def parse(self, text: str) -> ParsedPairs | Any:
        """Parses one line, returning the mapping or the pairs_hook result."""
        if not isinstance(text, str):
            raise TypeError(
                f"the input must be str, not {type(text).__name__}"
            )
        context = run(text, self.policy)
        if self.config.pairs_hook is not None:
            return self.config.pairs_hook(context.pairs)
        return context.parsed


class StrictParser(Parser):
    """Parser that rejects keys missing from allowed_keys."""

    def __init__(
        self,
        allowed_keys: Iterable[str] | None = None,
        case_sensitive: bool = False,
        pairs_hook: PairsHook = None,
    ):
        super().__init__(
            ParseConfig(
                allowed_keys=() if allowed_keys is None else allowed_keys,
                case_sensitive=case_sensitive,
                pairs_hook=pairs_hook,
            )
        )

    @property
    def allowed_keys(self) -> tuple[str, ...]:
        return self.config.allowed_keys or ()


def loads(s: str, **kwargs: Any) -> ParsedPairs | Any:
    """
    Parses a key=value line into a dict.

    Keyword arguments build a ParseConfig; allowed_keys enables strict mode.
    """
    if not isinstance(s, str):
        raise TypeError(f"the input must be str, not {type(s).__name__}")

    return Parser(ParseConfig(**kwargs)).parse(s)


def load(fp: IO[str], **kwargs: Any) -> ParsedPairs | Any:
    """
    Parses the key=value line read from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


def _needs_quotes(value: str) -> bool:
    return not value or any(c.isspace() for c in value)


def _encode_pair(key: str, value: Any, config: EncodeConfig) -> str:
    """Encodes one pair, rejecting anything the parser could not read back."""
    if not isinstance(value, str):
        msg = f"values must be str, not {type(value).__name__}"
        raise TypeError(msg)
    if not key or not all(is_key_char(c) for c in key):
        msg = f"key {key!r} must consist of letters, digits or underscores"
        raise ValueError(msg)
    if '"' in value:
        # Only a bare value can carry a quote, and never as its first character
        if _needs_quotes(value) or value[0] == '"':
            msg = f"value for key {key!r} cannot be encoded: {value!r}"
            raise ValueError(msg)
        return f"{key}={value}"

    if config.quote_values or _needs_quotes(value):
        return f'{key}="{value}"'
    return f"{key}={value}"


def _encode_pairs(obj: Mapping[Any, Any], config: EncodeConfig) -> str:
    """Encodes a mapping, filtering keys per configuration."""
    with ProfileContext("encode_pairs") as profile:
        items = []
        for key, value in obj.items():
            if not isinstance(key, str):
                if config.skipkeys:
                    continue
                msg = f"keys must be str, not {type(key).__name__}"
                raise TypeError(msg)
            items.append((key, value))

        if config.sort_keys:
            items.sort(key=lambda x: x[0])

        line = " ".join(_encode_pair(k, v, config) for k, v in items)
        profile.record(len(line), len(items))
        return line


def dumps(obj: Mapping[Any, Any], **kwargs: Any) -> str:
    """
    Serializes a mapping to a key=value line.

    The default output, ``key="value" key2="value2"``, parses back to an
    equal mapping.
    """
    if not isinstance(obj, Mapping):
        msg = f"Object of type {type(obj).__name__} is not a mapping"
        raise TypeError(msg)

    config = EncodeConfig(**kwargs)
    return _encode_pairs(obj, config)


def dump(obj: Mapping[Any, Any], fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes a mapping as a key=value line to a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(obj, **kwargs))


__all__ = [
    "CommitPolicy",
    "EncodeConfig",
    "HotPathStats",
    "IncompleteKeyValuePairError",
    "InvalidKeyError",
    "KeyValueParseError",
    "MissingAssignmentOperatorError",
    "MissingEndQuoteError",
    "MissingKeyError",
    "MissingValueError",
    "ParseConfig",
    "ParseContext",
    "ParseState",
    "Parser",
    "PermissiveCommit",
    "Position",
    "StrictCommit",
    "StrictParser",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "load",
    "loads",
]
