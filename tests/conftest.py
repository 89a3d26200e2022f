"""
Pytest configuration and shared fixtures for kvparse tests.

Provides immutable test data fixtures shared by the parsing and
encoding test modules.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import kvparse


@dataclass(frozen=True)
class KvTestCase:
    """
    Immutable container for key=value test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None


@pytest.fixture
def kv_pass_cases() -> list[KvTestCase]:
    """
    Provides lines that must parse successfully, with their mappings.

    Covers whitespace around keys, '=' and values, quoted and bare values,
    and keys built from digits and underscores.
    """
    return [
        KvTestCase("empty line", "", False, {}),
        KvTestCase("whitespace only", "   \t ", False, {}),
        KvTestCase("single pair", "key=value", False, {"key": "value"}),
        KvTestCase("leading spaces", " key=value", False, {"key": "value"}),
        KvTestCase("space after key", "key =value", False, {"key": "value"}),
        KvTestCase("space around key", " key =value", False, {"key": "value"}),
        KvTestCase("space before value", "key= value", False, {"key": "value"}),
        KvTestCase("space after value", "key=value ", False, {"key": "value"}),
        KvTestCase("single digit key", "1=value", False, {"1": "value"}),
        KvTestCase("digit key", "123=value", False, {"123": "value"}),
        KvTestCase("leading zero key", "0123=value", False, {"0123": "value"}),
        KvTestCase(
            "underscore key", "first_name=value", False, {"first_name": "value"}
        ),
        KvTestCase("single underscore", "_=value", False, {"_": "value"}),
        KvTestCase("double underscore", "__=value", False, {"__": "value"}),
        KvTestCase("digits leading", "0abc=value", False, {"0abc": "value"}),
        KvTestCase("letters leading", "a0bc=value", False, {"a0bc": "value"}),
        KvTestCase(
            "two pairs",
            "key=value anotherkey=anothervalue",
            False,
            {"key": "value", "anotherkey": "anothervalue"},
        ),
        KvTestCase(
            "two pairs padded keys",
            "  key  =value anotherkey  =anothervalue",
            False,
            {"key": "value", "anotherkey": "anothervalue"},
        ),
        KvTestCase("quoted value", 'key="value"', False, {"key": "value"}),
        KvTestCase("quoted spaces", 'key="va lue"', False, {"key": "va lue"}),
        KvTestCase(
            "quoted after spaces", 'key=   "va lue"', False, {"key": "va lue"}
        ),
        KvTestCase(
            "quoted then spaces", 'key="va lue"   ', False, {"key": "va lue"}
        ),
        KvTestCase(
            "two quoted values",
            'key = "va lue" anotherkey = "another value"',
            False,
            {"key": "va lue", "anotherkey": "another value"},
        ),
        KvTestCase(
            "mixed quoting",
            '  key  =value anotherkey  = "anothervalue"',
            False,
            {"key": "value", "anotherkey": "anothervalue"},
        ),
        KvTestCase(
            "quoted first",
            'anotherkey="anothervalue" key=value',
            False,
            {"anotherkey": "anothervalue", "key": "value"},
        ),
        KvTestCase(
            "header line",
            'name=Alice age=30 city="New York"',
            False,
            {"name": "Alice", "age": "30", "city": "New York"},
        ),
        KvTestCase("empty quoted value", 'key=""', False, {"key": ""}),
        KvTestCase(
            "tabs and newlines separate",
            "a=1\tb=2\nc=3",
            False,
            {"a": "1", "b": "2", "c": "3"},
        ),
    ]


@pytest.fixture
def kv_fail_cases() -> list[KvTestCase]:
    """
    Provides lines that must fail parsing, with the expected error type.
    """
    return [
        KvTestCase("missing value", "key=", True, kvparse.MissingValueError),
        KvTestCase(
            "missing value before space", "key=   ", True, kvparse.MissingValueError
        ),
        KvTestCase(
            "unterminated quote", 'key="value', True, kvparse.MissingEndQuoteError
        ),
        KvTestCase("missing key", "=value", True, kvparse.MissingKeyError),
        KvTestCase("quoted key", "'foo'=value", True, kvparse.MissingKeyError),
        KvTestCase(
            "missing operator",
            "key value",
            True,
            kvparse.MissingAssignmentOperatorError,
        ),
        KvTestCase(
            "bare key", "key", True, kvparse.IncompleteKeyValuePairError
        ),
        KvTestCase(
            "bare key after pair",
            "a=1 key",
            True,
            kvparse.IncompleteKeyValuePairError,
        ),
        KvTestCase(
            "quote after closing quote",
            'a="1""2"',
            True,
            kvparse.MissingKeyError,
        ),
    ]
