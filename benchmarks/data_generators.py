"""
Test data generators for key=value parsing benchmarks.

Each generator builds one mapping and renders it two ways so parsers can be
compared on identical content:
- as a key=value line for kvparse
- as a JSON object for the JSON reference decoders
"""

import json
import random
import string

import kvparse

# Constants for random data generation
_QUOTE_PROBABILITY = 0.5
_SEED = 1234


def generate_pairs(data_type: str) -> dict[str, str]:
    """Generates the mapping behind a benchmark payload."""
    generators = {
        "small_line": _generate_small_line,
        "wide_line": _generate_wide_line,
        "quoted_heavy": _generate_quoted_heavy,
        "bare_values": _generate_bare_values,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    random.seed(_SEED)
    return generators[data_type]()


def generate_test_data(data_type: str) -> str:
    """Generates a key=value line of the specified type."""
    return kvparse.dumps(generate_pairs(data_type), quote_values=False)


def generate_json_data(data_type: str) -> str:
    """Generates the same pairs as a JSON object."""
    return json.dumps(generate_pairs(data_type))


def _generate_small_line() -> dict[str, str]:
    """Generates a short header-style line."""
    return {
        "id": "12345",
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": "true",
        "balance": "1234.56",
        "city": "New York",
    }


def _generate_wide_line() -> dict[str, str]:
    """Generates a line with many pairs of mixed quoting."""
    pairs = {}
    for i in range(200):
        if random.random() < _QUOTE_PROBABILITY:
            value = f"{_random_string(6)} {_random_string(8)}"
        else:
            value = _random_string(random.randint(3, 12))
        pairs[f"field_{i:03d}"] = value
    return pairs


def _generate_quoted_heavy() -> dict[str, str]:
    """Generates long quoted values full of whitespace."""
    return {
        f"msg_{i}": " ".join(_random_string(random.randint(2, 9)) for _ in range(20))
        for i in range(40)
    }


def _generate_bare_values() -> dict[str, str]:
    """Generates bare values with '=' and punctuation."""
    return {
        f"opt_{i}": f"{_random_string(4)}={random.randint(0, 9999)}/{_random_string(3)}"
        for i in range(100)
    }


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
