"""
Test documents for jsontree benchmarks.

Each generator is seeded, so every library and every run sees the same text.
The documents exercise the parts of the grammar that dominate parse time:
- escape decoding, including `\\u` surrogate pairs
- number conversion to single and double precision
- container recursion and object members
"""

import json
import random
import string
from typing import Any

SEED = 20240515

# Characters that need a simple escape in JSON text
_SIMPLE_ESCAPES = ['\\"', "\\\\", "\\/", "\\n", "\\r", "\\t"]

# Supplementary-plane characters that encode as surrogate pairs
_ASTRAL = ["\U0001f600", "\U0001d11e", "\U0001f680", "\U00020000"]

# Stays inside binary32 range so single precision never overflows
_FLOAT_LIMIT = 1e30


def generate_document(kind: str) -> str:
    """Returns the benchmark document named `kind`."""
    generators = {
        "escape_heavy": _escape_heavy,
        "surrogate_pairs": _surrogate_pairs,
        "number_heavy": _number_heavy,
        "deep_nesting": _deep_nesting,
        "wide_object": _wide_object,
    }

    if kind not in generators:
        raise ValueError(f"Unknown document kind: {kind}")

    return generators[kind](random.Random(SEED))


DOCUMENT_KINDS = (
    "escape_heavy",
    "surrogate_pairs",
    "number_heavy",
    "deep_nesting",
    "wide_object",
)


def _escaped_text(rng: random.Random, length: int) -> str:
    """Builds raw JSON string content where about a third are escapes."""
    parts = []
    for _ in range(length):
        roll = rng.random()
        if roll < 0.2:
            parts.append(rng.choice(_SIMPLE_ESCAPES))
        elif roll < 0.3:
            parts.append(f"\\u{rng.randint(0x00A0, 0x07FF):04x}")
        else:
            parts.append(rng.choice(string.ascii_letters + " "))
    return "".join(parts)


def _escape_heavy(rng: random.Random) -> str:
    """Array of strings dense with simple and BMP `\\u` escapes."""
    items = ", ".join(f'"{_escaped_text(rng, 60)}"' for _ in range(200))
    return f"[{items}]"


def _surrogate_pairs(rng: random.Random) -> str:
    """Object whose values are mostly astral characters."""
    members = {
        f"emoji_{i}": "".join(rng.choice(_ASTRAL) for _ in range(20))
        for i in range(150)
    }
    # ensure_ascii writes every astral character as a \u surrogate pair
    return json.dumps(members, ensure_ascii=True)


def _number_heavy(rng: random.Random) -> str:
    """Rows of mixed integers, fractions and exponents."""
    rows: list[list[Any]] = []
    for _ in range(100):
        rows.append(
            [
                rng.randint(-(10**6), 10**6),
                round(rng.uniform(-1000.0, 1000.0), 6),
                rng.uniform(-_FLOAT_LIMIT, _FLOAT_LIMIT),
                rng.uniform(0, 1) * 1e-20,
            ]
        )
    return json.dumps(rows)


def _deep_nesting(rng: random.Random) -> str:
    """A chain of alternating arrays and objects, 24 levels deep."""

    def level(depth: int) -> Any:
        if depth == 0:
            return rng.choice([None, True, False, "leaf"])
        if depth % 2:
            return [level(depth - 1), depth]
        return {"depth": depth, "next": level(depth - 1)}

    return json.dumps([level(24) for _ in range(20)])


def _wide_object(rng: random.Random) -> str:
    """One flat object with many short members."""
    members = {
        f"key_{i:05d}": rng.choice(
            [None, True, False, i, f"value {i}", [], {}]
        )
        for i in range(2000)
    }
    return json.dumps(members)
