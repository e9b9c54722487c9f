"""
Test data generators for parsing and encoding benchmarks.

Builds host data shaped like addon saved variables and API payloads,
then renders it as JSON text (through the standard library) or as LSON
text (through lsonlib tables):
- Different sizes (small/large)
- Different shapes (flat/nested/mixed)
- String-heavy content with escape sequences
"""

import json
import random
import string
from typing import Any

from lsonlib import lson_format
from lsonlib import to_lson_value

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]

_ESCAPE_PROBABILITY = 0.3
_SEED = 8259


def generate_data(data_type: str) -> Any:
    """Generates host data for the given shape, reproducibly."""
    generators = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    rng = random.Random(_SEED)
    return generators[data_type](rng)


def generate_test_data(data_type: str) -> str:
    """Generates JSON text for the given shape."""
    return json.dumps(generate_data(data_type))


def generate_lson_data(data_type: str, indent: bool = False) -> str:
    """Generates LSON text for the given shape."""
    table = to_lson_value(generate_data(data_type))
    if indent:
        return lson_format.dumps_indented(table)
    return lson_format.dumps(table)


def _small_object(rng: random.Random) -> dict[str, Any]:
    """A character record under 1KB."""
    return {
        "guid": 12345,
        "name": "Aelwyn",
        "realm": "Silvermoon",
        "level": 60,
        "resting": True,
        "gold": 1234.56,
        "position": {"zone": "Elwynn Forest", "x": 0.4312, "y": 0.6687},
    }


def _large_object(rng: random.Random) -> dict[str, Any]:
    """An account database over 10KB with settings, bags and a log."""
    return {
        "version": rng.randint(100000, 999999),
        "settings": {
            "ui": {
                "scale": round(rng.uniform(0.64, 1.15), 2),
                "font": rng.choice(["Friz", "Arial", "Morpheus"]),
                "hide_in_combat": rng.choice([True, False]),
                "anchors": {
                    frame: {
                        "x": rng.randint(-800, 800),
                        "y": rng.randint(-600, 600),
                    }
                    for frame in ("player", "target", "focus", "party", "raid")
                },
            },
            "sounds": {
                "master": round(rng.random(), 2),
                "music": round(rng.random(), 2),
                "ambience": round(rng.random(), 2),
            },
        },
        "bags": [
            {
                "item_id": rng.randint(1000, 200000),
                "count": rng.randint(1, 200),
                "name": f"Item {_random_string(rng, 12)}",
                "quality": rng.choice(["poor", "common", "rare", "epic"]),
                "bound": rng.choice([True, False]),
                "price": round(rng.uniform(0.01, 5000.0), 2),
            }
            for _ in range(60)
        ],
        "log": [
            {
                "time": rng.randint(1_600_000_000, 1_800_000_000),
                "event": rng.choice(["loot", "quest", "death", "trade"]),
                "zone": _random_string(rng, 14),
                "note": f"Session {i}: {_random_string(rng, 24)}",
            }
            for i in range(40)
        ],
    }


def _mixed_array(rng: random.Random) -> list[Any]:
    """A long array of every scalar kind with small records mixed in."""
    array: list[Any] = []
    for i in range(200):
        choice = rng.randint(1, 5)
        if choice == 1:
            array.append(rng.randint(-1000, 1000))
        elif choice == 2:
            array.append(round(rng.uniform(-100.0, 100.0), 3))
        elif choice == 3:
            array.append(_random_string(rng, rng.randint(5, 30)))
        elif choice == 4:
            array.append(rng.choice([True, False]))
        else:
            array.append(
                {
                    "index": i,
                    "label": _random_string(rng, 10),
                    "score": round(rng.uniform(0, 100), 2),
                }
            )
    return array


def _nested_structure(rng: random.Random) -> dict[str, Any]:
    """A talent tree six levels deep."""

    def node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"spell": _random_string(rng, 10)}

        return {
            "tier": depth,
            "title": _random_string(rng, 15),
            "choices": [node(depth - 1) for _ in range(3)],
            "next": node(depth - 1),
        }

    return node(6)


def _string_heavy(rng: random.Random) -> dict[str, Any]:
    """Chat history full of characters that need escaping."""

    def message() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    rng.choice(['"', "\\", "\b", "\f", "\n", "\r", "\t"])
                )
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    return {
        "messages": [message() for _ in range(100)],
        "accented": [f"Caf\u00e9 n\u00b0{i} \u00bb ok" for i in range(50)],
        "channels": {
            f"channel_{i}": {
                "topic": message(),
                "motd": 'Raid at 8 \n bring "flasks"\t and food',
                "path": f"C:\\Games\\{_random_string(rng, 8)}\\WTF\\file_{i}.lua",
            }
            for i in range(20)
        },
    }


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
