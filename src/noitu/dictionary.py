"""Dictionary shape guard and JSON loader.

Schema: a JSON object mapping a first syllable to a list of second syllables,
e.g. {"thế": ["chân", "giới"], "chân": ["thật", "trời"]}.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional


def _shape_error(value: Any) -> Optional[str]:
    if not isinstance(value, Mapping):
        return f"dictionary must be an object, got {type(value).__name__}"
    for key, seconds in value.items():
        if not isinstance(key, str):
            return f"key {key!r} is not a string"
        if not isinstance(seconds, (list, tuple)):
            return f"entry {key!r} must be a list of strings"
        for item in seconds:
            if not isinstance(item, str):
                return f"entry {key!r} contains non-string value {item!r}"
    return None


def validate_dictionary(value: Any) -> bool:
    """True if value maps strings to lists of strings."""
    return _shape_error(value) is None


def ensure_dictionary(value: Any) -> Dict[str, List[str]]:
    """Return a plain dict copy of value, or raise ValueError if malformed."""
    problem = _shape_error(value)
    if problem:
        raise ValueError(f"Invalid dictionary: {problem}")
    return {k: list(v) for k, v in value.items()}


def load_dictionary(path: str | Path) -> Dict[str, List[str]]:
    """Load and shape-check a dictionary JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in dictionary file {path}: {e}") from e
    return ensure_dictionary(data)
