"""
JSON serialization helpers.

to_json() turns plain JSON values, dataclass instances and ordinary objects
into a JSON string. from_json() goes the other way for a given class: it
creates an instance without running ``__init__`` and assigns every decoded
key as an attribute, so the class's methods work on the result.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def to_json(obj: Any) -> str:
    """
    Return the JSON representation of *obj*.

    Dataclass instances are serialized by field, other objects by their
    instance attributes; anything else goes to ``json.dumps`` unchanged.
    Output is compact, with no whitespace after separators.
    Raises TypeError if a value cannot be serialized.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        payload: Any = dataclasses.asdict(obj)
    elif hasattr(obj, "__dict__") and not isinstance(obj, type):
        payload = vars(obj)
    else:
        payload = obj
    return json.dumps(payload, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """
    Reconstruct an instance of *cls* from a JSON object.

    Raises ValueError if *text* is not valid JSON or does not decode to an
    object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse JSON for {cls.__name__}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(
            f"JSON for {cls.__name__} must be an object, got {type(data).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in data.items():
        # object.__setattr__ so frozen dataclasses can be reconstructed too.
        object.__setattr__(instance, key, value)
    return instance
