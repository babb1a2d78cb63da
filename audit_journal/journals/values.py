"""Comparison and display helpers for snapshot values."""

from typing import Any

from pydantic_core import to_json

EMPTY_PLACEHOLDER = "(empty)"


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality over JSON values.

    Unlike ``==`` a boolean never equals a number. Integers and floats
    compare numerically.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            json_equal(value, right[key]) for key, value in left.items()
        )
    return False


def display_value(value: Any) -> str:
    """Render a value for activity text.

    Strings are shown as-is, null as the empty placeholder and everything
    else as compact JSON.
    """
    if value is None:
        return EMPTY_PLACEHOLDER
    if isinstance(value, str):
        return value
    return to_json(value).decode()
