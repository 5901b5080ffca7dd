"""
Runtime value helpers.

Lox values are plain Python objects: ``None`` for nil, ``bool``, ``float``
and ``str``.

Author: relox developers
"""

from typing import Any

from ..parser.printer import format_literal


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: Any, right: Any) -> bool:
    """Type-strict equality: values of different kinds are never equal."""
    # bool is a subclass of int in Python, so compare exact types
    if type(left) is not type(right):
        return False
    return left == right


def is_number(value: Any) -> bool:
    return isinstance(value, float)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def stringify(value: Any) -> str:
    """Display form used by ``print``."""
    return format_literal(value)
