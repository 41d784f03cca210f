"""Presence checks for single values and sequences."""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from .errors import InvalidParamError, MissingParamError

T = TypeVar("T")


def not_null(value: T | None, name: str) -> T:
    if value is None:
        raise MissingParamError(name, "cannot be null")
    return value


def not_empty(value: Any, name: str) -> Any:
    """Reject ``None`` and the exact empty string; whitespace passes."""
    not_null(value, name)
    if value == "":
        raise InvalidParamError(name, "cannot be empty")
    return value


def not_null_elements(sequence: Sequence[Any] | None, name: str) -> Sequence[Any]:
    """Reject a missing sequence or any ``None`` member.

    An empty sequence is valid; empty-string members are present, not absent.
    """
    not_null(sequence, name)
    for index, element in enumerate(sequence):
        if element is None:
            raise InvalidParamError(name, f"element [{index}] is null")
    return sequence


not_empty_elements = not_null_elements
