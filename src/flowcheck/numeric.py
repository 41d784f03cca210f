"""Numeric bound and integer-parse checks."""

from __future__ import annotations

import re

from .errors import InvalidParamError, MissingParamError

_INTEGER_RE = re.compile(r"-?[0-9]+")


def _require_int(value, name: str) -> int:
    if value is None:
        raise MissingParamError(name, "cannot be null")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParamError(name, f"must be an integer, got {type(value).__name__}")
    return value


def check_gt_zero(value: int, name: str) -> int:
    _require_int(value, name)
    if value <= 0:
        raise InvalidParamError(name, f"must be greater than zero: {value}")
    return value


def check_ge_zero(value: int, name: str) -> int:
    _require_int(value, name)
    if value < 0:
        raise InvalidParamError(name, f"must be greater than or equal to zero: {value}")
    return value


def check_integer(text: str, name: str) -> int:
    """Parse a base-10 integer with an optional leading ``-``."""
    if text is None:
        raise MissingParamError(name, "cannot be null")
    if not isinstance(text, str) or not _INTEGER_RE.fullmatch(text):
        raise InvalidParamError(name, f"must be an integer: {text!r}")
    return int(text)
