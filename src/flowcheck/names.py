"""Identifier, action-name and membership checks."""

from __future__ import annotations

import re
from typing import Iterable

from .errors import InvalidParamError, MissingParamError
from .presence import not_null
from .settings import settings

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_ACTION_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


def is_valid_identifier(text: str | None) -> bool:
    if not isinstance(text, str):
        return False
    return _IDENTIFIER_RE.fullmatch(text) is not None


def validate_action_name(name: str | None) -> str:
    """Validate a workflow action name.

    Letters, digits, ``_`` and ``-`` are allowed; the first character must be a
    letter or ``_``. Length is capped by ``settings.action_name_max_length``.
    """
    if name is None:
        raise MissingParamError("action name", "cannot be null")
    if not isinstance(name, str):
        raise InvalidParamError("action name", f"must be a string, got {type(name).__name__}")
    if name == "":
        raise InvalidParamError("action name", "cannot be empty")
    max_length = settings.action_name_max_length
    if len(name) > max_length:
        raise InvalidParamError(
            "action name",
            f"{name[:16]!r}... is {len(name)} characters, limit is {max_length}",
        )
    if _ACTION_NAME_RE.fullmatch(name) is None:
        raise InvalidParamError(
            "action name",
            f"{name!r} must match [A-Za-z_][A-Za-z0-9_-]*",
        )
    return name


def is_member(value: str, allowed: Iterable[str], name: str) -> str:
    """Return ``value`` when it equals one of ``allowed`` (case-sensitive)."""
    if value is None:
        raise MissingParamError(name, "cannot be null")
    not_null(allowed, name)
    allowed = list(allowed)
    if value not in allowed:
        raise InvalidParamError(
            name,
            f"{value!r} is not one of {', '.join(str(item) for item in allowed)}",
        )
    return value
