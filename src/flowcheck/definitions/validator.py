"""Validation entry point for coordinator definitions."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError

from .types import CoordinatorDefinition


class DefinitionValidationError(ValueError):
    """Raised when a coordinator definition is invalid."""


class DefinitionValidator:
    """Validates and normalizes coordinator payloads."""

    def validate(self, payload: Dict[str, Any]) -> CoordinatorDefinition:
        try:
            return CoordinatorDefinition.model_validate(payload)
        except ValidationError as exc:
            raise DefinitionValidationError(str(exc)) from exc
