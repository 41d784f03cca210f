"""Coordinator definition file loader."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from flowcheck.settings import settings

from .types import CoordinatorDefinition
from .validator import DefinitionValidationError, DefinitionValidator

logger = logging.getLogger(__name__)


class DefinitionLoader:
    """Loads and validates YAML coordinator definitions from a directory."""

    def __init__(self, definition_dir: str | Path | None = None):
        if definition_dir is None:
            self.definition_dir = settings.definition_dir_path
        else:
            self.definition_dir = Path(definition_dir).expanduser().resolve()
        self.validator = DefinitionValidator()

    def load(self, name: str) -> CoordinatorDefinition:
        file_path = self.definition_dir / f"{name}.yaml"
        if not file_path.exists():
            raise FileNotFoundError(
                f"Coordinator definition not found for '{name}' at {file_path}"
            )

        with file_path.open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}

        if not isinstance(payload, dict):
            raise DefinitionValidationError(
                f"Coordinator definition at {file_path} must be a mapping, got {type(payload).__name__}"
            )
        if "name" not in payload:
            payload["name"] = name
        definition = self.validator.validate(payload)
        logger.info("loaded coordinator definition %s from %s", definition.name, file_path)
        return definition
