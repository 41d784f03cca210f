from .loader import DefinitionLoader
from .types import EXECUTION_ORDERS, ControlsDefinition, CoordinatorDefinition
from .validator import DefinitionValidationError, DefinitionValidator

__all__ = [
    "DefinitionLoader",
    "CoordinatorDefinition",
    "ControlsDefinition",
    "EXECUTION_ORDERS",
    "DefinitionValidator",
    "DefinitionValidationError",
]
