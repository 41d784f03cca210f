"""Error kinds raised by parameter checks."""

from __future__ import annotations


class ParamError(ValueError):
    """Base class for a rejected parameter."""

    def __init__(self, param_name: str, cause: str):
        super().__init__(f"{param_name}: {cause}")
        self.param_name = param_name
        self.cause = cause


class MissingParamError(ParamError):
    """Raised when a required argument itself is absent."""


class InvalidParamError(ParamError):
    """Raised when an argument is present but its content is invalid."""
