"""Tagged results for callers that branch instead of catching."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .errors import MissingParamError, ParamError

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    MISSING = "missing"
    INVALID = "invalid"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check: the validated value or the error it raised."""

    value: Any = None
    error: Optional[ParamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        if self.error is None:
            return None
        if isinstance(self.error, MissingParamError):
            return ErrorKind.MISSING
        return ErrorKind.INVALID

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


def attempt(check: Callable[..., Any], *args: Any, **kwargs: Any) -> CheckResult:
    """Run ``check`` and capture a :class:`ParamError` as a failed result.

    Any other exception is a bug in the caller or the check and propagates.
    """
    try:
        return CheckResult(value=check(*args, **kwargs))
    except ParamError as exc:
        logger.debug("rejected %s: %s", exc.param_name, exc.cause)
        return CheckResult(error=exc)
