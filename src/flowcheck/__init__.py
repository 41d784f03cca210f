"""Parameter checks for workflow definitions."""

from .errors import InvalidParamError, MissingParamError, ParamError
from .frequency import CronExpression, check_frequency
from .names import is_member, is_valid_identifier, validate_action_name
from .numeric import check_ge_zero, check_gt_zero, check_integer
from .presence import not_empty, not_empty_elements, not_null, not_null_elements
from .result import CheckResult, ErrorKind, attempt
from .time_utils import check_date_oozie_tz, check_time_zone, coerce_utc, format_oozie_tz

__all__ = [
    "__version__",
    "ParamError",
    "MissingParamError",
    "InvalidParamError",
    "not_null",
    "not_empty",
    "not_null_elements",
    "not_empty_elements",
    "check_gt_zero",
    "check_ge_zero",
    "check_integer",
    "is_valid_identifier",
    "validate_action_name",
    "is_member",
    "check_date_oozie_tz",
    "check_time_zone",
    "coerce_utc",
    "format_oozie_tz",
    "check_frequency",
    "CronExpression",
    "CheckResult",
    "ErrorKind",
    "attempt",
]

__version__ = "0.1.0"
