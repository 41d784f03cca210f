"""UTC wire-format dates and timezone lookup."""

from __future__ import annotations

import re
from datetime import datetime, tzinfo

import pytz

from .errors import InvalidParamError, MissingParamError

OOZIE_TZ_FORMAT = "%Y-%m-%dT%H:%MZ"

_OOZIE_TZ_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}Z")


def coerce_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value.astimezone(pytz.UTC)


def format_oozie_tz(value: datetime) -> str:
    return coerce_utc(value).strftime(OOZIE_TZ_FORMAT)


def check_date_oozie_tz(text: str, name: str) -> datetime:
    """Parse ``YYYY-MM-DDThh:mmZ`` into an aware UTC datetime.

    The textual shape is checked first so that ``strptime`` leniency (single
    digit fields) does not leak through; ``strptime`` then enforces calendar
    ranges such as February 30th or hour 24.
    """
    if text is None:
        raise MissingParamError(name, "cannot be null")
    if not isinstance(text, str) or not _OOZIE_TZ_RE.fullmatch(text):
        raise InvalidParamError(
            name,
            f"{text!r} must be in UTC format YYYY-MM-DDThh:mmZ",
        )
    try:
        parsed = datetime.strptime(text, OOZIE_TZ_FORMAT)
    except ValueError as exc:
        raise InvalidParamError(name, f"{text!r} is not a valid date: {exc}") from exc
    return pytz.UTC.localize(parsed)


def check_time_zone(text: str, name: str) -> tzinfo:
    if text is None:
        raise MissingParamError(name, "cannot be null")
    # pytz.timezone() matches names case-insensitively; require the exact id.
    if not isinstance(text, str) or text not in pytz.all_timezones_set:
        raise InvalidParamError(name, f"unknown timezone: {text!r}")
    return pytz.timezone(text)
