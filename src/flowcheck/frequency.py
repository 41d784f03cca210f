"""Frequency expressions: a period in minutes or a five-field cron pattern.

Each cron field is parsed into a small expression tree before range checks::

    field := item ("," item)*
    item  := base ("/" step)?
    base  := "*" | value ("-" value)?
    value := digits | day name (day-of-week only)

Validation only; next fire times are not computed here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .errors import InvalidParamError, MissingParamError

DAY_NAMES: Dict[str, int] = {
    "SUN": 0,
    "MON": 1,
    "TUE": 2,
    "WED": 3,
    "THU": 4,
    "FRI": 5,
    "SAT": 6,
}

_PLAIN_MINUTES_RE = re.compile(r"[0-9]+")
_TOKEN_RE = re.compile(r"[0-9]+|[A-Za-z]+|[*,/-]")


@dataclass(frozen=True)
class FieldSpec:
    """Legal alphabet of one cron field."""

    name: str
    low: int
    high: int
    names: Dict[str, int] = field(default_factory=dict)
    # Names that take another value when they close a range (SUN as 7).
    range_end_names: Dict[str, int] = field(default_factory=dict)


CRON_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("minute", 0, 59),
    FieldSpec("hour", 0, 23),
    FieldSpec("day-of-month", 1, 31),
    FieldSpec("month", 1, 12),
    FieldSpec("day-of-week", 0, 7, DAY_NAMES, {"SUN": 7}),
)


@dataclass(frozen=True)
class Wildcard:
    pass


@dataclass(frozen=True)
class Literal:
    value: int
    token: str


@dataclass(frozen=True)
class RangeExpr:
    start: Literal
    end: Literal


@dataclass(frozen=True)
class StepExpr:
    base: Union[Wildcard, Literal, RangeExpr]
    step: int


@dataclass(frozen=True)
class ListExpr:
    items: Tuple[Union[Wildcard, Literal, RangeExpr, StepExpr], ...]


FieldExpr = Union[Wildcard, Literal, RangeExpr, StepExpr, ListExpr]


@dataclass(frozen=True)
class CronExpression:
    """A well-formed five-field expression."""

    text: str
    minute: FieldExpr
    hour: FieldExpr
    day_of_month: FieldExpr
    month: FieldExpr
    day_of_week: FieldExpr


class _FieldParser:
    """Recursive-descent parser for a single cron field."""

    def __init__(self, spec: FieldSpec, text: str, param_name: str):
        self.spec = spec
        self.text = text
        self.param_name = param_name
        self.tokens = self._tokenize(text)
        self.pos = 0

    def parse(self) -> FieldExpr:
        items = [self._item()]
        while self._accept(","):
            items.append(self._item())
        if self._peek() is not None:
            self._fail(f"unexpected {self._peek()!r}")
        if len(items) == 1:
            return items[0]
        return ListExpr(tuple(items))

    def _item(self):
        base = self._base()
        if self._accept("/"):
            token = self._next()
            if token is None or not token.isdigit():
                self._fail("step must be a positive integer")
            step = int(token)
            if step <= 0:
                self._fail(f"step must be a positive integer: {token}")
            return StepExpr(base, step)
        return base

    def _base(self):
        if self._accept("*"):
            return Wildcard()
        start = self._value()
        if self._accept("-"):
            end = self._value(range_end=True)
            if start.value > end.value:
                self._fail(f"range {start.token}-{end.token} is reversed")
            return RangeExpr(start, end)
        return start

    def _value(self, range_end: bool = False) -> Literal:
        token = self._next()
        if token is None:
            self._fail("unexpected end of field")
        if token.isdigit():
            value = int(token)
            if not self.spec.low <= value <= self.spec.high:
                self._fail(
                    f"{token} is outside {self.spec.low}-{self.spec.high}"
                )
            return Literal(value, token)
        if token.isalpha():
            value = None
            if range_end:
                value = self.spec.range_end_names.get(token.upper())
            if value is None:
                value = self.spec.names.get(token.upper())
            if value is None:
                self._fail(f"unknown value {token!r}")
            return Literal(value, token)
        self._fail(f"unexpected {token!r}")

    def _tokenize(self, text: str) -> List[str]:
        tokens: List[str] = []
        pos = 0
        while pos < len(text):
            match = _TOKEN_RE.match(text, pos)
            if match is None:
                self._fail(f"unexpected character {text[pos]!r}")
            tokens.append(match.group())
            pos = match.end()
        return tokens

    def _peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _next(self) -> Optional[str]:
        token = self._peek()
        if token is not None:
            self.pos += 1
        return token

    def _accept(self, token: str) -> bool:
        if self._peek() == token:
            self.pos += 1
            return True
        return False

    def _fail(self, reason: str) -> None:
        raise InvalidParamError(
            self.param_name,
            f"{self.spec.name} field {self.text!r}: {reason}",
        )


def parse_cron_field(spec: FieldSpec, text: str, name: str = "frequency") -> FieldExpr:
    return _FieldParser(spec, text, name).parse()


def check_frequency(text: str, name: str = "frequency") -> Union[int, CronExpression]:
    """Validate a frequency expression.

    Returns the period in minutes for a plain integer, otherwise the parsed
    :class:`CronExpression`. The first invalid field aborts the check.
    """
    if text is None:
        raise MissingParamError(name, "cannot be null")
    if not isinstance(text, str):
        raise InvalidParamError(name, f"must be a string, got {type(text).__name__}")
    if _PLAIN_MINUTES_RE.fullmatch(text):
        return int(text)

    fields = text.split()
    if len(fields) != len(CRON_FIELDS):
        raise InvalidParamError(
            name,
            f"{text!r} is neither a number of minutes nor a cron expression "
            f"with {len(CRON_FIELDS)} fields",
        )
    parsed = [parse_cron_field(spec, part, name) for spec, part in zip(CRON_FIELDS, fields)]
    return CronExpression(text, *parsed)
