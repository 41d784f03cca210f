"""Typed coordinator definitions validated through the parameter checks."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import List, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from flowcheck.frequency import CronExpression, check_frequency
from flowcheck.names import is_member, validate_action_name
from flowcheck.numeric import check_ge_zero, check_gt_zero
from flowcheck.presence import not_empty_elements
from flowcheck.settings import settings
from flowcheck.time_utils import check_date_oozie_tz, check_time_zone, coerce_utc

EXECUTION_ORDERS = ("FIFO", "LIFO", "LAST_ONLY", "NONE")


class ControlsDefinition(BaseModel):
    """Run controls for a coordinator."""

    timeout: int = 0
    concurrency: int = 1
    execution: str = Field(default_factory=lambda: settings.default_execution_order)
    throttle: int = 12

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: int) -> int:
        return check_ge_zero(value, "controls.timeout")

    @field_validator("concurrency", "throttle")
    @classmethod
    def validate_positive(cls, value: int, info: ValidationInfo) -> int:
        return check_gt_zero(value, f"controls.{info.field_name}")

    @field_validator("execution")
    @classmethod
    def validate_execution(cls, value: str) -> str:
        return is_member(value, EXECUTION_ORDERS, "controls.execution")


class CoordinatorDefinition(BaseModel):
    """A recurring workflow definition."""

    name: str
    frequency: str
    start: datetime
    end: datetime
    timezone: str = "UTC"
    controls: ControlsDefinition = Field(default_factory=ControlsDefinition)
    actions: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return validate_action_name(value)

    @field_validator("frequency", mode="before")
    @classmethod
    def validate_frequency(cls, value):
        # YAML hands plain minute periods over as ints.
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        check_frequency(value, "frequency")
        return value

    @field_validator("start", "end", mode="before")
    @classmethod
    def validate_dates(cls, value, info: ValidationInfo) -> datetime:
        if isinstance(value, datetime):
            return coerce_utc(value)
        return check_date_oozie_tz(value, info.field_name)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        check_time_zone(value, "timezone")
        return value

    @field_validator("actions")
    @classmethod
    def validate_actions(cls, value: List[str]) -> List[str]:
        not_empty_elements(value, "actions")
        seen = set()
        for action in value:
            validate_action_name(action)
            if action in seen:
                raise ValueError(f"duplicate action name: {action}")
            seen.add(action)
        return value

    @model_validator(mode="after")
    def validate_window(self) -> "CoordinatorDefinition":
        if self.end <= self.start:
            raise ValueError(
                f"end ({self.end.isoformat()}) must be after start ({self.start.isoformat()})"
            )
        return self

    @property
    def tzinfo(self) -> tzinfo:
        return check_time_zone(self.timezone, "timezone")

    @property
    def schedule(self) -> Union[int, CronExpression]:
        return check_frequency(self.frequency)
