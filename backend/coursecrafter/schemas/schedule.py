from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from coursecrafter.schemas.catalog import Course, TimeSlot


class ScheduleErrorKind(str, Enum):
    empty_cart = "empty_cart"
    credit_limit_exceeded = "credit_limit_exceeded"
    required_conflict = "required_conflict"
    no_valid_augmentation = "no_valid_augmentation"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


# Display strings shared with existing callers; keep them verbatim.
ERROR_MESSAGES = {
    ScheduleErrorKind.empty_cart: "No courses given.",
    ScheduleErrorKind.credit_limit_exceeded: "Your required classes exceed your max credit limit.",
    ScheduleErrorKind.required_conflict: "Your required classes do not fit.",
    ScheduleErrorKind.no_valid_augmentation: "No valid schedule found.",
}


class DayTimes(BaseModel):
    day: str
    times: list[TimeSlot] = Field(default_factory=list)


class Schedule(BaseModel):
    """Placed courses plus the occupied time slots per day, in first-insertion order."""

    model_config = ConfigDict(populate_by_name=True)

    courses: list[Course] = Field(default_factory=list)
    credit_total: float = Field(default=0, alias="creditTotal")
    week_times: list[DayTimes] = Field(default_factory=list, alias="weekTimes")

    def find_day(self, day: str) -> DayTimes | None:
        for entry in self.week_times:
            if entry.day == day:
                return entry
        return None


class GenerateSchedulesResponse(BaseModel):
    schedules: list[Schedule]
    count: int
    trials: int
