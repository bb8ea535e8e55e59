from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DAY_VALUES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

DAY_SHORT_MAP = {
    "Mon": "Monday",
    "Tue": "Tuesday",
    "Wed": "Wednesday",
    "Thu": "Thursday",
    "Fri": "Friday",
    "Sat": "Saturday",
    "Sun": "Sunday",
}


def normalize_day(value: str) -> str:
    day = value.strip()
    return DAY_SHORT_MAP.get(day, day)


def validate_clock_time(value: int) -> int:
    hours, minutes = divmod(value, 100)
    if value < 0 or hours > 23 or minutes > 59:
        raise ValueError("Time must be an HHMM 24-hour clock value")
    return value


class TimeSlot(BaseModel):
    """A meeting window on one day, both ends encoded as HHMM integers (1300 is 1:00 PM)."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @field_validator("start", "end")
    @classmethod
    def validate_clock(cls, value: int) -> int:
        return validate_clock_time(value)

    @model_validator(mode="after")
    def validate_order(self) -> "TimeSlot":
        if self.start >= self.end:
            raise ValueError("start must be earlier than end")
        return self


class Section(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    class_no: str = Field(default="", alias="classNo")
    session: str = ""
    faculty: list[str] = Field(default_factory=list)
    credits: float = Field(default=0, ge=0)
    status: str = ""
    location: str = ""
    days: list[str] | None = None
    time: TimeSlot | None = None

    @field_validator("days")
    @classmethod
    def validate_days(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        cleaned: list[str] = []
        for raw in value:
            day = normalize_day(raw)
            if day not in DAY_VALUES:
                raise ValueError(f"Invalid day: {raw}")
            if day not in cleaned:
                cleaned.append(day)
        return cleaned


class SectionGroup(BaseModel):
    """One facet of a course (lecture, lab, recitation) that needs exactly one section.

    A group whose ``all_sections`` is ``None`` carries no candidates and is not
    part of the course's required groups.
    """

    model_config = ConfigDict(populate_by_name=True)

    all_sections: list[Section] | None = Field(default=None, alias="allSections")
    selected_section: Section | None = Field(default=None, alias="selectedSection")

    @property
    def is_required(self) -> bool:
        return self.all_sections is not None


class Course(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    dept: str = ""
    description: str = ""
    attributes: list[str] = Field(default_factory=list)
    main_group: SectionGroup = Field(alias="mainGroup")
    secondary_groups: list[SectionGroup] = Field(default_factory=list, alias="secondaryGroups")
