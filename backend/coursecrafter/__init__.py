from coursecrafter.schemas.cart import Cart, CreditRequirements  # noqa: F401
from coursecrafter.schemas.catalog import Course, Section, SectionGroup, TimeSlot  # noqa: F401
from coursecrafter.schemas.schedule import DayTimes, Schedule, ScheduleErrorKind  # noqa: F401
from coursecrafter.services.schedule_generator import (  # noqa: F401
    ScheduleGenerationResult,
    ScheduleGenerator,
    generate_schedules,
)
