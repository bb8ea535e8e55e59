from __future__ import annotations

from coursecrafter.schemas.catalog import Course, Section, TimeSlot
from coursecrafter.schemas.schedule import Schedule


def time_slots_overlap(first: TimeSlot, second: TimeSlot) -> bool:
    # Inclusive bounds: a class ending at 1400 clashes with one starting at 1400.
    return first.start <= second.end and second.start <= first.end


def section_conflicts(section: Section | None, schedule: Schedule) -> bool:
    if section is None or not section.days or section.time is None:
        return False

    for day in section.days:
        entry = schedule.find_day(day)
        if entry is None:
            continue
        if any(time_slots_overlap(section.time, booked) for booked in entry.times):
            return True
    return False


def course_conflicts(course: Course, schedule: Schedule) -> bool:
    groups = [course.main_group, *course.secondary_groups]
    return any(section_conflicts(group.selected_section, schedule) for group in groups)
