"""In-place edits of a working schedule.

The solver pushes a section with ``add_section`` and pops it with
``remove_section`` when a branch fails, so every add must be undone in LIFO
order.
"""
from __future__ import annotations

from coursecrafter.schemas.catalog import Course, Section
from coursecrafter.schemas.schedule import DayTimes, Schedule


def add_section(section: Section | None, schedule: Schedule) -> Schedule:
    if section is None:
        return schedule

    schedule.credit_total += section.credits
    if not section.days or section.time is None:
        return schedule

    for day in section.days:
        entry = schedule.find_day(day)
        if entry is None:
            schedule.week_times.append(DayTimes(day=day, times=[section.time]))
        else:
            entry.times.append(section.time)
    return schedule


def remove_section(section: Section | None, schedule: Schedule) -> Schedule:
    if section is None:
        return schedule

    schedule.credit_total -= section.credits
    if not section.days or section.time is None:
        return schedule

    for day in reversed(section.days):
        for index, entry in enumerate(schedule.week_times):
            if entry.day != day:
                continue
            entry.times.pop()
            if not entry.times:
                del schedule.week_times[index]
            break
    return schedule


def add_course(course: Course, schedule: Schedule) -> Schedule:
    """Append a course whose groups are already selected, recording every selection."""
    schedule.courses.append(course)
    for group in [course.main_group, *course.secondary_groups]:
        add_section(group.selected_section, schedule)
    return schedule


def selected_credit_total(courses: list[Course]) -> float:
    return sum(
        group.selected_section.credits
        for course in courses
        for group in [course.main_group, *course.secondary_groups]
        if group.selected_section is not None
    )
