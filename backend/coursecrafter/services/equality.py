from __future__ import annotations

import math

from coursecrafter.schemas.schedule import Schedule


def schedules_identical(first: Schedule, second: Schedule) -> bool:
    """Structural comparison used to drop duplicate schedules.

    Course order does not matter (titles are compared sorted), but days and their
    time slots are compared positionally, so two schedules built in a different
    insertion order are treated as distinct.
    """
    if (
        len(first.courses) != len(second.courses)
        or not math.isclose(first.credit_total, second.credit_total, abs_tol=1e-9)
        or len(first.week_times) != len(second.week_times)
    ):
        return False

    for day_a, day_b in zip(first.week_times, second.week_times):
        if len(day_a.times) != len(day_b.times):
            return False

    titles_a = sorted(course.title for course in first.courses)
    titles_b = sorted(course.title for course in second.courses)
    if titles_a != titles_b:
        return False

    for day_a, day_b in zip(first.week_times, second.week_times):
        if day_a.day != day_b.day:
            return False
        for slot_a, slot_b in zip(day_a.times, day_b.times):
            if slot_a.start != slot_b.start or slot_a.end != slot_b.end:
                return False
    return True
