import pytest

from coursecrafter.schemas.catalog import Course, SectionGroup, TimeSlot
from coursecrafter.schemas.schedule import DayTimes, Schedule
from coursecrafter.services.equality import schedules_identical


def _course(title):
    return Course(id=title.lower(), title=title, main_group=SectionGroup())


def _schedule(titles, week, credits=8):
    return Schedule(
        courses=[_course(title) for title in titles],
        credit_total=credits,
        week_times=[
            DayTimes(day=day, times=[TimeSlot(start=start, end=end) for start, end in slots])
            for day, slots in week
        ],
    )


BASE_WEEK = [("Monday", [(900, 1015), (1300, 1500)]), ("Wednesday", [(900, 1015)])]


def test_course_order_does_not_matter():
    first = _schedule(["Etching", "Semantics"], BASE_WEEK)
    second = _schedule(["Semantics", "Etching"], BASE_WEEK)

    assert schedules_identical(first, second)
    assert schedules_identical(second, first)


@pytest.mark.parametrize(
    "other",
    [
        _schedule(["Etching"], BASE_WEEK),
        _schedule(["Etching", "Semantics"], BASE_WEEK, credits=7),
        _schedule(["Etching", "Cinema"], BASE_WEEK),
        _schedule(["Etching", "Semantics"], [("Wednesday", [(900, 1015)]), ("Monday", [(900, 1015), (1300, 1500)])]),
        _schedule(["Etching", "Semantics"], [("Monday", [(900, 1015), (1300, 1500)]), ("Friday", [(900, 1015)])]),
        _schedule(["Etching", "Semantics"], [("Monday", [(900, 1015), (1300, 1530)]), ("Wednesday", [(900, 1015)])]),
        _schedule(["Etching", "Semantics"], [("Monday", [(900, 1015)]), ("Wednesday", [(900, 1015), (1300, 1500)])]),
        _schedule(["Etching", "Semantics"], BASE_WEEK[:1]),
    ],
    ids=["course-count", "credits", "titles", "day-order", "day-name", "slot-time", "slot-count", "day-count"],
)
def test_structural_differences_are_detected(other):
    assert not schedules_identical(_schedule(["Etching", "Semantics"], BASE_WEEK), other)
