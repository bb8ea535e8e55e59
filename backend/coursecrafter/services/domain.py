from __future__ import annotations

from coursecrafter.schemas.catalog import Course, SectionGroup
from coursecrafter.schemas.schedule import Schedule
from coursecrafter.services.conflicts import section_conflicts


def section_groups(course: Course) -> list[SectionGroup]:
    """Groups that need a selection, main group first, then secondaries in catalog order."""
    groups = [course.main_group, *course.secondary_groups]
    return [group for group in groups if group.is_required]


def domain_size(course: Course) -> int:
    return sum(len(group.all_sections or []) for group in section_groups(course))


def open_section_count(group: SectionGroup, schedule: Schedule) -> int:
    return sum(1 for section in group.all_sections or [] if not section_conflicts(section, schedule))


def open_domain_size(course: Course, schedule: Schedule) -> int:
    """Candidates across the course's groups that still fit around ``schedule``."""
    return sum(open_section_count(group, schedule) for group in section_groups(course))


def course_credit_total(course: Course) -> float:
    # Nothing is selected yet, so the first candidate of each group stands in.
    total = 0.0
    for group in section_groups(course):
        if group.all_sections:
            total += group.all_sections[0].credits
    return total
