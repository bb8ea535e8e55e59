from __future__ import annotations

import logging
import random

from coursecrafter.schemas.catalog import Course, Section, SectionGroup
from coursecrafter.schemas.schedule import Schedule
from coursecrafter.services.conflicts import section_conflicts
from coursecrafter.services.domain import open_domain_size, open_section_count, section_groups
from coursecrafter.services.schedule_state import add_section, remove_section, selected_credit_total

logger = logging.getLogger(__name__)


class RequiredCourseSolver:
    """Backtracking search that gives every required group of every course one section.

    Courses are taken by fewest sections still fitting the schedule. After each
    placement the branch is abandoned as soon as a pending group has no
    section left that fits. Candidates within a group are tried in a shuffled
    order so repeated calls explore different assignments. The first complete
    assignment is returned; ``None`` means the courses cannot all be placed
    without a time overlap.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.random = rng or random.Random()

    def solve(self, courses: list[Course], schedule: Schedule | None = None) -> Schedule | None:
        working = schedule.model_copy(deep=True) if schedule is not None else Schedule()
        base_credits = working.credit_total
        placed_from = len(working.courses)
        remaining = [self._fresh_copy(course) for course in courses]
        if self._place_remaining(working, remaining):
            # The running total drifts under repeated float add/subtract while backtracking.
            working.credit_total = base_credits + selected_credit_total(working.courses[placed_from:])
            return working
        logger.debug("REQUIRED SOLVE FAILED | courses=%s", len(courses))
        return None

    @staticmethod
    def _fresh_copy(course: Course) -> Course:
        copied = course.model_copy(deep=True)
        for group in [copied.main_group, *copied.secondary_groups]:
            group.selected_section = None
        return copied

    def _shuffled(self, sections: list[Section]) -> list[Section]:
        candidates = list(sections)
        self.random.shuffle(candidates)
        return candidates

    @staticmethod
    def _has_empty_group(schedule: Schedule, groups: list[SectionGroup]) -> bool:
        return any(open_section_count(group, schedule) == 0 for group in groups)

    def _place_remaining(self, schedule: Schedule, remaining: list[Course]) -> bool:
        if not remaining:
            return True

        sizes = [open_domain_size(course, schedule) for course in remaining]
        index = min(range(len(remaining)), key=sizes.__getitem__)
        course = remaining[index]
        if sizes[index] == 0:
            return False

        rest = remaining[:index] + remaining[index + 1:]
        return self._assign_groups(schedule, course, section_groups(course), 0, rest)

    def _assign_groups(
        self,
        schedule: Schedule,
        course: Course,
        groups: list[SectionGroup],
        position: int,
        rest: list[Course],
    ) -> bool:
        if position == len(groups):
            schedule.courses.append(course)
            if self._place_remaining(schedule, rest):
                return True
            schedule.courses.pop()
            return False

        group = groups[position]
        pending = groups[position + 1:] + [
            pending_group for pending_course in rest for pending_group in section_groups(pending_course)
        ]
        for section in self._shuffled(group.all_sections or []):
            if section_conflicts(section, schedule):
                continue
            group.selected_section = section
            add_section(section, schedule)
            if not self._has_empty_group(schedule, pending) and self._assign_groups(
                schedule, course, groups, position + 1, rest
            ):
                return True
            remove_section(section, schedule)
            group.selected_section = None
        return False
