from __future__ import annotations

from itertools import combinations

from coursecrafter.schemas.catalog import Course
from coursecrafter.services.domain import domain_size
from coursecrafter.services.required_solver import RequiredCourseSolver


def unschedulable_courses(courses: list[Course]) -> list[str]:
    return [course.title for course in courses if domain_size(course) == 0]


def conflicting_required_pairs(courses: list[Course], solver: RequiredCourseSolver) -> list[tuple[str, str]]:
    # Pairs are reported in cart order; courses with no candidates are left to unschedulable_courses.
    candidates = [course for course in courses if domain_size(course) > 0]
    pairs: list[tuple[str, str]] = []
    for first, second in combinations(candidates, 2):
        if solver.solve([first, second]) is None:
            pairs.append((first.title, second.title))
    return pairs
