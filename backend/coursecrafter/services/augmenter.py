from __future__ import annotations

import logging
import random

from coursecrafter.schemas.cart import Cart
from coursecrafter.schemas.catalog import Course
from coursecrafter.services.domain import course_credit_total
from coursecrafter.services.required_solver import RequiredCourseSolver

logger = logging.getLogger(__name__)


class RandomAugmenter:
    """Grows a course list from the cart's optional pools toward the credit midpoint.

    Each draw removes a course from ``choose_any`` or a whole group from
    ``choose_one`` (keeping one random member), then re-validates the grown list
    with the solver. A draw that cannot be placed fails the whole trial.
    """

    def __init__(
        self,
        solver: RequiredCourseSolver,
        rng: random.Random | None = None,
        *,
        enforce_min_credits: bool = False,
    ) -> None:
        self.solver = solver
        self.random = rng or random.Random()
        self.enforce_min_credits = enforce_min_credits

    def grow(self, courses: list[Course], credit_total: float, cart: Cart) -> list[Course] | None:
        working = list(courses)
        choose_any = list(cart.choose_any)
        choose_one = [list(group) for group in cart.choose_one]
        credit_reqs = cart.credit_reqs

        while True:
            if credit_total >= credit_reqs.midpoint:
                return working
            if not choose_any and not choose_one:
                if self.enforce_min_credits and credit_total < credit_reqs.min:
                    logger.debug(
                        "AUGMENT BELOW MIN | credits=%s | min=%s",
                        credit_total,
                        credit_reqs.min,
                    )
                    return None
                return working

            course = self._draw(choose_any, choose_one)
            if any(existing.id == course.id for existing in working):
                continue

            working.append(course)
            if self.solver.solve(working) is None:
                logger.debug("AUGMENT REJECTED | course_id=%s | courses=%s", course.id, len(working))
                return None
            credit_total += course_credit_total(course)

    def _draw(self, choose_any: list[Course], choose_one: list[list[Course]]) -> Course:
        use_any = bool(choose_any)
        if choose_any and choose_one:
            use_any = self.random.randrange(2) == 0

        if use_any:
            return choose_any.pop(self.random.randrange(len(choose_any)))

        group = choose_one.pop(self.random.randrange(len(choose_one)))
        return group[self.random.randrange(len(group))]
