from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from time import perf_counter

from coursecrafter.core.config import Settings, get_settings
from coursecrafter.schemas.cart import Cart
from coursecrafter.schemas.schedule import Schedule, ScheduleErrorKind
from coursecrafter.services.augmenter import RandomAugmenter
from coursecrafter.services.diagnostics import conflicting_required_pairs, unschedulable_courses
from coursecrafter.services.domain import course_credit_total
from coursecrafter.services.equality import schedules_identical
from coursecrafter.services.required_solver import RequiredCourseSolver

logger = logging.getLogger(__name__)


@dataclass
class ScheduleGenerationResult:
    schedules: list[Schedule] = field(default_factory=list)
    error: ScheduleErrorKind | None = None
    trials: int = 0
    unresolvable_pairs: list[tuple[str, str]] = field(default_factory=list)
    unschedulable_courses: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return None if self.error is None else self.error.message


class ScheduleGenerator:
    """Builds up to ``schedule_max_results`` distinct schedules for a cart.

    The required courses are solved once to prove they fit. Each trial then
    samples optional courses on top of them, re-solves the grown list and keeps
    the result unless an identical schedule was already collected.
    """

    def __init__(
        self,
        *,
        settings: Settings,
        random_seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings
        seed = settings.schedule_random_seed if random_seed is None else random_seed
        self.random = rng or random.Random(seed)
        self.solver = RequiredCourseSolver(self.random)
        self.augmenter = RandomAugmenter(
            self.solver,
            self.random,
            enforce_min_credits=settings.schedule_enforce_min_credits,
        )

    def generate(self, cart: Cart) -> ScheduleGenerationResult:
        started = perf_counter()
        logger.info(
            "SCHEDULE GENERATION START | required=%s | choose_any=%s | choose_one=%s | credits=%s-%s",
            len(cart.required),
            len(cart.choose_any),
            len(cart.choose_one),
            cart.credit_reqs.min,
            cart.credit_reqs.max,
        )

        if cart.is_empty():
            return self._fail(ScheduleErrorKind.empty_cart)

        required_credits = sum(course_credit_total(course) for course in cart.required)
        if required_credits > cart.credit_reqs.max:
            return self._fail(ScheduleErrorKind.credit_limit_exceeded, credits=required_credits)

        if self.solver.solve(cart.required) is None:
            result = self._fail(ScheduleErrorKind.required_conflict)
            result.unschedulable_courses = unschedulable_courses(cart.required)
            result.unresolvable_pairs = conflicting_required_pairs(cart.required, self.solver)
            return result

        result = ScheduleGenerationResult()
        rejected = 0
        duplicates = 0
        while result.trials < self.settings.schedule_max_trials and len(result.schedules) < self.settings.schedule_max_results:
            result.trials += 1
            courses = self.augmenter.grow(cart.required, required_credits, cart)
            if courses is None:
                rejected += 1
                logger.debug(
                    "SCHEDULE TRIAL REJECTED | trial=%s | reason=%s",
                    result.trials,
                    ScheduleErrorKind.no_valid_augmentation.message,
                )
                continue

            schedule = self.solver.solve(courses)
            if schedule is None:
                rejected += 1
                continue

            if any(schedules_identical(existing, schedule) for existing in result.schedules):
                duplicates += 1
                continue
            result.schedules.append(schedule)

        logger.info(
            "SCHEDULE GENERATION COMPLETE | schedules=%s | trials=%s | rejected=%s | duplicates=%s | runtime_ms=%s",
            len(result.schedules),
            result.trials,
            rejected,
            duplicates,
            int((perf_counter() - started) * 1000),
        )
        return result

    @staticmethod
    def _fail(kind: ScheduleErrorKind, **context) -> ScheduleGenerationResult:
        logger.warning("SCHEDULE GENERATION FAILED | kind=%s | context=%s", kind.value, context)
        return ScheduleGenerationResult(error=kind)


def generate_schedules(
    cart: Cart,
    *,
    settings: Settings | None = None,
    random_seed: int | None = None,
) -> ScheduleGenerationResult:
    if settings is None:
        settings = get_settings()
    return ScheduleGenerator(settings=settings, random_seed=random_seed).generate(cart)
