import logging

from fastapi import APIRouter, Depends, Query

from coursecrafter.core.config import Settings, get_settings
from coursecrafter.core.exceptions import ScheduleGenerationError
from coursecrafter.schemas.cart import Cart
from coursecrafter.schemas.schedule import GenerateSchedulesResponse, ScheduleErrorKind
from coursecrafter.services.schedule_generator import ScheduleGenerator

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/schedules", response_model=GenerateSchedulesResponse)
def generate_schedules(
    cart: Cart,
    seed: int | None = Query(default=None, ge=0),
    settings: Settings = Depends(get_settings),
) -> GenerateSchedulesResponse:
    result = ScheduleGenerator(settings=settings, random_seed=seed).generate(cart)
    if not result.ok:
        details: dict = {}
        if result.error is ScheduleErrorKind.required_conflict:
            details["unresolvablePairs"] = [list(pair) for pair in result.unresolvable_pairs]
            details["unschedulableCourses"] = result.unschedulable_courses
        logger.info("SCHEDULE REQUEST REJECTED | kind=%s", result.error.value)
        raise ScheduleGenerationError(kind=result.error.value, message=result.message, details=details)

    return GenerateSchedulesResponse(
        schedules=result.schedules,
        count=len(result.schedules),
        trials=result.trials,
    )
