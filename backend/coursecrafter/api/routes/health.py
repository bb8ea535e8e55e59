from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from coursecrafter.core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/health/live")
def health_live(settings: Settings = Depends(get_settings)) -> dict:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "limits": {
            "max_trials": settings.schedule_max_trials,
            "max_results": settings.schedule_max_results,
        },
    }
