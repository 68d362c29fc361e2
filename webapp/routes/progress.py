import asyncio
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from core.progress import personal_record_summary, render_progress_chart, volume_by_date
from core.services.internal import WorkoutLogService
from webapp.dependencies import current_user, get_workout_log_service
from webapp.schemas import UserContext

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("")
async def progress(
    context: UserContext = Depends(current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
) -> dict[str, Any]:
    rows = await service.get_user_exercise_rows(context.user.id)
    records = await service.get_personal_records(context.user.id)
    return {
        "series": [point.model_dump() for point in volume_by_date(rows)],
        "personal_records": [record.model_dump(mode="json") for record in personal_record_summary(records.values())],
    }


@router.get("/chart.png")
async def progress_chart(
    context: UserContext = Depends(current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
) -> Response:
    rows = await service.get_user_exercise_rows(context.user.id)
    image = await asyncio.to_thread(render_progress_chart, volume_by_date(rows), user_id=context.user.id)
    return Response(content=image, media_type="image/png")
