from typing import Any

from fastapi import APIRouter, Depends, Query

from core.containers import get_container
from core.exceptions import ExerciseNotFoundError
from core.program import (
    PROGRESSION_RULES,
    apply_progression,
    get_week_progression,
    get_workout_day,
    list_workout_days,
    program_overview,
)
from core.schemas import BatchSaveResult, ExerciseSet, SetComparison
from core.services.internal import ProfileService, WorkoutLogService
from core.workout_log import WorkoutLogRecorder, compare_to_previous
from webapp.dependencies import (
    current_user,
    get_draft_cache,
    get_profile_service,
    get_workout_log_service,
    optional_user,
    resolve,
)
from webapp.schemas import CompleteWorkoutRequest, DraftRequest, SaveSetsRequest, UserContext, WeekUpdateRequest

router = APIRouter(prefix="/workouts", tags=["workouts"])


async def _current_week(context: UserContext | None) -> int:
    if context is None:
        return 1
    profile_service: ProfileService = await resolve(get_container().profile_service, access_token=context.access_token)
    profile = await profile_service.get_profile(context.user.id)
    return profile.current_week if profile else 1


def _comparisons(recorder: WorkoutLogRecorder) -> dict[str, list[SetComparison]]:
    if recorder.workout_log is None:
        return {}
    comparisons: dict[str, list[SetComparison]] = {}
    for exercise_log in recorder.workout_log.exercises:
        previous = recorder.previous.get(exercise_log.exercise_id)
        comparisons[exercise_log.exercise_id] = [
            compare_to_previous(exercise_set, previous.get_set(exercise_set.set_number) if previous else None)
            for exercise_set in exercise_log.sets
        ]
    return comparisons


@router.get("")
async def dashboard(
    week: int | None = Query(default=None),
    context: UserContext | None = Depends(optional_user),
) -> dict[str, Any]:
    week_number = week if week is not None else await _current_week(context)
    progression = get_week_progression(week_number)
    return {
        "week": week_number,
        "progression": progression.model_dump(mode="json"),
        "rules": PROGRESSION_RULES.model_dump(),
        "workouts": [
            apply_progression(workout, week_number).model_dump(mode="json") for workout in list_workout_days()
        ],
    }


@router.get("/weeks")
async def weeks() -> list[dict[str, Any]]:
    return [
        {
            "week_number": program_week.week_number,
            "phase": program_week.progression.phase,
            "description": program_week.progression.description,
            "intensity_target": program_week.progression.intensity_target,
            "rpe_range": program_week.progression.rpe_range,
        }
        for program_week in program_overview()
    ]


@router.put("/week")
async def update_week(
    data: WeekUpdateRequest,
    context: UserContext = Depends(current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> dict[str, Any]:
    profile = await profile_service.set_current_week(context.user.id, data.week)
    return {
        "current_week": data.week,
        "profile": profile.model_dump(mode="json") if profile else None,
    }


@router.get("/{day_id}")
async def workout_detail(
    day_id: int,
    week: int | None = Query(default=None),
    context: UserContext | None = Depends(optional_user),
    draft_cache: Any = Depends(get_draft_cache),
) -> dict[str, Any]:
    base = get_workout_day(day_id)
    week_number = week if week is not None else await _current_week(context)
    progression = get_week_progression(week_number)
    payload: dict[str, Any] = {
        "week": week_number,
        "progression": progression.model_dump(mode="json"),
        "workout": apply_progression(base, week_number).model_dump(mode="json"),
    }
    if context is None:
        return payload

    service: WorkoutLogService = await resolve(
        get_container().workout_log_service, access_token=context.access_token
    )
    recorder = WorkoutLogRecorder(service, context.user.id, day_id, week_number)
    workout_log = await recorder.load()
    drafts = await draft_cache.get_drafts(context.user.id, day_id, week_number)
    payload.update(
        {
            "log": workout_log.model_dump(mode="json") if workout_log else None,
            "previous": {key: value.model_dump(mode="json") for key, value in recorder.previous.items()},
            "personal_records": {
                key: value.model_dump(mode="json") for key, value in recorder.personal_records.items()
            },
            "comparisons": {
                key: [item.model_dump(mode="json") for item in value] for key, value in _comparisons(recorder).items()
            },
            "drafts": {key: [item.model_dump() for item in value] for key, value in drafts.items()},
        }
    )
    return payload


def _exercise_name(day_id: int, exercise_id: str) -> str:
    exercise = get_workout_day(day_id).get_exercise(exercise_id)
    if exercise is None:
        raise ExerciseNotFoundError(day_id, exercise_id)
    return exercise.name


@router.put("/{day_id}/weeks/{week}/drafts/{exercise_id}")
async def store_drafts(
    day_id: int,
    week: int,
    exercise_id: str,
    data: DraftRequest,
    context: UserContext = Depends(current_user),
    draft_cache: Any = Depends(get_draft_cache),
) -> dict[str, list[ExerciseSet]]:
    _exercise_name(day_id, exercise_id)
    get_week_progression(week)
    await draft_cache.save_draft(context.user.id, day_id, week, exercise_id, data.sets)
    return await draft_cache.get_drafts(context.user.id, day_id, week, exercise_id)


@router.post("/{day_id}/weeks/{week}/exercises/{exercise_id}/sets", response_model=BatchSaveResult)
async def save_sets(
    day_id: int,
    week: int,
    exercise_id: str,
    data: SaveSetsRequest,
    context: UserContext = Depends(current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
    draft_cache: Any = Depends(get_draft_cache),
) -> BatchSaveResult:
    exercise_name = _exercise_name(day_id, exercise_id)
    get_week_progression(week)
    recorder = WorkoutLogRecorder(service, context.user.id, day_id, week)
    await recorder.load()
    result = await recorder.save_exercise_batch(exercise_id, exercise_name, data.sets)
    await draft_cache.clear_drafts(context.user.id, day_id, week, exercise_id)
    return result


@router.post("/{day_id}/weeks/{week}/complete")
async def complete(
    day_id: int,
    week: int,
    data: CompleteWorkoutRequest,
    context: UserContext = Depends(current_user),
    service: WorkoutLogService = Depends(get_workout_log_service),
    draft_cache: Any = Depends(get_draft_cache),
) -> dict[str, Any]:
    get_workout_day(day_id)
    get_week_progression(week)
    recorder = WorkoutLogRecorder(service, context.user.id, day_id, week)
    completed = await recorder.complete_workout(data.notes)
    if completed:
        await draft_cache.clear_drafts(context.user.id, day_id, week)
    return {
        "completed": completed,
        "log": recorder.workout_log.model_dump(mode="json") if recorder.workout_log else None,
    }
