from core.program.progression_rules import (
    WEEKLY_PROGRESSIONS,
    calculate_adjusted_rest,
    calculate_adjusted_sets,
    format_rest_time,
    get_week_progression,
    parse_rest_seconds,
)
from core.program.workout_data import list_workout_days
from core.schemas import Exercise, ProgramWeek, WorkoutDay


def _adjust_notes(notes: str | None, goal: str) -> str | None:
    if not goal:
        return notes
    focus = f"Phase Focus: {goal}"
    return f"{notes} • {focus}" if notes else focus


def _adjust_rest(rest: str, week_number: int) -> str:
    seconds = parse_rest_seconds(rest)
    if seconds is None:
        return rest
    return format_rest_time(calculate_adjusted_rest(seconds, week_number))


def adjust_exercise(exercise: Exercise, week_number: int) -> Exercise:
    progression = get_week_progression(week_number)
    return exercise.model_copy(
        update={
            "sets": calculate_adjusted_sets(exercise.sets, week_number),
            "rest": _adjust_rest(exercise.rest, week_number),
            "notes": _adjust_notes(exercise.notes, progression.primary_goal),
        },
        deep=True,
    )


def apply_progression(workout: WorkoutDay, week_number: int) -> WorkoutDay:
    """Return a copy of ``workout`` scaled for ``week_number``.

    Set counts follow the week's volume multiplier (never below one set), rest
    periods follow the rest multiplier and every exercise note carries the
    week's primary goal. The input workout is left untouched.
    """
    progression = get_week_progression(week_number)
    exercises = [adjust_exercise(exercise, week_number) for exercise in workout.exercises]
    description = f"{workout.description} | {progression.phase} Phase (Week {week_number})"
    return workout.model_copy(update={"exercises": exercises, "description": description}, deep=True)


def program_overview() -> list[ProgramWeek]:
    base_workouts = list_workout_days()
    return [
        ProgramWeek(
            week_number=progression.week_number,
            progression=progression,
            workouts=[apply_progression(workout, progression.week_number) for workout in base_workouts],
        )
        for progression in WEEKLY_PROGRESSIONS
    ]
