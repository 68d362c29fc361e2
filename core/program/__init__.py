from core.program.exercise_videos import EXERCISE_VIDEOS, exercise_video_id
from core.program.progression import adjust_exercise, apply_progression, program_overview
from core.program.progression_rules import (
    PROGRESSION_RULES,
    WEEKLY_PROGRESSIONS,
    calculate_adjusted_rest,
    calculate_adjusted_sets,
    format_rest_time,
    get_week_progression,
    parse_rest_seconds,
)
from core.program.workout_data import WORKOUT_SPLIT, get_workout_day, list_workout_days

__all__ = [
    "EXERCISE_VIDEOS",
    "PROGRESSION_RULES",
    "WEEKLY_PROGRESSIONS",
    "WORKOUT_SPLIT",
    "adjust_exercise",
    "apply_progression",
    "calculate_adjusted_rest",
    "calculate_adjusted_sets",
    "exercise_video_id",
    "format_rest_time",
    "get_week_progression",
    "get_workout_day",
    "list_workout_days",
    "parse_rest_seconds",
    "program_overview",
]
