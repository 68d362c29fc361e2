import math
import re

from core.enums import TrainingPhase
from core.exceptions import ProgressionNotFoundError
from core.schemas import ProgressionRules, WeeklyProgression

_REST_PART_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(min|m|sec|s)\b", re.IGNORECASE)

WEEKLY_PROGRESSIONS: tuple[WeeklyProgression, ...] = (
    # Weeks 1-2: anatomical adaptation
    WeeklyProgression(
        week_number=1,
        phase=TrainingPhase.ANATOMICAL_ADAPTATION,
        volume_multiplier=1.0,
        intensity_target=65,
        rpe_range=(6, 7),
        rest_multiplier=1.2,
        description="Build work capacity and perfect form",
        goals=[
            "Master movement patterns",
            "Prepare connective tissue",
            "Build training base",
            "Focus on technique over weight",
        ],
    ),
    WeeklyProgression(
        week_number=2,
        phase=TrainingPhase.ANATOMICAL_ADAPTATION,
        volume_multiplier=1.1,
        intensity_target=70,
        rpe_range=(6, 7),
        rest_multiplier=1.15,
        description="Continue building capacity with slight volume increase",
        goals=[
            "Refine technique",
            "Increase work capacity",
            "Prepare for hypertrophy phase",
            "Build movement confidence",
        ],
    ),
    # Weeks 3-4: hypertrophy
    WeeklyProgression(
        week_number=3,
        phase=TrainingPhase.HYPERTROPHY_FOCUS,
        volume_multiplier=1.25,
        intensity_target=75,
        rpe_range=(7, 8),
        rest_multiplier=0.9,
        description="Maximum volume for muscle growth",
        goals=[
            "Maximize time under tension",
            "Create muscle damage for growth",
            "Increase training volume",
            "Build muscle mass",
        ],
    ),
    WeeklyProgression(
        week_number=4,
        phase=TrainingPhase.HYPERTROPHY_FOCUS,
        volume_multiplier=1.3,
        intensity_target=78,
        rpe_range=(7, 8),
        rest_multiplier=0.85,
        description="Peak hypertrophy volume",
        goals=[
            "Push volume to maximum recoverable",
            "Maintain intensity",
            "Maximize metabolic stress",
            "Peak muscle building stimulus",
        ],
    ),
    # Weeks 5-6: strength & power
    WeeklyProgression(
        week_number=5,
        phase=TrainingPhase.STRENGTH_POWER,
        volume_multiplier=1.0,
        intensity_target=85,
        rpe_range=(8, 9),
        rest_multiplier=1.3,
        description="Build maximum strength with heavy loads",
        goals=[
            "Increase maximum strength",
            "Develop explosive power",
            "Lift heavier weights",
            "Improve neural adaptations",
        ],
    ),
    WeeklyProgression(
        week_number=6,
        phase=TrainingPhase.STRENGTH_POWER,
        volume_multiplier=0.95,
        intensity_target=88,
        rpe_range=(8, 9),
        rest_multiplier=1.4,
        description="Peak strength development",
        goals=[
            "Maximize strength gains",
            "Perfect explosive technique",
            "Prepare for deload",
            "Test new strength levels",
        ],
    ),
    # Week 7: deload
    WeeklyProgression(
        week_number=7,
        phase=TrainingPhase.DELOAD,
        volume_multiplier=0.5,
        intensity_target=65,
        rpe_range=(6, 7),
        rest_multiplier=1.2,
        description="Active recovery and supercompensation",
        goals=[
            "Allow full recovery",
            "Prevent overtraining",
            "Refine technique",
            "Prepare for peak week",
        ],
    ),
    # Week 8: peak
    WeeklyProgression(
        week_number=8,
        phase=TrainingPhase.PEAK_PERFORMANCE,
        volume_multiplier=0.85,
        intensity_target=92,
        rpe_range=(9, 10),
        rest_multiplier=1.5,
        description="Demonstrate maximum capabilities",
        goals=[
            "Set personal records",
            "Test maximum strength",
            "Showcase all improvements",
            "Peak performance output",
        ],
    ),
)

PROGRESSION_RULES = ProgressionRules(
    weekly_load_increase=2.5,
    volume_landmark=15,
    deload_volume_reduction=50,
    deload_intensity_reduction=30,
)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_week_progression(week_number: int) -> WeeklyProgression:
    for progression in WEEKLY_PROGRESSIONS:
        if progression.week_number == week_number:
            return progression
    raise ProgressionNotFoundError(week_number)


def calculate_adjusted_sets(base_sets: int, week_number: int) -> int:
    progression = get_week_progression(week_number)
    return max(1, round_half_up(base_sets * progression.volume_multiplier))


def calculate_adjusted_rest(base_rest_seconds: int, week_number: int) -> int:
    progression = get_week_progression(week_number)
    return round_half_up(base_rest_seconds * progression.rest_multiplier)


def parse_rest_seconds(rest: str) -> int | None:
    """Parse rest strings such as ``"3 min"``, ``"90s"`` or ``"2min 30s"`` into seconds."""
    matches = _REST_PART_RE.findall(str(rest or ""))
    if not matches:
        return None
    total = 0.0
    for amount, unit in matches:
        value = float(amount)
        total += value * 60 if unit.lower().startswith("m") else value
    return round_half_up(total)


def format_rest_time(seconds: int) -> str:
    if seconds < 60:
        return f"{seconds}s"
    minutes, remaining_seconds = divmod(seconds, 60)
    if remaining_seconds > 0:
        return f"{minutes}min {remaining_seconds}s"
    return f"{minutes}min"
