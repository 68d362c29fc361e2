from typing import Any

from core.exceptions import WorkoutNotFoundError
from core.program.exercise_videos import exercise_video_id
from core.schemas import WorkoutDay


def _exercise(
    exercise_id: str, name: str, sets: int, reps: str, rest: str, exercise_type: str, notes: str
) -> dict[str, Any]:
    return {
        "id": exercise_id,
        "name": name,
        "sets": sets,
        "reps": reps,
        "rest": rest,
        "type": exercise_type,
        "notes": notes,
        "video_id": exercise_video_id(exercise_id),
    }


_WORKOUT_SPLIT: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Upper Body 1",
        "description": "Upper body push focus with chest and triceps emphasis",
        "focus": "Push",
        "duration": "75-90 min",
        "icon": "Dumbbell",
        "color": "from-blue-500 to-cyan-500",
        "exercises": [
            _exercise(
                "incline-barbell-bench-smith",
                "Incline Barbell Bench Press (Smith Machine)",
                3,
                "8",
                "3 min",
                "bodybuilding",
                "Compound movement - focus on controlled tempo and full range of motion",
            ),
            _exercise(
                "dips", "Dips", 3, "6", "3 min", "calisthenics",
                "Lean forward for chest emphasis, keep elbows at 45 degrees",
            ),
            _exercise(
                "standing-db-lateral-raises", "Standing Dumbbell Lateral Raises", 3, "12", "2 min", "bodybuilding",
                "Isolation - keep slight bend in elbows, raise to shoulder height",
            ),
            _exercise(
                "pike-push-ups", "Pike Push Ups", 3, "14", "2 min", "calisthenics",
                "Shoulder focus - keep hips high, head between arms",
            ),
            _exercise(
                "wide-grip-lat-pulldowns", "Wide Grip Lat Pulldowns", 3, "10", "3 min", "bodybuilding",
                "Pull to upper chest, squeeze shoulder blades together",
            ),
            _exercise(
                "barbell-bent-over-rows", "Barbell Bent Over Rows", 3, "10", "3 min", "bodybuilding",
                "Compound - maintain flat back, pull to lower chest",
            ),
            _exercise(
                "straight-bar-bicep-curls", "Straight Bar Bicep Curls", 3, "10", "2 min", "bodybuilding",
                "Keep elbows stationary, full range of motion",
            ),
            _exercise(
                "barbell-skull-crushers", "Barbell Skull Crushers", 4, "14", "2 min", "bodybuilding",
                "Isolation - lower to forehead, keep elbows tucked",
            ),
        ],
    },
    {
        "id": 2,
        "name": "Lower Body 1",
        "description": "Complete lower body development with quad, hamstring, and calf focus",
        "focus": "Legs",
        "duration": "80-95 min",
        "icon": "Activity",
        "color": "from-orange-500 to-red-500",
        "exercises": [
            _exercise(
                "high-bar-back-squats", "High Bar Back Squats", 3, "5", "3 min", "bodybuilding",
                "Heavy compound - go to parallel or below, keep chest up",
            ),
            _exercise(
                "front-squats-smith", "Front Squats (Smith Machine)", 3, "10", "3 min", "bodybuilding",
                "Quad emphasis - keep torso upright, elbows high",
            ),
            _exercise(
                "leg-press", "Leg Press", 3, "12", "3 min", "bodybuilding",
                "Full range of motion, feet shoulder-width apart",
            ),
            _exercise(
                "dumbbell-lunges", "Dumbbell Lunges", 3, "12", "2 min", "bodybuilding",
                "Per leg - step forward, knee at 90 degrees",
            ),
            _exercise(
                "prone-leg-curls", "Prone Leg Curls", 3, "14", "2 min", "bodybuilding",
                "Isolation - squeeze at top, control the negative",
            ),
            _exercise(
                "dumbbell-rdl", "Dumbbell Romanian Deadlifts", 3, "10", "3 min", "bodybuilding",
                "Hamstring focus - slight knee bend, push hips back",
            ),
            _exercise(
                "calf-raises-in", "Machine Standing Calf Raises (Toes In)", 4, "8, 10, 12, 14", "2 min",
                "bodybuilding", "Progressive reps - full stretch and contraction",
            ),
            _exercise(
                "calf-raises-out", "Machine Standing Calf Raises (Toes Out)", 4, "8, 10, 12, 14", "2 min",
                "bodybuilding", "Progressive reps - targets different calf muscles",
            ),
        ],
    },
    {
        "id": 3,
        "name": "Upper Body 2",
        "description": "Shoulder development with core work",
        "focus": "Shoulders",
        "duration": "70-85 min",
        "icon": "Zap",
        "color": "from-purple-500 to-pink-500",
        "exercises": [
            _exercise(
                "flat-barbell-bench", "Flat Barbell Bench Press", 3, "8", "3 min", "bodybuilding",
                "Compound - retract shoulder blades, bar to mid-chest",
            ),
            _exercise(
                "pull-ups", "Pull Ups", 3, "6", "3 min", "calisthenics",
                "Full range - dead hang to chin over bar",
            ),
            _exercise(
                "reverse-grip-bent-rows", "Reverse Grip Bent Over Rows", 3, "10", "3 min", "bodybuilding",
                "Underhand grip - targets lower lats and biceps",
            ),
            _exercise(
                "seated-lateral-raises", "Seated Lateral Raises", 3, "14", "2 min", "bodybuilding",
                "Isolation - prevents momentum, strict form",
            ),
            _exercise(
                "db-rear-delt-kickbacks", "Dumbbell Rear Delt Kickbacks", 3, "14", "2 min", "bodybuilding",
                "Bend forward, raise arms back and out",
            ),
            _exercise(
                "chin-ups", "Chin Ups", 3, "10", "3 min", "calisthenics",
                "Underhand grip - bicep and back emphasis",
            ),
            _exercise(
                "overhead-cable-triceps", "Overhead Cable Triceps Extensions", 4, "12", "2 min", "bodybuilding",
                "Keep elbows close to head, full extension",
            ),
            _exercise(
                "diamond-push-ups", "Diamond Push Ups", 4, "14", "2 min", "calisthenics",
                "Hands form diamond shape - tricep emphasis",
            ),
        ],
    },
    {
        "id": 4,
        "name": "Lower Body 2",
        "description": "Lower body power and strength development",
        "focus": "Legs",
        "duration": "80-95 min",
        "icon": "Flame",
        "color": "from-green-500 to-emerald-500",
        "exercises": [
            _exercise(
                "front-squats-smith-day4", "Front Squats (Smith Machine)", 3, "6", "3 min", "bodybuilding",
                "Heavy - maintain upright torso, core tight",
            ),
            _exercise(
                "machine-leg-extensions", "Machine Leg Extensions", 3, "10", "2 min", "bodybuilding",
                "Quad isolation - squeeze at top, control descent",
            ),
            _exercise(
                "jump-squats", "Jump Squats", 3, "12", "3 min", "calisthenics",
                "Explosive power - land softly, full squat depth",
            ),
            _exercise(
                "deadlifts", "Deadlifts", 3, "14", "3 min", "bodybuilding",
                "King of compounds - neutral spine, drive through heels",
            ),
            _exercise(
                "prone-leg-curls-day4", "Prone Leg Curls", 3, "14", "2 min", "bodybuilding",
                "Hamstring isolation - full contraction",
            ),
            _exercise(
                "calf-raises-in-day4", "Machine Standing Calf Raises (Toes In)", 4, "8, 10, 12, 14", "2 min",
                "bodybuilding", "Progressive reps - pause at top",
            ),
            _exercise(
                "calf-raises-out-day4", "Machine Standing Calf Raises (Toes Out)", 4, "8, 10, 12, 14", "2 min",
                "bodybuilding", "Progressive reps - full range of motion",
            ),
            _exercise(
                "adductor-machine", "Adductor Machine", 3, "12", "2 min", "bodybuilding",
                "Inner thigh - controlled movement, squeeze",
            ),
        ],
    },
    {
        "id": 5,
        "name": "Upper Body 3",
        "description": "Intense arm training with superset protocol",
        "focus": "Arms",
        "duration": "65-80 min",
        "icon": "Target",
        "color": "from-yellow-500 to-orange-500",
        "exercises": [
            _exercise(
                "incline-db-bench", "Incline Dumbbell Bench Press", 3, "6", "3 min", "bodybuilding",
                "Upper chest focus - 30-45 degree incline",
            ),
            _exercise(
                "push-ups", "Push Ups", 3, "10", "2 min", "calisthenics",
                "Bodyweight - chest to ground, full extension",
            ),
            _exercise(
                "pull-ups-day5", "Pull Ups", 3, "6", "3 min", "calisthenics",
                "Overhand grip - full range of motion",
            ),
            _exercise(
                "neutral-grip-pull-ups", "Neutral Grip Pull Ups", 3, "14", "3 min", "calisthenics",
                "Palms facing - targets brachialis and forearms",
            ),
            _exercise(
                "standing-db-lateral-raises-day5", "Standing Dumbbell Lateral Raises", 3, "14", "2 min",
                "bodybuilding", "Shoulder isolation - controlled tempo",
            ),
            _exercise(
                "wide-grip-ez-curls", "Wide Grip EZ Bar Curls", 3, "10", "2 min", "bodybuilding",
                "Bicep focus - no swinging, strict form",
            ),
            _exercise(
                "db-hammer-curls", "Dumbbell Hammer Curls", 3, "10", "2 min", "bodybuilding",
                "Neutral grip - targets brachialis",
            ),
            _exercise(
                "overhead-cable-triceps-day5", "Overhead Cable Triceps Extensions", 3, "14", "2 min",
                "bodybuilding", "Long head emphasis - full stretch and contraction",
            ),
        ],
    },
]

WORKOUT_SPLIT: tuple[WorkoutDay, ...] = tuple(WorkoutDay.model_validate(day) for day in _WORKOUT_SPLIT)


def list_workout_days() -> list[WorkoutDay]:
    return [day.model_copy(deep=True) for day in WORKOUT_SPLIT]


def get_workout_day(day_id: int) -> WorkoutDay:
    for day in WORKOUT_SPLIT:
        if day.id == day_id:
            return day.model_copy(deep=True)
    raise WorkoutNotFoundError(day_id)
