from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.enums import Difficulty, ExerciseType, ProgressDirection, TrainingPhase

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
YOUTUBE_THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


class Exercise(BaseModel):
    id: str
    name: str
    type: ExerciseType
    sets: Annotated[int, Field(ge=1)]
    reps: str
    rest: str
    notes: str | None = None
    video_id: str | None = None
    model_config = ConfigDict(extra="ignore")

    @property
    def video_url(self) -> str | None:
        if not self.video_id:
            return None
        return YOUTUBE_WATCH_URL.format(video_id=self.video_id)

    @property
    def thumbnail_url(self) -> str | None:
        if not self.video_id:
            return None
        return YOUTUBE_THUMBNAIL_URL.format(video_id=self.video_id)

    @property
    def reps_targets(self) -> list[str]:
        return [part.strip() for part in self.reps.split(",") if part.strip()]

    def target_reps_for_set(self, set_number: int) -> str:
        """Target for a given 1-based set; list-style reps map one value per set."""
        targets = self.reps_targets
        if not targets:
            return self.reps
        index = min(max(set_number, 1), len(targets)) - 1
        return targets[index]


class WorkoutDay(BaseModel):
    id: int
    name: str
    description: str
    focus: str
    difficulty: Difficulty = Difficulty.intermediate
    duration: str
    exercises: list[Exercise] = Field(default_factory=list)
    color: str
    icon: str
    background_image: str | None = None
    model_config = ConfigDict(extra="ignore")

    def get_exercise(self, exercise_id: str) -> Exercise | None:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None


class WeeklyProgression(BaseModel):
    week_number: Annotated[int, Field(ge=1)]
    phase: TrainingPhase
    volume_multiplier: float
    intensity_target: int
    rpe_range: tuple[int, int]
    rest_multiplier: float
    description: str
    goals: list[str]
    model_config = ConfigDict(frozen=True)

    @property
    def primary_goal(self) -> str:
        return self.goals[0] if self.goals else ""


class ProgressionRules(BaseModel):
    weekly_load_increase: float
    volume_landmark: int
    deload_volume_reduction: int
    deload_intensity_reduction: int
    model_config = ConfigDict(frozen=True)


class ProgramWeek(BaseModel):
    week_number: int
    progression: WeeklyProgression
    workouts: list[WorkoutDay]


class ExerciseSet(BaseModel):
    set_number: Annotated[int, Field(ge=1)]
    reps: Annotated[int, Field(ge=0)] = 0
    weight: Annotated[float, Field(ge=0)] = 0.0
    rpe: Annotated[int | None, Field(ge=1, le=10)] = None
    completed: bool = False
    model_config = ConfigDict(extra="ignore")

    @field_validator("weight", mode="before")
    @classmethod
    def _parse_weight(cls, value: Any) -> float:
        if value is None or value == "":
            return 0.0
        return float(value)

    @field_validator("reps", mode="before")
    @classmethod
    def _parse_reps(cls, value: Any) -> int:
        if value is None or value == "":
            return 0
        return int(value)


class ExerciseLog(BaseModel):
    id: str | None = None
    workout_log_id: str
    exercise_id: str
    exercise_name: str
    sets: list[ExerciseSet] = Field(default_factory=list)
    notes: str | None = None

    @field_validator("id", "workout_log_id", mode="before")
    @classmethod
    def _normalize_ids(cls, value: Any) -> str | None:
        return _optional_str(value)


class WorkoutLog(BaseModel):
    id: str | None = None
    user_id: str
    workout_day_id: int
    week_number: int
    completed_at: datetime | None = None
    notes: str | None = None
    exercises: list[ExerciseLog] = Field(default_factory=list)
    model_config = ConfigDict(extra="ignore")

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _normalize_ids(cls, value: Any) -> str | None:
        return _optional_str(value)

    def get_exercise_log(self, exercise_id: str) -> ExerciseLog | None:
        for exercise_log in self.exercises:
            if exercise_log.exercise_id == exercise_id:
                return exercise_log
        return None


class PersonalRecord(BaseModel):
    id: str | None = None
    user_id: str
    exercise_id: str
    exercise_name: str
    weight: float
    reps: int
    achieved_at: datetime | None = None
    model_config = ConfigDict(extra="ignore")

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _normalize_ids(cls, value: Any) -> str | None:
        return _optional_str(value)

    @field_validator("weight", mode="before")
    @classmethod
    def _parse_weight(cls, value: Any) -> float:
        return float(value)


class PreviousWorkoutData(BaseModel):
    exercise_id: str
    sets: list[ExerciseSet] = Field(default_factory=list)
    completed_at: datetime | None = None

    def get_set(self, set_number: int) -> ExerciseSet | None:
        for exercise_set in self.sets:
            if exercise_set.set_number == set_number:
                return exercise_set
        return None


class BatchSaveResult(BaseModel):
    workout_log_id: str
    exercise_id: str
    saved_sets: list[ExerciseSet]
    best_set: ExerciseSet | None = None
    is_new_record: bool = False
    personal_record: PersonalRecord | None = None


class SetComparison(BaseModel):
    direction: ProgressDirection
    weight_delta: float = 0.0
    reps_delta: int = 0


class AuthUser(BaseModel):
    id: str
    email: str | None = None
    full_name: str | None = None
    model_config = ConfigDict(extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str:
        return str(value)


class AuthSession(BaseModel):
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str = "bearer"
    user: AuthUser
    model_config = ConfigDict(extra="ignore")


class GeneratedCredentials(BaseModel):
    username: str
    password: str
    name: str | None = None
    login_link: str


class UserProfile(BaseModel):
    id: str
    full_name: str | None = None
    email: str | None = None
    username: str | None = None
    current_week: int = 1
    program_start_date: datetime | None = None
    created_at: datetime | None = None
    model_config = ConfigDict(extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> str:
        return str(value)

    @field_validator("current_week", mode="before")
    @classmethod
    def _default_week(cls, value: Any) -> int:
        return int(value or 1)


class ProgressPoint(BaseModel):
    date: str
    volume: int
