from pydantic import BaseModel, ConfigDict, Field

from core.schemas import AuthUser, ExerciseSet


class SignupRequest(BaseModel):
    full_name: str = ""
    email: str = ""


class LoginRequest(BaseModel):
    email: str
    password: str


class WeekUpdateRequest(BaseModel):
    week: int


class DraftRequest(BaseModel):
    sets: list[ExerciseSet] = Field(default_factory=list)


class SaveSetsRequest(BaseModel):
    sets: list[ExerciseSet] = Field(min_length=1)


class CompleteWorkoutRequest(BaseModel):
    notes: str | None = None


class MealSelection(BaseModel):
    """Meal names currently shown for a plan; empty means the plan's defaults."""

    meals: list[str] | None = None


class SwapRequest(MealSelection):
    index: int
    replacement: str


class UserContext(BaseModel):
    user: AuthUser
    access_token: str
    model_config = ConfigDict(frozen=True)
