from enum import Enum


class ExerciseType(str, Enum):
    calisthenics = "calisthenics"
    bodybuilding = "bodybuilding"

    def __str__(self) -> str:
        return self.value


class Difficulty(str, Enum):
    intermediate = "Intermediate"
    advanced = "Advanced"

    def __str__(self) -> str:
        return self.value


class TrainingPhase(str, Enum):
    ANATOMICAL_ADAPTATION = "Anatomical Adaptation"
    HYPERTROPHY_FOCUS = "Hypertrophy Focus"
    STRENGTH_POWER = "Strength & Power"
    DELOAD = "Deload"
    PEAK_PERFORMANCE = "Peak Performance"

    def __str__(self) -> str:
        return self.value


class ProgressDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    SAME = "same"

    def __str__(self) -> str:
        return self.value


class ShoppingCategory(str, Enum):
    PRODUCE = "Produce"
    MEAT_DAIRY = "Meat & Dairy"
    PANTRY = "Pantry"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


class FiberLevel(str, Enum):
    POOR = "Poor"
    MODERATE = "Moderate"
    GOOD = "Good"
    EXCESSIVE = "Excessive"

    def __str__(self) -> str:
        return self.value
