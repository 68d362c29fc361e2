class UserServiceError(Exception):
    def __init__(self, message: str, code: int = 500, details: str = ""):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        return f"Error {self.code}: {self.message} - {self.details}"


class AuthError(UserServiceError):
    def __init__(self, message: str, code: int = 400, details: str = ""):
        super().__init__(message, code=code, details=details)


class NotAuthenticatedError(Exception):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class FormValidationError(Exception):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class ProgressionNotFoundError(Exception):
    def __init__(self, week_number: int):
        super().__init__(f"No progression data found for week {week_number}")
        self.week_number = week_number


class WorkoutNotFoundError(Exception):
    def __init__(self, day_id: int):
        super().__init__(f"Workout day {day_id} does not exist")
        self.day_id = day_id


class ExerciseNotFoundError(Exception):
    def __init__(self, day_id: int, exercise_id: str):
        super().__init__(f"Exercise {exercise_id} is not part of workout day {day_id}")
        self.day_id = day_id
        self.exercise_id = exercise_id


class MealPlanNotFoundError(Exception):
    def __init__(self, calories: int):
        super().__init__(f"No meal plan found for {calories} kcal")
        self.calories = calories


class MealSwapError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class BatchSaveError(UserServiceError):
    def __init__(self, exercise_id: str, saved_set_numbers: list[int], cause: Exception):
        super().__init__(
            f"Failed to save sets for {exercise_id}",
            code=502,
            details=f"saved={saved_set_numbers} cause={cause}",
        )
        self.exercise_id = exercise_id
        self.saved_set_numbers = saved_set_numbers
        self.cause = cause


class NoProgressDataError(Exception):
    def __init__(self, user_id: str):
        super().__init__(f"No logged sets to chart for user {user_id}")
        self.user_id = user_id
