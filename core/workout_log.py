from typing import Any, Iterable, Protocol

from loguru import logger

from core.enums import ProgressDirection
from core.exceptions import BatchSaveError, UserServiceError
from core.schemas import (
    BatchSaveResult,
    ExerciseLog,
    ExerciseSet,
    PersonalRecord,
    PreviousWorkoutData,
    SetComparison,
    WorkoutLog,
)


class WorkoutLogStore(Protocol):
    async def get_workout_log(self, user_id: str, day_id: int, week_number: int) -> WorkoutLog | None: ...

    async def create_workout_log(self, user_id: str, day_id: int, week_number: int) -> WorkoutLog: ...

    async def get_exercise_rows(self, workout_log_id: str) -> list[dict[str, Any]]: ...

    async def find_set(self, workout_log_id: str, exercise_id: str, set_number: int) -> str | None: ...

    async def update_set(self, row_id: str, exercise_set: ExerciseSet) -> None: ...

    async def insert_set(
        self, workout_log_id: str, exercise_id: str, exercise_name: str, exercise_set: ExerciseSet
    ) -> None: ...

    async def get_previous_workout(
        self, user_id: str, day_id: int, week_number: int
    ) -> dict[str, PreviousWorkoutData]: ...

    async def get_personal_records(self, user_id: str) -> dict[str, PersonalRecord]: ...

    async def upsert_personal_record(self, record: PersonalRecord) -> PersonalRecord: ...

    async def complete_workout(self, workout_log_id: str, notes: str | None = None) -> WorkoutLog | None: ...


def select_best_set(sets: Iterable[ExerciseSet]) -> ExerciseSet | None:
    """Heaviest set with at least one rep; reps break ties, the earlier set wins a full tie."""
    best: ExerciseSet | None = None
    for exercise_set in sets:
        if exercise_set.weight <= 0 or exercise_set.reps <= 0:
            continue
        if best is None or (exercise_set.weight, exercise_set.reps) > (best.weight, best.reps):
            best = exercise_set
    return best


def is_new_personal_record(current: PersonalRecord | None, weight: float, reps: int) -> bool:
    if current is None:
        return True
    if weight > current.weight:
        return True
    return weight == current.weight and reps > current.reps


def collapse_sets(sets: Iterable[ExerciseSet]) -> list[ExerciseSet]:
    by_number: dict[int, ExerciseSet] = {}
    for exercise_set in sets:
        by_number[exercise_set.set_number] = exercise_set
    return [by_number[number] for number in sorted(by_number)]


def group_exercise_rows(rows: Iterable[dict[str, Any]]) -> list[ExerciseLog]:
    grouped: dict[str, ExerciseLog] = {}
    for row in rows:
        exercise_id = str(row["exercise_id"])
        exercise_log = grouped.get(exercise_id)
        if exercise_log is None:
            exercise_log = ExerciseLog(
                id=row.get("id"),
                workout_log_id=row["workout_log_id"],
                exercise_id=exercise_id,
                exercise_name=row.get("exercise_name") or exercise_id,
            )
            grouped[exercise_id] = exercise_log
        exercise_log.sets.append(ExerciseSet.model_validate(row))

    for exercise_log in grouped.values():
        exercise_log.sets = collapse_sets(exercise_log.sets)
    return list(grouped.values())


def compare_to_previous(current: ExerciseSet, previous: ExerciseSet | None) -> SetComparison:
    if previous is None:
        return SetComparison(direction=ProgressDirection.SAME)

    weight_delta = current.weight - previous.weight
    reps_delta = current.reps - previous.reps
    if weight_delta > 0:
        direction = ProgressDirection.UP
    elif weight_delta < 0:
        direction = ProgressDirection.DOWN
    elif reps_delta > 0:
        direction = ProgressDirection.UP
    elif reps_delta < 0:
        direction = ProgressDirection.DOWN
    else:
        direction = ProgressDirection.SAME
    return SetComparison(direction=direction, weight_delta=weight_delta, reps_delta=reps_delta)


class WorkoutLogRecorder:
    """Session state of one workout day/week for a single user.

    Mirrors what the workout screen keeps in memory: the current log (created
    on the first save), the previous week's sets and the personal records.
    """

    def __init__(self, service: WorkoutLogStore, user_id: str, day_id: int, week_number: int) -> None:
        self.service = service
        self.user_id = user_id
        self.day_id = day_id
        self.week_number = week_number
        self.workout_log: WorkoutLog | None = None
        self.previous: dict[str, PreviousWorkoutData] = {}
        self.personal_records: dict[str, PersonalRecord] = {}

    async def load(self) -> WorkoutLog | None:
        self.workout_log = await self.service.get_workout_log(self.user_id, self.day_id, self.week_number)
        if self.workout_log is not None and self.workout_log.id:
            rows = await self.service.get_exercise_rows(self.workout_log.id)
            self.workout_log.exercises = group_exercise_rows(rows)
        self.previous = await self.service.get_previous_workout(self.user_id, self.day_id, self.week_number)
        self.personal_records = await self.service.get_personal_records(self.user_id)
        return self.workout_log

    async def _ensure_workout_log(self) -> str:
        if self.workout_log is None:
            self.workout_log = await self.service.get_workout_log(self.user_id, self.day_id, self.week_number)
        if self.workout_log is None:
            self.workout_log = await self.service.create_workout_log(self.user_id, self.day_id, self.week_number)
        if not self.workout_log.id:
            raise ValueError("Workout log has no id")
        return self.workout_log.id

    async def save_exercise_batch(
        self, exercise_id: str, exercise_name: str, sets: Iterable[ExerciseSet]
    ) -> BatchSaveResult:
        ordered = collapse_sets(sets)
        saved: list[ExerciseSet] = []
        try:
            workout_log_id = await self._ensure_workout_log()
            for exercise_set in ordered:
                row_id = await self.service.find_set(workout_log_id, exercise_id, exercise_set.set_number)
                if row_id is not None:
                    await self.service.update_set(row_id, exercise_set)
                else:
                    await self.service.insert_set(workout_log_id, exercise_id, exercise_name, exercise_set)
                saved.append(exercise_set)
        except Exception as e:
            saved_numbers = [exercise_set.set_number for exercise_set in saved]
            logger.error(
                f"Batch save failed for user_id={self.user_id} exercise={exercise_id} "
                f"after sets {saved_numbers}: {e}"
            )
            raise BatchSaveError(exercise_id, saved_numbers, e) from e

        self._remember_sets(workout_log_id, exercise_id, exercise_name, saved)
        result = BatchSaveResult(workout_log_id=workout_log_id, exercise_id=exercise_id, saved_sets=saved)

        best = select_best_set(saved)
        result.best_set = best
        if best is None:
            return result

        current = self.personal_records.get(exercise_id)
        if not is_new_personal_record(current, best.weight, best.reps):
            return result

        try:
            record = await self.service.upsert_personal_record(
                PersonalRecord(
                    user_id=self.user_id,
                    exercise_id=exercise_id,
                    exercise_name=exercise_name,
                    weight=best.weight,
                    reps=best.reps,
                )
            )
        except UserServiceError as e:
            # sets are stored; a stale record is picked up again on the next save
            logger.error(f"Personal record update failed for user_id={self.user_id} exercise={exercise_id}: {e}")
            return result
        self.personal_records[exercise_id] = record
        logger.info(f"New personal record for user_id={self.user_id} exercise={exercise_id}: {best.weight}x{best.reps}")
        result.is_new_record = True
        result.personal_record = record
        return result

    async def save_exercise_set(
        self, exercise_id: str, exercise_name: str, exercise_set: ExerciseSet
    ) -> BatchSaveResult:
        return await self.save_exercise_batch(exercise_id, exercise_name, [exercise_set])

    async def complete_workout(self, notes: str | None = None) -> bool:
        if self.workout_log is None:
            self.workout_log = await self.service.get_workout_log(self.user_id, self.day_id, self.week_number)
        if self.workout_log is None or not self.workout_log.id:
            logger.info(f"Nothing to complete for user_id={self.user_id} day={self.day_id} week={self.week_number}")
            return False
        updated = await self.service.complete_workout(self.workout_log.id, notes)
        if updated is not None:
            updated.exercises = self.workout_log.exercises
            self.workout_log = updated
        return True

    def _remember_sets(
        self, workout_log_id: str, exercise_id: str, exercise_name: str, sets: list[ExerciseSet]
    ) -> None:
        if self.workout_log is None:
            return
        exercise_log = self.workout_log.get_exercise_log(exercise_id)
        if exercise_log is None:
            exercise_log = ExerciseLog(
                workout_log_id=workout_log_id, exercise_id=exercise_id, exercise_name=exercise_name
            )
            self.workout_log.exercises.append(exercise_log)
        exercise_log.sets = collapse_sets([*exercise_log.sets, *sets])
