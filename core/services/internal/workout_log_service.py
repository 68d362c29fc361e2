from datetime import datetime, timezone
from typing import Any

from loguru import logger

from core.schemas import ExerciseSet, PersonalRecord, PreviousWorkoutData, WorkoutLog
from core.services.internal.table_client import TableClient, eq, in_, lt, order_by

WORKOUT_LOGS_TABLE = "workout_logs"
EXERCISE_LOGS_TABLE = "exercise_logs"
PERSONAL_RECORDS_TABLE = "personal_records"


def _set_payload(exercise_set: ExerciseSet) -> dict[str, Any]:
    return {
        "reps": exercise_set.reps,
        "weight": exercise_set.weight,
        "rpe": exercise_set.rpe,
        "completed": exercise_set.completed,
    }


class WorkoutLogService(TableClient):
    """Reads and writes the user's workout history tables.

    Every call runs with the access token the service was built with, so the
    backend's row-level policies scope the rows to that user.
    """

    async def get_workout_log(self, user_id: str, day_id: int, week_number: int) -> WorkoutLog | None:
        row = await self.select_one(
            WORKOUT_LOGS_TABLE,
            filters={
                "user_id": eq(user_id),
                "workout_day_id": eq(day_id),
                "week_number": eq(week_number),
            },
            order=order_by(("completed_at", False)),
        )
        return WorkoutLog.model_validate(row) if row else None

    async def create_workout_log(self, user_id: str, day_id: int, week_number: int) -> WorkoutLog:
        rows = await self.insert(
            WORKOUT_LOGS_TABLE,
            {"user_id": user_id, "workout_day_id": day_id, "week_number": week_number},
        )
        if not rows:
            logger.error(f"Workout log insert returned no row for user_id={user_id} day={day_id} week={week_number}")
            raise ValueError("Workout log insert returned no row")
        logger.info(f"Created workout log {rows[0].get('id')} for user_id={user_id} day={day_id} week={week_number}")
        return WorkoutLog.model_validate(rows[0])

    async def get_exercise_rows(self, workout_log_id: str) -> list[dict[str, Any]]:
        return await self.select(
            EXERCISE_LOGS_TABLE,
            filters={"workout_log_id": eq(workout_log_id)},
            order=order_by(("exercise_id", True), ("set_number", True)),
        )

    async def find_set(self, workout_log_id: str, exercise_id: str, set_number: int) -> str | None:
        row = await self.select_one(
            EXERCISE_LOGS_TABLE,
            columns="id",
            filters={
                "workout_log_id": eq(workout_log_id),
                "exercise_id": eq(exercise_id),
                "set_number": eq(set_number),
            },
        )
        if row is None or row.get("id") is None:
            return None
        return str(row["id"])

    async def update_set(self, row_id: str, exercise_set: ExerciseSet) -> None:
        await self.update(EXERCISE_LOGS_TABLE, _set_payload(exercise_set), filters={"id": eq(row_id)})

    async def insert_set(
        self, workout_log_id: str, exercise_id: str, exercise_name: str, exercise_set: ExerciseSet
    ) -> None:
        payload = {
            "workout_log_id": workout_log_id,
            "exercise_id": exercise_id,
            "exercise_name": exercise_name,
            "set_number": exercise_set.set_number,
            **_set_payload(exercise_set),
        }
        await self.insert(EXERCISE_LOGS_TABLE, payload)

    async def get_previous_workout(
        self, user_id: str, day_id: int, week_number: int
    ) -> dict[str, PreviousWorkoutData]:
        previous_log = await self.select_one(
            WORKOUT_LOGS_TABLE,
            columns="id,completed_at",
            filters={
                "user_id": eq(user_id),
                "workout_day_id": eq(day_id),
                "week_number": lt(week_number),
            },
            order=order_by(("week_number", False)),
        )
        if not previous_log:
            return {}

        rows = await self.get_exercise_rows(str(previous_log["id"]))
        previous: dict[str, PreviousWorkoutData] = {}
        for row in rows:
            exercise_id = str(row["exercise_id"])
            entry = previous.setdefault(
                exercise_id,
                PreviousWorkoutData(exercise_id=exercise_id, completed_at=previous_log.get("completed_at")),
            )
            entry.sets.append(ExerciseSet.model_validate(row))
        return previous

    async def get_personal_records(self, user_id: str) -> dict[str, PersonalRecord]:
        rows = await self.select(PERSONAL_RECORDS_TABLE, filters={"user_id": eq(user_id)})
        records = [PersonalRecord.model_validate(row) for row in rows]
        return {record.exercise_id: record for record in records}

    async def upsert_personal_record(self, record: PersonalRecord) -> PersonalRecord:
        achieved_at = record.achieved_at or datetime.now(timezone.utc)
        rows = await self.upsert(
            PERSONAL_RECORDS_TABLE,
            {
                "user_id": record.user_id,
                "exercise_id": record.exercise_id,
                "exercise_name": record.exercise_name,
                "weight": record.weight,
                "reps": record.reps,
                "achieved_at": achieved_at.isoformat(),
            },
            on_conflict="user_id,exercise_id",
        )
        if not rows:
            return record.model_copy(update={"achieved_at": achieved_at})
        return PersonalRecord.model_validate(rows[0])

    async def complete_workout(self, workout_log_id: str, notes: str | None = None) -> WorkoutLog | None:
        rows = await self.update(
            WORKOUT_LOGS_TABLE,
            {"notes": notes, "completed_at": datetime.now(timezone.utc).isoformat()},
            filters={"id": eq(workout_log_id)},
        )
        return WorkoutLog.model_validate(rows[0]) if rows else None

    async def get_user_exercise_rows(self, user_id: str) -> list[dict[str, Any]]:
        logs = await self.select(WORKOUT_LOGS_TABLE, columns="id,completed_at", filters={"user_id": eq(user_id)})
        if not logs:
            return []
        completed = {str(log["id"]): log.get("completed_at") for log in logs}
        rows = await self.select(
            EXERCISE_LOGS_TABLE,
            filters={"workout_log_id": in_(completed)},
            order=order_by(("set_number", True)),
        )
        return [{**row, "completed_at": completed.get(str(row.get("workout_log_id")))} for row in rows]
