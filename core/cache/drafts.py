from collections import defaultdict

from loguru import logger
from pydantic import ValidationError

from config.app_settings import settings
from core.schemas import ExerciseSet
from .base import BaseCacheManager


class DraftCacheManager(BaseCacheManager):
    """Unsaved set entries, one hash per user.

    Fields are ``<day>:<week>:<exercise_id>:<set_number>`` so a single hash holds
    the scratch pad for every workout the user has open.
    """

    @staticmethod
    def _key(user_id: str) -> str:
        return f"drafts:{user_id}"

    @staticmethod
    def _field(day_id: int, week_number: int, exercise_id: str, set_number: int) -> str:
        return f"{day_id}:{week_number}:{exercise_id}:{set_number}"

    @staticmethod
    def _parse_field(field: str) -> tuple[int, int, str, int] | None:
        day, week, rest = (field.split(":", 2) + ["", ""])[:3]
        exercise_id, _, set_number = rest.rpartition(":")
        try:
            return int(day), int(week), exercise_id, int(set_number)
        except ValueError:
            return None

    @classmethod
    async def save_draft(
        cls, user_id: str, day_id: int, week_number: int, exercise_id: str, sets: list[ExerciseSet]
    ) -> None:
        key = cls._key(user_id)
        for exercise_set in sets:
            field = cls._field(day_id, week_number, exercise_id, exercise_set.set_number)
            await cls.set_json(key, field, exercise_set.model_dump())
        await cls.expire(key, settings.DRAFT_TTL)
        logger.debug(f"Stored {len(sets)} draft sets for user_id={user_id} exercise={exercise_id}")

    @classmethod
    async def get_drafts(
        cls, user_id: str, day_id: int, week_number: int, exercise_id: str | None = None
    ) -> dict[str, list[ExerciseSet]]:
        key = cls._key(user_id)
        drafts: dict[str, list[ExerciseSet]] = defaultdict(list)
        for field, raw in (await cls.get_all(key)).items():
            parsed = cls._parse_field(field)
            if parsed is None:
                continue
            day, week, draft_exercise_id, _ = parsed
            if day != day_id or week != week_number:
                continue
            if exercise_id is not None and draft_exercise_id != exercise_id:
                continue
            data = cls._load_json(raw, key, field)
            if data is None:
                continue
            try:
                drafts[draft_exercise_id].append(ExerciseSet.model_validate(data))
            except ValidationError as e:
                logger.warning(f"Dropping corrupted draft [{key}:{field}]: {e}")

        return {
            draft_exercise_id: sorted(sets, key=lambda s: s.set_number)
            for draft_exercise_id, sets in drafts.items()
        }

    @classmethod
    async def clear_drafts(
        cls, user_id: str, day_id: int, week_number: int, exercise_id: str | None = None
    ) -> None:
        key = cls._key(user_id)
        fields = []
        for field in await cls.get_all(key):
            parsed = cls._parse_field(field)
            if parsed is None:
                continue
            day, week, draft_exercise_id, _ = parsed
            if day == day_id and week == week_number and exercise_id in (None, draft_exercise_id):
                fields.append(field)
        await cls.delete(key, *fields)
