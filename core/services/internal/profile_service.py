from loguru import logger

from core.program.progression_rules import get_week_progression
from core.schemas import UserProfile
from core.services.internal.table_client import TableClient, eq

PROFILES_TABLE = "profiles"


class ProfileService(TableClient):
    async def get_profile(self, user_id: str) -> UserProfile | None:
        row = await self.select_one(PROFILES_TABLE, filters={"id": eq(user_id)})
        if row is None:
            logger.info(f"No profile found for user_id={user_id}")
            return None
        return UserProfile.model_validate(row)

    async def set_current_week(self, user_id: str, week_number: int) -> UserProfile | None:
        get_week_progression(week_number)
        rows = await self.update(PROFILES_TABLE, {"current_week": week_number}, filters={"id": eq(user_id)})
        if not rows:
            logger.warning(f"Current week update matched no profile for user_id={user_id}")
            return None
        logger.debug(f"user_id={user_id} moved to week {week_number}")
        return UserProfile.model_validate(rows[0])
