import json
from json import JSONDecodeError
from typing import Any, Awaitable, Callable, ClassVar, cast

from loguru import logger
from redis.asyncio import Redis, from_url
from redis.exceptions import RedisError

from config.app_settings import settings


class BaseCacheManager:
    _redis: ClassVar[Redis | None] = None
    _socket_timeout: ClassVar[float] = 5.0
    _socket_connect_timeout: ClassVar[float] = 3.0

    @classmethod
    def _create_client(cls) -> Redis:
        return from_url(
            url=settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=cls._socket_timeout,
            socket_connect_timeout=cls._socket_connect_timeout,
        )

    @classmethod
    def _client(cls) -> Redis:
        if cls._redis is None:
            cls._redis = cls._create_client()
        return cls._redis

    @classmethod
    async def _reset_client(cls) -> None:
        if cls._redis is None:
            return
        try:
            await cls._redis.aclose()
        except Exception as exc:  # noqa: BLE001
            logger.warning(f"Redis client close failed: {exc}")
        finally:
            cls._redis = None

    @classmethod
    async def _with_client(
        cls,
        func: Callable[[Redis], Awaitable[Any]],
        *,
        on_error: Callable[[Exception], Any] | None = None,
    ) -> Any:
        for attempt in (1, 2):
            client = cls._client()
            try:
                return await func(client)
            except RedisError as exc:
                logger.warning(f"Redis operation failed (attempt {attempt}): {exc}")
                await cls._reset_client()
                if attempt >= 2 and on_error is not None:
                    return on_error(exc)
        return None

    @classmethod
    def _add_prefix(cls, key: str) -> str:
        return f"app:{key}"

    @classmethod
    async def close_pool(cls) -> None:
        try:
            await cls._reset_client()
            logger.info("Redis connection closed.")
        except Exception as e:
            logger.error(f"Error closing Redis connection: {e}")

    @classmethod
    async def healthcheck(cls) -> bool:
        return await cls._with_client(lambda c: c.ping(), on_error=lambda _: False)

    @classmethod
    async def set(cls, key: str, field: str, value: str) -> None:
        def _op(client: Redis) -> Awaitable[int]:
            return cast(Awaitable[int], client.hset(cls._add_prefix(key), field, value))

        await cls._with_client(_op, on_error=lambda e: logger.error(f"Redis SET error [{key}:{field}]: {e}"))

    @classmethod
    async def delete(cls, key: str, *fields: str) -> None:
        if not fields:
            return

        def _op(client: Redis) -> Awaitable[int]:
            return cast(Awaitable[int], client.hdel(cls._add_prefix(key), *fields))

        await cls._with_client(_op, on_error=lambda e: logger.error(f"Redis DELETE error [{key}]: {e}"))

    @classmethod
    async def get_all(cls, key: str) -> dict[str, str]:
        def _op(client: Redis) -> Awaitable[dict[str, str]]:
            return cast(Awaitable[dict[str, str]], client.hgetall(cls._add_prefix(key)))

        result = await cls._with_client(
            _op, on_error=lambda e: logger.error(f"Redis HGETALL error [{key}]: {e}") or {}
        )
        return result or {}

    @classmethod
    async def expire(cls, key: str, seconds: int) -> None:
        def _op(client: Redis) -> Awaitable[bool]:
            return cast(Awaitable[bool], client.expire(cls._add_prefix(key), seconds))

        await cls._with_client(_op, on_error=lambda e: logger.error(f"Redis EXPIRE error [{key}]: {e}"))

    @classmethod
    async def set_json(cls, key: str, field: str, data: dict[str, Any]) -> None:
        await cls.set(key, field, json.dumps(data))

    @staticmethod
    def _load_json(raw: str, key: str, field: str) -> dict[str, Any] | None:
        try:
            data = json.loads(raw)
        except (JSONDecodeError, TypeError) as e:
            logger.error(f"Invalid JSON [{key}:{field}]: {e}")
            return None
        return data if isinstance(data, dict) else None
