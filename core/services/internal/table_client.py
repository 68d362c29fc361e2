from typing import Any, Iterable

from loguru import logger

from core.exceptions import UserServiceError
from core.services.internal.api_client import APIClient


def eq(value: Any) -> str:
    return f"eq.{_literal(value)}"


def lt(value: Any) -> str:
    return f"lt.{_literal(value)}"


def in_(values: Iterable[Any]) -> str:
    return f"in.({','.join(_literal(value) for value in values)})"


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def order_by(*columns: tuple[str, bool]) -> str:
    """Build an ``order`` parameter from ``(column, ascending)`` pairs."""
    return ",".join(f"{column}.{'asc' if ascending else 'desc'}" for column, ascending in columns)


class TableClient(APIClient):
    """Row access against the backend's REST table endpoint.

    Filters are passed as ``{column: "<op>.<value>"}`` mappings built with
    :func:`eq`, :func:`lt` and :func:`in_`.
    """

    def _table_url(self, table: str) -> str:
        return f"{self.rest_url}/{table}"

    @staticmethod
    def _rows(table: str, status: int, payload: Any) -> list[dict[str, Any]]:
        if payload is None:
            return []
        if isinstance(payload, dict):
            return [payload]
        if isinstance(payload, list):
            return [row for row in payload if isinstance(row, dict)]
        logger.warning(f"Unexpected payload from table={table} HTTP={status}: {payload!r}")
        return []

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: dict[str, str] | None = None,
        order: str | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, str] = {"select": columns}
        params.update(filters or {})
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = str(limit)
        status, payload = await self._api_request("get", self._table_url(table), params=params)
        return self._rows(table, status, payload)

    async def select_one(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: dict[str, str] | None = None,
        order: str | None = None,
    ) -> dict[str, Any] | None:
        rows = await self.select(table, columns=columns, filters=filters, order=order, limit=1)
        return rows[0] if rows else None

    async def insert(self, table: str, data: dict[str, Any] | list[dict[str, Any]]) -> list[dict[str, Any]]:
        status, payload = await self._api_request(
            "post",
            self._table_url(table),
            data,
            headers={"Prefer": "return=representation"},
        )
        if status not in {200, 201}:
            raise UserServiceError(f"Insert into {table} failed", code=status, details=str(payload))
        return self._rows(table, status, payload)

    async def update(self, table: str, data: dict[str, Any], *, filters: dict[str, str]) -> list[dict[str, Any]]:
        if not filters:
            raise ValueError(f"Refusing to update {table} without filters")
        status, payload = await self._api_request(
            "patch",
            self._table_url(table),
            data,
            params=filters,
            headers={"Prefer": "return=representation"},
        )
        return self._rows(table, status, payload)

    async def upsert(self, table: str, data: dict[str, Any], *, on_conflict: str) -> list[dict[str, Any]]:
        status, payload = await self._api_request(
            "post",
            self._table_url(table),
            data,
            params={"on_conflict": on_conflict},
            headers={"Prefer": "resolution=merge-duplicates,return=representation"},
        )
        if status not in {200, 201}:
            raise UserServiceError(f"Upsert into {table} failed", code=status, details=str(payload))
        return self._rows(table, status, payload)
