"""StorageService: save user data through a database picked by name.

The consumer is always :class:`~solidctl.domain.storage.UserService`; only the
injected database changes. Plugins add databases via ``register_databases``.
"""

from __future__ import annotations

import logging

from solidctl.domain.storage import BUILTIN_DATABASES, Database, UserService
from solidctl.services.base import BaseService
from solidctl.services.contracts import SaveResultData, dump_validated
from solidctl.services.result import ServiceResult
from solidctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class StorageService(BaseService):
    def _databases(self, warnings: list[str]) -> dict[str, type[Database]]:
        databases = dict(BUILTIN_DATABASES)
        for name, database_cls in self._collect_plugin_variants(
            "register_databases", warnings
        ).items():
            normalized = name.strip().lower()
            if normalized in BUILTIN_DATABASES:
                warnings.append(f"Skipping plugin database {name!r}: conflicts with a built-in")
                continue
            databases[normalized] = database_cls
        return databases

    @traced
    def save(self, data: str, database: str = "sql") -> ServiceResult:
        op = "save"
        warnings: list[str] = []
        databases = self._databases(warnings)
        database_cls = databases.get(database.strip().lower())
        if database_cls is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_DATABASE",
                f"Unknown database: {database!r}",
                available=sorted(databases),
            )

        lines: list[str] = []
        try:
            db = database_cls(lines.append)  # type: ignore[call-arg]
        except TypeError as exc:
            logger.warning("Could not construct database %r", database, exc_info=True)
            return ServiceResult.failure(
                op,
                "INVALID_DATABASE",
                f"Database {database!r} cannot be built with a line sink: {exc}",
            )
        if not isinstance(db, Database):
            return ServiceResult.failure(
                op,
                "INVALID_DATABASE",
                f"{type(db).__name__} does not satisfy the Database protocol",
            )
        try:
            UserService(db, lines.append).save_user_data(data)
        except Exception as exc:
            logger.warning("Database %r failed while saving", database, exc_info=True)
            return ServiceResult.failure(
                op, "DATABASE_FAILED", f"Database {db.name!r} failed: {exc}", lines=lines
            )

        payload = dump_validated(
            SaveResultData, {"database": db.name, "data": data, "lines": lines}
        )
        return ServiceResult(ok=True, op=op, data=payload, warnings=warnings)
