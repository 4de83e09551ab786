"""Storage conflict classification.

Maps driver-level constraint violations to StorageConflictError using the
SQLSTATE class code (PostgreSQL drivers) or the extended error name
(SQLite). Message text is never inspected.

SQLSTATE:
    23505 unique_violation      -> UNIQUE_VIOLATION
    23503 foreign_key_violation -> FOREIGN_KEY_VIOLATION
"""

from sqlalchemy.exc import IntegrityError

from src.core.enums import ErrorCode
from src.domain.errors import StorageConflictError

_SQLSTATE_CODES: dict[str, ErrorCode] = {
    "23505": ErrorCode.UNIQUE_VIOLATION,
    "23503": ErrorCode.FOREIGN_KEY_VIOLATION,
}

_SQLITE_CODES: dict[str, ErrorCode] = {
    "SQLITE_CONSTRAINT_UNIQUE": ErrorCode.UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": ErrorCode.UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": ErrorCode.FOREIGN_KEY_VIOLATION,
}

_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNIQUE_VIOLATION: "Resource already exists",
    ErrorCode.FOREIGN_KEY_VIOLATION: "Referenced resource does not exist",
}


def _driver_errors(error: IntegrityError) -> list[BaseException]:
    """DBAPI error plus its cause chain (asyncpg wraps the native error)."""
    chain: list[BaseException] = []
    current: BaseException | None = error.orig
    while current is not None and len(chain) < 5:
        chain.append(current)
        current = current.__cause__
    return chain


def classify_integrity_error(error: IntegrityError) -> StorageConflictError | None:
    """Classify a constraint violation.

    Args:
        error: IntegrityError raised by SQLAlchemy.

    Returns:
        StorageConflictError for unique and foreign-key conflicts,
        None for every other integrity failure (NOT NULL, CHECK).
    """
    for driver_error in _driver_errors(error):
        sqlstate = getattr(driver_error, "sqlstate", None) or getattr(
            driver_error, "pgcode", None
        )
        code = _SQLSTATE_CODES.get(sqlstate) if isinstance(sqlstate, str) else None

        if code is None:
            errorname = getattr(driver_error, "sqlite_errorname", None)
            if isinstance(errorname, str):
                code = _SQLITE_CODES.get(errorname)

        if code is not None:
            details: dict[str, str] = {}
            constraint = getattr(driver_error, "constraint_name", None)
            if isinstance(constraint, str):
                details["constraint"] = constraint
            return StorageConflictError(
                code=code,
                message=_MESSAGES[code],
                details=details or None,
            )

    return None
