# eventdb/db/constraints.py
"""
Row-check enforcement and translation of database integrity errors.

Every model lists its row-level invariants in ``__row_checks__``. The same
rules are declared as named CHECK constraints on the table, so they hold for
direct SQL too; evaluating them in ``before_flush`` rejects a bad row with a
precise rule name before any statement reaches the database.
"""

import logging
from contextlib import contextmanager
from itertools import chain
from typing import Callable, NamedTuple

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import ClauseElement

from eventdb.core.exceptions import (
    ConstraintViolation,
    DataModelError,
    DuplicateKey,
    ReferentialViolation,
)

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes for integrity violations
PG_UNIQUE_VIOLATION = "23505"
PG_CHECK_VIOLATION = "23514"
PG_NOT_NULL_VIOLATION = "23502"
PG_FOREIGN_KEY_VIOLATION = "23503"


class RowCheck(NamedTuple):
    name: str
    columns: tuple[str, ...]
    predicate: Callable[..., bool]


@event.listens_for(Session, "before_flush")
def enforce_row_checks(session, flush_context, instances):
    for obj in chain(session.new, session.dirty):
        for check in getattr(obj, "__row_checks__", ()):
            values = [getattr(obj, column) for column in check.columns]
            # Unset values are filled by column defaults or rejected by NOT NULL
            if any(v is None or isinstance(v, ClauseElement) for v in values):
                continue
            shown = ", ".join(
                f"{column}={value!r}" for column, value in zip(check.columns, values)
            )
            try:
                passed = check.predicate(*values)
            except TypeError as exc:
                # e.g. a tz-aware datetime compared with a stored naive one
                raise ConstraintViolation(
                    check.name,
                    f"{type(obj).__name__} has incomparable values for {check.name} ({shown})",
                ) from exc
            if not passed:
                raise ConstraintViolation(
                    check.name,
                    f"{type(obj).__name__} violates {check.name} ({shown})",
                )


def _detail(message: str) -> str:
    # "UNIQUE constraint failed: users.email" -> "users.email"
    first_line = message.splitlines()[0] if message else ""
    return first_line.split(":", 1)[1].strip() if ":" in first_line else first_line


def translate_integrity_error(exc: IntegrityError) -> DataModelError:
    """Maps a driver-level integrity error onto the data-layer taxonomy."""
    orig = exc.orig
    message = str(orig)
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    diag = getattr(orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)

    if sqlstate == PG_UNIQUE_VIOLATION or "UNIQUE constraint failed" in message:
        return DuplicateKey(constraint or _detail(message), message)
    if sqlstate == PG_CHECK_VIOLATION or "CHECK constraint failed" in message:
        return ConstraintViolation(constraint or _detail(message), message)
    if sqlstate == PG_NOT_NULL_VIOLATION or "NOT NULL constraint failed" in message:
        column = getattr(diag, "column_name", None) or _detail(message)
        return ConstraintViolation(f"not_null:{column}", message)
    if sqlstate == PG_FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
        return ReferentialViolation(message)
    return DataModelError(message)


@contextmanager
def atomic(db: Session):
    """
    Runs one logical write: commits on success, rolls back on any failure.

    Integrity errors raised by the database are re-raised as data-layer
    errors, so callers only ever see the DataModelError hierarchy.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        error = translate_integrity_error(exc)
        logger.warning(f"Write rejected by database: {error}")
        raise error from exc
    except DataModelError as exc:
        db.rollback()
        logger.warning(f"Write rejected: {exc}")
        raise
    except Exception:
        db.rollback()
        logger.error("Write failed, transaction rolled back", exc_info=True)
        raise
