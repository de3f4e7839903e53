# tests/db/test_atomic.py

import logging

import pytest

from eventdb import crud
from eventdb.core.exceptions import ConstraintViolation
from eventdb.core.logging import setup_logging
from eventdb.db.constraints import atomic
from eventdb.models.user import Role
from eventdb.schemas.feedback import EventFeedbackCreate
from tests.utils.event import create_random_event
from tests.utils.user import create_random_user


def test_atomic_commits_on_success(db_session, session_factory):
    with atomic(db_session):
        db_session.add(Role(role_name="organizer"))

    other = session_factory()
    try:
        assert other.query(Role).filter(Role.role_name == "organizer").count() == 1
    finally:
        other.close()


def test_atomic_rolls_back_on_any_error(db_session, caplog):
    with pytest.raises(RuntimeError):
        with atomic(db_session):
            db_session.add(Role(role_name="organizer"))
            db_session.flush()
            raise RuntimeError("boom")

    assert db_session.query(Role).count() == 0
    assert "Write failed, transaction rolled back" in caplog.text


def test_rejected_write_is_logged(db_session, caplog):
    caplog.set_level(logging.WARNING, logger="eventdb.db.constraints")
    user = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=user.user_id)
    feedback = crud.event_feedback.create_with_event(
        db_session, obj_in=EventFeedbackCreate(user_id=user.user_id, rating=3), event_id=event.event_id
    )

    with pytest.raises(ConstraintViolation):
        crud.event_feedback.update(db_session, db_obj=feedback, obj_in={"rating": 0})

    assert "ck_event_feedback_rating_range" in caplog.text


def test_setup_logging_configures_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
