# tests/crud/test_event_crud.py

import time
from datetime import datetime, timedelta, timezone

import pytest

from eventdb import crud
from eventdb.constants import EventStatus
from eventdb.core.exceptions import (
    ConstraintViolation,
    DuplicateKey,
    NotFound,
    ReferentialViolation,
)
from eventdb.schemas.event import EventCategoryCreate, EventCreate, EventUpdate
from tests.utils.event import create_random_category, create_random_event, utc_now
from tests.utils.user import create_random_user


def test_create_event(db_session):
    """
    Tests the creation of an event in the database.
    """
    # ARRANGE
    organizer = create_random_user(db_session)

    # ACT
    event = create_random_event(db_session, organizer_id=organizer.user_id)

    # ASSERT
    assert event.event_id is not None
    assert event.organizer_id == organizer.user_id
    assert event.status == "draft"  # Check default value
    assert event.is_recurring is False


def test_event_must_end_after_it_starts(db_session):
    organizer = create_random_user(db_session)
    category = create_random_category(db_session)
    start = utc_now() + timedelta(days=3)
    event_in = EventCreate(
        category_id=category.category_id,
        title="Backwards",
        description="Ends before it starts",
        start_datetime=start,
        end_datetime=start - timedelta(hours=1),
    )

    with pytest.raises(ConstraintViolation) as exc_info:
        crud.event.create_with_organizer(db_session, obj_in=event_in, organizer_id=organizer.user_id)

    assert exc_info.value.rule == "ck_events_end_after_start"
    assert crud.event.get_by_organizer(db_session, organizer_id=organizer.user_id) == []


def test_zero_length_event_is_rejected(db_session):
    organizer = create_random_user(db_session)

    with pytest.raises(ConstraintViolation):
        create_random_event(db_session, organizer_id=organizer.user_id, duration=timedelta(0))


def test_update_cannot_break_date_order(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)
    original_end = event.end_datetime

    with pytest.raises(ConstraintViolation):
        crud.event.update(
            db_session,
            db_obj=event,
            obj_in=EventUpdate(end_datetime=event.start_datetime - timedelta(days=1)),
        )

    # The failed write was rolled back
    assert event.end_datetime == original_end


def test_update_event_title(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)

    updated = crud.event.update(db_session, db_obj=event, obj_in=EventUpdate(title="Renamed"))

    assert updated.title == "Renamed"
    assert updated.status == EventStatus.DRAFT


def test_update_refreshes_updated_at(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)
    created_at, updated_at = event.created_at, event.updated_at
    time.sleep(0.01)

    crud.event.update(db_session, db_obj=event, obj_in=EventUpdate(title="Moved"))
    db_session.refresh(event)

    assert event.updated_at > updated_at
    assert event.created_at == created_at


def test_aware_datetimes_are_stored_as_utc(db_session):
    """
    Times given with a UTC offset are shifted to UTC and stored naive.
    """
    # ARRANGE
    organizer = create_random_user(db_session)
    category = create_random_category(db_session)
    plus_two = timezone(timedelta(hours=2))
    event_in = EventCreate(
        category_id=category.category_id,
        title="Offset",
        description="Scheduled in UTC+2",
        start_datetime=datetime(2030, 6, 1, 10, 0, tzinfo=plus_two),
        end_datetime=datetime(2030, 6, 1, 13, 0, tzinfo=plus_two),
    )

    # ACT
    event = crud.event.create_with_organizer(db_session, obj_in=event_in, organizer_id=organizer.user_id)

    # ASSERT
    assert event.start_datetime == datetime(2030, 6, 1, 8, 0)
    assert event.end_datetime == datetime(2030, 6, 1, 11, 0)

    updated = crud.event.update(
        db_session,
        db_obj=event,
        obj_in=EventUpdate(end_datetime=datetime(2030, 6, 1, 14, 0, tzinfo=timezone.utc)),
    )
    assert updated.end_datetime == datetime(2030, 6, 1, 14, 0)

    in_range = crud.event.get_in_range(
        db_session,
        start=datetime(2030, 6, 1, 9, 0, tzinfo=plus_two),
        end=datetime(2030, 6, 1, 11, 0, tzinfo=plus_two),
    )
    assert [e.event_id for e in in_range] == [event.event_id]


def test_aware_update_cannot_break_date_order(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(
        db_session, organizer_id=organizer.user_id, start=datetime(2030, 6, 1, 8, 0)
    )

    with pytest.raises(ConstraintViolation) as exc_info:
        crud.event.update(
            db_session,
            db_obj=event,
            obj_in=EventUpdate(end_datetime=datetime(2030, 6, 1, 9, 0, tzinfo=timezone(timedelta(hours=2)))),
        )

    assert exc_info.value.rule == "ck_events_end_after_start"
    assert event.end_datetime == datetime(2030, 6, 1, 11, 0)


def test_raw_aware_value_is_reported_as_constraint_violation(db_session):
    # A dict bypasses the schema, so the stored naive start meets an aware end
    organizer = create_random_user(db_session)
    event = create_random_event(
        db_session, organizer_id=organizer.user_id, start=datetime(2030, 6, 1, 8, 0)
    )

    with pytest.raises(ConstraintViolation) as exc_info:
        crud.event.update(
            db_session,
            db_obj=event,
            obj_in={"end_datetime": datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)},
        )

    assert exc_info.value.rule == "ck_events_end_after_start"
    assert event.end_datetime == datetime(2030, 6, 1, 11, 0)


def test_duplicate_category_name_is_rejected(db_session):
    crud.event_category.create(db_session, obj_in=EventCategoryCreate(name="Concert"))

    with pytest.raises(DuplicateKey) as exc_info:
        crud.event_category.create(db_session, obj_in=EventCategoryCreate(name="Concert"))

    assert "name" in exc_info.value.constraint
    assert len(crud.event_category.get_multi(db_session)) == 1


def test_event_with_unknown_category_is_rejected(db_session):
    organizer = create_random_user(db_session)

    with pytest.raises(ReferentialViolation):
        create_random_event(db_session, organizer_id=organizer.user_id, category_id=9999)


def test_event_with_unknown_organizer_is_rejected(db_session):
    with pytest.raises(ReferentialViolation):
        create_random_event(db_session, organizer_id=9999)


def test_status_lifecycle(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)

    event = crud.event.transition_status(db_session, event_id=event.event_id, status="published")
    assert event.status == EventStatus.PUBLISHED

    event = crud.event.transition_status(db_session, event_id=event.event_id, status="completed")
    assert event.status == EventStatus.COMPLETED


@pytest.mark.parametrize(
    "path, target",
    [
        ([], "completed"),
        (["cancelled"], "published"),
        (["published", "completed"], "draft"),
    ],
)
def test_invalid_status_transition(db_session, path, target):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)
    for status in path:
        crud.event.transition_status(db_session, event_id=event.event_id, status=status)

    with pytest.raises(ConstraintViolation) as exc_info:
        crud.event.transition_status(db_session, event_id=event.event_id, status=target)

    assert exc_info.value.rule == "event_status_transition"


def test_unknown_status_is_rejected(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)

    with pytest.raises(ConstraintViolation) as exc_info:
        crud.event.transition_status(db_session, event_id=event.event_id, status="archived")

    assert exc_info.value.rule == "ck_events_status"


def test_unknown_status_set_directly_is_rejected(db_session):
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)

    with pytest.raises(ConstraintViolation) as exc_info:
        crud.event.update(db_session, db_obj=event, obj_in={"status": "archived"})

    assert exc_info.value.rule == "ck_events_status"


def test_transition_unknown_event(db_session):
    with pytest.raises(NotFound):
        crud.event.transition_status(db_session, event_id=404, status="published")


def test_get_in_range_returns_overlapping_events(db_session):
    organizer = create_random_user(db_session)
    base = utc_now().replace(microsecond=0) + timedelta(days=30)
    early = create_random_event(db_session, organizer_id=organizer.user_id, start=base + timedelta(days=1))
    later = create_random_event(db_session, organizer_id=organizer.user_id, start=base + timedelta(days=5))
    create_random_event(db_session, organizer_id=organizer.user_id, start=base + timedelta(days=20))
    # Started before the window, still running inside it
    spanning = create_random_event(
        db_session,
        organizer_id=organizer.user_id,
        start=base - timedelta(days=1),
        duration=timedelta(days=2),
    )

    events = crud.event.get_in_range(db_session, start=base, end=base + timedelta(days=7))

    assert [e.event_id for e in events] == [spanning.event_id, early.event_id, later.event_id]


def test_get_by_status(db_session):
    organizer = create_random_user(db_session)
    draft = create_random_event(db_session, organizer_id=organizer.user_id)
    published = create_random_event(db_session, organizer_id=organizer.user_id)
    crud.event.transition_status(db_session, event_id=published.event_id, status="published")

    assert [e.event_id for e in crud.event.get_by_status(db_session, status="published")] == [
        published.event_id
    ]
    assert [e.event_id for e in crud.event.get_by_status(db_session, status="draft")] == [
        draft.event_id
    ]


def test_get_by_organizer(db_session):
    alice = create_random_user(db_session)
    bob = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=alice.user_id)
    create_random_event(db_session, organizer_id=bob.user_id)

    events = crud.event.get_by_organizer(db_session, organizer_id=alice.user_id)

    assert [e.event_id for e in events] == [event.event_id]


def test_deleting_category_in_use_is_restricted(db_session):
    organizer = create_random_user(db_session)
    category = create_random_category(db_session)
    create_random_event(db_session, organizer_id=organizer.user_id, category_id=category.category_id)

    with pytest.raises(ReferentialViolation):
        crud.event_category.remove(db_session, id=category.category_id)

    assert crud.event_category.get_by_name(db_session, name=category.name) is not None
