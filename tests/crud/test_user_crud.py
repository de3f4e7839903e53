# tests/crud/test_user_crud.py

import time

import pytest

from eventdb import crud
from eventdb.core.exceptions import DuplicateKey, NotFound, ReferentialViolation
from eventdb.models.user import UserRoleAssignment
from eventdb.schemas.user import RoleCreate, UserCreate, UserUpdate
from tests.utils.event import create_random_event
from tests.utils.user import create_random_user


def _alice(**overrides) -> UserCreate:
    data = {
        "username": "alice",
        "email": "alice@x.com",
        "password_hash": "hash",
        "first_name": "Alice",
        "last_name": "Kamara",
    }
    data.update(overrides)
    return UserCreate(**data)


def test_create_user(db_session):
    # ACT
    user = crud.user.create(db_session, obj_in=_alice())

    # ASSERT
    assert user.user_id is not None
    assert user.is_active is True
    assert user.created_at is not None
    assert crud.user.get_by_username(db_session, username="alice").user_id == user.user_id


def test_duplicate_email_is_rejected(db_session):
    crud.user.create(db_session, obj_in=_alice())

    with pytest.raises(DuplicateKey) as exc_info:
        crud.user.create(db_session, obj_in=_alice(username="alice2"))

    assert "email" in exc_info.value.constraint
    assert crud.user.get_by_username(db_session, username="alice2") is None


def test_duplicate_username_is_rejected(db_session):
    crud.user.create(db_session, obj_in=_alice())

    with pytest.raises(DuplicateKey) as exc_info:
        crud.user.create(db_session, obj_in=_alice(email="other@x.com"))

    assert "username" in exc_info.value.constraint


def test_email_is_stored_lower_case(db_session):
    user = crud.user.create(db_session, obj_in=_alice(email="Alice@X.com"))

    assert user.email == "alice@x.com"
    assert crud.user.get_by_email(db_session, email="ALICE@x.com").user_id == user.user_id
    with pytest.raises(DuplicateKey):
        crud.user.create(db_session, obj_in=_alice(username="alice2", email="ALICE@X.COM"))


def test_update_user(db_session):
    user = create_random_user(db_session)

    updated = crud.user.update(db_session, db_obj=user, obj_in=UserUpdate(first_name="Fatmata"))

    assert updated.first_name == "Fatmata"
    assert updated.last_name == "User"


def test_update_refreshes_updated_at(db_session):
    user = create_random_user(db_session)
    created_at, updated_at = user.created_at, user.updated_at
    time.sleep(0.01)

    crud.user.update(db_session, db_obj=user, obj_in=UserUpdate(first_name="Isatu"))
    db_session.refresh(user)

    assert user.updated_at > updated_at
    assert user.created_at == created_at


def test_get_or_raise_unknown_user(db_session):
    with pytest.raises(NotFound) as exc_info:
        crud.user.get_or_raise(db_session, 9999)

    assert exc_info.value.entity == "User"
    assert exc_info.value.key == 9999


def test_assign_and_revoke_role(db_session):
    user = create_random_user(db_session)
    organizer = crud.role.create(db_session, obj_in=RoleCreate(role_name="organizer"))
    attendee = crud.role.create(db_session, obj_in=RoleCreate(role_name="attendee"))

    crud.user.assign_role(db_session, user_id=user.user_id, role_id=organizer.role_id)
    crud.user.assign_role(db_session, user_id=user.user_id, role_id=attendee.role_id)
    roles = crud.user.get_roles(db_session, user_id=user.user_id)
    assert [r.role_name for r in roles] == ["attendee", "organizer"]

    crud.user.revoke_role(db_session, user_id=user.user_id, role_id=attendee.role_id)
    roles = crud.user.get_roles(db_session, user_id=user.user_id)
    assert [r.role_name for r in roles] == ["organizer"]


def test_assign_role_twice_is_rejected(db_session):
    user = create_random_user(db_session)
    role = crud.role.create(db_session, obj_in=RoleCreate(role_name="admin"))
    crud.user.assign_role(db_session, user_id=user.user_id, role_id=role.role_id)

    with pytest.raises(DuplicateKey) as exc_info:
        crud.user.assign_role(db_session, user_id=user.user_id, role_id=role.role_id)

    assert exc_info.value.constraint == "pk_user_role_mapping"


def test_assign_unknown_role_is_rejected(db_session):
    user = create_random_user(db_session)

    with pytest.raises(ReferentialViolation):
        crud.user.assign_role(db_session, user_id=user.user_id, role_id=404)


def test_revoke_missing_assignment(db_session):
    user = create_random_user(db_session)
    role = crud.role.create(db_session, obj_in=RoleCreate(role_name="admin"))

    with pytest.raises(NotFound):
        crud.user.revoke_role(db_session, user_id=user.user_id, role_id=role.role_id)


def test_duplicate_role_name_is_rejected(db_session):
    crud.role.create(db_session, obj_in=RoleCreate(role_name="admin"))

    with pytest.raises(DuplicateKey):
        crud.role.create(db_session, obj_in=RoleCreate(role_name="admin"))

    assert crud.role.get_by_name(db_session, role_name="admin") is not None


def test_deleting_user_removes_role_assignments(db_session):
    user = create_random_user(db_session)
    role = crud.role.create(db_session, obj_in=RoleCreate(role_name="attendee"))
    crud.user.assign_role(db_session, user_id=user.user_id, role_id=role.role_id)
    user_id = user.user_id

    crud.user.remove(db_session, id=user_id)

    assert crud.user.get(db_session, user_id) is None
    assert db_session.query(UserRoleAssignment).count() == 0
    assert crud.role.get(db_session, role.role_id) is not None


def test_deleting_role_removes_role_assignments(db_session):
    user = create_random_user(db_session)
    role = crud.role.create(db_session, obj_in=RoleCreate(role_name="attendee"))
    crud.user.assign_role(db_session, user_id=user.user_id, role_id=role.role_id)

    crud.role.remove(db_session, id=role.role_id)

    assert db_session.query(UserRoleAssignment).count() == 0
    assert crud.user.get_roles(db_session, user_id=user.user_id) == []


def test_deleting_referenced_user_is_restricted(db_session):
    # ARRANGE
    organizer = create_random_user(db_session)
    event = create_random_event(db_session, organizer_id=organizer.user_id)

    # ACT / ASSERT
    with pytest.raises(ReferentialViolation):
        crud.user.remove(db_session, id=organizer.user_id)

    assert crud.user.get(db_session, organizer.user_id) is not None
    assert crud.event.get(db_session, event.event_id).organizer_id == organizer.user_id


def test_deactivate_user(db_session):
    organizer = create_random_user(db_session)
    create_random_event(db_session, organizer_id=organizer.user_id)

    user = crud.user.deactivate(db_session, user_id=organizer.user_id)

    assert user.is_active is False
    assert crud.event.get_by_organizer(db_session, organizer_id=organizer.user_id)
