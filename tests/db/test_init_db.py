# tests/db/test_init_db.py

from eventdb import crud
from eventdb.core.config import Settings, settings
from eventdb.db.init_db import init_db, seed_default_roles
from eventdb.schemas.user import RoleCreate


def test_seed_default_roles(db_session):
    seeded = seed_default_roles(db_session)

    assert sorted(r.role_name for r in seeded) == sorted(settings.DEFAULT_ROLES)
    assert crud.role.get_by_name(db_session, role_name="organizer") is not None


def test_seeding_is_idempotent(db_session):
    crud.role.create(db_session, obj_in=RoleCreate(role_name="admin", description="Custom"))

    first = seed_default_roles(db_session)
    second = seed_default_roles(db_session)

    assert "admin" not in {r.role_name for r in first}
    assert second == []
    assert crud.role.get_by_name(db_session, role_name="admin").description == "Custom"
    assert len(crud.role.get_multi(db_session)) == len(settings.DEFAULT_ROLES)


def test_init_db_on_existing_schema(db_session):
    init_db(db_session)

    assert len(crud.role.get_multi(db_session)) == len(settings.DEFAULT_ROLES)


def test_database_url_follows_environment(monkeypatch):
    monkeypatch.setenv("ENV", "prod")
    monkeypatch.setenv("DATABASE_URL_PROD", "postgresql://events:secret@db/events")

    assert Settings().DATABASE_URL == "postgresql://events:secret@db/events"

    monkeypatch.setenv("ENV", "local")
    monkeypatch.setenv("DATABASE_URL_LOCAL", "sqlite:///./local.db")

    assert Settings().DATABASE_URL == "sqlite:///./local.db"
