# eventdb/db/init_db.py
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from eventdb.core.config import settings
from eventdb.db.constraints import atomic
from eventdb.models import Base, Role

logger = logging.getLogger(__name__)


def create_tables(bind: Engine) -> None:
    """Create all tables, leaves of the foreign-key graph first."""
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created")


def seed_default_roles(db: Session) -> list[Role]:
    """Insert the default roles that are missing; existing ones are kept."""
    existing = {name for (name,) in db.query(Role.role_name).all()}
    missing = [
        Role(role_name=name, description=description)
        for name, description in settings.DEFAULT_ROLES.items()
        if name not in existing
    ]
    if missing:
        with atomic(db):
            db.add_all(missing)
        logger.info(f"Seeded roles: {', '.join(r.role_name for r in missing)}")
    return missing


def init_db(db: Session) -> None:
    create_tables(db.get_bind())
    seed_default_roles(db)


if __name__ == "__main__":
    from eventdb.core.logging import setup_logging
    from eventdb.db.session import SessionLocal

    setup_logging()
    session = SessionLocal()
    try:
        init_db(session)
    finally:
        session.close()
