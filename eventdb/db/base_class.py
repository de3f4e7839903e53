# eventdb/db/base_class.py

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# Constraint names are derived from these templates so that DB errors can be
# mapped back to the rule that failed (e.g. ck_events_end_after_start).
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# This is the single source of truth for our declarative base.
# All SQLAlchemy models in the project will inherit from this class.
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))
