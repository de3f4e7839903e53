# eventdb/models/event_category.py
from sqlalchemy import Column, Integer, String

from eventdb.db.base_class import Base


class EventCategory(Base):
    """Static lookup of event kinds, e.g. Concert or Conference."""

    __tablename__ = "event_categories"
    __table_args__ = {"comment": "Categories for events (e.g., Concert, Conference)"}

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(String(255), nullable=True)
