# eventdb/models/user.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func, true
from sqlalchemy.orm import relationship

from eventdb.db.base_class import Base
from eventdb.models.mixins import TimestampMixin, utcnow


class User(TimestampMixin, Base):
    """
    An account. Users are referenced by events, tickets, RSVPs, feedback and
    notifications, none of which cascade, so a referenced user cannot be
    hard-deleted; deactivate it instead.
    """

    __tablename__ = "users"
    __table_args__ = {"comment": "Stores user account information"}

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(100), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    phone = Column(String(20), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())

    role_assignments = relationship(
        "UserRoleAssignment",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<User(user_id={self.user_id}, username={self.username})>"


class Role(Base):
    __tablename__ = "user_roles"
    __table_args__ = {"comment": "Defines available user roles (organizer, attendee, admin)"}

    role_id = Column(Integer, primary_key=True, autoincrement=True)
    role_name = Column(String(30), nullable=False, unique=True)
    description = Column(String(255), nullable=True)

    assignments = relationship(
        "UserRoleAssignment",
        back_populates="role",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Role(role_id={self.role_id}, role_name={self.role_name})>"


class UserRoleAssignment(Base):
    """Many-to-many link between users and roles; owned by both sides."""

    __tablename__ = "user_role_mapping"
    __table_args__ = {"comment": "Maps users to their roles (many-to-many relationship)"}

    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True
    )
    role_id = Column(
        Integer, ForeignKey("user_roles.role_id", ondelete="CASCADE"), primary_key=True
    )
    assigned_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )

    user = relationship("User", back_populates="role_assignments")
    role = relationship("Role", back_populates="assignments")
