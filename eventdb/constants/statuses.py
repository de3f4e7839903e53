# eventdb/constants/statuses.py
"""
Closed value sets for the enumerated columns.

Each class doubles as the source of the matching CHECK constraint, so the
Python-side and database-side definitions cannot drift apart.
"""


class _ValueSet:
    @classmethod
    def all_values(cls) -> list[str]:
        """Return all valid values, in declaration order."""
        return [
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls.all_values()

    @classmethod
    def sql_in(cls, column: str) -> str:
        """SQL predicate restricting ``column`` to the value set."""
        quoted = ", ".join(f"'{value}'" for value in cls.all_values())
        return f"{column} IN ({quoted})"


class EventStatus(_ValueSet):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

    # Allowed lifecycle moves; cancelled and completed are terminal
    TRANSITIONS = {
        "draft": ("published", "cancelled"),
        "published": ("cancelled", "completed"),
        "cancelled": (),
        "completed": (),
    }

    @classmethod
    def can_transition(cls, current: str, target: str) -> bool:
        return target in cls.TRANSITIONS.get(current, ())


class TicketStatus(_ValueSet):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    REDEEMED = "redeemed"


class RsvpResponse(_ValueSet):
    CONFIRMED = "confirmed"
    WAITLISTED = "waitlisted"
    CANCELLED = "cancelled"


class NotificationType(_ValueSet):
    REMINDER = "reminder"
    UPDATE = "update"
    PROMOTIONAL = "promotional"
    SYSTEM = "system"
