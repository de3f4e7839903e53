# tests/db/test_query_plans.py
"""
The hot lookups must be answered from an index rather than a table scan.
"""

from datetime import datetime

from sqlalchemy import and_, select

from eventdb.db.query_plan import explain, uses_index
from eventdb.models.event import Event
from eventdb.models.notification import Notification
from eventdb.models.rsvp import RSVP
from eventdb.models.ticket import Ticket


def test_events_by_date_range(db_session):
    window_start = datetime(2030, 1, 1)
    window_end = datetime(2030, 2, 1)
    statement = (
        select(Event)
        .where(Event.start_datetime < window_end, Event.end_datetime > window_start)
        .order_by(Event.start_datetime)
    )

    assert uses_index(explain(db_session, statement), "events")


def test_events_by_status(db_session):
    statement = select(Event).where(Event.status == "published")

    assert uses_index(explain(db_session, statement), "events")


def test_tickets_by_user_and_by_status(db_session):
    by_user = select(Ticket).where(Ticket.user_id == 1)
    by_status = select(Ticket).where(Ticket.status == "active")

    assert uses_index(explain(db_session, by_user), "tickets")
    assert uses_index(explain(db_session, by_status), "tickets")


def test_rsvp_by_event_and_user(db_session):
    statement = select(RSVP).where(and_(RSVP.event_id == 1, RSVP.user_id == 2))

    assert uses_index(explain(db_session, statement), "rsvps")


def test_notifications_by_user(db_session):
    statement = select(Notification).where(Notification.user_id == 1)

    assert uses_index(explain(db_session, statement), "notifications")


def test_unindexed_lookup_is_a_scan(db_session):
    statement = select(Event).where(Event.title == "Launch")

    plan = explain(db_session, statement)

    assert not uses_index(plan, "events")


def test_uses_index_reads_postgres_plans():
    index_plan = [
        "Bitmap Heap Scan on tickets  (cost=4.18..12.64 rows=4 width=60)",
        "  ->  Bitmap Index Scan on idx_tickets_user  (cost=0.00..4.18 rows=4 width=0)",
    ]
    scan_plan = ["Seq Scan on tickets  (cost=0.00..1.05 rows=1 width=60)"]

    assert uses_index(index_plan, "tickets")
    assert not uses_index(scan_plan, "tickets")
