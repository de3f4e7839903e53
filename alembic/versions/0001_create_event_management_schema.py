"""Create event management schema

Revision ID: 0001_event_management_schema
Revises:
Create Date: 2025-06-01

Creates all tables of the event management data model in foreign-key order:
- identity: users, user_roles, user_role_mapping
- venues: venues, venue_sections
- catalog and events: event_categories, events, event_schedule
- ticketing: ticket_types, tickets
- engagement: rsvps, notifications, event_feedback
- sponsorship: sponsors, sponsorship_tiers, event_sponsors
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_event_management_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # ============================================
    # 1. Identity
    # ============================================
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(50), nullable=False),
        sa.Column('last_name', sa.String(50), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('user_id', name=op.f('pk_users')),
        sa.UniqueConstraint('username', name=op.f('uq_users_username')),
        sa.UniqueConstraint('email', name=op.f('uq_users_email')),
        comment='Stores user account information',
    )

    op.create_table(
        'user_roles',
        sa.Column('role_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('role_name', sa.String(30), nullable=False),
        sa.Column('description', sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint('role_id', name=op.f('pk_user_roles')),
        sa.UniqueConstraint('role_name', name=op.f('uq_user_roles_role_name')),
        comment='Defines available user roles (organizer, attendee, admin)',
    )

    op.create_table(
        'user_role_mapping',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('role_id', sa.Integer(), nullable=False),
        sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('user_id', 'role_id', name=op.f('pk_user_role_mapping')),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE',
                                name=op.f('fk_user_role_mapping_user_id_users')),
        sa.ForeignKeyConstraint(['role_id'], ['user_roles.role_id'], ondelete='CASCADE',
                                name=op.f('fk_user_role_mapping_role_id_user_roles')),
        comment='Maps users to their roles (many-to-many relationship)',
    )

    # ============================================
    # 2. Venues
    # ============================================
    op.create_table(
        'venues',
        sa.Column('venue_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('city', sa.String(50), nullable=False),
        sa.Column('state', sa.String(50), nullable=False),
        sa.Column('country', sa.String(50), nullable=False),
        sa.Column('postal_code', sa.String(20), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('venue_id', name=op.f('pk_venues')),
        sa.CheckConstraint('capacity > 0', name=op.f('ck_venues_capacity_positive')),
        comment='Stores venue information for events',
    )

    op.create_table(
        'venue_sections',
        sa.Column('section_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('venue_id', sa.Integer(), nullable=False),
        sa.Column('section_name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(255), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('section_id', name=op.f('pk_venue_sections')),
        sa.ForeignKeyConstraint(['venue_id'], ['venues.venue_id'], ondelete='CASCADE',
                                name=op.f('fk_venue_sections_venue_id_venues')),
        sa.CheckConstraint('capacity > 0', name=op.f('ck_venue_sections_capacity_positive')),
        comment='Defines sections within venues for seat management',
    )
    op.create_index(op.f('ix_venue_sections_venue_id'), 'venue_sections', ['venue_id'])

    # ============================================
    # 3. Catalog and events
    # ============================================
    op.create_table(
        'event_categories',
        sa.Column('category_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint('category_id', name=op.f('pk_event_categories')),
        sa.UniqueConstraint('name', name=op.f('uq_event_categories_name')),
        comment='Categories for events (e.g., Concert, Conference)',
    )

    op.create_table(
        'events',
        sa.Column('event_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('organizer_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('venue_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('start_datetime', sa.DateTime(), nullable=False),
        sa.Column('end_datetime', sa.DateTime(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('is_recurring', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('recurrence_pattern', sa.String(50), nullable=True),
        sa.Column('image_url', sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('event_id', name=op.f('pk_events')),
        sa.ForeignKeyConstraint(['organizer_id'], ['users.user_id'], ondelete='RESTRICT',
                                name=op.f('fk_events_organizer_id_users')),
        sa.ForeignKeyConstraint(['category_id'], ['event_categories.category_id'], ondelete='RESTRICT',
                                name=op.f('fk_events_category_id_event_categories')),
        sa.ForeignKeyConstraint(['venue_id'], ['venues.venue_id'], ondelete='RESTRICT',
                                name=op.f('fk_events_venue_id_venues')),
        sa.CheckConstraint('end_datetime > start_datetime', name=op.f('ck_events_end_after_start')),
        sa.CheckConstraint(
            "status IN ('draft', 'published', 'cancelled', 'completed')",
            name=op.f('ck_events_status'),
        ),
        comment='Main table for event information',
    )
    op.create_index(op.f('ix_events_organizer_id'), 'events', ['organizer_id'])
    op.create_index('idx_events_datetime', 'events', ['start_datetime', 'end_datetime'])
    op.create_index('idx_events_status', 'events', ['status'])

    op.create_table(
        'event_schedule',
        sa.Column('schedule_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('session_title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('speaker_name', sa.String(100), nullable=True),
        sa.Column('speaker_bio', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('schedule_id', name=op.f('pk_event_schedule')),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE',
                                name=op.f('fk_event_schedule_event_id_events')),
        sa.CheckConstraint('end_time > start_time', name=op.f('ck_event_schedule_end_after_start')),
        comment='Detailed schedule for multi-session events',
    )
    op.create_index(op.f('ix_event_schedule_event_id'), 'event_schedule', ['event_id'])

    # ============================================
    # 4. Ticketing
    # ============================================
    op.create_table(
        'ticket_types',
        sa.Column('ticket_type_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(255), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('quantity_available', sa.Integer(), nullable=False),
        sa.Column('quantity_sold', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sales_start', sa.DateTime(), nullable=False),
        sa.Column('sales_end', sa.DateTime(), nullable=False),
        sa.Column('max_per_user', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('ticket_type_id', name=op.f('pk_ticket_types')),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE',
                                name=op.f('fk_ticket_types_event_id_events')),
        sa.CheckConstraint('sales_end > sales_start', name=op.f('ck_ticket_types_sales_window')),
        sa.CheckConstraint('quantity_available >= 0',
                           name=op.f('ck_ticket_types_quantity_available_non_negative')),
        sa.CheckConstraint('max_per_user > 0', name=op.f('ck_ticket_types_max_per_user_positive')),
        sa.CheckConstraint('price >= 0', name=op.f('ck_ticket_types_price_non_negative')),
        sa.CheckConstraint('quantity_sold >= 0 AND quantity_sold <= quantity_available',
                           name=op.f('ck_ticket_types_quantity_sold_within_available')),
        comment='Defines different ticket types for events',
    )
    op.create_index(op.f('ix_ticket_types_event_id'), 'ticket_types', ['event_id'])

    op.create_table(
        'tickets',
        sa.Column('ticket_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('ticket_type_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('purchase_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('status', sa.String(20), nullable=False, server_default='active'),
        sa.Column('seat_number', sa.String(20), nullable=True),
        sa.Column('section_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('ticket_id', name=op.f('pk_tickets')),
        sa.ForeignKeyConstraint(['ticket_type_id'], ['ticket_types.ticket_type_id'], ondelete='RESTRICT',
                                name=op.f('fk_tickets_ticket_type_id_ticket_types')),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='RESTRICT',
                                name=op.f('fk_tickets_user_id_users')),
        sa.ForeignKeyConstraint(['section_id'], ['venue_sections.section_id'], ondelete='RESTRICT',
                                name=op.f('fk_tickets_section_id_venue_sections')),
        sa.CheckConstraint("status IN ('active', 'cancelled', 'redeemed')", name=op.f('ck_tickets_status')),
        comment='Individual tickets purchased by users',
    )
    op.create_index(op.f('ix_tickets_ticket_type_id'), 'tickets', ['ticket_type_id'])
    op.create_index('idx_tickets_user', 'tickets', ['user_id'])
    op.create_index('idx_tickets_status', 'tickets', ['status'])

    # ============================================
    # 5. Engagement
    # ============================================
    op.create_table(
        'rsvps',
        sa.Column('rsvp_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('response', sa.String(20), nullable=False),
        sa.Column('response_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('guests', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('rsvp_id', name=op.f('pk_rsvps')),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE',
                                name=op.f('fk_rsvps_event_id_events')),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='RESTRICT',
                                name=op.f('fk_rsvps_user_id_users')),
        sa.UniqueConstraint('event_id', 'user_id', name=op.f('uq_rsvps_event_id_user_id')),
        sa.CheckConstraint("response IN ('confirmed', 'waitlisted', 'cancelled')",
                           name=op.f('ck_rsvps_response')),
        sa.CheckConstraint('guests >= 0', name=op.f('ck_rsvps_guests_non_negative')),
        comment='Tracks user RSVPs for events',
    )
    op.create_index('idx_rsvps_event_user', 'rsvps', ['event_id', 'user_id'])

    op.create_table(
        'notifications',
        sa.Column('notification_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('notification_type', sa.String(20), nullable=False),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('notification_id', name=op.f('pk_notifications')),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='RESTRICT',
                                name=op.f('fk_notifications_user_id_users')),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='SET NULL',
                                name=op.f('fk_notifications_event_id_events')),
        sa.CheckConstraint(
            "notification_type IN ('reminder', 'update', 'promotional', 'system')",
            name=op.f('ck_notifications_notification_type'),
        ),
        comment='Tracks notifications sent to users',
    )
    op.create_index('idx_notifications_user', 'notifications', ['user_id'])

    op.create_table(
        'event_feedback',
        sa.Column('feedback_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.SmallInteger(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('feedback_id', name=op.f('pk_event_feedback')),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE',
                                name=op.f('fk_event_feedback_event_id_events')),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='RESTRICT',
                                name=op.f('fk_event_feedback_user_id_users')),
        sa.UniqueConstraint('event_id', 'user_id', name=op.f('uq_event_feedback_event_id_user_id')),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name=op.f('ck_event_feedback_rating_range')),
        comment='Stores attendee feedback for events',
    )

    # ============================================
    # 6. Sponsorship
    # ============================================
    op.create_table(
        'sponsors',
        sa.Column('sponsor_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('logo_url', sa.String(255), nullable=True),
        sa.Column('website_url', sa.String(255), nullable=True),
        sa.Column('contact_email', sa.String(100), nullable=True),
        sa.Column('contact_phone', sa.String(20), nullable=True),
        sa.PrimaryKeyConstraint('sponsor_id', name=op.f('pk_sponsors')),
        comment='Information about event sponsors',
    )

    op.create_table(
        'sponsorship_tiers',
        sa.Column('tier_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('description', sa.String(255), nullable=True),
        sa.Column('min_amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('benefits', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('tier_id', name=op.f('pk_sponsorship_tiers')),
        sa.UniqueConstraint('name', name=op.f('uq_sponsorship_tiers_name')),
        sa.CheckConstraint('min_amount >= 0', name=op.f('ck_sponsorship_tiers_min_amount_non_negative')),
        comment='Defines different sponsorship tiers',
    )

    op.create_table(
        'event_sponsors',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('sponsor_id', sa.Integer(), nullable=False),
        sa.Column('tier_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False),
        sa.Column('agreement_details', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('event_id', 'sponsor_id', name=op.f('pk_event_sponsors')),
        sa.ForeignKeyConstraint(['event_id'], ['events.event_id'], ondelete='CASCADE',
                                name=op.f('fk_event_sponsors_event_id_events')),
        sa.ForeignKeyConstraint(['sponsor_id'], ['sponsors.sponsor_id'], ondelete='RESTRICT',
                                name=op.f('fk_event_sponsors_sponsor_id_sponsors')),
        sa.ForeignKeyConstraint(['tier_id'], ['sponsorship_tiers.tier_id'], ondelete='RESTRICT',
                                name=op.f('fk_event_sponsors_tier_id_sponsorship_tiers')),
        sa.CheckConstraint('amount >= 0', name=op.f('ck_event_sponsors_amount_non_negative')),
        comment='Maps sponsors to events with tier information',
    )
    op.create_index(op.f('ix_event_sponsors_tier_id'), 'event_sponsors', ['tier_id'])


def downgrade() -> None:
    op.drop_index(op.f('ix_event_sponsors_tier_id'), table_name='event_sponsors')
    op.drop_table('event_sponsors')
    op.drop_table('sponsorship_tiers')
    op.drop_table('sponsors')
    op.drop_table('event_feedback')
    op.drop_index('idx_notifications_user', table_name='notifications')
    op.drop_table('notifications')
    op.drop_index('idx_rsvps_event_user', table_name='rsvps')
    op.drop_table('rsvps')
    op.drop_index('idx_tickets_status', table_name='tickets')
    op.drop_index('idx_tickets_user', table_name='tickets')
    op.drop_index(op.f('ix_tickets_ticket_type_id'), table_name='tickets')
    op.drop_table('tickets')
    op.drop_index(op.f('ix_ticket_types_event_id'), table_name='ticket_types')
    op.drop_table('ticket_types')
    op.drop_index(op.f('ix_event_schedule_event_id'), table_name='event_schedule')
    op.drop_table('event_schedule')
    op.drop_index('idx_events_status', table_name='events')
    op.drop_index('idx_events_datetime', table_name='events')
    op.drop_index(op.f('ix_events_organizer_id'), table_name='events')
    op.drop_table('events')
    op.drop_table('event_categories')
    op.drop_index(op.f('ix_venue_sections_venue_id'), table_name='venue_sections')
    op.drop_table('venue_sections')
    op.drop_table('venues')
    op.drop_table('user_role_mapping')
    op.drop_table('user_roles')
    op.drop_table('users')
