"""initial_scheduling_schema

Revision ID: 3f9c2a7d1b04
Revises: 
Create Date: 2025-11-12 10:24:31.518204

Creates files, users, appointments and notifications. Slot exclusivity is
enforced by a partial unique index on (provider_id, slot_start) limited to
rows that are not canceled, so concurrent bookings of the same provider
hour cannot both be stored.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a7d1b04'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'files',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('path', sa.String(length=255), nullable=False, unique=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index('ix_files_id', 'files', ['id'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('is_provider', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('avatar_id', sa.Integer(), sa.ForeignKey('files.id'), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])

    op.create_table(
        'appointments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('requester_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('provider_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('date', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('slot_start', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('canceled_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.CheckConstraint('requester_id <> provider_id', name='ck_appointments_not_self'),
    )
    op.create_index('ix_appointments_id', 'appointments', ['id'])
    op.create_index('idx_appointments_requester_date', 'appointments', ['requester_id', 'date'])
    op.create_index(
        'uq_appointments_provider_slot_active',
        'appointments',
        ['provider_id', 'slot_start'],
        unique=True,
        postgresql_where=sa.text('canceled_at IS NULL'),
        sqlite_where=sa.text('canceled_at IS NULL'),
    )

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('content', sa.String(length=500), nullable=False),
        sa.Column('recipient_user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('idx_notifications_recipient_created', 'notifications', ['recipient_user_id', 'created_at'])


def downgrade() -> None:
    op.drop_index('idx_notifications_recipient_created', table_name='notifications')
    op.drop_index('ix_notifications_id', table_name='notifications')
    op.drop_table('notifications')

    op.drop_index('uq_appointments_provider_slot_active', table_name='appointments')
    op.drop_index('idx_appointments_requester_date', table_name='appointments')
    op.drop_index('ix_appointments_id', table_name='appointments')
    op.drop_table('appointments')

    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')

    op.drop_index('ix_files_id', table_name='files')
    op.drop_table('files')
