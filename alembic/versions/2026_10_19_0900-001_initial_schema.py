"""Initial schema: profile, weekly metrics, push subscriptions

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table('user_profile', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('sex', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=False),
        sa.Column('height_cm', sa.Float(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('health_metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('sleep_score', sa.Integer(), nullable=False),
        sa.Column('waist_cm', sa.Float(), nullable=False),
        sa.Column('rhr', sa.Integer(), nullable=False),
        sa.Column('nutrition_score', sa.Float(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_health_metrics_date'), 'health_metrics', ['date'], unique=True)

    op.create_table('fitness_metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('vo2_max', sa.Float(), nullable=False),
        sa.Column('weekly_workouts', sa.Integer(), nullable=False),
        sa.Column('daily_steps', sa.Integer(), nullable=False),
        sa.Column('weekly_mobility', sa.Integer(), nullable=False),
        sa.Column('cardio_recovery', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_fitness_metrics_date'), 'fitness_metrics', ['date'], unique=True)

    op.create_table('cognition_metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('dual_n_back_level', sa.Integer(), nullable=False),
        sa.Column('reaction_time_ms', sa.Integer(), nullable=False),
        sa.Column('weekly_mindfulness', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_cognition_metrics_date'), 'cognition_metrics', ['date'], unique=True)

    op.create_table('push_subscriptions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('endpoint', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('p256dh', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('auth', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('reminder_day', sa.Integer(), nullable=False),
        sa.Column('reminder_time', sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column('timezone', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_push_subscriptions_endpoint'), 'push_subscriptions', ['endpoint'], unique=True)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_push_subscriptions_endpoint'), table_name='push_subscriptions')
    op.drop_table('push_subscriptions')
    op.drop_index(op.f('ix_cognition_metrics_date'), table_name='cognition_metrics')
    op.drop_table('cognition_metrics')
    op.drop_index(op.f('ix_fitness_metrics_date'), table_name='fitness_metrics')
    op.drop_table('fitness_metrics')
    op.drop_index(op.f('ix_health_metrics_date'), table_name='health_metrics')
    op.drop_table('health_metrics')
    op.drop_table('user_profile')
