"""create activity log tables

Revision ID: 3e1f0c9a7b21
Revises:
Create Date: 2026-09-28 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e1f0c9a7b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def _value_log(name: str, value_col: str, precision: int) -> None:
    op.create_table(
        name,
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column(value_col, sa.Numeric(precision, 2), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(f'ix_{name}_user_id', name, ['user_id'])
    op.create_index(f'ix_{name}_date', name, ['date'])


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'meals' not in tables:
        op.create_table(
            'meals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('time', sa.Time(), nullable=False),
            sa.Column('food', sa.String(), nullable=False),
            sa.Column('calories', sa.Integer(), nullable=False),
            *_timestamps(),
        )
        op.create_index('ix_meals_user_id', 'meals', ['user_id'])
        op.create_index('ix_meals_date', 'meals', ['date'])

    if 'gym_sessions' not in tables:
        op.create_table(
            'gym_sessions',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('exercise', sa.String(), nullable=False),
            sa.Column('duration', sa.Integer(), nullable=False),
            sa.Column('notes', sa.String(), nullable=True),
            *_timestamps(),
        )
        op.create_index('ix_gym_sessions_user_id', 'gym_sessions', ['user_id'])
        op.create_index('ix_gym_sessions_date', 'gym_sessions', ['date'])

    if 'sleep_entries' not in tables:
        _value_log('sleep_entries', 'hours', 4)
    if 'weight_entries' not in tables:
        _value_log('weight_entries', 'weight', 6)
    if 'waist_entries' not in tables:
        _value_log('waist_entries', 'waist', 6)

    if 'daily_notes' not in tables:
        op.create_table(
            'daily_notes',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('tags', sa.JSON(), nullable=False),
            sa.Column('severity', sa.Integer(), nullable=True),
            sa.Column('notes', sa.String(), nullable=True),
            *_timestamps(),
            sa.UniqueConstraint('user_id', 'date', name='uq_daily_notes_user_date'),
        )
        op.create_index('ix_daily_notes_user_id', 'daily_notes', ['user_id'])


def downgrade() -> None:
    # Safe drop if exists
    for name in ('daily_notes', 'waist_entries', 'weight_entries', 'sleep_entries', 'gym_sessions', 'meals'):
        op.execute(f'DROP TABLE IF EXISTS {name}')
