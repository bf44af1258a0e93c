"""add goals and user_settings tables

Revision ID: 8c42d5e6f013
Revises: 3e1f0c9a7b21
Create Date: 2026-10-02 00:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c42d5e6f013'
down_revision: Union[str, Sequence[str], None] = '3e1f0c9a7b21'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'goals' not in tables:
        op.create_table(
            'goals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('goal_type', sa.String(10), nullable=False),
            sa.Column('category', sa.String(20), nullable=False),
            sa.Column('target_value', sa.Numeric(10, 2), nullable=False),
            sa.Column('start_date', sa.Date(), nullable=False),
            sa.Column('end_date', sa.Date(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.CheckConstraint('start_date <= end_date', name='ck_goals_date_range'),
            sa.CheckConstraint('target_value > 0', name='ck_goals_target_positive'),
        )
        op.create_index('ix_goals_user_id', 'goals', ['user_id'])

    if 'user_settings' not in tables:
        op.create_table(
            'user_settings',
            sa.Column('user_id', sa.String(), primary_key=True, nullable=False),
            sa.Column('daily_calorie_goal', sa.Integer(), nullable=False),
            sa.Column('weight_measurement_interval', sa.Integer(), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )


def downgrade() -> None:
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS user_settings')
    op.execute('DROP TABLE IF EXISTS goals')
