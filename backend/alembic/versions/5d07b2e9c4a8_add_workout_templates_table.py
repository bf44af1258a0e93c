"""add workout_templates table

Revision ID: 5d07b2e9c4a8
Revises: 8c42d5e6f013
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d07b2e9c4a8'
down_revision: Union[str, Sequence[str], None] = '8c42d5e6f013'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    if 'workout_templates' not in inspector.get_table_names():
        op.create_table(
            'workout_templates',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('exercises', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )
        op.create_index('ix_workout_templates_user_id', 'workout_templates', ['user_id'])


def downgrade() -> None:
    op.execute('DROP TABLE IF EXISTS workout_templates')
