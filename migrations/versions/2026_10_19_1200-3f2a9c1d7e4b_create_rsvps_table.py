"""create rsvps table

Revision ID: 3f2a9c1d7e4b
Revises:
Create Date: 2026-10-19 12:00:00

"""
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e4b'
down_revision: Union[str, None] = None
branch_labels: Union[str, None] = None
depends_on: Union[str, None] = None


def upgrade() -> None:
    op.create_table(
        'rsvps',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, server_default=''),
        sa.Column('phone', sa.String(50), nullable=False, server_default=''),
        sa.Column('attending', sa.String(50), nullable=False, server_default=''),
        sa.Column('guestCount', sa.Integer, nullable=False, server_default='1'),
        sa.Column('meal', sa.String(255), nullable=False, server_default=''),
        sa.Column('allergies', sa.Text, nullable=False, server_default=''),
        sa.Column('message', sa.Text, nullable=False, server_default=''),
        sa.Column('createdAt', sa.String(32), nullable=False),
        sa.Column('ip', sa.String(64), nullable=False, server_default=''),
    )
    op.create_index('ix_rsvps_createdAt', 'rsvps', ['createdAt'])


def downgrade() -> None:
    op.drop_index('ix_rsvps_createdAt', table_name='rsvps')
    op.drop_table('rsvps')
