"""create_expenses

Revision ID: create_expenses_001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'create_expenses_001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the expenses table and its indexes."""
    op.create_table('expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('category', sa.String(length=32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_expenses_created_at', 'expenses', ['created_at'], unique=False)
    op.create_index('idx_expenses_category', 'expenses', ['category'], unique=False)


def downgrade() -> None:
    """Drop the expenses table."""
    op.drop_index('idx_expenses_category', table_name='expenses')
    op.drop_index('idx_expenses_created_at', table_name='expenses')
    op.drop_table('expenses')
