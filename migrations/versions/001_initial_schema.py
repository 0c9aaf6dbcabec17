"""Initial schema for wallets and wallet identities

Revision ID: 001
Revises: 
Create Date: 2026-10-17 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create wallets table
    op.create_table('wallets',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # Create wallet_identities table
    op.create_table('wallet_identities',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('wallet_id', sa.Integer(), nullable=False),
        sa.Column('enrollment_id', sa.String(length=255), nullable=False),
        sa.Column('data', sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['wallet_id'], ['wallets.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('wallet_id', 'enrollment_id', name='uq_wallet_identities_wallet_enrollment')
    )

    # Create indexes for wallet_identities
    op.create_index('idx_wallet_identities_wallet', 'wallet_identities', ['wallet_id'])


def downgrade() -> None:
    op.drop_index('idx_wallet_identities_wallet', table_name='wallet_identities')
    op.drop_table('wallet_identities')
    op.drop_table('wallets')
