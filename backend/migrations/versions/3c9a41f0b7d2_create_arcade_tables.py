"""create game, player and prize tables

Revision ID: 3c9a41f0b7d2
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9a41f0b7d2'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'game',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('token_cost', sa.Float(), nullable=False),
        sa.Column('top_player', sa.String(length=64), nullable=True),
    )
    op.create_table(
        'player',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('player_id', sa.String(length=64), nullable=True),
        sa.Column('first_name', sa.String(length=64), nullable=False),
        sa.Column('last_name', sa.String(length=64), nullable=False),
        sa.Column('screen_name', sa.String(length=64), nullable=False),
        sa.Column('tokens', sa.Integer(), nullable=True),
        sa.Column('tickets', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('game_stats', sa.JSON(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index('ix_player_player_id', 'player', ['player_id'], unique=True)
    op.create_index('ix_player_screen_name', 'player', ['screen_name'], unique=True)
    op.create_table(
        'prize',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('ticket_cost', sa.Integer(), nullable=False),
        sa.Column('available_quantity', sa.Integer(), nullable=False),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )


def downgrade():
    op.drop_table('prize')
    op.drop_index('ix_player_screen_name', table_name='player')
    op.drop_index('ix_player_player_id', table_name='player')
    op.drop_table('player')
    op.drop_table('game')
