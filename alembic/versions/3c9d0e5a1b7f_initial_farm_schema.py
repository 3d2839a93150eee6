"""initial_farm_schema

Revision ID: 3c9d0e5a1b7f
Revises:
Create Date: 2026-10-17 09:12:44.218305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '3c9d0e5a1b7f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('farm_name', sa.String(length=200), nullable=False),
        sa.Column('role', sa.Enum('farmer', 'admin', name='user_role'), nullable=False),
        sa.Column('profile_image', sa.String(length=500), nullable=True),
        sa.Column('language', sa.String(length=10), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('timezone', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('priority', sa.Enum('low', 'medium', 'high', 'critical', name='task_priority_enum'), nullable=False),
        sa.Column('status', sa.Enum('upcoming', 'today', 'overdue', 'completed', name='task_status_enum'), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('assigned_to', sa.String(length=100), nullable=False),
        sa.Column('recurring', sa.Enum('daily', 'weekly', 'monthly', name='task_recurrence_enum'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tasks_user_id', 'tasks', ['user_id'])
    op.create_index('ix_tasks_due_date', 'tasks', ['due_date'])

    op.create_table(
        'inventory',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=50), nullable=False),
        sa.Column('threshold', sa.Float(), nullable=False),
        sa.Column('status', sa.Enum('low', 'good', name='inventory_status_enum'), nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_inventory_user_id', 'inventory', ['user_id'])

    op.create_table(
        'equipment',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column(
            'status',
            sa.Enum('available', 'in-use', 'maintenance-due', 'out-of-service', name='equipment_status_enum'),
            nullable=False,
        ),
        sa.Column('last_used', sa.Date(), nullable=True),
        sa.Column('assigned_to', sa.String(length=100), nullable=True),
        sa.Column('next_service', sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_equipment_user_id', 'equipment', ['user_id'])

    op.create_table(
        'contacts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_contacts_user_id', 'contacts', ['user_id'])

    op.create_table(
        'weather_preferences',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('location', sa.String(length=200), nullable=False),
        sa.Column('units', sa.Enum('metric', 'imperial', name='weather_units_enum'), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )


def downgrade() -> None:
    op.drop_table('weather_preferences')
    op.drop_index('ix_contacts_user_id', table_name='contacts')
    op.drop_table('contacts')
    op.drop_index('ix_equipment_user_id', table_name='equipment')
    op.drop_table('equipment')
    op.drop_index('ix_inventory_user_id', table_name='inventory')
    op.drop_table('inventory')
    op.drop_index('ix_tasks_due_date', table_name='tasks')
    op.drop_index('ix_tasks_user_id', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')

    # Enum types are not dropped with their tables
    for enum_name in (
        'weather_units_enum', 'equipment_status_enum', 'inventory_status_enum',
        'task_recurrence_enum', 'task_status_enum', 'task_priority_enum', 'user_role',
    ):
        op.execute(f'DROP TYPE IF EXISTS {enum_name}')
