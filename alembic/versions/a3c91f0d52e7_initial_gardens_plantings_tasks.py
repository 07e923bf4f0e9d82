"""initial gardens, areas, plantings and tasks

Revision ID: a3c91f0d52e7
Revises:
Create Date: 2026-10-17 09:12:44.201533

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = 'a3c91f0d52e7'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'gardens',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_gardens_user_id', 'gardens', ['user_id'])

    op.create_table(
        'areas',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('garden_id', sa.Integer(), sa.ForeignKey('gardens.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('area_type', sa.Enum('outdoor', 'greenhouse', name='area_type_enum'), nullable=False),
        sa.Column('length_ft', sa.Float(), nullable=True),
        sa.Column('width_ft', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_areas_garden_id', 'areas', ['garden_id'])

    op.create_table(
        'plantings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('garden_id', sa.Integer(), sa.ForeignKey('gardens.id', ondelete='CASCADE'), nullable=False),
        sa.Column('area_id', sa.Integer(), sa.ForeignKey('areas.id', ondelete='CASCADE'), nullable=False),
        sa.Column('plant_id', sa.String(length=100), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('date_planted', sa.Date(), nullable=False),
        sa.Column('location_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.Enum('active', 'removed', name='planting_status_enum'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('quantity >= 1', name='ck_plantings_quantity_positive'),
    )
    op.create_index('ix_plantings_user_id', 'plantings', ['user_id'])
    op.create_index('ix_plantings_garden_id', 'plantings', ['garden_id'])
    op.create_index('ix_plantings_area_id', 'plantings', ['area_id'])
    op.create_index('ix_plantings_plant_id', 'plantings', ['plant_id'])

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('planting_id', sa.Integer(), sa.ForeignKey('plantings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('garden_id', sa.Integer(), nullable=False),
        sa.Column(
            'task_type',
            sa.Enum('water', 'harvest', 'pestCheck', 'general', name='task_type_enum'),
            nullable=False,
        ),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('status', sa.Enum('pending', 'completed', name='task_status_enum'), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('details', sa.Text(), nullable=False),
        sa.Column('related_plant_name', sa.String(length=200), nullable=True),
        sa.Column('related_area_id', sa.Integer(), nullable=True),
        sa.Column('recurring', sa.Boolean(), nullable=False),
        sa.Column('recurring_days', sa.Integer(), nullable=True),
        sa.Column('notification_sent', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "(recurring = false AND recurring_days IS NULL) "
            "OR (recurring = true AND recurring_days > 0)",
            name='ck_tasks_recurrence',
        ),
        sa.CheckConstraint(
            "(status = 'completed') = (completed_at IS NOT NULL)",
            name='ck_tasks_completed_at',
        ),
    )
    op.create_index('ix_tasks_user_id', 'tasks', ['user_id'])
    op.create_index('ix_tasks_planting_id', 'tasks', ['planting_id'])
    op.create_index('ix_tasks_garden_id', 'tasks', ['garden_id'])
    op.create_index('ix_tasks_due_date', 'tasks', ['due_date'])


def downgrade() -> None:
    op.drop_table('tasks')
    op.drop_table('plantings')
    op.drop_table('areas')
    op.drop_table('gardens')
    op.execute("DROP TYPE IF EXISTS task_type_enum")
    op.execute("DROP TYPE IF EXISTS task_status_enum")
    op.execute("DROP TYPE IF EXISTS planting_status_enum")
    op.execute("DROP TYPE IF EXISTS area_type_enum")
