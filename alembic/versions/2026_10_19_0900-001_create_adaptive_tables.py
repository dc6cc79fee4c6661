"""Create adaptive coach tables

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

_STR = sqlmodel.sql.sqltypes.AutoString

# (table, indexed columns) for the append-only per-user logs
_LOG_INDEXES = [
    ('workout_logs', ['user_id', 'date']),
    ('exercise_history', ['user_id', 'exercise_id', 'date']),
    ('sleep_logs', ['user_id', 'date']),
    ('nutrition_logs', ['user_id', 'date']),
    ('meal_logs', ['user_id', 'date']),
]


def upgrade() -> None:
    """Create state, recommendation and log tables."""
    # Per-user state
    op.create_table('user_fatigue', sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('current_fatigue', sa.Float(), nullable=False),
        sa.Column('baseline_fatigue', sa.Float(), nullable=False),
        sa.Column('recovery_rate', sa.Float(), nullable=False),
        sa.Column('recovery_status', _STR(length=16), nullable=False),
        sa.Column('ready_to_train', sa.Boolean(), nullable=False),
        sa.Column('muscle_group_fatigue', sa.JSON(), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id'))

    op.create_table('training_preferences', sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('preferred_time', _STR(length=16), nullable=False),
        sa.Column('preferred_duration', sa.Integer(), nullable=False),
        sa.Column('preferred_exercises_per_workout', sa.Integer(), nullable=False),
        sa.Column('preferred_frequency', sa.Integer(), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id'))

    op.create_table('learning_profiles', sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('response_to_volume', sa.Float(), nullable=False),
        sa.Column('response_to_intensity', sa.Float(), nullable=False),
        sa.Column('response_to_frequency', sa.Float(), nullable=False),
        sa.Column('recovery_capacity', sa.Float(), nullable=False),
        sa.Column('nutrition_adherence', sa.Float(), nullable=False),
        sa.Column('exercise_preferences', sa.JSON(), nullable=False),
        sa.Column('exercise_avoidances', sa.JSON(), nullable=False),
        sa.Column('learning_rate', sa.Float(), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id'))

    op.create_table('exercise_response_profiles', sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('exercise_id', _STR(length=100), nullable=False),
        sa.Column('effectiveness_score', sa.Float(), nullable=False),
        sa.Column('fatigue_impact', sa.Float(), nullable=False),
        sa.Column('recovery_time', sa.Float(), nullable=False),
        sa.Column('preferred_rep_range', sa.JSON(), nullable=False),
        sa.Column('preferred_rir_range', sa.JSON(), nullable=False),
        sa.Column('notes', _STR(), nullable=False),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id', 'exercise_id'))

    op.create_table('personalized_recommendations', sa.Column('id', _STR(length=36), nullable=False),
        sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('type', _STR(length=16), nullable=False),
        sa.Column('title', _STR(length=255), nullable=False),
        sa.Column('description', _STR(), nullable=False),
        sa.Column('priority', _STR(length=8), nullable=False),
        sa.Column('base_reason', _STR(length=255), nullable=False),
        sa.Column('data_points', sa.JSON(), nullable=False),
        sa.Column('created', sa.DateTime(), nullable=False),
        sa.Column('expires', sa.DateTime(), nullable=True),
        sa.Column('implemented', sa.Boolean(), nullable=False),
        sa.Column('result', _STR(), nullable=True),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_personalized_recommendations_user_id'), 'personalized_recommendations',
                    ['user_id'], unique=False)

    # Logs
    op.create_table('workout_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('perceived_exertion', sa.Float(), nullable=True),
        sa.Column('notes', _STR(), nullable=True),
        sa.Column('completed_sets', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('exercise_history', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('exercise_id', _STR(length=100), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('rir', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('sleep_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('quality', sa.Float(), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('nutrition_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('adherence_score', sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('meal_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', _STR(length=64), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('meal_type', _STR(length=32), nullable=True),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('id'))

    for table, columns in _LOG_INDEXES:
        for column in columns:
            op.create_index(op.f(f'ix_{table}_{column}'), table, [column], unique=False)


def downgrade() -> None:
    """Drop all adaptive coach tables."""
    for table, columns in reversed(_LOG_INDEXES):
        for column in columns:
            op.drop_index(op.f(f'ix_{table}_{column}'), table_name=table)
        op.drop_table(table)

    op.drop_index(op.f('ix_personalized_recommendations_user_id'), table_name='personalized_recommendations')
    op.drop_table('personalized_recommendations')
    op.drop_table('exercise_response_profiles')
    op.drop_table('learning_profiles')
    op.drop_table('training_preferences')
    op.drop_table('user_fatigue')
