"""Initial schema: users, workouts, events, event_registrations, trainee_progress

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum('admin', 'member', name='user_role')


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('height', sa.Float(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('bmi', sa.Float(), nullable=True),
        sa.Column('join_date', sa.String(length=10), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('event_title', sa.String(length=150), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=False),
        sa.Column('reps_or_secs', sa.Integer(), nullable=False),
        sa.Column('rest_time', sa.Integer(), nullable=False),
        sa.Column('image_uri', sa.String(length=255), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('sets >= 0', name='ck_workouts_sets'),
        sa.CheckConstraint('reps_or_secs >= 0', name='ck_workouts_reps'),
        sa.CheckConstraint('rest_time >= 0', name='ck_workouts_rest'),
    )
    op.create_index('ix_workouts_user_id', 'workouts', ['user_id'])
    op.create_index('ix_workouts_created_at', 'workouts', ['created_at'])
    op.create_index('idx_workouts_user_completed', 'workouts', ['user_id', 'is_completed'])

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=150), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('time', sa.String(length=5), nullable=False),
        sa.Column('location', sa.String(length=100), nullable=False),
        sa.Column('image_uri', sa.String(length=255), nullable=True),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_events_date', 'events', ['date'])

    op.create_table(
        'event_registrations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('events.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('registration_date', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('event_id', 'user_id', name='uq_event_registrations_event_user'),
    )

    op.create_table(
        'trainee_progress',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trainee_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('completed_workouts', sa.Integer(), nullable=False),
        sa.Column('total_workouts', sa.Integer(), nullable=False),
        sa.Column('last_updated', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_trainee_progress_trainee_id', 'trainee_progress', ['trainee_id'])


def downgrade():
    op.drop_index('ix_trainee_progress_trainee_id', table_name='trainee_progress')
    op.drop_table('trainee_progress')
    op.drop_table('event_registrations')
    op.drop_index('ix_events_date', table_name='events')
    op.drop_table('events')
    op.drop_index('idx_workouts_user_completed', table_name='workouts')
    op.drop_index('ix_workouts_created_at', table_name='workouts')
    op.drop_index('ix_workouts_user_id', table_name='workouts')
    op.drop_table('workouts')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
    user_role.drop(op.get_bind(), checkfirst=True)
