"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns():
    return [
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    json_type = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')

    op.create_table(
        'users',
        *_base_columns(),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('profile_image', sa.String(1000), nullable=True),
        sa.Column('firebase_uid', sa.String(128), nullable=False),
        sa.Column('study_streak', sa.Integer(), server_default='0', nullable=False),
        sa.Column('study_points', sa.Integer(), server_default='0', nullable=False),
        sa.Column('collaboration_score', sa.Integer(), server_default='0', nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_firebase_uid', 'users', ['firebase_uid'], unique=True)

    op.create_table(
        'study_plans',
        *_base_columns(),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('difficulty', sa.Enum('Low', 'Medium', 'High', name='plan_difficulty'), nullable=True),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
    )
    op.create_index('ix_study_plans_id', 'study_plans', ['id'])
    op.create_index('ix_study_plans_user_id', 'study_plans', ['user_id'])
    op.create_index('ix_study_plans_scheduled_at', 'study_plans', ['scheduled_at'])

    op.create_table(
        'quizzes',
        *_base_columns(),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('questions', json_type, nullable=False),
        sa.Column('score', sa.Integer(), nullable=True),
        sa.Column('total_questions', sa.Integer(), nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
    )
    op.create_index('ix_quizzes_id', 'quizzes', ['id'])
    op.create_index('ix_quizzes_user_id', 'quizzes', ['user_id'])

    op.create_table(
        'study_groups',
        *_base_columns(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('subject', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('owner_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('members_count', sa.Integer(), server_default='1', nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
    )
    op.create_index('ix_study_groups_id', 'study_groups', ['id'])
    op.create_index('ix_study_groups_owner_id', 'study_groups', ['owner_id'])

    op.create_table(
        'study_group_members',
        *_base_columns(),
        sa.Column('group_id', sa.Uuid(), sa.ForeignKey('study_groups.id'), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('joined_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_study_group_members_id', 'study_group_members', ['id'])
    op.create_index('ix_study_group_members_group_id', 'study_group_members', ['group_id'])
    op.create_index('ix_study_group_members_user_id', 'study_group_members', ['user_id'])

    op.create_table(
        'ideas',
        *_base_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('likes', sa.Integer(), server_default='0', nullable=False),
    )
    op.create_index('ix_ideas_id', 'ideas', ['id'])
    op.create_index('ix_ideas_user_id', 'ideas', ['user_id'])

    op.create_table(
        'peer_matches',
        *_base_columns(),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('matched_user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('compatibility', sa.Integer(), nullable=True),
        sa.Column('subjects', json_type, nullable=True),
        sa.Column(
            'status',
            sa.Enum('pending', 'connected', 'declined', name='peer_match_status'),
            nullable=False,
        ),
    )
    op.create_index('ix_peer_matches_id', 'peer_matches', ['id'])
    op.create_index('ix_peer_matches_user_id', 'peer_matches', ['user_id'])

    op.create_table(
        'notifications',
        *_base_columns(),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('read', sa.Boolean(), server_default=sa.false(), nullable=False),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])


def downgrade() -> None:
    op.drop_table('notifications')
    op.drop_table('peer_matches')
    op.drop_table('ideas')
    op.drop_table('study_group_members')
    op.drop_table('study_groups')
    op.drop_table('quizzes')
    op.drop_table('study_plans')
    op.drop_table('users')
    sa.Enum(name='peer_match_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='plan_difficulty').drop(op.get_bind(), checkfirst=True)
