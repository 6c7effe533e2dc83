"""create training catalog schema

Revision ID: 4b1d0c6e92aa
Revises:
Create Date: 2026-10-19 10:12:03.518204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# enum types are created with their first table and dropped explicitly
user_role = sa.Enum('admin', 'manager', 'viewer', name='user_role')
user_status = sa.Enum('active', 'suspended', name='user_status')
muscle_role = sa.Enum('primary', 'secondary', name='muscle_role')

LOOKUPS = (
    'plane', 'laterality', 'difficulty_level', 'exercise_type',
    'equipment', 'movement_pattern', 'physical_capability', 'muscle_group',
)

# (table, column) pairs indexed for the joins and duplicate checks
INDEXES = (
    ('users', 'id'),
    ('physical_subcapability', 'capability_id'),
    ('training_method', 'subcapability_id'),
    ('muscle_subgroup', 'group_id'),
    ('muscle', 'subgroup_id'),
    ('exercise', 'name_es'),
    ('exercise_muscle', 'exercise_id'),
    ('exercise_muscle', 'muscle_id'),
    ('exercise_equipment', 'exercise_id'),
    ('exercise_equipment', 'equipment_id'),
    ('exercise_movement_pattern', 'exercise_id'),
    ('exercise_movement_pattern', 'pattern_id'),
    ('exercise_muscle_subgroup', 'exercise_id'),
    ('exercise_muscle_subgroup', 'subgroup_id'),
)


# revision identifiers, used by Alembic.
revision: str = '4b1d0c6e92aa'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) admin accounts
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('role', user_role, nullable=False, server_default='viewer'),
        sa.Column('status', user_status, nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2) id + name lookups
    for table in LOOKUPS:
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=120), nullable=False),
        )

    # 3) lookups with a parent
    op.create_table(
        'physical_subcapability',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('capability_id', sa.Integer(), sa.ForeignKey('physical_capability.id'), nullable=False),
    )
    op.create_table(
        'training_method',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('subcapability_id', sa.Integer(), sa.ForeignKey('physical_subcapability.id'), nullable=False),
    )
    op.create_table(
        'muscle_subgroup',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('group_id', sa.Integer(), sa.ForeignKey('muscle_group.id'), nullable=False),
    )
    op.create_table(
        'muscle',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('subgroup_id', sa.Integer(), sa.ForeignKey('muscle_subgroup.id'), nullable=True),
    )

    # 4) exercises
    op.create_table(
        'exercise',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name_es', sa.String(length=200), nullable=False),
        sa.Column('name_en', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('urlvideo', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('plane_id', sa.Integer(), sa.ForeignKey('plane.id'), nullable=True),
        sa.Column('laterality_id', sa.Integer(), sa.ForeignKey('laterality.id'), nullable=True),
        sa.Column('difficulty_id', sa.Integer(), sa.ForeignKey('difficulty_level.id'), nullable=True),
        sa.Column('training_method_id', sa.Integer(), sa.ForeignKey('training_method.id'), nullable=True),
        sa.Column('type_id', sa.Integer(), sa.ForeignKey('exercise_type.id'), nullable=True),
    )

    # 5) join rows; no ON DELETE CASCADE, the repository removes them first
    op.create_table(
        'exercise_muscle',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercise.id'), nullable=False),
        sa.Column('muscle_id', sa.Integer(), sa.ForeignKey('muscle.id'), nullable=False),
        sa.Column('role', muscle_role, nullable=False, server_default='primary'),
    )
    op.create_table(
        'exercise_equipment',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercise.id'), nullable=False),
        sa.Column('equipment_id', sa.Integer(), sa.ForeignKey('equipment.id'), nullable=False),
    )
    op.create_table(
        'exercise_movement_pattern',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercise.id'), nullable=False),
        sa.Column('pattern_id', sa.Integer(), sa.ForeignKey('movement_pattern.id'), nullable=False),
    )
    op.create_table(
        'exercise_muscle_subgroup',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercise.id'), nullable=False),
        sa.Column('subgroup_id', sa.Integer(), sa.ForeignKey('muscle_subgroup.id'), nullable=False),
    )

    for table, column in INDEXES:
        op.create_index(f'ix_{table}_{column}', table, [column])


def downgrade() -> None:
    for table, column in reversed(INDEXES):
        op.drop_index(f'ix_{table}_{column}', table_name=table)

    # drop child tables in reverse order
    op.drop_table('exercise_muscle_subgroup')
    op.drop_table('exercise_movement_pattern')
    op.drop_table('exercise_equipment')
    op.drop_table('exercise_muscle')
    op.drop_table('exercise')
    op.drop_table('muscle')
    op.drop_table('muscle_subgroup')
    op.drop_table('training_method')
    op.drop_table('physical_subcapability')
    for table in reversed(LOOKUPS):
        op.drop_table(table)
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # finally drop enum types
    bind = op.get_bind()
    for enum_type in (muscle_role, user_status, user_role):
        enum_type.drop(bind, checkfirst=True)
