"""Initial schema: users, exercises, workout_days, workout_logs, weight_log.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

starting_weight_type = sa.Enum(
    "Barbell", "EZ Bar", "Dumbbell", "Smith Machine", "Custom", name="startingweighttype"
)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("body_part", sa.String(length=100), nullable=False),
        sa.Column("sets_range", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("reps_range", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("weight_increment", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("rest_timer", sa.Integer(), nullable=False, server_default="60"),
        sa.Column("starting_weight_type", starting_weight_type, nullable=False, server_default="Barbell"),
        sa.Column("custom_starting_weight", sa.Numeric(precision=8, scale=2), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE", name=op.f("fk_exercises_user_id_users")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
    )
    op.create_index("ix_exercises_user_name", "exercises", ["user_id", "name"], unique=False)

    op.create_table(
        "workout_days",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("day_name", sa.String(length=255), nullable=False),
        sa.Column("exercises", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_completed", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "progression_schemes",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE", name=op.f("fk_workout_days_user_id_users")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_days")),
    )
    op.create_index("ix_workout_days_user_order", "workout_days", ["user_id", "display_order"], unique=False)

    op.create_table(
        "workout_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("exercise", sa.String(length=255), nullable=False),
        sa.Column("completed_sets", sa.Integer(), nullable=False),
        sa.Column("failed_rep", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("target_reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.Column("estimated_one_rm", sa.Numeric(precision=8, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE", name=op.f("fk_workout_logs_user_id_users")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_logs")),
    )
    op.create_index(
        "ix_workout_logs_user_exercise_date",
        "workout_logs",
        ["user_id", "exercise", "date"],
        unique=False,
    )

    op.create_table(
        "weight_log",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("weight", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE", name=op.f("fk_weight_log_user_id_users")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_weight_log")),
    )
    op.create_index("ix_weight_log_user_date", "weight_log", ["user_id", "date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_weight_log_user_date", table_name="weight_log")
    op.drop_table("weight_log")
    op.drop_index("ix_workout_logs_user_exercise_date", table_name="workout_logs")
    op.drop_table("workout_logs")
    op.drop_index("ix_workout_days_user_order", table_name="workout_days")
    op.drop_table("workout_days")
    op.drop_index("ix_exercises_user_name", table_name="exercises")
    op.drop_table("exercises")
    starting_weight_type.drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
