"""initial coach schema with default exercises

Revision ID: 0001_initial_schema
Revises: 
Create Date: 2026-10-19 10:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MUSCLE_GROUPS = ("chest", "back", "shoulders", "biceps", "triceps", "legs", "glutes", "abs", "cardio")

WEEK_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

DEFAULT_EXERCISES = (
    ("push-ups", "Отжимания", "chest"),
    ("pull-ups", "Подтягивания", "back"),
    ("squats", "Приседания", "legs"),
    ("plank", "Планка", "abs"),
    ("bench-press", "Жим лёжа", "chest"),
    ("deadlift", "Становая тяга", "back"),
)


def muscle_group_type(column: str) -> sa.Enum:
    return sa.Enum(
        *MUSCLE_GROUPS,
        name=f"{column}_musclegroup",
        native_enum=False,
        create_constraint=True,
        length=32,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("telegram_id", sa.String(length=64), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=True),
        sa.Column("first_name", sa.String(length=255), nullable=True),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_telegram_id", "users", ["telegram_id"], unique=True)

    op.create_table(
        "user_stats",
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("current_streak", sa.Integer, nullable=False, server_default="0"),
        sa.Column("best_streak", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_workouts", sa.Integer, nullable=False, server_default="0"),
        sa.Column("badges", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("best_streak >= current_streak", name="ck_user_stats_best_ge_current"),
    )

    exercises = op.create_table(
        "exercises",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("slug", sa.String(length=64), nullable=True, unique=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_group", muscle_group_type("muscle_group"), nullable=False),
        sa.Column("is_custom", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=True,
        ),
    )
    op.create_index("ix_exercises_id", "exercises", ["id"])
    op.create_index("ix_exercises_muscle_group", "exercises", ["muscle_group"])
    op.create_index("ix_exercises_user_id", "exercises", ["user_id"])

    op.create_table(
        "week_plans",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("week", sa.String(length=7), nullable=False),
        *[sa.Column(day, muscle_group_type(day), nullable=True) for day in WEEK_DAYS],
        sa.UniqueConstraint("user_id", "week", name="uq_week_plans_user_week"),
    )
    op.create_index("ix_week_plans_id", "week_plans", ["id"])
    op.create_index("ix_week_plans_user_id", "week_plans", ["user_id"])

    op.create_table(
        "workouts",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("muscle_group", muscle_group_type("muscle_group"), nullable=False),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("duration", sa.Integer, nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "date", "muscle_group", name="uq_workouts_user_date_muscle_group"),
    )
    op.create_index("ix_workouts_id", "workouts", ["id"])
    op.create_index("ix_workouts_user_id", "workouts", ["user_id"])
    op.create_index("ix_workouts_date", "workouts", ["date"])

    op.create_table(
        "workout_sets",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "workout_id",
            sa.Integer,
            sa.ForeignKey("workouts.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "exercise_id",
            sa.Integer,
            sa.ForeignKey("exercises.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("reps", sa.Integer, nullable=False),
        sa.Column("weight", sa.Float, nullable=True),
        sa.Column("rest_time", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("reps > 0", name="ck_workout_sets_reps_positive"),
        sa.CheckConstraint("weight IS NULL OR weight >= 0", name="ck_workout_sets_weight_non_negative"),
    )
    op.create_index("ix_workout_sets_id", "workout_sets", ["id"])
    op.create_index("ix_workout_sets_workout_id", "workout_sets", ["workout_id"])
    op.create_index("ix_workout_sets_exercise_id", "workout_sets", ["exercise_id"])

    op.bulk_insert(
        exercises,
        [
            {"slug": slug, "name": name, "muscle_group": muscle_group, "is_custom": False, "user_id": None}
            for slug, name, muscle_group in DEFAULT_EXERCISES
        ],
    )


def downgrade() -> None:
    op.drop_table("workout_sets")
    op.drop_table("workouts")
    op.drop_table("week_plans")
    op.drop_table("exercises")
    op.drop_table("user_stats")
    op.drop_table("users")
