"""Initial schema: users, study_plans, study_tasks, study_weeks.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("username", sa.String, nullable=False),
        sa.Column("password", sa.String, nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("users_username_unique", "users", ["username"], unique=True)

    op.create_table(
        "study_plans",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=True),
        sa.Column("course_name", sa.Text, nullable=False),
        sa.Column("exam_date", sa.String, nullable=False),
        sa.Column("weekly_study_time", sa.Integer, nullable=False),
        sa.Column("study_preference", sa.String, nullable=False),
        sa.Column("learning_style", sa.String, nullable=True),
        sa.Column("study_materials", sa.JSON, nullable=True),
        sa.Column("topics", sa.JSON, nullable=False),
        sa.Column("topics_progress", sa.JSON, nullable=True),
        sa.Column("resources", sa.JSON, nullable=False),
        sa.Column("selected_schedule", sa.Integer, server_default="1"),
        sa.Column("created_at", sa.String, nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_study_plans_user_id", "study_plans", ["user_id"])

    op.create_table(
        "study_tasks",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "study_plan_id", sa.Integer, sa.ForeignKey("study_plans.id"), nullable=False
        ),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("date", sa.String, nullable=False),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("resource", sa.Text, nullable=True),
        sa.Column("is_completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("task_type", sa.String, nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_study_tasks_study_plan_id", "study_tasks", ["study_plan_id"])

    op.create_table(
        "study_weeks",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "study_plan_id", sa.Integer, sa.ForeignKey("study_plans.id"), nullable=False
        ),
        sa.Column("week_start", sa.String, nullable=False),
        sa.Column("week_end", sa.String, nullable=False),
        sa.Column("monday_task", sa.JSON, nullable=True),
        sa.Column("wednesday_task", sa.JSON, nullable=True),
        sa.Column("friday_task", sa.JSON, nullable=True),
        sa.Column("weekend_task", sa.JSON, nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_study_weeks_study_plan_id", "study_weeks", ["study_plan_id"])


def downgrade() -> None:
    op.drop_table("study_weeks")
    op.drop_table("study_tasks")
    op.drop_table("study_plans")
    op.drop_index("users_username_unique", table_name="users")
    op.drop_table("users")
