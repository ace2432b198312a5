from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from core.setup import Base


class StudyPlan(Base):
    """Represents a user's preparation plan for one exam."""
    __tablename__ = "study_plans"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    # Anonymous plans have no owner
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    course_name = Column(Text, nullable=False)
    exam_date = Column(String, nullable=False)  # ISO-8601 date
    weekly_study_time = Column(Integer, nullable=False)  # minutes
    study_preference = Column(String, nullable=False)
    learning_style = Column(String, nullable=True)
    study_materials = Column(JSON, nullable=True)
    topics = Column(JSON, nullable=False)
    topics_progress = Column(JSON, nullable=True)
    resources = Column(JSON, nullable=False)
    selected_schedule = Column(Integer, default=1)
    created_at = Column(String, nullable=False)  # ISO-8601 timestamp

    # No cascade: deleting a plan leaves its tasks and weeks in place
    user = relationship("User", back_populates="study_plans")
    tasks = relationship(
        "StudyTask", back_populates="study_plan", passive_deletes="all"
    )
    weeks = relationship(
        "StudyWeek", back_populates="study_plan", passive_deletes="all"
    )


class StudyTask(Base):
    """Represents one scheduled activity within a study plan."""
    __tablename__ = "study_tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    study_plan_id = Column(
        Integer, ForeignKey("study_plans.id"), nullable=False, index=True
    )
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(String, nullable=False)  # ISO-8601 date
    duration = Column(Integer, nullable=False)  # minutes
    resource = Column(Text, nullable=True)
    is_completed = Column(Boolean, default=False, nullable=False)
    task_type = Column(String, nullable=False)

    study_plan = relationship("StudyPlan", back_populates="tasks")


class StudyWeek(Base):
    """Calendar view of a plan week with up to four task snapshots."""
    __tablename__ = "study_weeks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    study_plan_id = Column(
        Integer, ForeignKey("study_plans.id"), nullable=False, index=True
    )
    week_start = Column(String, nullable=False)
    week_end = Column(String, nullable=False)
    monday_task = Column(JSON, nullable=True)
    wednesday_task = Column(JSON, nullable=True)
    friday_task = Column(JSON, nullable=True)
    weekend_task = Column(JSON, nullable=True)

    study_plan = relationship("StudyPlan", back_populates="weeks")
