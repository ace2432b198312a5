from datetime import date, datetime
from typing import Annotated, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from util.enum import StudyPreference, LearningStyle

# Task dates share their field name with the type
TaskDate = date

# Percentage of a topic covered so far
Progress = Annotated[int, Field(ge=0, le=100)]


class StudyPlanIn(BaseModel):
    user_id: Optional[int] = None
    course_name: str
    exam_date: date
    weekly_study_time: int  # minutes
    study_preference: StudyPreference
    learning_style: Optional[LearningStyle] = None
    study_materials: Optional[List[str]] = None
    topics: List[str]
    topics_progress: Optional[Dict[str, Progress]] = None
    resources: List[str]
    selected_schedule: Optional[int] = None


class StudyPlanPatch(BaseModel):
    user_id: Optional[int] = None
    course_name: Optional[str] = None
    exam_date: Optional[date] = None
    weekly_study_time: Optional[int] = None
    study_preference: Optional[StudyPreference] = None
    learning_style: Optional[LearningStyle] = None
    study_materials: Optional[List[str]] = None
    topics: Optional[List[str]] = None
    topics_progress: Optional[Dict[str, Progress]] = None
    resources: Optional[List[str]] = None
    selected_schedule: Optional[int] = None

    model_config = ConfigDict(extra="forbid")


class StudyPlanOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    course_name: str
    exam_date: date
    weekly_study_time: int
    study_preference: StudyPreference
    learning_style: Optional[LearningStyle] = None
    study_materials: List[str]
    topics: List[str]
    topics_progress: Dict[str, Progress]
    resources: List[str]
    selected_schedule: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StudyTaskIn(BaseModel):
    study_plan_id: int
    title: str
    description: Optional[str] = None
    date: TaskDate
    duration: int  # minutes
    resource: Optional[str] = None
    is_completed: bool = False
    task_type: str  # "study", "review", "practice", ...


class StudyTaskPatch(BaseModel):
    study_plan_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[TaskDate] = None
    duration: Optional[int] = None
    resource: Optional[str] = None
    is_completed: Optional[bool] = None
    task_type: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


class StudyTaskOut(BaseModel):
    id: int
    study_plan_id: int
    title: str
    description: Optional[str] = None
    date: TaskDate
    duration: int
    resource: Optional[str] = None
    is_completed: bool = False
    task_type: str

    model_config = ConfigDict(from_attributes=True)


class TaskCompletionIn(BaseModel):
    is_completed: bool


class _WeekRange(BaseModel):
    week_start: date
    week_end: date

    @model_validator(mode="after")
    def check_range(self):
        if self.week_start > self.week_end:
            raise ValueError("week_start must not be after week_end")
        return self


class StudyWeekIn(_WeekRange):
    """Calendar week of a plan.

    The task slots hold copies of tasks taken when the week was written;
    later edits to the tasks themselves are not reflected here.
    """
    study_plan_id: int
    monday_task: Optional[StudyTaskOut] = None
    wednesday_task: Optional[StudyTaskOut] = None
    friday_task: Optional[StudyTaskOut] = None
    weekend_task: Optional[StudyTaskOut] = None


class StudyWeekPatch(BaseModel):
    study_plan_id: Optional[int] = None
    week_start: Optional[date] = None
    week_end: Optional[date] = None
    monday_task: Optional[StudyTaskOut] = None
    wednesday_task: Optional[StudyTaskOut] = None
    friday_task: Optional[StudyTaskOut] = None
    weekend_task: Optional[StudyTaskOut] = None

    model_config = ConfigDict(extra="forbid")


class StudyWeekOut(StudyWeekIn):
    id: int

    model_config = ConfigDict(from_attributes=True)
