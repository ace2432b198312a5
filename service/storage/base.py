"""Persistence contract shared by every storage backend.

Reads return None for a missing record, updates return None without creating
anything, and deletes report whether a record was removed. None of these
raise for a missing id.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional, TypeVar
from pydantic import BaseModel
from schema.users import UserIn, UserRecord
from schema.study_plans import (
    StudyPlanIn, StudyPlanPatch, StudyPlanOut,
    StudyTaskIn, StudyTaskPatch, StudyTaskOut,
    StudyWeekIn, StudyWeekPatch, StudyWeekOut,
)

RecordT = TypeVar("RecordT", bound=BaseModel)


def apply_patch(record: RecordT, patch: BaseModel) -> RecordT:
    """Merge the fields explicitly set on `patch` over `record`.

    The result is validated again, so invariants spanning several fields
    (such as a week's date range) hold after the merge.
    """
    merged = record.model_dump()
    for field, value in patch.model_dump(exclude_unset=True).items():
        merged[field] = value
    return type(record).model_validate(merged)


class StorageInterface(ABC):

    # Users
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def create_user(self, data: UserIn) -> UserRecord:
        """Raises DatabaseIntegrityError if the username is taken"""

    # Study plans
    @abstractmethod
    def get_study_plan(self, plan_id: int) -> Optional[StudyPlanOut]:
        ...

    @abstractmethod
    def get_all_study_plans(self) -> List[StudyPlanOut]:
        ...

    @abstractmethod
    def create_study_plan(self, data: StudyPlanIn) -> StudyPlanOut:
        ...

    @abstractmethod
    def update_study_plan(
        self, plan_id: int, patch: StudyPlanPatch
    ) -> Optional[StudyPlanOut]:
        ...

    @abstractmethod
    def delete_study_plan(self, plan_id: int) -> bool:
        """Tasks and weeks of the plan are left in place"""

    # Study tasks
    @abstractmethod
    def get_study_task(self, task_id: int) -> Optional[StudyTaskOut]:
        ...

    @abstractmethod
    def get_tasks_by_plan_id(self, plan_id: int) -> List[StudyTaskOut]:
        ...

    @abstractmethod
    def create_study_task(self, data: StudyTaskIn) -> StudyTaskOut:
        ...

    @abstractmethod
    def update_study_task(
        self, task_id: int, patch: StudyTaskPatch
    ) -> Optional[StudyTaskOut]:
        ...

    @abstractmethod
    def delete_study_task(self, task_id: int) -> bool:
        ...

    @abstractmethod
    def mark_task_complete(
        self, task_id: int, is_completed: bool
    ) -> Optional[StudyTaskOut]:
        ...

    # Study weeks
    @abstractmethod
    def get_study_week(self, week_id: int) -> Optional[StudyWeekOut]:
        ...

    @abstractmethod
    def get_weeks_by_plan_id(self, plan_id: int) -> List[StudyWeekOut]:
        ...

    @abstractmethod
    def create_study_week(self, data: StudyWeekIn) -> StudyWeekOut:
        ...

    @abstractmethod
    def update_study_week(
        self, week_id: int, patch: StudyWeekPatch
    ) -> Optional[StudyWeekOut]:
        ...

    @abstractmethod
    def delete_study_week(self, week_id: int) -> bool:
        ...


def new_plan_values(data: StudyPlanIn) -> dict:
    """Field values for a plan about to be inserted, optional fields filled in.

    `created_at` is stamped here; a caller-supplied value never reaches storage.
    """
    values = data.model_dump()
    if values["study_materials"] is None:
        values["study_materials"] = []
    if values["topics_progress"] is None:
        values["topics_progress"] = {}
    if values["selected_schedule"] is None:
        values["selected_schedule"] = 1
    values["created_at"] = datetime.now(timezone.utc)
    return values
