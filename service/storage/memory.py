import threading
from typing import Dict, List, Optional
from error import DatabaseIntegrityError
from schema.users import UserIn, UserRecord
from schema.study_plans import (
    StudyPlanIn, StudyPlanPatch, StudyPlanOut,
    StudyTaskIn, StudyTaskPatch, StudyTaskOut,
    StudyWeekIn, StudyWeekPatch, StudyWeekOut,
)
from service.storage.base import StorageInterface, apply_patch, new_plan_values


def _copy(record):
    return record.model_copy(deep=True) if record is not None else None


class MemStorage(StorageInterface):
    """Keeps every record in process memory.

    Each entity type has its own container and its own id counter starting
    at 1. Ids are never handed out twice, even after a delete, but nothing
    survives a restart. Callers always receive copies of stored records.

    Request handlers run in a threadpool, so every write holds `_lock` from
    the first read of a container to the last assignment.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: Dict[int, UserRecord] = {}
        self._study_plans: Dict[int, StudyPlanOut] = {}
        self._study_tasks: Dict[int, StudyTaskOut] = {}
        self._study_weeks: Dict[int, StudyWeekOut] = {}
        self._user_id = 1
        self._plan_id = 1
        self._task_id = 1
        self._week_id = 1

    # Users
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return _copy(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        # Linear scan; user counts are expected to stay small
        for user in list(self._users.values()):
            if user.username == username:
                return _copy(user)
        return None

    def create_user(self, data: UserIn) -> UserRecord:
        with self._lock:
            if self.get_user_by_username(data.username) is not None:
                raise DatabaseIntegrityError("Username already exists")
            user = UserRecord(id=self._user_id, **data.model_dump())
            self._users[user.id] = user
            self._user_id += 1
        return _copy(user)

    # Study plans
    def get_study_plan(self, plan_id: int) -> Optional[StudyPlanOut]:
        return _copy(self._study_plans.get(plan_id))

    def get_all_study_plans(self) -> List[StudyPlanOut]:
        return [_copy(plan) for plan in list(self._study_plans.values())]

    def create_study_plan(self, data: StudyPlanIn) -> StudyPlanOut:
        values = new_plan_values(data)
        with self._lock:
            plan = StudyPlanOut(id=self._plan_id, **values)
            self._study_plans[plan.id] = plan
            self._plan_id += 1
        return _copy(plan)

    def update_study_plan(
        self, plan_id: int, patch: StudyPlanPatch
    ) -> Optional[StudyPlanOut]:
        with self._lock:
            existing = self._study_plans.get(plan_id)
            if existing is None:
                return None
            updated = apply_patch(existing, patch)
            self._study_plans[plan_id] = updated
        return _copy(updated)

    def delete_study_plan(self, plan_id: int) -> bool:
        with self._lock:
            return self._study_plans.pop(plan_id, None) is not None

    # Study tasks
    def get_study_task(self, task_id: int) -> Optional[StudyTaskOut]:
        return _copy(self._study_tasks.get(task_id))

    def get_tasks_by_plan_id(self, plan_id: int) -> List[StudyTaskOut]:
        return [
            _copy(task) for task in list(self._study_tasks.values())
            if task.study_plan_id == plan_id
        ]

    def create_study_task(self, data: StudyTaskIn) -> StudyTaskOut:
        with self._lock:
            task = StudyTaskOut(id=self._task_id, **data.model_dump())
            self._study_tasks[task.id] = task
            self._task_id += 1
        return _copy(task)

    def update_study_task(
        self, task_id: int, patch: StudyTaskPatch
    ) -> Optional[StudyTaskOut]:
        with self._lock:
            existing = self._study_tasks.get(task_id)
            if existing is None:
                return None
            updated = apply_patch(existing, patch)
            self._study_tasks[task_id] = updated
        return _copy(updated)

    def delete_study_task(self, task_id: int) -> bool:
        with self._lock:
            return self._study_tasks.pop(task_id, None) is not None

    def mark_task_complete(
        self, task_id: int, is_completed: bool
    ) -> Optional[StudyTaskOut]:
        with self._lock:
            existing = self._study_tasks.get(task_id)
            if existing is None:
                return None
            updated = existing.model_copy(update={"is_completed": is_completed})
            self._study_tasks[task_id] = updated
        return _copy(updated)

    # Study weeks
    def get_study_week(self, week_id: int) -> Optional[StudyWeekOut]:
        return _copy(self._study_weeks.get(week_id))

    def get_weeks_by_plan_id(self, plan_id: int) -> List[StudyWeekOut]:
        return [
            _copy(week) for week in list(self._study_weeks.values())
            if week.study_plan_id == plan_id
        ]

    def create_study_week(self, data: StudyWeekIn) -> StudyWeekOut:
        with self._lock:
            week = StudyWeekOut(id=self._week_id, **data.model_dump())
            self._study_weeks[week.id] = week
            self._week_id += 1
        return _copy(week)

    def update_study_week(
        self, week_id: int, patch: StudyWeekPatch
    ) -> Optional[StudyWeekOut]:
        with self._lock:
            existing = self._study_weeks.get(week_id)
            if existing is None:
                return None
            updated = apply_patch(existing, patch)
            self._study_weeks[week_id] = updated
        return _copy(updated)

    def delete_study_week(self, week_id: int) -> bool:
        with self._lock:
            return self._study_weeks.pop(week_id, None) is not None
