from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from core.db import CreateDBSession
from core.setup import DatabaseSetup
from error import DatabaseIntegrityError
from model.users import User
from model.study_plans import StudyPlan, StudyTask, StudyWeek
from schema.users import UserIn, UserRecord
from schema.study_plans import (
    StudyPlanIn, StudyPlanPatch, StudyPlanOut,
    StudyTaskIn, StudyTaskPatch, StudyTaskOut,
    StudyWeekIn, StudyWeekPatch, StudyWeekOut,
)
from service.storage.base import StorageInterface, apply_patch, new_plan_values


class SQLStorage(StorageInterface):
    """Storage backed by the migrated SQL schema.

    Dates and timestamps are kept as ISO-8601 text and list or mapping
    fields as JSON, mirroring the record schemas one column per field.
    The schema must be migrated before the first call.
    """

    def __init__(self, database: DatabaseSetup) -> None:
        self.database = database

    def _session(self) -> CreateDBSession:
        return CreateDBSession(self.database)

    @staticmethod
    def _columns(record) -> dict:
        return record.model_dump(mode="json", exclude={"id"})

    def _get(self, model, schema, record_id: int):
        with self._session() as db:
            row = db.query(model).filter(model.id == record_id).first()
            return schema.model_validate(row.to_dict()) if row else None

    def _list_by_plan(self, model, schema, plan_id: int) -> list:
        with self._session() as db:
            rows = (
                db.query(model)
                .filter(model.study_plan_id == plan_id)
                .order_by(model.id)
                .all()
            )
            return [schema.model_validate(row.to_dict()) for row in rows]

    def _insert(self, model, schema, values: dict):
        with self._session() as db:
            row = model(**values)
            db.add(row)
            db.commit()
            return schema.model_validate(row.to_dict())

    def _update(self, model, schema, record_id: int, patch):
        with self._session() as db:
            row = db.query(model).filter(model.id == record_id).first()
            if row is None:
                return None
            updated = apply_patch(schema.model_validate(row.to_dict()), patch)
            for key, value in self._columns(updated).items():
                setattr(row, key, value)
            db.commit()
            return updated

    def _delete(self, model, record_id: int) -> bool:
        with self._session() as db:
            row = db.query(model).filter(model.id == record_id).first()
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True

    # Users
    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self._get(User, UserRecord, user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self._session() as db:
            row = db.query(User).filter(User.username == username).first()
            return UserRecord.model_validate(row.to_dict()) if row else None

    def create_user(self, data: UserIn) -> UserRecord:
        try:
            return self._insert(User, UserRecord, data.model_dump())
        except IntegrityError as e:
            raise DatabaseIntegrityError("Username already exists") from e

    # Study plans
    def get_study_plan(self, plan_id: int) -> Optional[StudyPlanOut]:
        return self._get(StudyPlan, StudyPlanOut, plan_id)

    def get_all_study_plans(self) -> List[StudyPlanOut]:
        with self._session() as db:
            rows = db.query(StudyPlan).order_by(StudyPlan.id).all()
            return [StudyPlanOut.model_validate(row.to_dict()) for row in rows]

    def create_study_plan(self, data: StudyPlanIn) -> StudyPlanOut:
        # Validate through the record schema so stored values are normalized
        values = StudyPlanOut.model_validate(
            {"id": 0, **new_plan_values(data)}
        )
        return self._insert(StudyPlan, StudyPlanOut, self._columns(values))

    def update_study_plan(
        self, plan_id: int, patch: StudyPlanPatch
    ) -> Optional[StudyPlanOut]:
        return self._update(StudyPlan, StudyPlanOut, plan_id, patch)

    def delete_study_plan(self, plan_id: int) -> bool:
        return self._delete(StudyPlan, plan_id)

    # Study tasks
    def get_study_task(self, task_id: int) -> Optional[StudyTaskOut]:
        return self._get(StudyTask, StudyTaskOut, task_id)

    def get_tasks_by_plan_id(self, plan_id: int) -> List[StudyTaskOut]:
        return self._list_by_plan(StudyTask, StudyTaskOut, plan_id)

    def create_study_task(self, data: StudyTaskIn) -> StudyTaskOut:
        return self._insert(StudyTask, StudyTaskOut, data.model_dump(mode="json"))

    def update_study_task(
        self, task_id: int, patch: StudyTaskPatch
    ) -> Optional[StudyTaskOut]:
        return self._update(StudyTask, StudyTaskOut, task_id, patch)

    def delete_study_task(self, task_id: int) -> bool:
        return self._delete(StudyTask, task_id)

    def mark_task_complete(
        self, task_id: int, is_completed: bool
    ) -> Optional[StudyTaskOut]:
        with self._session() as db:
            row = db.query(StudyTask).filter(StudyTask.id == task_id).first()
            if row is None:
                return None
            row.is_completed = is_completed
            db.commit()
            return StudyTaskOut.model_validate(row.to_dict())

    # Study weeks
    def get_study_week(self, week_id: int) -> Optional[StudyWeekOut]:
        return self._get(StudyWeek, StudyWeekOut, week_id)

    def get_weeks_by_plan_id(self, plan_id: int) -> List[StudyWeekOut]:
        return self._list_by_plan(StudyWeek, StudyWeekOut, plan_id)

    def create_study_week(self, data: StudyWeekIn) -> StudyWeekOut:
        return self._insert(StudyWeek, StudyWeekOut, data.model_dump(mode="json"))

    def update_study_week(
        self, week_id: int, patch: StudyWeekPatch
    ) -> Optional[StudyWeekOut]:
        return self._update(StudyWeek, StudyWeekOut, week_id, patch)

    def delete_study_week(self, week_id: int) -> bool:
        return self._delete(StudyWeek, week_id)
