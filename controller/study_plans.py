import logging
from datetime import date
from typing import List
from schema import SuccessOut
from schema.study_plans import (
    StudyPlanIn, StudyPlanPatch, StudyPlanOut,
    StudyTaskIn, StudyTaskOut, StudyWeekOut,
)
from service.storage import StorageInterface
from util.enum import TaskType
import error

logger = logging.getLogger(__name__)

TOPIC_TASK_MINUTES = 60
MATERIAL_TASK_MINUTES = 30


class StudyPlanController:
    @staticmethod
    def _seed_tasks(storage: StorageInterface, plan: StudyPlanOut) -> List[StudyTaskOut]:
        """One study task per topic, then one review task per material.

        Seeding is all-or-nothing: if any insert fails, the tasks created so
        far are deleted before the error propagates.
        """
        today = date.today()
        seeds = [
            StudyTaskIn(
                study_plan_id=plan.id,
                title=topic,
                description=f"Study session for {topic}",
                date=today,
                duration=TOPIC_TASK_MINUTES,
                task_type=TaskType.study.value,
            )
            for topic in plan.topics
        ]
        seeds += [
            StudyTaskIn(
                study_plan_id=plan.id,
                title=f"Review {material}",
                description=f"Review study material: {material}",
                date=today,
                duration=MATERIAL_TASK_MINUTES,
                task_type=TaskType.review.value,
            )
            for material in plan.study_materials
        ]
        created = []
        try:
            for task in seeds:
                created.append(storage.create_study_task(task))
        except Exception:
            for task in created:
                storage.delete_study_task(task.id)
            raise
        return created

    @staticmethod
    def create_study_plan(storage: StorageInterface, data: StudyPlanIn) -> StudyPlanOut:
        if data.user_id is not None and not storage.get_user(data.user_id):
            raise error.InvalidRequestError("User does not exist")

        plan = storage.create_study_plan(data)
        try:
            tasks = StudyPlanController._seed_tasks(storage, plan)
        except Exception:
            logger.error(f"Seeding tasks for study plan {plan.id} failed, removing it")
            storage.delete_study_plan(plan.id)
            raise
        logger.info(f"Created study plan {plan.id} with {len(tasks)} tasks")
        return plan

    @staticmethod
    def get_all_study_plans(storage: StorageInterface) -> List[StudyPlanOut]:
        return storage.get_all_study_plans()

    @staticmethod
    def get_study_plan(storage: StorageInterface, plan_id: int) -> StudyPlanOut:
        plan = storage.get_study_plan(plan_id)
        if not plan:
            raise error.ResourceNotFoundError("Study plan not found")
        return plan

    @staticmethod
    def update_study_plan(
        storage: StorageInterface, plan_id: int, patch: StudyPlanPatch
    ) -> StudyPlanOut:
        if patch.user_id is not None and not storage.get_user(patch.user_id):
            raise error.InvalidRequestError("User does not exist")

        plan = storage.update_study_plan(plan_id, patch)
        if not plan:
            raise error.ResourceNotFoundError("Study plan not found")
        return plan

    @staticmethod
    def delete_study_plan(storage: StorageInterface, plan_id: int) -> SuccessOut:
        # Tasks and weeks of the plan are intentionally kept
        if not storage.delete_study_plan(plan_id):
            raise error.ResourceNotFoundError("Study plan not found")
        logger.info(f"Deleted study plan {plan_id}")
        return SuccessOut(message="Study plan deleted successfully")

    @staticmethod
    def get_plan_tasks(storage: StorageInterface, plan_id: int) -> List[StudyTaskOut]:
        return storage.get_tasks_by_plan_id(plan_id)

    @staticmethod
    def get_plan_weeks(storage: StorageInterface, plan_id: int) -> List[StudyWeekOut]:
        return storage.get_weeks_by_plan_id(plan_id)
