from fastapi import APIRouter, Depends, status
from controller.study_plans import StudyPlanController
from core.dependencies import get_storage
from schema import SuccessOut
from schema.study_plans import (
    StudyPlanIn, StudyPlanPatch, StudyPlanOut, StudyTaskOut, StudyWeekOut
)
from service.storage import StorageInterface

router = APIRouter(tags=["Study Plans"])


@router.get("/study-plans", response_model=list[StudyPlanOut])
def get_study_plans(storage: StorageInterface = Depends(get_storage)):
    return StudyPlanController.get_all_study_plans(storage)


@router.post(
    "/study-plans", response_model=StudyPlanOut, status_code=status.HTTP_201_CREATED
)
def create_study_plan(data: StudyPlanIn, storage: StorageInterface = Depends(get_storage)):
    """
    Create a study plan
    - Seeds one study task per topic and one review task per material
    """
    return StudyPlanController.create_study_plan(storage, data)


@router.get("/study-plans/{plan_id}", response_model=StudyPlanOut)
def get_study_plan(plan_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyPlanController.get_study_plan(storage, plan_id)


@router.patch("/study-plans/{plan_id}", response_model=StudyPlanOut)
def update_study_plan(
    plan_id: int,
    patch: StudyPlanPatch,
    storage: StorageInterface = Depends(get_storage),
):
    """Only the fields present in the body are changed"""
    return StudyPlanController.update_study_plan(storage, plan_id, patch)


@router.delete("/study-plans/{plan_id}", response_model=SuccessOut)
def delete_study_plan(plan_id: int, storage: StorageInterface = Depends(get_storage)):
    """
    Delete a study plan
    - Tasks and weeks belonging to the plan are not deleted
    """
    return StudyPlanController.delete_study_plan(storage, plan_id)


@router.get("/study-plans/{plan_id}/tasks", response_model=list[StudyTaskOut])
def get_plan_tasks(plan_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyPlanController.get_plan_tasks(storage, plan_id)


@router.get("/study-plans/{plan_id}/weeks", response_model=list[StudyWeekOut])
def get_plan_weeks(plan_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyPlanController.get_plan_weeks(storage, plan_id)
