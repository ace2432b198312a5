from fastapi import APIRouter, Depends, status
from controller.study_tasks import StudyTaskController
from core.dependencies import get_storage
from schema import SuccessOut
from schema.study_plans import (
    StudyTaskIn, StudyTaskPatch, StudyTaskOut, TaskCompletionIn
)
from service.storage import StorageInterface

router = APIRouter(tags=["Study Tasks"])


@router.post(
    "/study-tasks", response_model=StudyTaskOut, status_code=status.HTTP_201_CREATED
)
def create_study_task(data: StudyTaskIn, storage: StorageInterface = Depends(get_storage)):
    return StudyTaskController.create_study_task(storage, data)


@router.get("/study-tasks/{task_id}", response_model=StudyTaskOut)
def get_study_task(task_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyTaskController.get_study_task(storage, task_id)


@router.patch("/study-tasks/{task_id}", response_model=StudyTaskOut)
def update_study_task(
    task_id: int,
    patch: StudyTaskPatch,
    storage: StorageInterface = Depends(get_storage),
):
    return StudyTaskController.update_study_task(storage, task_id, patch)


@router.patch("/study-tasks/{task_id}/complete", response_model=StudyTaskOut)
def set_task_completion(
    task_id: int,
    data: TaskCompletionIn,
    storage: StorageInterface = Depends(get_storage),
):
    """Mark a task complete or incomplete"""
    return StudyTaskController.set_completion(storage, task_id, data.is_completed)


@router.delete("/study-tasks/{task_id}", response_model=SuccessOut)
def delete_study_task(task_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyTaskController.delete_study_task(storage, task_id)
