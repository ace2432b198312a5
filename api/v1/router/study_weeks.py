from fastapi import APIRouter, Depends, status
from controller.study_weeks import StudyWeekController
from core.dependencies import get_storage
from schema import SuccessOut
from schema.study_plans import StudyWeekIn, StudyWeekPatch, StudyWeekOut
from service.storage import StorageInterface

router = APIRouter(tags=["Study Weeks"])


@router.post(
    "/study-weeks", response_model=StudyWeekOut, status_code=status.HTTP_201_CREATED
)
def create_study_week(data: StudyWeekIn, storage: StorageInterface = Depends(get_storage)):
    """
    Create a calendar week
    - Task slots are stored as copies of the tasks at this moment
    """
    return StudyWeekController.create_study_week(storage, data)


@router.get("/study-weeks/{week_id}", response_model=StudyWeekOut)
def get_study_week(week_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyWeekController.get_study_week(storage, week_id)


@router.patch("/study-weeks/{week_id}", response_model=StudyWeekOut)
def update_study_week(
    week_id: int,
    patch: StudyWeekPatch,
    storage: StorageInterface = Depends(get_storage),
):
    return StudyWeekController.update_study_week(storage, week_id, patch)


@router.delete("/study-weeks/{week_id}", response_model=SuccessOut)
def delete_study_week(week_id: int, storage: StorageInterface = Depends(get_storage)):
    return StudyWeekController.delete_study_week(storage, week_id)
