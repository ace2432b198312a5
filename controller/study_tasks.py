from schema import SuccessOut
from schema.study_plans import StudyTaskIn, StudyTaskPatch, StudyTaskOut
from service.storage import StorageInterface
import error


class StudyTaskController:
    @staticmethod
    def create_study_task(storage: StorageInterface, data: StudyTaskIn) -> StudyTaskOut:
        return storage.create_study_task(data)

    @staticmethod
    def get_study_task(storage: StorageInterface, task_id: int) -> StudyTaskOut:
        task = storage.get_study_task(task_id)
        if not task:
            raise error.ResourceNotFoundError("Study task not found")
        return task

    @staticmethod
    def update_study_task(
        storage: StorageInterface, task_id: int, patch: StudyTaskPatch
    ) -> StudyTaskOut:
        task = storage.update_study_task(task_id, patch)
        if not task:
            raise error.ResourceNotFoundError("Study task not found")
        return task

    @staticmethod
    def set_completion(
        storage: StorageInterface, task_id: int, is_completed: bool
    ) -> StudyTaskOut:
        task = storage.mark_task_complete(task_id, is_completed)
        if not task:
            raise error.ResourceNotFoundError("Study task not found")
        return task

    @staticmethod
    def delete_study_task(storage: StorageInterface, task_id: int) -> SuccessOut:
        if not storage.delete_study_task(task_id):
            raise error.ResourceNotFoundError("Study task not found")
        return SuccessOut(message="Study task deleted successfully")
