from schema import SuccessOut
from schema.study_plans import StudyWeekIn, StudyWeekPatch, StudyWeekOut
from service.storage import StorageInterface
import error


class StudyWeekController:
    @staticmethod
    def create_study_week(storage: StorageInterface, data: StudyWeekIn) -> StudyWeekOut:
        return storage.create_study_week(data)

    @staticmethod
    def get_study_week(storage: StorageInterface, week_id: int) -> StudyWeekOut:
        week = storage.get_study_week(week_id)
        if not week:
            raise error.ResourceNotFoundError("Study week not found")
        return week

    @staticmethod
    def update_study_week(
        storage: StorageInterface, week_id: int, patch: StudyWeekPatch
    ) -> StudyWeekOut:
        week = storage.update_study_week(week_id, patch)
        if not week:
            raise error.ResourceNotFoundError("Study week not found")
        return week

    @staticmethod
    def delete_study_week(storage: StorageInterface, week_id: int) -> SuccessOut:
        if not storage.delete_study_week(week_id):
            raise error.ResourceNotFoundError("Study week not found")
        return SuccessOut(message="Study week deleted successfully")
