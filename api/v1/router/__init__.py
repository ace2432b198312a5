from api.v1.router.users import router as users
from api.v1.router.study_plans import router as study_plans
from api.v1.router.study_tasks import router as study_tasks
from api.v1.router.study_weeks import router as study_weeks
from api.v1.router.calendar import router as calendar

__all__ = ["users", "study_plans", "study_tasks", "study_weeks", "calendar"]
