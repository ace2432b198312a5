from model.users import User
from model.study_plans import StudyPlan, StudyTask, StudyWeek

__all__ = ["User", "StudyPlan", "StudyTask", "StudyWeek"]
