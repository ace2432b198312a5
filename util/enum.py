import enum


class StudyPreference(str, enum.Enum):
    """Preferred length of individual study sessions."""

    short = "short"
    long = "long"


class LearningStyle(str, enum.Enum):
    visual = "visual"
    auditory = "auditory"
    reading = "reading"
    kinesthetic = "kinesthetic"


class TaskType(str, enum.Enum):
    """Known task types. Tasks may carry other values too."""

    study = "study"
    review = "review"
    practice = "practice"
    break_ = "break"


class SyncMode(str, enum.Enum):
    """Defines how tasks are pushed to the external calendar."""

    one_time = "one-time"
    full = "full"


class StorageBackend(str, enum.Enum):
    memory = "memory"
    sql = "sql"
