from service.storage.base import StorageInterface, apply_patch, new_plan_values
from service.storage.memory import MemStorage
from service.storage.sql import SQLStorage

__all__ = ["StorageInterface", "apply_patch", "new_plan_values", "MemStorage", "SQLStorage"]
