from schema.calendar import CalendarExportIn, ExportResult
from service.calendar import CalendarExportAdapter
from service.storage import StorageInterface
import error


class CalendarController:
    @staticmethod
    async def export_plan(
        storage: StorageInterface,
        adapter: CalendarExportAdapter,
        plan_id: int,
        data: CalendarExportIn,
    ) -> ExportResult:
        """Export every task of a plan, read fresh from storage"""
        if not storage.get_study_plan(plan_id):
            raise error.ResourceNotFoundError("Study plan not found")

        tasks = storage.get_tasks_by_plan_id(plan_id)
        return await adapter.export_tasks(tasks, data.calendar_name, data.sync_mode)
