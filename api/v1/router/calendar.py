from fastapi import APIRouter, Depends
from controller.calendar import CalendarController
from core.dependencies import get_calendar_adapter, get_storage
from schema import SuccessOut
from schema.calendar import AuthStatusOut, AuthUrlOut, CalendarExportIn, ExportResult
from service.calendar import CalendarExportAdapter
from service.storage import StorageInterface
import error

router = APIRouter(tags=["Calendar"])


@router.get("/calendar/auth-url", response_model=AuthUrlOut)
async def get_auth_url(adapter: CalendarExportAdapter = Depends(get_calendar_adapter)):
    return AuthUrlOut(url=await adapter.get_auth_url())


@router.get("/calendar/status", response_model=AuthStatusOut)
async def get_auth_status(adapter: CalendarExportAdapter = Depends(get_calendar_adapter)):
    return AuthStatusOut(authenticated=await adapter.check_auth_status())


@router.post(
    "/study-plans/{plan_id}/calendar/export",
    response_model=ExportResult,
    response_model_exclude_none=True,
)
async def export_plan(
    plan_id: int,
    data: CalendarExportIn,
    storage: StorageInterface = Depends(get_storage),
    adapter: CalendarExportAdapter = Depends(get_calendar_adapter),
):
    """
    Export a plan's tasks to Google Calendar
    - Returns `success: false` with an `authUrl` when authorization is needed
    """
    return await CalendarController.export_plan(storage, adapter, plan_id, data)


@router.post("/calendar/disable-sync", response_model=SuccessOut)
async def disable_sync(adapter: CalendarExportAdapter = Depends(get_calendar_adapter)):
    if not await adapter.disable_sync():
        raise error.CalendarError("Failed to disable Google Calendar sync")
    return SuccessOut(message="Google Calendar sync disabled")
