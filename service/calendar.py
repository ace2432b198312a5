"""Client for the server-side Google Calendar integration.

The remote service owns OAuth and the Google API calls; this module only
maps study tasks to events and drives the authorize, export and disable
endpoints. No retries are attempted; the transport timeout is the only bound
on a call.
"""
import logging
from datetime import datetime, time, timedelta, tzinfo
from typing import Iterable, Optional
from zoneinfo import ZoneInfo
import httpx
from config.setting import settings
from error import AuthUrlUnavailable, CalendarError, CalendarExportError
from schema.calendar import CalendarEvent, ExportResult
from schema.study_plans import StudyTaskOut
from util.enum import SyncMode, TaskType

logger = logging.getLogger(__name__)

AUTH_URL_PATH = "/api/auth/google/url"
AUTH_STATUS_PATH = "/api/auth/google/status"
EXPORT_PATH = "/api/calendar/google/export"
DISABLE_SYNC_PATH = "/api/calendar/google/disable-sync"

EVENT_START = time(10, 0)

COLOR_IDS = {
    TaskType.study.value: "1",
    TaskType.review.value: "2",
    TaskType.practice.value: "3",
    TaskType.break_.value: "4",
}
DEFAULT_COLOR_ID = "5"


def color_id_for(task_type: Optional[str]) -> str:
    return COLOR_IDS.get((task_type or "").lower(), DEFAULT_COLOR_ID)


def task_to_event(task: StudyTaskOut, tz: Optional[tzinfo] = None) -> CalendarEvent:
    """Build the calendar event for a task.

    Events start at 10:00 on the task's date in `tz`, or in the process's
    local zone when no zone is given, and last `duration` minutes.
    """
    start = datetime.combine(task.date, EVENT_START)
    start = start.replace(tzinfo=tz) if tz is not None else start.astimezone()
    end = start + timedelta(minutes=task.duration)
    return CalendarEvent(
        title=task.title,
        description=task.description or "",
        start=start.isoformat(timespec="milliseconds"),
        end=end.isoformat(timespec="milliseconds"),
        location=task.resource or "",
        color_id=color_id_for(task.task_type),
    )


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class CalendarExportAdapter:
    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        tz: Optional[tzinfo] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url or settings.CALENDAR_SERVICE_URL
        self.transport = transport
        if tz is None and settings.CALENDAR_TIMEZONE:
            tz = ZoneInfo(settings.CALENDAR_TIMEZONE)
        self.tz = tz
        self.timeout = timeout or settings.CALENDAR_TIMEOUT_SECONDS

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, transport=self.transport, timeout=self.timeout
        )

    async def get_auth_url(self) -> str:
        """Fetch the URL the user must visit to authorize calendar access.

        Raises:
            AuthUrlUnavailable: the URL could not be retrieved
        """
        try:
            async with self._client() as client:
                response = await client.get(AUTH_URL_PATH)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to get Google auth URL: {e}")
            raise AuthUrlUnavailable() from e

        url = _json_body(response).get("url")
        if not url:
            logger.error("Google auth URL response did not contain a url")
            raise AuthUrlUnavailable()
        return url

    async def check_auth_status(self) -> bool:
        """Whether the current session is authorized.

        Any failure reads as "not authenticated"; this never raises.
        """
        try:
            async with self._client() as client:
                response = await client.get(AUTH_STATUS_PATH)
        except httpx.HTTPError as e:
            logger.warning(f"Error checking Google auth status: {e}")
            return False

        if not response.is_success:
            return False
        return _json_body(response).get("authenticated") is True

    async def export_tasks(
        self,
        tasks: Iterable[StudyTaskOut],
        calendar_name: str,
        sync_mode: SyncMode = SyncMode.one_time,
    ) -> ExportResult:
        """Push tasks to the external calendar.

        A 401 carrying an `authUrl` is returned as an unsuccessful result so
        the caller can send the user to re-authorize. Every other failure
        raises CalendarExportError.
        """
        events = [task_to_event(task, self.tz) for task in tasks]
        payload = {
            "events": [event.model_dump(by_alias=True) for event in events],
            "calendarName": calendar_name,
            "syncMode": SyncMode(sync_mode).value,
        }

        try:
            async with self._client() as client:
                response = await client.post(EXPORT_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Failed to export to Google Calendar: {e}")
            raise CalendarExportError() from e

        body = _json_body(response)
        if response.is_success:
            exported = body.get("events")
            return ExportResult(
                success=True, events=exported if isinstance(exported, list) else []
            )

        if response.status_code == 401 and body.get("authUrl"):
            logger.info("Google Calendar export requires authorization")
            return ExportResult(success=False, auth_url=body["authUrl"])

        message = body.get("message")
        logger.error(
            f"Google Calendar export failed with status {response.status_code}: "
            f"{message or 'no message'}"
        )
        raise CalendarExportError(message) if message else CalendarExportError()

    async def disable_sync(self) -> bool:
        """Turn off ongoing synchronization. Failures are logged, not raised."""
        try:
            async with self._client() as client:
                response = await client.post(DISABLE_SYNC_PATH)
            if not response.is_success:
                raise CalendarError(
                    _json_body(response).get("message")
                    or "Failed to disable Google Calendar sync"
                )
        except (httpx.HTTPError, CalendarError) as e:
            logger.error(f"Failed to disable Google Calendar sync: {e}")
            return False
        return True
