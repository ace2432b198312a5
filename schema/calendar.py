from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from util.enum import SyncMode


class CalendarEvent(BaseModel):
    title: str
    description: str = ""
    start: str
    end: str
    location: str = ""
    color_id: str = Field(alias="colorId")

    model_config = ConfigDict(populate_by_name=True)


class ExportResult(BaseModel):
    success: bool
    auth_url: Optional[str] = Field(default=None, alias="authUrl")
    events: Optional[List[Dict[str, Any]]] = None

    model_config = ConfigDict(populate_by_name=True)


class CalendarExportIn(BaseModel):
    calendar_name: str = "Study Plan"
    sync_mode: SyncMode = SyncMode.one_time


class AuthUrlOut(BaseModel):
    url: str


class AuthStatusOut(BaseModel):
    authenticated: bool
