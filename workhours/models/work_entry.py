"""Work entry model definitions."""
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkEntryCreate(BaseModel):
    """
    Work entry submission as sent by the landing page.

    Every field is optional at this level; required fields are checked by
    ``WorkHoursService`` so that a missing field is a 400, not a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    employee_name: Optional[str] = Field(None, alias="employeeName")
    date: Optional[str] = None
    start_time: Optional[str] = Field(None, alias="startTime")
    end_time: Optional[str] = Field(None, alias="endTime")
    break_time: Optional[float] = Field(None, alias="breakTime")
    comment: Optional[str] = None

    @field_validator("break_time", mode="before")
    @classmethod
    def blank_break_is_none(cls, value):
        """HTML number inputs submit an empty string when left blank."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


class WorkEntry(BaseModel):
    """Stored work entry joined with the employee name."""

    id: int
    employee: str
    date: datetime.date
    start_time: Optional[datetime.time] = None
    end_time: Optional[datetime.time] = None
    break_time: Optional[float] = None
    net_hours: Optional[float] = None
    comment: Optional[str] = None


class MessageResponse(BaseModel):
    """Acknowledgement returned by write endpoints."""

    message: str
