"""Work hours endpoints - submitting time entries."""
from fastapi import APIRouter, Depends

from workhours.context import get_database
from workhours.database import Database
from workhours.models.work_entry import MessageResponse, WorkEntryCreate
from workhours.services.work_hours_service import WorkHoursService


router = APIRouter(tags=["work-hours"])


@router.post("/log-hours", response_model=MessageResponse)
async def log_hours(entry: WorkEntryCreate, db: Database = Depends(get_database)):
    """
    Log one day of work for an employee.

    - employeeName, date, startTime and endTime are required (400 otherwise)
    - The employee must already exist (400 otherwise)
    - breakTime is in minutes and defaults to 0
    """
    service = WorkHoursService(db)
    return await service.log_hours(entry)
