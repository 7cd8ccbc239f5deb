"""Work hours service - business logic for logging and listing hours."""
import logging
from datetime import date, datetime, time

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from workhours.database import Database
from workhours.errors import PersistenceError, ValidationError
from workhours.models.work_entry import MessageResponse, WorkEntry, WorkEntryCreate
from workhours.services.employee_service import EmployeeService
from workhours.tables import employees, work_hours
from workhours.utils.hours import calculate_net_hours

logger = logging.getLogger(__name__)

TIME_FORMATS = ("%H:%M", "%H:%M:%S")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError("Invalid date, expected YYYY-MM-DD.")


def _parse_time(value: str) -> time:
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValidationError("Invalid time, expected HH:MM.")


class WorkHoursService:
    """Service for handling work hour entries."""

    def __init__(self, db: Database):
        """Initialize service with database connection."""
        self.db = db
        self.employees = EmployeeService(db)

    async def log_hours(self, entry: WorkEntryCreate) -> MessageResponse:
        """
        Record one day of work for an employee.

        The employee lookup and the insert share one transaction.

        Args:
            entry: Submitted work entry

        Returns:
            Acknowledgement message

        Raises:
            ValidationError: If a required field is missing or malformed,
                or the employee does not exist
            PersistenceError: If the database fails
        """
        required = (entry.employee_name, entry.date, entry.start_time, entry.end_time)
        if not all(required):
            raise ValidationError("Missing required fields.")

        work_date = _parse_date(entry.date)
        start_time = _parse_time(entry.start_time)
        end_time = _parse_time(entry.end_time)
        break_minutes = entry.break_time or 0
        # Only whole break minutes count towards net hours
        net_hours = calculate_net_hours(entry.start_time, entry.end_time, int(break_minutes))

        try:
            async with self.db.transaction() as conn:
                employee_id = await self.employees.find_employee_id(conn, entry.employee_name)
                if employee_id is None:
                    raise ValidationError("Employee not found.")

                await conn.execute(
                    insert(work_hours).values(
                        employee_id=employee_id,
                        date=work_date,
                        start_time=start_time,
                        end_time=end_time,
                        break_time=break_minutes,
                        net_hours=net_hours,
                        comment=entry.comment,
                    )
                )
        except SQLAlchemyError:
            logger.exception(
                "Failed to log hours for %r on %s", entry.employee_name, entry.date
            )
            raise PersistenceError()

        return MessageResponse(message="Work hours logged successfully.")

    async def list_work_hours(self) -> list[WorkEntry]:
        """
        List every work entry with its employee name, most recent date first.

        Raises:
            PersistenceError: If the database fails
        """
        query = (
            select(
                work_hours.c.id,
                employees.c.name.label("employee"),
                work_hours.c.date,
                work_hours.c.start_time,
                work_hours.c.end_time,
                work_hours.c.break_time,
                work_hours.c.net_hours,
                work_hours.c.comment,
            )
            .select_from(work_hours.join(employees, work_hours.c.employee_id == employees.c.id))
            .order_by(work_hours.c.date.desc(), work_hours.c.id)
        )

        try:
            async with self.db.connection() as conn:
                result = await conn.execute(query)
                rows = result.mappings().all()
        except SQLAlchemyError:
            logger.exception("Failed to list work hours")
            raise PersistenceError()

        return [WorkEntry(**row) for row in rows]
