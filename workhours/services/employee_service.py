"""Employee service - business logic for employee records."""
import logging
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from workhours.database import Database
from workhours.errors import PersistenceError, ValidationError
from workhours.models.employee import Employee, EmployeeCreate
from workhours.tables import employees

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for creating and looking up employees."""

    def __init__(self, db: Database):
        """Initialize service with database connection."""
        self.db = db

    def _row_to_employee(self, row) -> Employee:
        return Employee(
            id=row.id,
            name=row.name,
            mo_hours=row.mo_hours or 0,
            di_hours=row.di_hours or 0,
            mi_hours=row.mi_hours or 0,
            do_hours=row.do_hours or 0,
            fr_hours=row.fr_hours or 0,
        )

    async def create_employee(self, employee: EmployeeCreate) -> Employee:
        """
        Create a new employee.

        Args:
            employee: Employee data

        Returns:
            Created employee

        Raises:
            ValidationError: If an employee with that name already exists
            PersistenceError: On any other database failure
        """
        values = employee.model_dump()
        try:
            async with self.db.transaction() as conn:
                result = await conn.execute(insert(employees).values(**values))
                employee_id = result.inserted_primary_key[0]
        except IntegrityError:
            raise ValidationError("Employee already exists.")
        except SQLAlchemyError:
            logger.exception("Failed to create employee %r", employee.name)
            raise PersistenceError()

        return Employee(id=employee_id, **values)

    async def find_employee_id(self, conn: AsyncConnection, name: str) -> Optional[int]:
        """Look up an employee id by exact name on an open connection."""
        result = await conn.execute(select(employees.c.id).where(employees.c.name == name))
        return result.scalar_one_or_none()

    async def get_employee_id(self, name: str) -> Optional[int]:
        """
        Get an employee id by exact name.

        Returns:
            The id, or None if no employee has that name
        """
        async with self.db.connection() as conn:
            return await self.find_employee_id(conn, name)

    async def list_employees(self) -> list[Employee]:
        """List all employees ordered by name."""
        async with self.db.connection() as conn:
            result = await conn.execute(select(employees).order_by(employees.c.name))
            return [self._row_to_employee(row) for row in result]
