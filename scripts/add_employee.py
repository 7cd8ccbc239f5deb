"""Add an employee so they can log hours, or list existing employees."""
import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from workhours.config import settings
from workhours.database import Database
from workhours.errors import WorkHoursError
from workhours.models.employee import EmployeeCreate
from workhours.services.employee_service import EmployeeService

WEEKDAYS = ("mo", "di", "mi", "do", "fr")


async def add_employee(db: Database, employee: EmployeeCreate) -> int:
    """Insert one employee and report its id."""
    created = await EmployeeService(db).create_employee(employee)
    print(f"Created employee {created.name!r} with id {created.id}")
    return created.id


async def list_employees(db: Database) -> list[str]:
    """Print every employee with their default weekday hours."""
    lines = []
    for employee in await EmployeeService(db).list_employees():
        hours = " ".join(f"{day}={getattr(employee, f'{day}_hours'):g}" for day in WEEKDAYS)
        lines.append(f"{employee.id:>4}  {employee.name}  {hours}")

    print("\n".join(lines) if lines else "No employees")
    return lines


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("name", nargs="?", help="Display name, must be unique")
    parser.add_argument("--list", action="store_true", help="List employees and exit")
    for day in WEEKDAYS:
        parser.add_argument(f"--{day}", type=float, default=0, help=f"Default hours ({day})")
    args = parser.parse_args(argv)

    if not args.list and not args.name:
        parser.error("a name is required unless --list is given")
    return args


def employee_from_args(args: argparse.Namespace) -> EmployeeCreate:
    return EmployeeCreate(
        name=args.name,
        **{f"{day}_hours": getattr(args, day) for day in WEEKDAYS},
    )


async def main(args: argparse.Namespace) -> None:
    """Create the schema if needed, then run the requested command."""
    db = Database(settings)
    try:
        await db.connect()
        if args.list:
            await list_employees(db)
        else:
            await add_employee(db, employee_from_args(args))
    finally:
        await db.disconnect()


if __name__ == "__main__":
    try:
        asyncio.run(main(parse_args()))
    except WorkHoursError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
