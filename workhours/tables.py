"""Relational schema for employees and their logged work hours."""
from sqlalchemy import (
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    Table,
    Text,
    Time,
)

metadata = MetaData()

employees = Table(
    "employees",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", Text, nullable=False, unique=True),
    # Default weekly hours, Monday to Friday
    Column("mo_hours", Float, default=0, server_default="0"),
    Column("di_hours", Float, default=0, server_default="0"),
    Column("mi_hours", Float, default=0, server_default="0"),
    Column("do_hours", Float, default=0, server_default="0"),
    Column("fr_hours", Float, default=0, server_default="0"),
)

work_hours = Table(
    "work_hours",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("employee_id", Integer, ForeignKey("employees.id"), nullable=False),
    Column("date", Date, nullable=False),
    Column("start_time", Time),
    Column("end_time", Time),
    Column("break_time", Float, default=0, server_default="0"),
    Column("net_hours", Float),
    Column("comment", Text),
)
