"""Admin endpoints - session login and reporting."""
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from workhours.context import AppContext, get_context, get_database
from workhours.database import Database
from workhours.errors import AuthorizationError
from workhours.models.work_entry import MessageResponse, WorkEntry
from workhours.services.auth_service import AdminAuthService
from workhours.services.work_hours_service import WorkHoursService
from workhours.utils.auth import is_privileged


router = APIRouter(tags=["admin"])


class AdminLoginRequest(BaseModel):
    """
    Admin login request model.

    The password is not type checked here; anything that is not the
    configured secret is a 401, never a schema error.
    """

    password: Any = None


async def require_admin(request: Request) -> None:
    """
    Dependency that rejects sessions without a successful admin login.

    Raises:
        AuthorizationError: If the session is not privileged (403)
    """
    if not is_privileged(request.session):
        raise AuthorizationError("Access denied.")


@router.post("/admin-login", response_model=MessageResponse)
async def admin_login(
    request: Request,
    login_req: Optional[AdminLoginRequest] = None,
    context: AppContext = Depends(get_context),
):
    """
    Log in as admin.

    Sets the admin flag on the session cookie; a wrong password is a 401.
    """
    service = AdminAuthService(context.verifier)
    password = login_req.password if login_req else None
    return service.login(request.session, password)


@router.get(
    "/admin-work-hours",
    response_model=list[WorkEntry],
    dependencies=[Depends(require_admin)],
)
async def admin_work_hours(db: Database = Depends(get_database)):
    """
    List all logged work hours, most recent date first.

    - Requires an admin session (403 otherwise)
    """
    service = WorkHoursService(db)
    return await service.list_work_hours()
