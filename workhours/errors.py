"""Error taxonomy and the JSON handlers that render it."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class WorkHoursError(Exception):
    """Base error; ``status_code`` is the HTTP status reported to clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WorkHoursError):
    """Missing or malformed input, or an unknown employee."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(WorkHoursError):
    """Admin credentials were rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(WorkHoursError):
    """The session is not privileged."""

    status_code = status.HTTP_403_FORBIDDEN


class PersistenceError(WorkHoursError):
    """Any database failure. Details stay in the server log."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error."):
        super().__init__(message)


async def work_hours_error_handler(request: Request, exc: WorkHoursError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Unparseable request bodies are client errors, reported like the rest."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body."},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WorkHoursError, work_hours_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
