# gradebook/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from gradebook.core.exceptions import BaseAPIException, StudentOrGradeNotFoundException
from gradebook.core.logging import logger

# 1. Student / grade lookups that did not resolve (fixed body, reason stays internal)
async def student_or_grade_not_found_handler(request: Request, exc: StudentOrGradeNotFoundException):
    logger.warning(
        f"{request.method} {request.url.path} -> 404 ({exc.reason.value}) {exc.details or ''}".rstrip()
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": exc.status_code,
            "message": exc.message,
        },
    )

# 2. Handle Custom Logic Errors
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details
            }
        },
    )

# 3. Handle Validation Errors (raised by pydantic when the client sends bad input)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # Get field name (e.g., "body.emailAddress" or just "grade")
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        details[field] = error["msg"]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Input validation failed",
                "details": details
            }
        },
    )

# 4. Handle Standard HTTP Errors (404 for unknown URLs, 405, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "details": None
            }
        },
    )

# 5. Handle General System Errors
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred. Please contact support.",
                "details": None
            }
        },
    )


def add_exception_handlers(app: FastAPI):
    app.add_exception_handler(StudentOrGradeNotFoundException, student_or_grade_not_found_handler)
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
