"""
Centralized Error Handling and Logging
Every error response has the shape {"error": <message>}; details go to the log.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union
from contextvars import ContextVar

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

class ErrorHandlingConfig:
    """Error logging behavior"""

    LOG_REQUEST_BODIES = True
    MAX_BODY_LOG_SIZE = 5000  # Truncate large bodies
    LOG_CLIENT_ERRORS = True  # 4xx responses

    @classmethod
    def truncate(cls, data: Union[str, Any]) -> Any:
        if isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        return data

class StructuredLogger:
    """Structured error logging with request context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log a JSON error entry and return its trace id"""

        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception)
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = traceback.format_exc()

        if extra_context:
            log_entry["context"] = extra_context

        logger.error(json.dumps(log_entry, indent=2, default=str))

        return trace_id

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to each request and keeps the body for error logs"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)

        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES:
            body = await request.body()

        request.state.captured_body = body
        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        return response

def _captured_body(request: Request) -> Optional[str]:
    body = getattr(request.state, 'captured_body', None)
    if not body:
        return None
    try:
        return ErrorHandlingConfig.truncate(body.decode('utf-8'))
    except UnicodeDecodeError:
        return "DECODE_ERROR"

# Global Exception Handlers
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions; 5xx carry the raw storage message"""

    if exc.status_code >= 500 or (exc.status_code >= 400 and ErrorHandlingConfig.LOG_CLIENT_ERRORS):
        StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            extra_context={
                "status_code": exc.status_code,
                "request_body": _captured_body(request)
            },
            include_traceback=False
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle FastAPI validation errors (HTTP 422)"""

    validation_details = []
    for error in exc.errors():
        validation_details.append({
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown")
        })

    StructuredLogger.log_error(
        "validation_error_422",
        f"Request validation failed: {len(validation_details)} validation errors",
        request=request,
        extra_context={
            "validation_errors": validation_details,
            "request_body": _captured_body(request)
        },
        include_traceback=False
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "detail": validation_details
        }
    )

async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internals"""

    StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc,
        extra_context={"request_body": _captured_body(request)}
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"}
    )

def raise_for_service_error(result) -> None:
    """Translate a failed ServiceResult into an HTTPException"""
    if result.success:
        return
    if result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail=result.error)
    raise HTTPException(status_code=500, detail=result.error)

def setup_error_handling(app):
    """Install request context middleware and exception handlers"""

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")
