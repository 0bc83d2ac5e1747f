# estate_api/errors.py
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from .uploads import UploadRejected

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


async def handle_broad_exceptions(request: Request, call_next):
    """Answer any error that escapes a route with a generic 500."""
    try:
        return await call_next(request)
    except UploadRejected as exc:
        logger.warning("Upload rejected on %s %s: %s", request.method, request.url.path, exc)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE},
    )
