import logging

from fastapi import Request
from starlette.responses import JSONResponse

from vite_assets.exceptions.vite_exceptions import ViteBaseException

log = logging.getLogger(__name__)


async def vite_exception_handler(
    request: Request, exception: Exception
) -> JSONResponse:
    if isinstance(exception, ViteBaseException):
        log.exception(
            "Unable to resolve vite assets for %s: %s",
            request.url.path,
            exception.log_message or exception.error_description,
            exc_info=exception,
        )
        error_description = exception.error_description
    else:
        log.exception("Unexpected error for %s", request.url.path, exc_info=exception)
        error_description = "Something went wrong"

    return JSONResponse(
        content={"error": "server_error", "error_description": error_description},
        status_code=500,
    )
