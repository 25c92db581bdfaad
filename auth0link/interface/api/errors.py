"""Exception handlers mapping adapter and domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from auth0link.adapter.error import ApiError, ResponseDecodeError, TransportError
from auth0link.domain.error import NotFoundError, PreconditionError


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logfire.warn(
        "Auth0 rejected request",
        path=request.url.path,
        status_code=exc.status_code,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message, "upstream_status": exc.status_code},
    )


async def transport_error_handler(
    request: Request, exc: TransportError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Identity provider unavailable"},
    )


async def decode_error_handler(
    request: Request, exc: ResponseDecodeError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Unexpected response from identity provider"},
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def precondition_handler(
    request: Request, exc: PreconditionError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(TransportError, transport_error_handler)
    app.add_exception_handler(ResponseDecodeError, decode_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(PreconditionError, precondition_handler)
