"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dressing.domain import UnknownZoneError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(UnknownZoneError)
    async def unknown_zone_handler(
        request: Request, exc: UnknownZoneError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "unknown_zone",
                "details": {"zone": exc.code, "available": exc.available},
            },
        )
