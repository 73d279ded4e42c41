from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import DuplicateKeyError

from devevents.core.errors import ConfigurationError, MissingReferenceError, ValidationError


def _detail(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return _detail(422, exc)

    @app.exception_handler(MissingReferenceError)
    async def missing_reference(request: Request, exc: MissingReferenceError) -> JSONResponse:
        return _detail(404, exc)

    @app.exception_handler(DuplicateKeyError)
    async def duplicate_key(request: Request, exc: DuplicateKeyError) -> JSONResponse:
        return _detail(409, exc)

    @app.exception_handler(ConfigurationError)
    async def configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
        return _detail(503, exc)
