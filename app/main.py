# app/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import (
    EmailAlreadyExistsError,
    ObjectNotFoundError,
    UnknownPrincipalError,
)
from app.core.logging import configure_logging
from app.api.v1.api import api_router
from app.db.init_db import init_db

logger = logging.getLogger("headhunter.api")


def _result(code: int, message: str, data=None, headers=None) -> JSONResponse:
    body = {"flag": False, "code": code, "message": message, "data": data}
    return JSONResponse(status_code=code, content=jsonable_encoder(body), headers=headers)


# ---------- EXCEPTION HANDLERS ----------

async def handle_object_not_found(request: Request, exc: ObjectNotFoundError):
    return _result(404, str(exc))


async def handle_email_already_exists(request: Request, exc: EmailAlreadyExistsError):
    return _result(409, str(exc))


async def handle_unknown_principal(request: Request, exc: UnknownPrincipalError):
    # identical to the wrong-password response
    return _result(401, "username or password is incorrect.")


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = {}
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"] if p != "body") or "body"
        errors[field] = err["msg"]
    return _result(400, "Provided arguments are invalid, see data for details.", errors)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return _result(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def handle_unexpected(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _result(500, "A server internal error occurs.", str(exc) if settings.debug else None)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield


def create_application() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(ObjectNotFoundError, handle_object_not_found)
    app.add_exception_handler(EmailAlreadyExistsError, handle_email_already_exists)
    app.add_exception_handler(UnknownPrincipalError, handle_unknown_principal)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
