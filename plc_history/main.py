# plc_history/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from plc_history.api.dependencies import close_clients
from plc_history.api.middleware import CorrelationIdMiddleware, RequestAuditMiddleware
from plc_history.api.routers import health, history
from plc_history.application.exceptions import (
    ApplicationError,
    DirectoryUnavailableError,
    IdentityNotFoundError,
    InvalidAuditLogError,
    UnsupportedDidMethodError,
)
from plc_history.config.logging import configure_logging
from plc_history.config.settings import get_settings
from plc_history.domain.exceptions import DomainError

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_clients()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> RequestAudit.
app.add_middleware(RequestAuditMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(IdentityNotFoundError)
async def identity_not_found_error_handler(request, exc: IdentityNotFoundError):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(UnsupportedDidMethodError)
async def unsupported_did_method_error_handler(request, exc: UnsupportedDidMethodError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(DirectoryUnavailableError)
async def directory_unavailable_error_handler(request, exc: DirectoryUnavailableError):
    return JSONResponse(status_code=502, content={"detail": exc.message})


@app.exception_handler(InvalidAuditLogError)
async def invalid_audit_log_error_handler(request, exc: InvalidAuditLogError):
    return JSONResponse(status_code=502, content={"detail": exc.message})


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /plc
app.include_router(health.router)
app.include_router(history.router, prefix="/plc")
