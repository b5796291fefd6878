from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quickstats.api import classification, health, stats
from quickstats.config import SERVICE_TITLE, SERVICE_VERSION
from quickstats.observability.logging import setup_logging
from quickstats.observability.metrics import MetricsMiddleware, metrics_router

# Set by the lifespan handler from the startup self-check of the numeric core
READY_FLAG = False


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    READY_FLAG = health.core_self_check()
    yield
    READY_FLAG = False


def _serialize_error(err):
    if isinstance(err, Exception):
        return str(err)
    if isinstance(err, dict):
        return {k: _serialize_error(v) for k, v in err.items()}
    if isinstance(err, (list, tuple)):
        return [_serialize_error(e) for e in err]
    return err


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=SERVICE_TITLE,
        version=SERVICE_VERSION,
        lifespan=app_lifespan,
    )
    app.add_middleware(MetricsMiddleware)
    app.include_router(metrics_router)          # /metrics
    app.include_router(health.router)           # /health, /ready
    app.include_router(stats.router)            # /stats/*
    app.include_router(classification.router)   # /classification/*
    app.state.ready_flag = lambda: READY_FLAG

    # Malformed bodies answer 400 like rejected numeric input, not 422
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"detail": _serialize_error(exc.errors())},
        )

    return app


app = create_app()
