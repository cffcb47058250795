# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.logging import logger
from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.logging_context import LoggingContextMiddleware
from catalog.middlewares.prometheus import PrometheusMiddleware
from catalog.routing import collect_subrouters
from catalog.storage.db import engine, wait_and_init_db
from catalog.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup and shutdown.

    Startup waits for the database before serving requests; shutdown
    releases pooled database connections.
    """
    # Startup
    logger.info("Application startup initiated")
    await wait_and_init_db()
    logger.info("Database connection established")

    yield

    # Shutdown
    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Uses the lifespan context manager for startup/shutdown, includes the
    routers collected by ``catalog.routing.collect_subrouters()``,
    registers the exception
    handlers that render the error envelope and adds the middlewares:
    - `PrometheusMiddleware`: HTTP request metrics.
    - `LoggingContextMiddleware`: request context for structured logs.
    - `CorrelationIDMiddleware`: request correlation IDs.
    """
    app = FastAPI(
        title="Library Catalog",
        description="Authors, books, book search and author statistics",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Collect routers
    app.include_router(collect_subrouters())

    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → LoggingContextMiddleware → PrometheusMiddleware
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
