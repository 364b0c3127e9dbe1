import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, openapi, settings
from core.errors import register_error_handlers
from core.log import configure_logging
from customers import router as customers_router
from foods import router as foods_router
from students import router as students_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    app = FastAPI(
        title=openapi.API_TITLE,
        version=openapi.API_VERSION,
        description=openapi.API_DESCRIPTION,
        docs_url=openapi.DOCS_URL,
        openapi_url=openapi.OPENAPI_URL,
        redoc_url=None,
        lifespan=lifespan,
    )

    origins = settings.cors_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(foods_router.router, prefix="/api", tags=["foods"])
    app.include_router(customers_router.router, prefix="/api", tags=["customers"])
    app.include_router(students_router.router, prefix="/api", tags=["students"])

    @app.get("/health", include_in_schema=False)
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    def root() -> dict:
        return {"message": "sample api", "docs": openapi.DOCS_URL}

    return app


app = create_app()


def run() -> None:
    configure_logging()
    host, port = settings.host(), settings.port()
    logger.info("Server running at http://%s:%s", host, port)
    logger.info("Swagger UI available at http://%s:%s%s", host, port, openapi.DOCS_URL)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
