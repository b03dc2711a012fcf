from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from addresses import router as addresses_router
from core import db, errors, schema, settings
from customers import router as customers_router

logger = logging.getLogger(__name__)


def create_app(database_path: str | Path = settings.DATABASE_PATH) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Open the shared connection and create tables before serving anything.
        # Any failure here aborts startup.
        try:
            await db.connect(database_path)
            await schema.init_schema()
        except Exception:
            logger.exception("startup_failed database_path=%s", database_path)
            await db.close()
            raise
        try:
            yield
        finally:
            await db.close()

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    errors.register_exception_handlers(app)

    app.include_router(customers_router.router, tags=["customers"])
    app.include_router(addresses_router.router, tags=["addresses"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "customer address api"}

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
