from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo import MongoClient
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings, settings as default_settings
from app.core.database import check_database_connection, create_mongo_client, init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import logger
from app.api.v1.router import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await run_in_threadpool(init_db, app.state.mongo_client, app.state.settings.MONGO_PING_TIMEOUT_MS)
    yield


def create_app(config: Optional[Settings] = None, mongo_client: Optional[MongoClient] = None) -> FastAPI:
    """
    Build the application.

    The MongoDB client is created here (or passed in) and kept on app.state
    for the life of the process; handlers reach it through app.api.deps.
    """
    config = config or default_settings

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.APP_VERSION,
        debug=config.DEBUG,
        lifespan=lifespan
    )
    app.state.settings = config
    app.state.mongo_client = mongo_client if mongo_client is not None else create_mongo_client(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=config.API_PREFIX)

    @app.get("/")
    def root():
        """
        Welcome endpoint
        """
        return {
            "message": f"Welcome to {config.PROJECT_NAME}",
            "docs": "/docs",
            "version": config.APP_VERSION
        }

    @app.get("/health")
    def health():
        """
        Health check: pings MongoDB
        """
        if check_database_connection(app.state.mongo_client, config.MONGO_PING_TIMEOUT_MS):
            return {"status": "ok", "database": "up"}
        return JSONResponse(status_code=503, content={"status": "degraded", "database": "down"})

    logger.info(f"{config.PROJECT_NAME} {config.APP_VERSION} ready (db={config.MONGO_DB}.{config.MONGO_COLLECTION})")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT)
