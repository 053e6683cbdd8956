import logging
from typing import Optional

from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from app.db.init_db import create_database
from app.db.base import ALL_MODELS
from app.db.schema_builder import SchemaBuilder, SchemaBuildError
from app.db.session import Database
from app.core.config import Settings, settings
from app.api.v1.router import api_router

logger = logging.getLogger(__name__)


def _use_token_url(app: FastAPI, token_url: str) -> None:
    """Point the OAuth2 password flow in this app's OpenAPI schema at its own login route."""

    def openapi():
        if app.openapi_schema:
            return app.openapi_schema
        schema = FastAPI.openapi(app)
        for scheme in schema.get("components", {}).get("securitySchemes", {}).values():
            password_flow = scheme.get("flows", {}).get("password")
            if password_flow is not None:
                password_flow["tokenUrl"] = token_url
        return schema

    app.openapi = openapi


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    database_url = app_settings.assemble_db_url()
    logging.basicConfig(level=app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: ensure the database exists, then build the schema once
        if app_settings.CREATE_DATABASE:
            create_database(database_url)

        database = Database(database_url)
        result = SchemaBuilder(database.engine, ALL_MODELS).build(force=app_settings.FORCE_SYNC_SCHEMA)
        if not result.ok:
            database.dispose()
            raise SchemaBuildError(
                f"Schema setup stopped at {result.state.value} (entity: {result.entity})"
            ) from result.error

        app.state.settings = app_settings
        app.state.database = database
        yield

        # Shutdown: release the pool
        database.dispose()

    app = FastAPI(title=app_settings.PROJECT_NAME, lifespan=lifespan)

    # Set all CORS enabled origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=app_settings.API_V1_STR)

    _use_token_url(app, f"{app_settings.API_V1_STR}/auth/login")

    @app.get("/")
    def read_root():
        return {"Hello": "Cinema"}

    return app


app = create_app()
