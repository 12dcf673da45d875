import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from exam_server.config import Settings, settings
from exam_server.database import StorageGateway
from exam_server.routes import admin, health, questions, submissions

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _error_field(err: dict) -> str:
    """Dotted field path of a validation error; an unparseable body is reported as 'body'."""
    if err.get("type") == "json_invalid":
        return "body"
    return ".".join(str(part) for part in err["loc"][1:])


def create_app(app_settings: Settings = None) -> FastAPI:
    """Build the ASGI app. The storage pool is created on startup and disposed on shutdown."""
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.on_event("startup")
    def startup_event():
        """Open the process-wide connection pool"""
        app.state.storage = StorageGateway(
            app_settings.sqlalchemy_url,
            pool_size=app_settings.db_pool_size,
            pool_timeout=app_settings.db_pool_timeout,
            pool_recycle=app_settings.db_pool_recycle,
            ssl_ca=app_settings.db_ssl_ca,
            echo=app_settings.debug,
        )
        if app_settings.create_tables:
            try:
                app.state.storage.create_all()
            except SQLAlchemyError:
                # Keep serving; /api/test reports the outage
                logger.error("Could not create tables at startup", exc_info=True)
        logger.info("%s is starting...", app_settings.app_name)

    @app.on_event("shutdown")
    def shutdown_event():
        storage = getattr(app.state, "storage", None)
        if storage is not None:
            storage.dispose()

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        fields = sorted({_error_field(err) for err in exc.errors()} - {""})
        logger.info("Rejected invalid request to %s: %s", request.url.path, fields)
        return JSONResponse(
            status_code=422,
            content={"success": False, "message": f"Invalid request: {', '.join(fields) or 'body'}"},
        )

    app.include_router(health.router)
    app.include_router(submissions.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")
    app.include_router(questions.router, prefix="/api")

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run("exam_server.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
