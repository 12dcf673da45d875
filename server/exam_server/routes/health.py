import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(tags=["Health"])

logger = logging.getLogger(__name__)


@router.get("/")
def root():
    """Liveness probe"""
    return {"status": "OK", "message": "Online Exam Server is running"}


@router.get("/api/test")
def test_database(request: Request):
    """Storage connectivity probe"""
    try:
        request.app.state.storage.ping()
    except SQLAlchemyError:
        logger.error("Database connectivity check failed", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Database connection failed"},
        )
    return {"success": True, "message": "Database connected successfully!"}
