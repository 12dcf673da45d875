from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from exam_server.database import get_db
from exam_server.errors import ExamServerError
from exam_server.routes import error_envelope
from exam_server.schemas import ExamResponseOut, StatsOut
from exam_server.services import reporting

router = APIRouter(tags=["Admin"])


@router.get("/responses")
def list_responses(db: Session = Depends(get_db)):
    """All submissions, most recent first"""
    try:
        rows = reporting.list_responses(db)
    except ExamServerError as e:
        return error_envelope(e)
    return {
        "success": True,
        "data": [ExamResponseOut.model_validate(row).model_dump(mode="json") for row in rows],
    }


@router.get("/stats")
def get_stats(db: Session = Depends(get_db)):
    try:
        stats = reporting.get_stats(db)
    except ExamServerError as e:
        return error_envelope(e)
    data = StatsOut(
        totalSubmissions=stats.total_submissions,
        averageScore=stats.average_score,
        tabSwitchCount=stats.tab_switch_count,
    )
    return {"success": True, "data": data.model_dump()}
