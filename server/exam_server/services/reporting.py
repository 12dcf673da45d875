"""
Read-only aggregates over recorded submissions.
"""
import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exam_server.errors import StorageFailure
from exam_server.models import ExamResponse

logger = logging.getLogger(__name__)


@dataclass
class Stats:
    total_submissions: int
    average_score: float
    tab_switch_count: int


def get_stats(db: Session) -> Stats:
    """Count, average score and tab-switch count.

    All three aggregates come from one SELECT so they always describe the
    same set of rows, even while submissions are being inserted.
    """
    stmt = select(
        func.count(ExamResponse.id),
        func.avg(ExamResponse.score),
        func.coalesce(func.sum(case((ExamResponse.was_tab_switched.is_(True), 1), else_=0)), 0),
    )
    try:
        total, average, tab_switches = db.execute(stmt).one()
    except SQLAlchemyError as e:
        logger.error("Failed to compute stats", exc_info=True)
        raise StorageFailure() from e

    return Stats(
        total_submissions=int(total),
        average_score=round(float(average or 0), 2),
        tab_switch_count=int(tab_switches),
    )


def list_responses(db: Session) -> List[ExamResponse]:
    """Every submission, most recent first."""
    stmt = select(ExamResponse).order_by(ExamResponse.submitted_at.desc(), ExamResponse.id.desc())
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as e:
        logger.error("Failed to list responses", exc_info=True)
        raise StorageFailure() from e
