"""
Exam submission: one recorded response per roll number.

The UNIQUE constraint on exam_responses.roll_number is the only duplicate
guard. No existence check precedes the insert: of two concurrent submissions
for the same roll number, exactly one commits.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exam_server.database import is_unique_violation
from exam_server.errors import DuplicateSubmission, StorageFailure
from exam_server.models import ExamResponse

logger = logging.getLogger(__name__)


def submit(
    db: Session,
    roll_number: str,
    name: str,
    department: str,
    section: str,
    score: int,
    total_questions: int,
    was_tab_switched: bool,
) -> None:
    """Record an exam attempt. submitted_at is assigned by the database."""
    response = ExamResponse(
        roll_number=roll_number,
        name=name,
        department=department,
        section=section,
        score=score,
        total_questions=total_questions,
        was_tab_switched=was_tab_switched,
    )
    try:
        db.add(response)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        if is_unique_violation(e):
            logger.info("Duplicate submission rejected for roll number %r", roll_number)
            raise DuplicateSubmission() from e
        logger.error("Failed to store submission for %r", roll_number, exc_info=True)
        raise StorageFailure("Submission failed") from e

    logger.info("Stored submission for %r: %d/%d, tab switched=%s",
                roll_number, score, total_questions, was_tab_switched)


def roll_number_exists(db: Session, roll_number: str) -> bool:
    """Advisory pre-check for clients; submit() is the authoritative guard."""
    stmt = select(func.count()).select_from(ExamResponse).where(ExamResponse.roll_number == roll_number)
    try:
        count = db.execute(stmt).scalar_one()
    except SQLAlchemyError as e:
        logger.error("Roll number lookup failed for %r", roll_number, exc_info=True)
        raise StorageFailure() from e
    return count > 0
