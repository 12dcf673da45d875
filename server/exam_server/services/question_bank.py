"""
CRUD over the question bank.

Update and delete by an unknown id are successful no-ops; both return the
number of affected rows so callers can tell when nothing matched.
"""
import logging
from typing import List, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exam_server.errors import CorruptRecord, StorageFailure
from exam_server.models import ExamQuestion
from exam_server.services.options_codec import decode_options, encode_options

logger = logging.getLogger(__name__)


def list_questions(db: Session) -> List[dict]:
    """All questions by ascending id, with options decoded."""
    try:
        rows = db.execute(select(ExamQuestion).order_by(ExamQuestion.id.asc())).scalars().all()
    except SQLAlchemyError as e:
        logger.error("Failed to list questions", exc_info=True)
        raise StorageFailure() from e

    questions = []
    for row in rows:
        try:
            options = decode_options(row.options)
        except CorruptRecord as e:
            logger.error("Question %s has corrupt options %r: %s", row.id, row.options, e.detail, exc_info=True)
            raise
        questions.append({
            "id": row.id,
            "question": row.question,
            "options": options,
            "correct_answer": row.correct_answer,
        })
    return questions


def create_question(db: Session, question: str, options: Sequence[str], correct_answer: str) -> int:
    row = ExamQuestion(question=question, options=encode_options(options), correct_answer=correct_answer)
    try:
        db.add(row)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to create question", exc_info=True)
        raise StorageFailure() from e

    logger.info("Created question %s", row.id)
    return row.id


def update_question(db: Session, question_id: int, question: str, options: Sequence[str], correct_answer: str) -> int:
    """Replace question, options and correct_answer of one row."""
    stmt = (
        update(ExamQuestion)
        .where(ExamQuestion.id == question_id)
        .values(question=question, options=encode_options(options), correct_answer=correct_answer)
    )
    return _execute_write(db, stmt, "update", question_id)


def delete_question(db: Session, question_id: int) -> int:
    stmt = delete(ExamQuestion).where(ExamQuestion.id == question_id)
    return _execute_write(db, stmt, "delete", question_id)


def _execute_write(db: Session, stmt, action: str, question_id: int) -> int:
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to %s question %s", action, question_id, exc_info=True)
        raise StorageFailure() from e

    if result.rowcount == 0:
        logger.info("No question with id %s to %s", question_id, action)
    return result.rowcount
