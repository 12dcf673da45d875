from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from exam_server.database import get_db
from exam_server.errors import ExamServerError
from exam_server.routes import error_envelope
from exam_server.schemas import QuestionOut, QuestionRequest
from exam_server.services import question_bank

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.get("")
def list_questions(db: Session = Depends(get_db)):
    """Question bank ordered by id"""
    try:
        questions = question_bank.list_questions(db)
    except ExamServerError as e:
        return error_envelope(e)
    data = [
        QuestionOut(
            id=q["id"],
            question=q["question"],
            options=q["options"],
            correctAnswer=q["correct_answer"],
        ).model_dump()
        for q in questions
    ]
    return {"success": True, "data": data}


@router.post("")
def create_question(payload: QuestionRequest, db: Session = Depends(get_db)):
    try:
        question_id = question_bank.create_question(
            db, payload.question, payload.options, payload.correct_answer_text
        )
    except ExamServerError as e:
        return error_envelope(e)
    return {"success": True, "id": question_id}


@router.put("/{question_id}")
def update_question(question_id: int, payload: QuestionRequest, db: Session = Depends(get_db)):
    """
    Replace a question. An unknown id is a successful no-op.
    """
    try:
        question_bank.update_question(
            db, question_id, payload.question, payload.options, payload.correct_answer_text
        )
    except ExamServerError as e:
        return error_envelope(e)
    return {"success": True, "message": "Question updated"}


@router.delete("/{question_id}")
def delete_question(question_id: int, db: Session = Depends(get_db)):
    try:
        question_bank.delete_question(db, question_id)
    except ExamServerError as e:
        return error_envelope(e)
    return {"success": True, "message": "Question deleted"}
