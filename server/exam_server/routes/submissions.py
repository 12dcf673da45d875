from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from exam_server.database import get_db
from exam_server.errors import ExamServerError
from exam_server.routes import error_envelope
from exam_server.schemas import RollCheckResponse, SubmitExamRequest
from exam_server.services import submissions

router = APIRouter(tags=["Exam"])


@router.post("/submit-exam")
def submit_exam(payload: SubmitExamRequest, db: Session = Depends(get_db)):
    """
    Record a finished exam. A roll number can submit only once.
    """
    try:
        submissions.submit(
            db,
            roll_number=payload.roll_number,
            name=payload.name,
            department=payload.department,
            section=payload.section,
            score=payload.score,
            total_questions=payload.total_questions,
            was_tab_switched=payload.was_tab_switched,
        )
    except ExamServerError as e:
        return error_envelope(e)
    return {"success": True, "message": "Exam submitted successfully"}


@router.get("/check-roll/{roll_number}", response_model=RollCheckResponse)
def check_roll(roll_number: str, db: Session = Depends(get_db)):
    try:
        exists = submissions.roll_number_exists(db, roll_number.strip())
    except ExamServerError as e:
        return error_envelope(e)
    return RollCheckResponse(exists=exists)
