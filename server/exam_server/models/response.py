from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.sql import func
from exam_server.database import Base


class ExamResponse(Base):
    """One recorded exam attempt per roll number"""
    __tablename__ = "exam_responses"

    id = Column(Integer, primary_key=True, index=True)
    roll_number = Column(String(64), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    department = Column(String(255), nullable=False)
    section = Column(String(64), nullable=False)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    was_tab_switched = Column(Boolean, nullable=False, default=False)  # Possible cheating
    submitted_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<ExamResponse {self.roll_number} ({self.score}/{self.total_questions})>"
