from sqlalchemy import Column, Integer, Text
from exam_server.database import Base


class ExamQuestion(Base):
    """A question in the bank"""
    __tablename__ = "exam_questions"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    options = Column(Text, nullable=False)  # JSON array of strings, see services.options_codec
    correct_answer = Column(Text, nullable=False)  # Option index or exact option text

    def __repr__(self):
        return f"<ExamQuestion {self.id}>"
