from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from typing import List, Union
from datetime import datetime


# Submission Schemas
class SubmitExamRequest(BaseModel):
    roll_number: str = Field(min_length=1, max_length=64)
    name: str
    department: str
    section: str
    score: int = Field(ge=0)
    total_questions: int = Field(gt=0)
    was_tab_switched: bool = False

    @field_validator("roll_number")
    @classmethod
    def roll_number_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("roll_number must not be blank")
        return value


class RollCheckResponse(BaseModel):
    exists: bool


class ExamResponseOut(BaseModel):
    id: int
    roll_number: str
    name: str
    department: str
    section: str
    score: int
    total_questions: int
    was_tab_switched: bool
    submitted_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StatsOut(BaseModel):
    totalSubmissions: int
    averageScore: float
    tabSwitchCount: int


# Question Schemas
class QuestionRequest(BaseModel):
    question: str
    options: List[str]
    correct_answer: Union[StrictInt, str]

    @property
    def correct_answer_text(self) -> str:
        """Stored form of correct_answer; an option index is kept as its decimal text."""
        return str(self.correct_answer)


class QuestionOut(BaseModel):
    id: int
    question: str
    options: List[str]
    correctAnswer: str
