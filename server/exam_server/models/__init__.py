"""
Models package initialization
Import all models here to ensure they are registered with SQLAlchemy
"""

from exam_server.models.response import ExamResponse
from exam_server.models.question import ExamQuestion

__all__ = [
    "ExamResponse",
    "ExamQuestion",
]
