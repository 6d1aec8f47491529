"""
Question routing and answering over the fact base.
"""

from .question_answerer import QuestionAnswerer
from .models import Answer, QuestionType

__all__ = ["QuestionAnswerer", "Answer", "QuestionType"]
