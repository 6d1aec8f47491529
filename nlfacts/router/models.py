"""
Data models for question routing and answers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional


class QuestionType(Enum):
    """Types of questions that can be answered."""
    WHO = "who"  # who is the R of Y?
    WHAT = "what"  # what does X R?
    WHERE = "where"  # where does X live?
    YES_NO = "yes_no"  # is X P? / is X R Y?
    UNKNOWN = "unknown"


@dataclass
class Answer:
    """Answer to a natural-language question."""
    question: str
    question_type: QuestionType
    predicate: Optional[str] = None
    pattern: List[str] = field(default_factory=list)
    label: str = "Answer"
    values: List[str] = field(default_factory=list)
    verdict: Optional[bool] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def understood(self) -> bool:
        return self.question_type != QuestionType.UNKNOWN

    def render(self) -> str:
        """Render the answer as user-facing text."""
        if not self.understood:
            return "Could not understand query format."

        if self.question_type == QuestionType.YES_NO:
            return "Answer: Yes" if self.verdict else "Answer: No (or unknown)"

        if not self.values:
            return "Answer: No matches found."

        lines = [f"{self.label}:"]
        lines.extend(f"  - {value}" for value in self.values)
        return "\n".join(lines)
