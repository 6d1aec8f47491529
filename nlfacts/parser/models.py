"""
Data models for the sentence translator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..kb.models import Fact


class SentenceRule(Enum):
    """Sentence shapes, listed in the order they are tried."""
    LOCATION = "location"  # X lives in Y
    POSSESSIVE = "possessive"  # X is the R of Y
    COPULA = "copula"  # X is P
    SIMPLE = "simple"  # X R Y


@dataclass
class TranslationResult:
    """Result of translating one sentence."""
    sentence: str
    rule: Optional[SentenceRule]
    fact: Optional[Fact]
    message: str

    @property
    def added(self) -> bool:
        return self.fact is not None
