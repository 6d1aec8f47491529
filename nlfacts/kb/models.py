"""
Data models for the fact base module.
"""

from dataclasses import dataclass
from typing import Dict, Any, List, Tuple


# Pattern token that matches any single argument value
WILDCARD = "?"


@dataclass(frozen=True)
class Fact:
    """Represents a relational fact: predicate(arg1, arg2, ...)."""
    predicate: str
    arguments: Tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.predicate}({', '.join(self.arguments)})"


@dataclass
class QueryResult:
    """Result of a fact base query."""
    predicate: str
    pattern: List[str]
    matches: List[List[str]]
    metadata: Dict[str, Any]

    @property
    def found(self) -> bool:
        return bool(self.matches)

    def column(self, index: int) -> List[str]:
        """Values at one argument position across every match."""
        return [match[index] for match in self.matches if index < len(match)]
