"""
Fact Store for holding facts and answering wildcard match queries.
"""

import logging
from typing import List, Dict, Any, Sequence, Tuple

from .models import Fact, QueryResult, WILDCARD

logger = logging.getLogger(__name__)


class FactStore:
    """In-memory storage for facts, keyed by predicate name."""

    def __init__(self, wildcard: str = WILDCARD):
        self.wildcard = wildcard

        # predicate -> argument tuples in insertion order, duplicates allowed
        self.facts: Dict[str, List[Tuple[str, ...]]] = {}

    def __len__(self) -> int:
        return sum(len(entries) for entries in self.facts.values())

    def insert(self, predicate: str, arguments: Sequence[str]) -> Fact:
        """
        Add a new fact to the store.

        The predicate is lowercased; arguments are kept as supplied. No arity
        checks are made, so one predicate may hold facts of different lengths.

        Args:
            predicate: Name of the predicate (e.g. "parent", "likes")
            arguments: Ordered arguments of the fact

        Returns:
            The stored Fact
        """
        fact = Fact(predicate=predicate.lower(), arguments=tuple(arguments))
        self.facts.setdefault(fact.predicate, []).append(fact.arguments)

        logger.info(f"Added fact: {fact}")
        return fact

    def query(self, predicate: str, pattern: Sequence[str]) -> List[List[str]]:
        """
        Query the store for facts matching a pattern.

        Args:
            predicate: The predicate to search for
            pattern: Arguments to match, with the wildcard marker matching anything

        Returns:
            Argument lists of every matching fact, in insertion order
        """
        pred = predicate.lower()

        if pred not in self.facts:
            logger.debug(f"No facts stored for predicate '{pred}'")
            return []

        results = [
            list(arguments) for arguments in self.facts[pred]
            if self._matches(arguments, pattern)
        ]

        logger.debug(f"Query {pred}({', '.join(pattern)}) matched {len(results)} facts")
        return results

    def search(self, predicate: str, pattern: Sequence[str]) -> QueryResult:
        """Run a query and wrap the matches with the pattern that produced them."""
        matches = self.query(predicate, pattern)
        return QueryResult(
            predicate=predicate.lower(),
            pattern=list(pattern),
            matches=matches,
            metadata={"match_count": len(matches)}
        )

    def _matches(self, arguments: Tuple[str, ...], pattern: Sequence[str]) -> bool:
        """Check one stored fact against a pattern."""
        if len(arguments) != len(pattern):
            return False

        for token, value in zip(pattern, arguments):
            if token != self.wildcard and token.lower() != value.lower():
                return False

        return True

    def get_predicates(self) -> List[str]:
        """Get all predicate names in the order they were first seen."""
        return list(self.facts.keys())

    def get_all_facts(self) -> List[Fact]:
        """Get all facts in the store, grouped by predicate."""
        return [
            Fact(predicate=predicate, arguments=arguments)
            for predicate, entries in self.facts.items()
            for arguments in entries
        ]

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the fact store."""
        return {
            "total_facts": len(self),
            "predicates": self.get_predicates(),
            "arities": {
                predicate: sorted(set(len(arguments) for arguments in entries))
                for predicate, entries in self.facts.items()
            }
        }
