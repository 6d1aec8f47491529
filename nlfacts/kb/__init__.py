"""
Fact base holding relational facts with wildcard lookup.
"""

from .fact_store import FactStore
from .models import Fact, QueryResult, WILDCARD

__all__ = ["FactStore", "Fact", "QueryResult", "WILDCARD"]
