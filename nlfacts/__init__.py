"""
Natural-Language Fact Base

Turns short English sentences into relational facts, stores them in an
in-memory fact base and answers simple questions through wildcard lookups.
"""

__version__ = "1.0.0"
__author__ = "nlfacts Team"
