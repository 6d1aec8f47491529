"""
Translation of natural-language sentences into facts.
"""

from .sentence_translator import SentenceTranslator
from .models import SentenceRule, TranslationResult

__all__ = ["SentenceTranslator", "SentenceRule", "TranslationResult"]
