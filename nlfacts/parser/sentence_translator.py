"""
Sentence Translator for turning natural-language statements into facts.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ..kb.fact_store import FactStore
from ..kb.models import Fact
from .models import SentenceRule, TranslationResult
from .text_utils import split_tokens, keyword_at, token_at

logger = logging.getLogger(__name__)

RuleCheck = Callable[[str, List[str]], bool]
RuleHandler = Callable[[List[str]], Optional[Fact]]


class SentenceTranslator:
    """Rule-based translator from short sentences to relational facts."""

    def __init__(self, fact_store: FactStore):
        self.fact_store = fact_store

        # Tried top to bottom; the first passing check wins even when its
        # handler emits nothing. Later rules act as fallbacks for earlier ones.
        self.rules: List[Tuple[SentenceRule, RuleCheck, RuleHandler]] = [
            (
                SentenceRule.LOCATION,
                lambda text, tokens: "lives in" in text,
                self._parse_lives_in
            ),
            (
                SentenceRule.POSSESSIVE,
                lambda text, tokens: "is the" in text and " of " in text,
                self._parse_relationship
            ),
            (
                SentenceRule.COPULA,
                lambda text, tokens: " is " in text,
                self._parse_copula
            ),
            (
                SentenceRule.SIMPLE,
                lambda text, tokens: len(tokens) >= 3,
                self._parse_relationship
            ),
        ]

    def translate(self, sentence: str) -> TranslationResult:
        """
        Translate a sentence and add the resulting fact to the store.

        Args:
            sentence: The natural language sentence to parse

        Returns:
            TranslationResult with the inserted fact (if any) and a
            human-readable confirmation message
        """
        logger.info(f"Parsing: {sentence!r}")

        tokens = split_tokens(sentence)
        if not tokens:
            return TranslationResult(
                sentence=sentence,
                rule=None,
                fact=None,
                message="Empty sentence, nothing to parse."
            )

        rule, parsed = self._apply_rules(sentence.lower(), tokens)

        if parsed is None:
            logger.debug(f"No fact emitted for {sentence!r} (rule: {rule})")
            return TranslationResult(
                sentence=sentence,
                rule=rule,
                fact=None,
                message="Could not parse sentence pattern."
            )

        fact = self.fact_store.insert(parsed.predicate, parsed.arguments)
        return TranslationResult(
            sentence=sentence,
            rule=rule,
            fact=fact,
            message=f"Added fact: {fact}"
        )

    def _apply_rules(
        self,
        text: str,
        tokens: List[str]
    ) -> Tuple[Optional[SentenceRule], Optional[Fact]]:
        """Run the first rule whose check passes."""
        for rule, check, handler in self.rules:
            if check(text, tokens):
                logger.debug(f"Sentence matched rule {rule.value}")
                return rule, handler(tokens)
        return None, None

    def _parse_lives_in(self, tokens: List[str]) -> Optional[Fact]:
        """X lives in Y -> lives_in(x, y)"""
        for i in range(1, len(tokens) - 2):
            if token_at(tokens, i) == "lives" and token_at(tokens, i + 1) == "in":
                return Fact(
                    predicate="lives_in",
                    arguments=(token_at(tokens, i - 1), token_at(tokens, i + 2))
                )
        return None

    def _parse_relationship(self, tokens: List[str]) -> Optional[Fact]:
        """
        X is the R of Y -> r(x, y), falling back to X R Y -> r(x, y).

        The fallback reads the first three tokens as they are, so a sentence
        that mentions "is the ... of" without the aligned window still yields
        a fact.
        """
        for i in range(1, len(tokens) - 4):
            if (keyword_at(tokens, i) == "is" and
                    keyword_at(tokens, i + 1) == "the" and
                    keyword_at(tokens, i + 3) == "of"):
                return Fact(
                    predicate=token_at(tokens, i + 2),
                    arguments=(token_at(tokens, i - 1), token_at(tokens, i + 4))
                )

        if len(tokens) >= 3:
            return Fact(
                predicate=token_at(tokens, 1),
                arguments=(token_at(tokens, 0), token_at(tokens, 2))
            )
        return None

    def _parse_copula(self, tokens: List[str]) -> Optional[Fact]:
        """X is P -> p(x); longer copula sentences are read as relationships."""
        if len(tokens) != 3:
            return self._parse_relationship(tokens)

        if keyword_at(tokens, 1) != "is":
            return None

        return Fact(predicate=token_at(tokens, 2), arguments=(token_at(tokens, 0),))
