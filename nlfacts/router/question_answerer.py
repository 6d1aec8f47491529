"""
Question Answerer for routing natural-language questions to fact base queries.
"""

import logging
from typing import Callable, List, Optional, Tuple

from ..kb.fact_store import FactStore
from ..kb.models import WILDCARD
from ..parser.text_utils import split_words, strip_punctuation
from .models import Answer, QuestionType

logger = logging.getLogger(__name__)

QuestionCheck = Callable[[str], bool]
QuestionHandler = Callable[[str, str], Optional[Answer]]


class QuestionAnswerer:
    """Answers questions by turning them into wildcard fact base queries."""

    def __init__(self, fact_store: FactStore, wildcard: str = WILDCARD):
        self.fact_store = fact_store
        self.wildcard = wildcard

        # Tried top to bottom. A handler returns None when it cannot extract
        # its parts, and routing moves on to the next entry.
        self.routes: List[Tuple[QuestionType, QuestionCheck, QuestionHandler]] = [
            (
                QuestionType.WHO,
                lambda text: "who is the" in text,
                self._answer_who
            ),
            (
                QuestionType.WHAT,
                lambda text: "what does" in text,
                self._answer_what
            ),
            (
                QuestionType.WHERE,
                lambda text: "where does" in text and "live" in text,
                self._answer_where
            ),
            (
                QuestionType.YES_NO,
                lambda text: text.startswith("is "),
                self._answer_yes_no
            ),
        ]

    def answer(self, question: str) -> Answer:
        """
        Answer a natural-language question from the fact base.

        Args:
            question: The user's question

        Returns:
            Answer with the query that was run and its results
        """
        logger.info(f"Query: {question!r}")

        text = question.lower()

        for question_type, check, handler in self.routes:
            if not check(text):
                continue

            answer = handler(question, text)
            if answer is not None:
                logger.info(
                    f"Routed to {question_type.value}: "
                    f"{answer.predicate}({', '.join(answer.pattern)}) -> {answer.render()!r}"
                )
                return answer

            logger.debug(f"Question matched {question_type.value} but its pattern was not found")

        logger.info("Could not understand query format")
        return Answer(question=question, question_type=QuestionType.UNKNOWN)

    def _answer_who(self, question: str, text: str) -> Optional[Answer]:
        """who is the R of Y? -> r(?, y), reporting subjects"""
        of_pos = text.find("of ")
        start = text.find("is the ")
        if of_pos == -1 or start == -1:
            return None

        start += len("is the ")
        end = text.find(" of", start)
        if end == -1:
            return None

        relation = strip_punctuation(text[start:end])
        rest = text[of_pos + len("of "):].split()
        if not relation or not rest:
            return None

        obj = strip_punctuation(rest[0])
        return self._list_answer(
            question, QuestionType.WHO, relation, [self.wildcard, obj], "Who", 0
        )

    def _answer_what(self, question: str, text: str) -> Optional[Answer]:
        """what does X R? -> r(x, ?), reporting objects"""
        pos = text.find("what does ")
        if pos == -1:
            return None

        words = split_words(text[pos + len("what does "):])
        if len(words) < 2:
            return None

        subject, relation = words[0], words[1]
        return self._list_answer(
            question, QuestionType.WHAT, relation, [subject, self.wildcard], "Answer", 1
        )

    def _answer_where(self, question: str, text: str) -> Optional[Answer]:
        """where does X live? -> lives_in(x, ?), reporting locations"""
        pos = text.find("where does ")
        if pos == -1:
            return None

        words = split_words(text[pos + len("where does "):])
        if not words:
            return None

        return self._list_answer(
            question, QuestionType.WHERE, "lives_in", [words[0], self.wildcard], "Location", 1
        )

    def _answer_yes_no(self, question: str, text: str) -> Optional[Answer]:
        """is X P? -> p(x); is X R Y? -> r(x, y)"""
        words = split_words(text)

        if len(words) == 3:
            predicate, pattern = words[2], [words[1]]
        elif len(words) >= 4:
            predicate, pattern = words[2], [words[1], words[3]]
        else:
            return None

        result = self.fact_store.search(predicate, pattern)
        return Answer(
            question=question,
            question_type=QuestionType.YES_NO,
            predicate=result.predicate,
            pattern=result.pattern,
            verdict=result.found,
            metadata=result.metadata
        )

    def _list_answer(
        self,
        question: str,
        question_type: QuestionType,
        predicate: str,
        pattern: List[str],
        label: str,
        index: int
    ) -> Answer:
        """Run a wildcard query and report one argument position of each match."""
        result = self.fact_store.search(predicate, pattern)
        return Answer(
            question=question,
            question_type=question_type,
            predicate=result.predicate,
            pattern=result.pattern,
            label=label,
            values=result.column(index),
            metadata=result.metadata
        )
