from typing import Dict, List, Optional, Sequence

from packages.mip_core.logging import get_logger
from packages.mip_dto.interview import Answer, Feedback, Question
from .rules import (
    DEFAULT_SCORE,
    DEFAULT_SUGGESTION,
    build_suggestions,
    calculate_keyword_score,
    find_matched_keywords,
)

logger = get_logger("mip.feedback")


class FeedbackScorer:
    """
    Keyword based answer scorer.
    Stateless; produces one Feedback per answer in answer order.
    """
    def score(self, questions: Sequence[Question], answers: Sequence[Answer]) -> List[Feedback]:
        questions_by_id: Dict[str, Question] = {}
        for question in questions:
            # First occurrence wins on duplicate ids
            questions_by_id.setdefault(question.id, question)

        return [self._score_answer(questions_by_id.get(answer.question_id), answer) for answer in answers]

    def _score_answer(self, question: Optional[Question], answer: Answer) -> Feedback:
        # NOTE: an unknown question id and a question without keywords both
        # land here and cannot be told apart from the result.
        if question is None or not question.keywords:
            if question is None:
                logger.debug(f"No question found for answer {answer.question_id}, using default feedback")
            return Feedback(
                question_id=answer.question_id,
                score=DEFAULT_SCORE,
                matched_keywords=[],
                suggestions=DEFAULT_SUGGESTION,
            )

        matched = find_matched_keywords(question.keywords, answer.text)
        score = calculate_keyword_score(len(matched), len(question.keywords))
        unmatched = [keyword for keyword in question.keywords if keyword not in matched]

        return Feedback(
            question_id=answer.question_id,
            score=score,
            matched_keywords=matched,
            suggestions=build_suggestions(score, unmatched),
        )


_default_scorer = FeedbackScorer()


def score(questions: Sequence[Question], answers: Sequence[Answer]) -> List[Feedback]:
    return _default_scorer.score(questions, answers)
