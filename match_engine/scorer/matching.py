#!/usr/bin/env python3
"""
Answer Matching - Per-question agreement between a user and a candidate.

Every (user, candidate) answer pair falls in exactly one case:
- Multi / Multi: options in both selections (user's selection order)
- Multi / Single, Single / Multi: the single value if it is selected on the multi side
- Single / Single: the value if both are set and equal
An unset single value or an empty selection never agrees with anything.
"""

from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass
import logging

from match_engine.scorer.models import (
    AnswerSet, AnswerValue, Candidate, MultiAnswer, NO_ANSWER, Question, SingleAnswer
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerMatch:
    """Agreement on one question."""
    shared: Tuple[str, ...] = ()
    exact: bool = False
    partial: int = 0


def _single_in_multi(single: SingleAnswer, multi: MultiAnswer) -> Tuple[str, ...]:
    if single.value is not None and single.value in multi:
        return (single.value,)
    return ()


def classify_answers(
    user_answer: Optional[AnswerValue],
    candidate_answer: Optional[AnswerValue]
) -> AnswerMatch:
    """
    Classify agreement between two answers to the same question.

    Args:
        user_answer: User's answer, None when absent
        candidate_answer: Candidate's answer, None when absent

    Returns:
        AnswerMatch where exact is True when any option is shared and partial
        counts shared options on multi-select questions only
    """
    user = NO_ANSWER if user_answer is None else user_answer
    other = NO_ANSWER if candidate_answer is None else candidate_answer

    if isinstance(user, MultiAnswer) and isinstance(other, MultiAnswer):
        shared = tuple(v for v in user.values if v in other)
        return AnswerMatch(shared=shared, exact=bool(shared), partial=len(shared))

    if isinstance(user, MultiAnswer) and isinstance(other, SingleAnswer):
        shared = _single_in_multi(other, user)
        return AnswerMatch(shared=shared, exact=bool(shared))

    if isinstance(user, SingleAnswer) and isinstance(other, MultiAnswer):
        shared = _single_in_multi(user, other)
        return AnswerMatch(shared=shared, exact=bool(shared))

    if isinstance(user, SingleAnswer) and isinstance(other, SingleAnswer):
        if user.value is not None and user.value == other.value:
            return AnswerMatch(shared=(user.value,), exact=True)
        return AnswerMatch()

    raise TypeError(
        f"Unsupported answer types: {type(user).__name__}, {type(other).__name__}"
    )


def shared_answers(
    question_id: str,
    user_answer: Optional[AnswerValue],
    candidate_answer: Optional[AnswerValue]
) -> List[str]:
    """Options both sides agree on for one question (for "shared answers" chips)."""
    shared = list(classify_answers(user_answer, candidate_answer).shared)
    if shared:
        logger.debug(f"Question {question_id}: shared {shared}")
    return shared


def count_matches(
    user_answers: AnswerSet,
    candidate_answers: AnswerSet,
    questionnaire: Sequence[Question]
) -> Tuple[int, int]:
    """
    Count exact and partial matches over the full catalog.

    Returns: (exact_match_count, partial_match_count)
    """
    exact_count = 0
    partial_count = 0

    for question in questionnaire:
        match = classify_answers(
            user_answers.get(question.id),
            candidate_answers.get(question.id)
        )
        if match.exact:
            exact_count += 1
        partial_count += match.partial

    return exact_count, partial_count


def shared_answers_by_question(
    user_answers: AnswerSet,
    candidate: Candidate,
    questionnaire: Sequence[Question]
) -> List[Tuple[str, List[str]]]:
    """Shared options per question, in catalog order, skipping questions with none."""
    result = []
    for question in questionnaire:
        shared = shared_answers(
            question.id,
            user_answers.get(question.id),
            candidate.answers.get(question.id)
        )
        if shared:
            result.append((question.id, shared))
    return result
