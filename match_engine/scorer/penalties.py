#!/usr/bin/env python3
"""
Penalty Calculations - Penalize rankings built on an incomplete answer set.

A question counts as missing when the user's answer is absent, an unset
single value, or a multi-select with no selections. Missing answers are
counted against the full catalog, not only the questions the user was shown.
"""

from typing import Any, Dict, List, Sequence, Tuple
import logging

from match_engine.config_loader import ScorerConfig
from match_engine.scorer.models import AnswerSet, Question

logger = logging.getLogger(__name__)


def missing_questions(user_answers: AnswerSet, questionnaire: Sequence[Question]) -> List[str]:
    """Ids of catalog questions the user left unanswered, in catalog order."""
    missing = []
    for question in questionnaire:
        answer = user_answers.get(question.id)
        if answer is None or answer.is_empty:
            missing.append(question.id)
    return missing


def count_missing(user_answers: AnswerSet, questionnaire: Sequence[Question]) -> int:
    return len(missing_questions(user_answers, questionnaire))


def calculate_missing_penalty(
    user_answers: AnswerSet,
    questionnaire: Sequence[Question],
    config: ScorerConfig
) -> Tuple[float, Dict[str, Any]]:
    """
    Calculate the missing-answer penalty.

    Returns: (penalty_amount, penalty_details)
    """
    missing = missing_questions(user_answers, questionnaire)
    penalty = len(missing) * config.missing_answer_penalty

    details = {
        'type': 'missing_answers',
        'amount': penalty,
        'missing_count': len(missing),
        'reason': f"{len(missing)} question(s) left unanswered",
        'details': missing,
    }
    if missing:
        logger.debug(f"Missing answers: {missing}, penalty={penalty:.2f}")

    return penalty, details
