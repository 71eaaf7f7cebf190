#!/usr/bin/env python3
"""
Match Bonus - Reward per-question agreement on top of raw similarity.

Formula: exact_ratio * exact_match_weight + partial_matches * partial_match_weight
"""

from typing import Any, Dict, Tuple
import logging

from match_engine.config_loader import ScorerConfig

logger = logging.getLogger(__name__)


def calculate_bonus(
    exact_match_count: int,
    partial_match_count: int,
    total_question_count: int,
    config: ScorerConfig
) -> Tuple[float, Dict[str, Any]]:
    """
    Calculate the exact/partial match bonus.

    The ratio term is capped at exact_match_weight; the partial term grows
    with every shared option on multi-select questions.

    Args:
        exact_match_count: Questions where user and candidate agree
        partial_match_count: Shared options summed over multi-select questions
        total_question_count: Size of the full catalog
        config: ScorerConfig with bonus weights

    Returns: (bonus_amount, bonus_details)
    """
    exact_ratio = exact_match_count / total_question_count if total_question_count > 0 else 0.0

    ratio_bonus = exact_ratio * config.exact_match_weight
    partial_bonus = partial_match_count * config.partial_match_weight
    bonus = ratio_bonus + partial_bonus

    details = {
        'exact_match_ratio': exact_ratio,
        'ratio_bonus': ratio_bonus,
        'partial_bonus': partial_bonus,
        'bonus': bonus,
    }
    return bonus, details
