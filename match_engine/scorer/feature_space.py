#!/usr/bin/env python3
"""
Feature Space - Enumerate every (question, option) pair as a vector dimension.

Indices follow catalog order of questions, then declaration order of each
question's options, so repeated builds over an equal catalog are identical.
"""

from typing import Dict, Optional, Sequence, Tuple
from dataclasses import dataclass
import logging

from match_engine.exceptions import ConfigurationError
from match_engine.scorer.models import Question

logger = logging.getLogger(__name__)

FeatureKey = Tuple[str, str]


def feature_key(question_id: str, option: str) -> FeatureKey:
    # A pair, not a joined string: ("a", "b::c") and ("a::b", "c") must stay distinct
    return (question_id, option)


@dataclass(frozen=True)
class FeatureSpace:
    """Bijection between (question id, option) pairs and indices 0..size-1."""
    index: Dict[FeatureKey, int]
    size: int

    def lookup(self, question_id: str, option: Optional[str]) -> Optional[int]:
        """Return the index of a (question, option) pair, or None if unknown."""
        if option is None:
            return None
        return self.index.get(feature_key(question_id, option))


def build_feature_space(questionnaire: Sequence[Question]) -> FeatureSpace:
    """
    Build the feature space for a question catalog.

    Args:
        questionnaire: Ordered sequence of questions

    Returns:
        FeatureSpace with one index per declared option

    Raises:
        ConfigurationError: If the catalog is empty, a question id repeats,
            or a question declares no options
    """
    if not questionnaire:
        raise ConfigurationError("Questionnaire has no questions")

    index: Dict[FeatureKey, int] = {}
    seen_ids = set()

    for question in questionnaire:
        if question.id in seen_ids:
            raise ConfigurationError(f"Duplicate question id: {question.id!r}")
        seen_ids.add(question.id)

        if not question.options:
            raise ConfigurationError(f"Question {question.id!r} has no options")

        for option in question.options:
            key = feature_key(question.id, option)
            if key in index:
                raise ConfigurationError(
                    f"Question {question.id!r} declares option {option!r} more than once"
                )
            index[key] = len(index)

    logger.debug(f"Built feature space: {len(questionnaire)} questions, {len(index)} features")
    return FeatureSpace(index=index, size=len(index))
