#!/usr/bin/env python3
"""
Vectorizer - Map an answer set onto a binary vector in a feature space.
"""

import logging
import numpy as np

from match_engine.scorer.feature_space import FeatureSpace
from match_engine.scorer.models import AnswerSet, MultiAnswer, SingleAnswer

logger = logging.getLogger(__name__)


def answers_to_vector(answers: AnswerSet, feature_space: FeatureSpace) -> np.ndarray:
    """
    Convert answers to a multi-hot vector of length feature_space.size.

    Options the feature space does not know (stale catalog, retired option,
    unknown question id) are skipped.

    Args:
        answers: Mapping of question id to answer value
        feature_space: Feature space shared by every vector of the run

    Returns:
        numpy int8 array with 1 at each selected feature, 0 elsewhere
    """
    vector = np.zeros(feature_space.size, dtype=np.int8)

    for question_id, answer in answers.items():
        if isinstance(answer, MultiAnswer):
            selected = answer.values
        elif isinstance(answer, SingleAnswer):
            selected = (answer.value,) if answer.value is not None else ()
        else:
            raise TypeError(f"Unsupported answer type for {question_id!r}: {type(answer).__name__}")

        for option in selected:
            idx = feature_space.lookup(question_id, option)
            if idx is None:
                logger.debug(f"Skipping unknown feature {question_id!r}/{option!r}")
                continue
            vector[idx] = 1

    return vector
