#!/usr/bin/env python3
"""
Scoring Service - Rank candidates by compatibility with the user's answers.

Per candidate:
- similarity: cosine similarity of multi-hot answer vectors
- bonus: exact-match ratio and partial (multi-select overlap) reward
- penalty: unanswered questions on the user's side
- score: clamp(similarity + bonus - penalty, 0, 1)

Candidates are returned sorted by score, highest first; ties keep input order.
The service keeps no state between calls.
"""

from typing import List, Optional, Sequence
import logging

from match_engine.config_loader import ScorerConfig, ResultPolicy
from match_engine.scorer.feature_space import FeatureSpace, build_feature_space
from match_engine.scorer.models import AnswerSet, Candidate, Question, ScoredCandidate
from match_engine.scorer.similarity import cosine_similarity
from match_engine.scorer.vectorizer import answers_to_vector
from match_engine.scorer import matching
from match_engine.scorer import bonus as bonus_calculations
from match_engine.scorer import penalties as penalty_calculations

logger = logging.getLogger(__name__)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _apply_result_policy(
    results: List[ScoredCandidate],
    policy: Optional[ResultPolicy]
) -> List[ScoredCandidate]:
    """Apply ResultPolicy to filter and truncate results.

    Args:
        results: List of scored candidates (already sorted by score)
        policy: ResultPolicy to apply, or None for no filtering

    Returns:
        Filtered and truncated results
    """
    if policy is None:
        return results

    filtered = results

    if policy.min_score > 0:
        filtered = [r for r in filtered if r.score >= policy.min_score]

    if policy.top_k is not None:
        filtered = filtered[:policy.top_k]

    return filtered


class ScoringService:
    """
    Service for ranking candidate profiles against a user's answers.

    Supports ResultPolicy for post-scoring filtering and truncation.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def score_candidate(
        self,
        user_answers: AnswerSet,
        candidate: Candidate,
        questionnaire: Sequence[Question],
        feature_space: FeatureSpace,
        user_vector=None
    ) -> ScoredCandidate:
        """Score a single candidate.

        Args:
            user_answers: User's answer set
            candidate: Candidate profile
            questionnaire: Full question catalog (used for bonus and penalty)
            feature_space: Feature space built from questionnaire
            user_vector: Pre-computed user vector, built on demand if None

        Returns:
            ScoredCandidate with score and breakdown
        """
        if user_vector is None:
            user_vector = answers_to_vector(user_answers, feature_space)
        candidate_vector = answers_to_vector(candidate.answers, feature_space)
        similarity = cosine_similarity(user_vector, candidate_vector)

        exact_matches, partial_matches = matching.count_matches(
            user_answers, candidate.answers, questionnaire
        )
        bonus, bonus_details = bonus_calculations.calculate_bonus(
            exact_match_count=exact_matches,
            partial_match_count=partial_matches,
            total_question_count=len(questionnaire),
            config=self.config
        )
        penalty, penalty_details = penalty_calculations.calculate_missing_penalty(
            user_answers, questionnaire, self.config
        )

        raw_score = similarity + bonus - penalty
        final_score = clamp(raw_score)

        logger.debug(
            f"Candidate {candidate.id}: sim={similarity:.3f}, bonus={bonus:.3f}, "
            f"penalty={penalty:.3f}, score={final_score:.3f}"
        )

        return ScoredCandidate(
            candidate=candidate,
            score=final_score,
            similarity=similarity,
            bonus=bonus,
            penalty=penalty,
            exact_matches=exact_matches,
            partial_matches=partial_matches,
            missing_count=penalty_details['missing_count'],
            score_components={
                'raw_score': raw_score,
                'bonus': bonus_details,
                'penalty': penalty_details,
            }
        )

    def score(
        self,
        user_answers: AnswerSet,
        questionnaire: Sequence[Question],
        candidates: Sequence[Candidate],
        result_policy: Optional[ResultPolicy] = None
    ) -> List[ScoredCandidate]:
        """Score and rank every candidate.

        Args:
            user_answers: User's answer set (snapshot; not retained)
            questionnaire: Full question catalog, not only the questions shown
            candidates: Candidate pool, in display order
            result_policy: Optional policy for post-scoring filtering/truncation

        Returns:
            List of ScoredCandidate sorted by score (highest first, stable)

        Raises:
            ConfigurationError: If the questionnaire is malformed
        """
        feature_space = build_feature_space(questionnaire)
        user_vector = answers_to_vector(user_answers, feature_space)

        scored = [
            self.score_candidate(
                user_answers, candidate, questionnaire, feature_space, user_vector=user_vector
            )
            for candidate in candidates
        ]

        # list.sort is stable, also with reverse=True
        scored.sort(key=lambda s: s.score, reverse=True)

        if result_policy:
            scored = _apply_result_policy(scored, result_policy)
            logger.info(f"Returning {len(scored)} of {len(candidates)} candidates "
                        f"(policy: min_score={result_policy.min_score}, top_k={result_policy.top_k})")
        else:
            logger.info(f"Scored {len(scored)} candidates")

        return scored


def score(
    user_answers: AnswerSet,
    questionnaire: Sequence[Question],
    candidates: Sequence[Candidate],
    config: Optional[ScorerConfig] = None
) -> List[ScoredCandidate]:
    """Rank candidates with the default (or given) scoring configuration."""
    return ScoringService(config).score(user_answers, questionnaire, candidates)
