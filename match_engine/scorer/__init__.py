#!/usr/bin/env python3
"""
Scoring Module - Compatibility scoring of candidate profiles.

Public API:
- ScoringService / score: rank candidates against the user's answers
- build_feature_space: enumerate (question, option) features
- shared_answers: options user and candidate agree on for one question

Modules:

- models.py: Questions, tagged answer values, candidates, ScoredCandidate
- feature_space.py: Feature Space Builder
- vectorizer.py: Answer set -> multi-hot vector
- similarity.py: Cosine similarity
- matching.py: Per-question exact/partial match classification
- bonus.py: Exact and partial match bonus
- penalties.py: Missing-answer penalty
- service.py: ScoringService orchestrator
"""

from match_engine.scorer.models import (
    Question, QuestionKind, SingleAnswer, MultiAnswer, NO_ANSWER,
    AnswerSet, AnswerValue, Candidate, ScoredCandidate
)
from match_engine.scorer.feature_space import FeatureSpace, build_feature_space
from match_engine.scorer.vectorizer import answers_to_vector
from match_engine.scorer.similarity import cosine_similarity
from match_engine.scorer.matching import shared_answers, shared_answers_by_question
from match_engine.scorer.service import ScoringService, score

__all__ = [
    'ScoringService', 'score', 'build_feature_space', 'answers_to_vector',
    'cosine_similarity', 'shared_answers', 'shared_answers_by_question',
    'FeatureSpace', 'Question', 'QuestionKind', 'SingleAnswer', 'MultiAnswer',
    'NO_ANSWER', 'AnswerSet', 'AnswerValue', 'Candidate', 'ScoredCandidate'
]
