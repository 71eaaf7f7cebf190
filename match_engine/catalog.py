#!/usr/bin/env python3
"""
Catalog - Convert loaded configuration into questions, candidates and answers.

Raw answers (from YAML or JSON) are lists for multi-select questions and
strings or null for single-choice ones; they become MultiAnswer / SingleAnswer
here so nothing downstream has to probe shapes.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence
import logging

from match_engine.config_loader import AppConfig
from match_engine.exceptions import ConfigurationError
from match_engine.scorer.models import (
    AnswerSet, AnswerValue, Candidate, MultiAnswer, Question, QuestionKind, SingleAnswer
)

logger = logging.getLogger(__name__)


def parse_answer(raw: Any, kind: Optional[QuestionKind] = None) -> AnswerValue:
    """
    Convert a raw answer into an AnswerValue.

    Args:
        raw: str, None, or a list/tuple/set of str
        kind: Question kind if known; a MULTI question always yields MultiAnswer

    Returns:
        SingleAnswer or MultiAnswer
    """
    if isinstance(raw, (list, tuple, set, frozenset)):
        values = sorted(raw) if isinstance(raw, (set, frozenset)) else raw
        return MultiAnswer(tuple(str(v) for v in values))

    value = None if raw is None else str(raw)
    if kind == QuestionKind.MULTI:
        return MultiAnswer(() if value is None else (value,))
    return SingleAnswer(value)


def parse_answer_set(
    raw_answers: Optional[Mapping[str, Any]],
    questionnaire: Optional[Sequence[Question]] = None
) -> AnswerSet:
    """Convert a raw question-id mapping into an AnswerSet."""
    kinds = {q.id: q.kind for q in questionnaire or ()}
    return {
        str(question_id): parse_answer(raw, kinds.get(str(question_id)))
        for question_id, raw in (raw_answers or {}).items()
    }


def build_questionnaire(config: AppConfig) -> List[Question]:
    """Build the ordered question catalog from config."""
    questions = []
    for q in config.questions:
        try:
            kind = QuestionKind(q.type.lower())
        except ValueError:
            raise ConfigurationError(f"Question {q.id!r} has unknown type {q.type!r}")
        questions.append(Question(id=q.id, text=q.text, kind=kind, options=tuple(q.options)))
    return questions


def build_candidates(config: AppConfig, questionnaire: Sequence[Question]) -> List[Candidate]:
    """
    Build the candidate pool from config.

    Raises:
        ConfigurationError: If two candidates share an id
    """
    candidates = []
    seen_ids = set()
    for c in config.candidates:
        if c.id in seen_ids:
            raise ConfigurationError(f"Duplicate candidate id: {c.id!r}")
        seen_ids.add(c.id)
        candidates.append(Candidate(
            id=c.id,
            name=c.name,
            bio=c.bio,
            avatar=c.avatar,
            answers=parse_answer_set(c.answers, questionnaire)
        ))

    logger.debug(f"Loaded {len(candidates)} candidates")
    return candidates


def blank_answer_set(questionnaire: Sequence[Question]) -> AnswerSet:
    """Fresh answer set with nothing selected."""
    return {
        q.id: MultiAnswer(()) if q.kind == QuestionKind.MULTI else SingleAnswer(None)
        for q in questionnaire
    }


def unanswered_single_questions(answers: AnswerSet, questionnaire: Sequence[Question]) -> List[str]:
    """Ids of single-choice questions still unset. Multi-select may stay empty."""
    unanswered = []
    for q in questionnaire:
        if q.kind != QuestionKind.SINGLE:
            continue
        answer = answers.get(q.id)
        if answer is None or answer.is_empty:
            unanswered.append(q.id)
    return unanswered


def answer_set_to_raw(answers: AnswerSet) -> Dict[str, Any]:
    """Inverse of parse_answer_set, for printing or saving."""
    return {
        question_id: list(a.values) if isinstance(a, MultiAnswer) else a.value
        for question_id, a in answers.items()
    }
