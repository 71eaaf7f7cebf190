#!/usr/bin/env python3
"""
Scoring Models - Data structures for questions, answers and scoring results.

Answer values are a tagged variant: a question answered with one option is a
SingleAnswer (value may be None when unset), a multi-select question is a
MultiAnswer holding the selected options.
"""

from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union
from dataclasses import dataclass, field


class QuestionKind(str, Enum):
    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class Question:
    """A questionnaire entry. Option order defines feature order."""
    id: str
    text: str
    kind: QuestionKind
    options: Tuple[str, ...]


@dataclass(frozen=True)
class SingleAnswer:
    value: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class MultiAnswer:
    values: Tuple[str, ...] = ()

    def __post_init__(self):
        # Collapse duplicates, keep selection order
        object.__setattr__(self, 'values', tuple(dict.fromkeys(self.values)))

    @property
    def is_empty(self) -> bool:
        return not self.values

    def __contains__(self, option: Optional[str]) -> bool:
        return option in self.values


AnswerValue = Union[SingleAnswer, MultiAnswer]
AnswerSet = Dict[str, AnswerValue]

NO_ANSWER = SingleAnswer(None)


@dataclass(frozen=True)
class Candidate:
    """Static candidate profile. Never mutated by the engine."""
    id: str
    name: str
    bio: str = ""
    avatar: Optional[str] = None
    answers: AnswerSet = field(default_factory=dict, hash=False)


@dataclass
class ScoredCandidate:
    """Candidate with its composite score and score breakdown."""
    candidate: Candidate
    score: float = 0.0

    similarity: float = 0.0
    bonus: float = 0.0
    penalty: float = 0.0
    exact_matches: int = 0
    partial_matches: int = 0
    missing_count: int = 0
    score_components: Dict[str, Any] = field(default_factory=dict)

    @property
    def compatibility_percent(self) -> int:
        # Half-up rounding, so 0.625 shows as 63%
        return int(self.score * 100 + 0.5)
