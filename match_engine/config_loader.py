import yaml
import os
import logging
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator

from match_engine.exceptions import ConfigurationError

RawAnswer = Union[str, List[str], None]


class ScorerConfig(BaseModel):
    """
    Configuration for the ScoringService.

    final_score = clamp(similarity + bonus - penalty, 0, 1)
    """
    # Bonus weights
    exact_match_weight: float = 0.2  # Scales the exact-match ratio (0-1)
    partial_match_weight: float = 0.03  # Per shared option on multi-select questions

    # Penalty per unanswered catalog question
    missing_answer_penalty: float = 0.05


class ResultPolicy(BaseModel):
    """Post-scoring result filtering and truncation policy.

    Applied after ranking to filter and truncate results.
    """
    min_score: float = Field(default=0.0, ge=0.0, le=1.0)  # 0-1, filter threshold
    top_k: Optional[int] = Field(default=None, ge=0)  # Maximum results to return, None = all


class QuestionConfig(BaseModel):
    id: str
    text: str = ""
    type: str = "single"  # "single" or "multi"
    options: List[str] = Field(default_factory=list)


class CandidateConfig(BaseModel):
    id: str
    name: str
    bio: str = ""
    avatar: Optional[str] = None
    answers: Dict[str, RawAnswer] = Field(default_factory=dict)


class AppConfig(BaseModel):
    log_level: str = "INFO"
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)
    questions: List[QuestionConfig] = Field(default_factory=list)
    candidates: List[CandidateConfig] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path, fall back to the config.yaml shipped at the repository root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not read config {config_path}: {e}") from e

    # Allow env var override for log level
    env_log_level = os.environ.get("MATCH_LOG_LEVEL")
    if env_log_level:
        data['log_level'] = env_log_level

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {config_path}: {e}") from e
