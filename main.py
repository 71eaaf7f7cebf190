import logging
import sys
import argparse

import yaml
from pydantic import ValidationError

from match_engine.config_loader import load_config, ResultPolicy
from match_engine.catalog import (
    answer_set_to_raw, build_candidates, build_questionnaire, parse_answer_set,
    unanswered_single_questions
)
from match_engine.exceptions import ConfigurationError
from match_engine.scorer import ScoringService, shared_answers_by_question

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_answers(path):
    """Load a user answer mapping (question id -> answer) from a YAML or JSON file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Answers file {path} must contain a mapping")
    return data


def print_results(results, user_answers, questionnaire):
    for rank, scored in enumerate(results, start=1):
        candidate = scored.candidate
        print(f"{rank}. {candidate.name} - {scored.compatibility_percent}%")
        if candidate.bio:
            print(f"   {candidate.bio}")
        shared = shared_answers_by_question(user_answers, candidate, questionnaire)
        chips = [option for _, options in shared for option in options]
        print(f"   Shared answers: {', '.join(chips) if chips else '-'}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank candidate profiles by quiz compatibility")
    parser.add_argument("--config", default="config.yaml", help="Path to config file with catalog")
    parser.add_argument("--answers", required=True, help="YAML/JSON file with the user's answers")
    parser.add_argument("--top-k", type=int, default=None, help="Show at most this many matches")
    parser.add_argument("--min-score", type=float, default=None, help="Hide matches below this score (0-1)")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        logging.getLogger().setLevel(config.log_level)

        questionnaire = build_questionnaire(config)
        candidates = build_candidates(config, questionnaire)
        user_answers = parse_answer_set(load_answers(args.answers), questionnaire)
    except (ConfigurationError, OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load inputs: {e}")
        return 1

    logger.debug(f"User answers: {answer_set_to_raw(user_answers)}")
    unanswered = unanswered_single_questions(user_answers, questionnaire)
    if unanswered:
        logger.warning(f"Unanswered questions: {', '.join(unanswered)}")

    policy = config.result_policy
    if args.top_k is not None or args.min_score is not None:
        try:
            policy = ResultPolicy(
                min_score=args.min_score if args.min_score is not None else policy.min_score,
                top_k=args.top_k if args.top_k is not None else policy.top_k
            )
        except ValidationError as e:
            logger.error(f"Invalid result policy: {e}")
            return 1

    service = ScoringService(config.scorer)
    try:
        results = service.score(user_answers, questionnaire, candidates, result_policy=policy)
    except ConfigurationError as e:
        logger.error(f"Cannot rank candidates: {e}")
        return 1

    print_results(results, user_answers, questionnaire)
    return 0


if __name__ == "__main__":
    sys.exit(main())
