#!/usr/bin/env python3
"""
Unit tests for catalog conversion from configuration.
"""

import unittest

from match_engine.catalog import (
    answer_set_to_raw, blank_answer_set, build_candidates, build_questionnaire,
    parse_answer, parse_answer_set, unanswered_single_questions
)
from match_engine.config_loader import AppConfig
from match_engine.exceptions import ConfigurationError
from match_engine.scorer.models import MultiAnswer, QuestionKind, SingleAnswer
from tests.fixtures.catalog_fixtures import DEMO_QUESTIONS


class TestParseAnswer(unittest.TestCase):

    def test_list_becomes_multi(self):
        self.assertEqual(parse_answer(["Cooking", "Gaming"]), MultiAnswer(("Cooking", "Gaming")))

    def test_string_and_none_become_single(self):
        self.assertEqual(parse_answer("Italian"), SingleAnswer("Italian"))
        self.assertEqual(parse_answer(None), SingleAnswer(None))

    def test_multi_question_kind_wraps_scalar(self):
        self.assertEqual(parse_answer("Cooking", QuestionKind.MULTI), MultiAnswer(("Cooking",)))
        self.assertEqual(parse_answer(None, QuestionKind.MULTI), MultiAnswer(()))

    def test_duplicates_collapsed(self):
        self.assertEqual(parse_answer(["A", "B", "A"]).values, ("A", "B"))

    def test_parse_answer_set_uses_question_kinds(self):
        answers = parse_answer_set({"q1": "Movie / Chill", "q4": "Gaming"}, DEMO_QUESTIONS)
        self.assertEqual(answers["q1"], SingleAnswer("Movie / Chill"))
        self.assertEqual(answers["q4"], MultiAnswer(("Gaming",)))

    def test_round_trip_to_raw(self):
        raw = {"q1": "Movie / Chill", "q3": None, "q4": ["Gaming", "Sports"]}
        self.assertEqual(answer_set_to_raw(parse_answer_set(raw, DEMO_QUESTIONS)), raw)


class TestBuildCatalog(unittest.TestCase):

    def setUp(self):
        self.config = AppConfig(
            questions=[
                {"id": "q1", "text": "Weekend?", "type": "single", "options": ["Hike", "Movie"]},
                {"id": "q2", "text": "Hobbies", "type": "MULTI", "options": ["Cooking", "Gaming"]},
            ],
            candidates=[
                {"id": "alice", "name": "Alice", "answers": {"q1": "Hike", "q2": ["Cooking"]}},
                {"id": "bob", "name": "Bob", "answers": {"q1": "Movie", "q2": "Gaming"}},
            ]
        )

    def test_build_questionnaire(self):
        questions = build_questionnaire(self.config)
        self.assertEqual([q.id for q in questions], ["q1", "q2"])
        self.assertEqual(questions[1].kind, QuestionKind.MULTI)
        self.assertEqual(questions[0].options, ("Hike", "Movie"))

    def test_unknown_question_type(self):
        self.config.questions[0].type = "ranking"
        with self.assertRaises(ConfigurationError):
            build_questionnaire(self.config)

    def test_build_candidates(self):
        questions = build_questionnaire(self.config)
        candidates = build_candidates(self.config, questions)

        self.assertEqual([c.id for c in candidates], ["alice", "bob"])
        self.assertEqual(candidates[1].answers["q2"], MultiAnswer(("Gaming",)))

    def test_duplicate_candidate_ids(self):
        self.config.candidates[1].id = "alice"
        with self.assertRaises(ConfigurationError):
            build_candidates(self.config, build_questionnaire(self.config))


class TestAnswerSetHelpers(unittest.TestCase):

    def test_blank_answer_set(self):
        blank = blank_answer_set(DEMO_QUESTIONS)
        self.assertEqual(blank["q1"], SingleAnswer(None))
        self.assertEqual(blank["q4"], MultiAnswer(()))
        self.assertEqual(len(blank), len(DEMO_QUESTIONS))

    def test_unanswered_single_questions(self):
        answers = blank_answer_set(DEMO_QUESTIONS)
        self.assertEqual(unanswered_single_questions(answers, DEMO_QUESTIONS), ["q1", "q2", "q3"])

        answers["q1"] = SingleAnswer("Movie / Chill")
        answers["q2"] = SingleAnswer("Italian")
        answers["q3"] = SingleAnswer("Calm")
        # Multi-select may stay empty
        self.assertEqual(unanswered_single_questions(answers, DEMO_QUESTIONS), [])


if __name__ == '__main__':
    unittest.main()
