import unittest
import os
import yaml
from unittest.mock import patch, mock_open

from pydantic import ValidationError

from match_engine.config_loader import load_config, AppConfig, ResultPolicy, ScorerConfig
from match_engine.exceptions import ConfigurationError


class TestConfigLoader(unittest.TestCase):

    def setUp(self):
        self.sample_config = {
            "log_level": "DEBUG",
            "scorer": {"exact_match_weight": 0.3},
            "result_policy": {"top_k": 2},
            "questions": [
                {"id": "q1", "text": "Cuisine", "type": "single", "options": ["Italian", "Indian"]},
            ],
            "candidates": [
                {"id": "alice", "name": "Alice", "answers": {"q1": "Indian", "q2": ["Cooking"], "q3": None}},
            ],
        }
        self.config_yaml = yaml.dump(self.sample_config)

    def test_load_config(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy_path.yaml")
                self.assertIsInstance(config, AppConfig)
                self.assertEqual(config.log_level, "DEBUG")
                self.assertEqual(config.scorer.exact_match_weight, 0.3)
                self.assertEqual(config.result_policy.top_k, 2)
                self.assertEqual(config.candidates[0].answers["q2"], ["Cooking"])
                self.assertIsNone(config.candidates[0].answers["q3"])

    def test_scorer_defaults(self):
        config = ScorerConfig()
        self.assertEqual(config.exact_match_weight, 0.2)
        self.assertEqual(config.partial_match_weight, 0.03)
        self.assertEqual(config.missing_answer_penalty, 0.05)

    def test_env_var_override_log_level(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"MATCH_LOG_LEVEL": "WARNING"}):
                    config = load_config("dummy_path.yaml")
                    self.assertEqual(config.log_level, "WARNING")

    def test_empty_file_uses_defaults(self):
        with patch("builtins.open", mock_open(read_data="")):
            with patch("os.path.exists", return_value=True):
                config = load_config("dummy")
                self.assertEqual(config.questions, [])
                self.assertEqual(config.result_policy.min_score, 0.0)

    def test_invalid_config_raises_configuration_error(self):
        bad_yaml = yaml.dump({"questions": [{"text": "No id"}]})
        with patch("builtins.open", mock_open(read_data=bad_yaml)):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ConfigurationError):
                    load_config("dummy")

    def test_unknown_log_level_raises_configuration_error(self):
        self.sample_config["log_level"] = "verbose"
        with patch("builtins.open", mock_open(read_data=yaml.dump(self.sample_config))):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ConfigurationError):
                    load_config("dummy")

    def test_unknown_env_log_level_raises_configuration_error(self):
        with patch("builtins.open", mock_open(read_data=self.config_yaml)):
            with patch("os.path.exists", return_value=True):
                with patch.dict(os.environ, {"MATCH_LOG_LEVEL": "loud"}):
                    with self.assertRaises(ConfigurationError):
                        load_config("dummy")

    def test_log_level_is_normalized(self):
        self.assertEqual(AppConfig(log_level="debug").log_level, "DEBUG")

    def test_result_policy_bounds(self):
        with self.assertRaises(ValidationError):
            ResultPolicy(top_k=-1)
        with self.assertRaises(ValidationError):
            ResultPolicy(min_score=1.5)
        self.assertEqual(ResultPolicy(top_k=0).top_k, 0)

    def test_unparseable_yaml_raises_configuration_error(self):
        with patch("builtins.open", mock_open(read_data="questions: [unclosed")):
            with patch("os.path.exists", return_value=True):
                with self.assertRaises(ConfigurationError):
                    load_config("dummy")

    def test_shipped_config_has_demo_catalog(self):
        # Missing path falls back to the repository config.yaml
        config = load_config("does/not/exist.yaml")
        self.assertEqual([q.id for q in config.questions], ["q1", "q2", "q3", "q4"])
        self.assertEqual([c.id for c in config.candidates], ["alice", "bob", "carla", "dan"])


if __name__ == '__main__':
    unittest.main()
