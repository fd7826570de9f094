"""Tests for evaluator configuration loading."""

import pytest
from omegaconf.errors import ConfigKeyError

from dogm_eval.common import EvaluatorConfig, load_config, load_evaluator_config


def test_defaults():
    config = load_evaluator_config()

    assert config == EvaluatorConfig()
    assert config.max_assignment_distance == 5.0
    assert config.max_neighbor_distance == 3.0
    assert config.min_neighbors == 5
    assert config.matching == "greedy"


def test_yaml_section_and_overrides(tmp_path):
    config_file = tmp_path / "eval.yaml"
    config_file.write_text(
        "resolution: 0.1\n"
        "evaluator:\n"
        "  max_assignment_distance: 4.0\n"
        "  matching: one_to_one\n"
    )

    config = load_evaluator_config(config_file, overrides=["min_neighbors=3", "bogus"])

    assert config.max_assignment_distance == 4.0
    assert config.matching == "one_to_one"
    assert config.min_neighbors == 3
    assert config.max_neighbor_distance == 3.0


def test_yaml_without_section(tmp_path):
    config_file = tmp_path / "eval.yaml"
    config_file.write_text("max_neighbor_distance: 2.5\n")

    assert load_evaluator_config(config_file).max_neighbor_distance == 2.5


def test_unknown_key_rejected(tmp_path):
    config_file = tmp_path / "eval.yaml"
    config_file.write_text("evaluator:\n  radius: 4.0\n")

    with pytest.raises(ConfigKeyError):
        load_evaluator_config(config_file)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_evaluator_config(tmp_path / "missing.yaml")


def test_out_of_range_value():
    with pytest.raises(ValueError):
        load_evaluator_config(overrides=["max_assignment_distance=-1.0"])


def test_from_dict_round_trip():
    config = EvaluatorConfig(max_assignment_distance=2.0, matching="one_to_one")

    assert EvaluatorConfig.from_dict(config.to_dict()) == config


def test_load_config_reads_yaml(tmp_path):
    config_file = tmp_path / "plain.yaml"
    config_file.write_text("grid_size: 50.0\n")

    assert load_config(str(config_file)) == {"grid_size": 50.0}
