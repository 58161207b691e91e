import argparse

import pytest

from matrixprobs.config import Config
from matrixprobs.errors import ConfigurationError


def test_defaults():
    config = Config()
    assert config.limit == 0
    assert config.sinks == []
    assert not config.calc_joints


def test_empty_paths_are_disabled():
    config = Config(marginals="", joints="", conditionals="m.txt")
    assert config.marginals is None
    assert config.joints is None
    assert config.sinks == [("conditionals", "m.txt")]


def test_calc_joints():
    assert not Config(marginals="m.txt").calc_joints
    assert Config(joints="j.txt").calc_joints
    assert Config(conditionals="c.txt").calc_joints


def test_validate():
    config = Config(limit=10, marginals="m.txt")
    assert config.validate() is config
    with pytest.raises(ConfigurationError):
        Config().validate()
    with pytest.raises(ConfigurationError):
        Config(limit=-1, marginals="m.txt").validate()


def test_from_args():
    args = argparse.Namespace(limit=5, marginals=None, joints="j.txt",
                              conditionals=None)
    config = Config.from_args(args)
    assert config == Config(5, None, "j.txt", None)


def test_immutable():
    config = Config(marginals="m.txt")
    with pytest.raises(AttributeError):
        config.limit = 3
