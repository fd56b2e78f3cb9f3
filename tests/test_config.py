import logging

import pytest

from lsystem_tree.config import DEFAULT_AXIOM, MAX_ITERATIONS, TreeConfig, config_from_dict
from lsystem_tree.errors import ConfigurationError


def test_defaults():
    config = config_from_dict({})
    assert config.axiom == DEFAULT_AXIOM == "F"
    assert config.iterations == 0
    assert config.reparent_target is None


def test_reparent_target_falls_back_to_parent():
    assert TreeConfig(parent="root").reparent_target == "root"
    assert TreeConfig(parent="root", owner="tree").reparent_target == "tree"


@pytest.mark.parametrize("raw, clamped", [(9, MAX_ITERATIONS), (-2, 0), (3, 3), (2.0, 2)])
def test_loader_clamps_iterations(raw, clamped):
    assert config_from_dict({"iterations": raw}).iterations == clamped


def test_loader_warns_when_clamping(caplog):
    with caplog.at_level(logging.WARNING, logger="lsystem_tree.config"):
        config_from_dict({"iterations": 12})
    assert "clamped" in caplog.text


def test_loader_rejects_unknown_keys():
    with pytest.raises(ConfigurationError):
        config_from_dict({"iterations": 1, "leaves": True})


def test_loader_rejects_non_numeric_iterations():
    with pytest.raises(ConfigurationError):
        config_from_dict({"iterations": "many"})


@pytest.mark.parametrize("config", [
    TreeConfig(iterations=7),
    TreeConfig(iterations=-1),
    TreeConfig(iterations=False),
    TreeConfig(axiom=None),
])
def test_validate_rejects_bad_values(config):
    with pytest.raises(ConfigurationError):
        config.validate()
