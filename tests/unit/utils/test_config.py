"""Test config loading and logging setup."""

import logging

import numpy as np
import pytest

from mcts_engine.mcts.search import SearchConfig
from mcts_engine.utils.config import load_config
from mcts_engine.utils.logging import setup_logging
from mcts_engine.utils.seed import make_rng, random_choice


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("search:\n  iterations: 64\n  seed: 3\ngame:\n  name: treblecross\n")

    config = load_config(path)

    assert config['game']['name'] == "treblecross"
    search = SearchConfig.from_dict(config['search'])
    assert search.iterations == 64
    assert search.seed == 3


def test_shipped_config_is_valid():
    from pathlib import Path

    path = Path(__file__).parents[3] / "configs" / "self_play.yaml"
    config = load_config(path)
    search = SearchConfig.from_dict(config['search'])
    assert search.iterations is None
    assert search.time_budget == 1.0


def test_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_non_mapping_config(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_setup_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    log_file = tmp_path / "run.log"

    try:
        logger = setup_logging(logging.DEBUG, str(log_file))
        logger.getChild("test").debug("hello from test")
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
        logging.getLogger("mcts_engine").setLevel(logging.NOTSET)

    assert logger.name == "mcts_engine"
    assert "hello from test" in log_file.read_text()


def test_make_rng():
    rng = np.random.default_rng(0)
    assert make_rng(rng) is rng
    assert make_rng(5).integers(1000) == make_rng(5).integers(1000)


def test_random_choice_covers_sequence():
    rng = make_rng(0)
    picks = {random_choice(rng, "abc") for _ in range(100)}
    assert picks == {"a", "b", "c"}
