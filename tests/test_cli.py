import argparse
import logging

import pytest
import yaml

from particle_ramps.cli.serve import build_config
from particle_ramps.logging_config import resolve_level, setup_logging


def test_build_config_without_file():
    config = build_config(argparse.Namespace(config=None))
    assert config.editor_names() == ["size", "opacity", "color"]


def test_build_config_from_file(tmp_path):
    path = tmp_path / "ramps.yaml"
    path.write_text(yaml.dump({"curves": [{"name": "glow"}]}))
    config = build_config(argparse.Namespace(config=path))
    assert config.editor_names() == ["glow"]


def test_setup_logging_accepts_names(tmp_path):
    log_file = tmp_path / "ramps.log"
    logger = setup_logging("debug", log_file)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    setup_logging(logging.WARNING)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    logger.handlers.clear()


def test_resolve_level():
    assert resolve_level("info") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("loud")
