"""Unit test fixtures.

Most helpers are in tests/conftest.py.
This file contains unit-test-specific fixtures.
"""

import json
import logging
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write a config dict to a JSON file and return its path."""

    def _write(data: dict, name: str = "codefig.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_template(tmp_path):
    """Write a template file under tmp_path/site and return its path."""

    def _write(text: str, name: str = "post.html") -> Path:
        site = tmp_path / "site"
        site.mkdir(exist_ok=True)
        path = site / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def _remove_codefig_handlers() -> None:
    logger = logging.getLogger("codefig")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_logger():
    """Leave the codefig logger without handlers before and after each test."""
    _remove_codefig_handlers()
    yield logging.getLogger("codefig")
    _remove_codefig_handlers()
