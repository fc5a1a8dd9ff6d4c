"""
Shared pytest fixtures for lpssim tests.
"""

import logging
from pathlib import Path

import pytest

from lpssim import Exponential, Hyperexponential


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def unit_exponential() -> Exponential:
    """Exponential job sizes with mean 1."""
    return Exponential.from_mean(1.0)


@pytest.fixture
def balanced_hyperexponential() -> Hyperexponential:
    """Hyperexponential job sizes with mean 1 and squared CV 1.5."""
    return Hyperexponential(2.0, 2.0 / 3.0, 0.5)


@pytest.fixture(autouse=True)
def reset_lpssim_logging():
    """Reset the lpssim logger before and after each test.

    Removes every handler but a NullHandler and resets the level, so logging
    configured by one test cannot leak into another.
    """
    logger = logging.getLogger("lpssim")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
