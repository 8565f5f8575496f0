"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def app_dir(tmp_path: Path, monkeypatch) -> Path:
    """An empty application directory, made the cwd."""
    root = tmp_path / "app-root"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture(autouse=True)
def _reset_formkit_logger():
    """Drop handlers the CLI attached to the formkit logger."""
    yield
    logger = logging.getLogger("formkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
