"""Shared test fixtures."""

from dataclasses import replace

import pytest

from maplab import Session, default_config


@pytest.fixture
def config():
    """Built-in configuration without colours or progress delay."""
    base = default_config()
    return replace(
        base,
        display=replace(base.display, color=False),
        progress=replace(base.progress, delay=0.0),
    )


@pytest.fixture
def session(config):
    """Fresh session with no original built."""
    return Session(config.variants)
