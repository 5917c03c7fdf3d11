"""Shared test fixtures."""

import pytest

from pyextduration import Duration
from pyextduration.modes import HUMAN, MILLIS


@pytest.fixture
def human_mode():
    return HUMAN


@pytest.fixture
def millis_mode():
    return MILLIS


@pytest.fixture
def hms_250():
    """1h 2m 3s 250ms."""
    return Duration.from_millis(3_723_250)
