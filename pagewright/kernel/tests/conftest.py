"""Kernel test fixtures."""

import pytest

from pagewright.kernel.ids import sequential_ids
from pagewright.kernel.tests.builders import build_sample_tree


@pytest.fixture
def sample_tree():
    return build_sample_tree()


@pytest.fixture
def ids():
    return sequential_ids("new")
