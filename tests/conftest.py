"""
Shared pytest fixtures for credgen tests.

Provides scripted random sources (so generator output can be predicted
exactly) and a few option presets used across the test modules.
"""
import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from credgen.charsets import GenerationOptions  # noqa: E402
from credgen.random_source import RandomSource  # noqa: E402


@pytest.fixture
def first_source():
    """Source that always picks the first option."""
    return RandomSource(randbelow=lambda n: 0)


@pytest.fixture
def last_source():
    """Source that always picks the last option."""
    return RandomSource(randbelow=lambda n: n - 1)


@pytest.fixture
def broken_source():
    """Source whose OS entropy pool is gone."""
    def randbelow(n):
        raise NotImplementedError("no source of randomness")
    return RandomSource(randbelow=randbelow)


@pytest.fixture
def all_classes():
    return GenerationOptions(uppercase=True, lowercase=True, numbers=True, symbols=True)


@pytest.fixture
def alphanumeric():
    return GenerationOptions(uppercase=True, lowercase=True, numbers=True, symbols=False)
