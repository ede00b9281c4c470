"""
Common fixtures for all tests
"""
import os
import sys

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from core.config import get_settings
from d2_domains.resolver import get_default_resolver
from d2_domains.suffix_table import get_suffix_table
from tests.fixtures import load_sample_result


@pytest.fixture
def sample_result():
    """Fresh copy of the current-schema sample audit result"""
    return load_sample_result()


@pytest.fixture
def clear_caches():
    """Reset cached settings, suffix table and resolver around a test"""
    get_settings.cache_clear()
    get_suffix_table.cache_clear()
    get_default_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_suffix_table.cache_clear()
    get_default_resolver.cache_clear()
