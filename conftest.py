"""
Root conftest.py for pytest configuration

Applies markers based on test location and registers domain markers.
"""
import pytest

from tests.markers import DOMAIN_MARKERS, apply_auto_markers


def pytest_collection_modifyitems(config, items):
    """Apply automatic markers to all collected items"""
    for item in items:
        apply_auto_markers(item)


def pytest_configure(config):
    """Register domain markers"""
    for marker_name, description in DOMAIN_MARKERS.items():
        config.addinivalue_line("markers", f"{marker_name}: {description}")
