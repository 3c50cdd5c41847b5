"""
Global test fixtures for the typetags project.
"""

import pytest

from typetags.config.settings import clear_settings_cache
from typetags.core import TypeName, default_instance


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def default_instances():
    """
    One freshly constructed instance per category.

    Returns:
        dict: Type-name key to instance, in table order
    """
    return {name: default_instance(name) for name in TypeName.ALL}
