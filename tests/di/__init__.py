"""Test doubles for DI components.

Importing this package registers the mock provider variants.
"""

from .container import build_test_container
from .persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
