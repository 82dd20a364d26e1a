"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ArtistFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.catalog import (
    ArtistAlternateNameFactory,
    ArtistFactory,
    EbookFactory,
    EbookPlaceholderFactory,
)
from tests.factories.project import ProjectFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # User
    "DEFAULT_TEST_PASSWORD",
    "UserFactory",
    # Catalog
    "ArtistAlternateNameFactory",
    "ArtistFactory",
    "EbookFactory",
    "EbookPlaceholderFactory",
    # Project
    "ProjectFactory",
]
