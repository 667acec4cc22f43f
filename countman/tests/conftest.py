"""
Pytest fixtures for Countman tests.
"""

import pytest
from django.contrib.auth import get_user_model

from countman.adapters import reset_adapters
from countman.models import Location
from countman.service import Count
from countman.tests.fakes import CATALOG


User = get_user_model()


@pytest.fixture(autouse=True)
def _fresh_adapters():
    """Adapters are cached per process; start every test clean."""
    reset_adapters()
    yield
    reset_adapters()


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username='counter',
        password='testpass123'
    )


@pytest.fixture
def other_user(db):
    """A second staff member."""
    return User.objects.create_user(
        username='reviewer',
        password='testpass123'
    )


@pytest.fixture
def dock(db):
    """Get or create the Dock location."""
    location, _ = Location.objects.get_or_create(name='Dock')
    return location


@pytest.fixture
def aisle(db):
    """Get or create the Aisle 4 location."""
    location, _ = Location.objects.get_or_create(
        name='Aisle 4',
        defaults={'description': 'Cold storage'}
    )
    return location


@pytest.fixture
def counter(db):
    """Count service wired to the configured test adapters."""
    return Count()


@pytest.fixture
def anchor():
    """ProductInfo for barcode A1."""
    return CATALOG['A1']


@pytest.fixture
def bracket():
    """ProductInfo for barcode B2."""
    return CATALOG['B2']
