"""Fixtures shared by command and query tests."""

import pytest

from tests.shared.fixtures.factories import TestUserFactory


@pytest.fixture
def current_user():
    return TestUserFactory.default_current_user()
