'''
Fixtures for copilot-api unit tests.
'''

from __future__ import annotations

import pytest

from copilot_api.auth import InMemoryCredentialStore

from .helpers import NOW, FakeTokenExchange, make_credentials


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def exchange() -> FakeTokenExchange:
    return FakeTokenExchange()


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore({'default': make_credentials()})
