"""Shared fixtures for the hubtags-cli tests."""

import pytest

from hubtags_cli.registry.client import HubClient


@pytest.fixture
def client():
    return HubClient()
