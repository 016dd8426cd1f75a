"""Shared fixtures for the alignment visualizer tests."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def protein_alphabet():
    """Standard protein alphabet."""
    return "ARNDCEQGHILKMFPSTWYV"


@pytest.fixture
def aligned_pair():
    """Two aligned sequences with a gap and a few substitutions."""
    return (
        "MKTAYIAKQRQISFVKSHFSRQ-DILDLQY",
        "MKPAYIAKQRQISFVKSHFSRQDDILDVQY",
    )
