"""Pytest configuration for persistedql tests."""

import pytest

from persistedql.utils.hashing import sha256_hexdigest

QUERY = """
query FooQuery($id: ID!) {
  item(id: $id) {
    name
  }
}
"""


@pytest.fixture
def query() -> str:
    """A GraphQL query document as a client would send it."""
    return QUERY


@pytest.fixture
def digest() -> str:
    """The APQ hash of ``query``."""
    return sha256_hexdigest(QUERY)
