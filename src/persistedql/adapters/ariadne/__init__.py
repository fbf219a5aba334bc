"""Ariadne framework adapter for persistedql."""

from persistedql.adapters.ariadne.graphql import ApqGraphQL
from persistedql.adapters.ariadne.handler import ApqGraphQLHTTPHandler

__all__ = [
    "ApqGraphQL",
    "ApqGraphQLHTTPHandler",
]
