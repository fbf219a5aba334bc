"""Codec implementations."""

from persistedql.infrastructure.codecs.json import JsonCodec

__all__ = ["JsonCodec"]
