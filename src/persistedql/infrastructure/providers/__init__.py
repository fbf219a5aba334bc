"""Cache provider implementations.

``RedisCacheProvider`` lives in :mod:`persistedql.infrastructure.providers.redis`
and needs the ``redis`` extra.
"""

from persistedql.infrastructure.providers.memory import InMemoryCacheProvider

__all__ = ["InMemoryCacheProvider"]
