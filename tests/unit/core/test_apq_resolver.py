"""Tests for ApqResolver."""

import json
import logging
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from persistedql import (
    ApqConfigurationError,
    ApqErrorKind,
    ApqResolver,
    Deferred,
    Failed,
    InMemoryCacheProvider,
    JsonCodec,
    PersistedQuery,
    RequestContext,
    Resolved,
    sha256_hexdigest,
)


def _make_provider(stored: str | None = None, put_result: bool = True) -> MagicMock:
    """Create a mock cache provider."""
    provider = MagicMock()
    provider.get = AsyncMock(return_value=stored)
    provider.put = AsyncMock(return_value=put_result)
    return provider


def _extensions(sha256_hash: object) -> dict:
    return {"persistedQuery": {"version": 1, "sha256Hash": sha256_hash}}


class TestDeferral:
    """Requests without the persistedQuery extension."""

    @pytest.mark.asyncio
    async def test_no_extensions(self, query: str) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(RequestContext(query=query))

        assert outcome == Deferred()
        provider.get.assert_not_awaited()
        provider.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_extensions_only(self, query: str) -> None:
        resolver = ApqResolver(_make_provider())

        outcome = await resolver.resolve(
            RequestContext(query=query, extensions={"tracing": True})
        )

        assert outcome == Deferred()


class TestHashFormat:
    """Requests whose hash is not a string."""

    @pytest.mark.asyncio
    async def test_invalid_hash_and_valid_query(self, query: str) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(
            RequestContext(query=query, extensions=_extensions({"a": 1}))
        )

        assert outcome == Failed(ApqErrorKind.HASH_FORMAT_INCORRECT)
        provider.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_hash_and_no_query(self) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(
            RequestContext(extensions=_extensions({"a": 1}))
        )

        assert outcome == Failed(ApqErrorKind.HASH_FORMAT_INCORRECT)
        provider.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_hash_wins_over_invalid_query(self) -> None:
        resolver = ApqResolver(_make_provider())

        outcome = await resolver.resolve(
            RequestContext(query={"a": 1}, extensions=_extensions(42))
        )

        assert outcome == Failed(ApqErrorKind.HASH_FORMAT_INCORRECT)

    @pytest.mark.asyncio
    async def test_invalid_hash_is_never_hashed(self, query: str) -> None:
        resolver = ApqResolver(_make_provider())

        with patch(
            "persistedql.core.services.apq_resolver.sha256_hexdigest"
        ) as hexdigest:
            await resolver.resolve(
                RequestContext(query=query, extensions=_extensions([1]))
            )

        hexdigest.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_hash_without_malformed_flag(self, query: str) -> None:
        """Test a descriptor without a hash never reaches the cache provider."""
        provider = _make_provider()
        resolver = ApqResolver(provider)

        with patch.object(
            PersistedQuery,
            "from_extension",
            return_value=PersistedQuery(version=1, sha256_hash=None),
        ):
            with_query = await resolver.resolve(
                RequestContext(query=query, extensions=_extensions("abc"))
            )
            hash_only = await resolver.resolve(
                RequestContext(extensions=_extensions("abc"))
            )

        assert with_query == Failed(ApqErrorKind.HASH_FORMAT_INCORRECT)
        assert hash_only == Failed(ApqErrorKind.HASH_FORMAT_INCORRECT)
        provider.get.assert_not_awaited()
        provider.put.assert_not_awaited()


class TestQueryFormat:
    """Requests whose query is not a string."""

    @pytest.mark.asyncio
    async def test_object_query(self) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(
            RequestContext(query={"a": 1}, extensions=_extensions("bogus digest"))
        )

        assert outcome == Failed(ApqErrorKind.QUERY_FORMAT_INCORRECT)
        provider.put.assert_not_awaited()
        provider.get.assert_not_awaited()


class TestMaxQuerySize:
    """Size limit checks."""

    @pytest.mark.asyncio
    async def test_zero_limit_rejects_correct_hash(
        self, query: str, digest: str
    ) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(
            RequestContext(
                query=query, extensions=_extensions(digest), max_query_size=0
            )
        )

        assert outcome == Failed(ApqErrorKind.PERSISTED_QUERY_LARGER_THAN_MAX_SIZE)
        provider.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_size_wins_over_hash_mismatch(self, query: str) -> None:
        resolver = ApqResolver(_make_provider())

        outcome = await resolver.resolve(
            RequestContext(
                query=query, extensions=_extensions("bogus digest"), max_query_size=1
            )
        )

        assert outcome == Failed(ApqErrorKind.PERSISTED_QUERY_LARGER_THAN_MAX_SIZE)

    @pytest.mark.asyncio
    async def test_oversized_query_is_never_hashed(self, query: str) -> None:
        resolver = ApqResolver(_make_provider())

        with patch(
            "persistedql.core.services.apq_resolver.sha256_hexdigest"
        ) as hexdigest:
            await resolver.resolve(
                RequestContext(
                    query=query, extensions=_extensions("x"), max_query_size=0
                )
            )

        hexdigest.assert_not_called()

    @pytest.mark.asyncio
    async def test_query_exactly_at_limit_is_accepted(
        self, query: str, digest: str
    ) -> None:
        resolver = ApqResolver(_make_provider())

        outcome = await resolver.resolve(
            RequestContext(
                query=query,
                extensions=_extensions(digest),
                max_query_size=len(query.encode("utf-8")),
            )
        )

        assert outcome == Resolved(query)

    @pytest.mark.asyncio
    async def test_limit_does_not_apply_to_hash_only(self, digest: str) -> None:
        resolver = ApqResolver(_make_provider(stored="{ a }"))

        outcome = await resolver.resolve(
            RequestContext(extensions=_extensions(digest), max_query_size=0)
        )

        assert outcome == Resolved("{ a }")


class TestStore:
    """Requests carrying both the query and its hash."""

    @pytest.mark.asyncio
    async def test_correct_hash_stores_and_resolves(
        self, query: str, digest: str
    ) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(
            RequestContext(query=query, extensions=_extensions(digest))
        )

        assert outcome == Resolved(query)
        provider.put.assert_awaited_once_with(digest, query)

    @pytest.mark.asyncio
    async def test_hash_mismatch(self, query: str) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(
            RequestContext(query=query, extensions=_extensions("bogus digest"))
        )

        assert outcome == Failed(ApqErrorKind.PROVIDED_SHA_DOES_NOT_MATCH)
        provider.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_uppercase_hash_does_not_match(
        self, query: str, digest: str
    ) -> None:
        """Test the hash comparison is exact."""
        resolver = ApqResolver(_make_provider())

        outcome = await resolver.resolve(
            RequestContext(query=query, extensions=_extensions(digest.upper()))
        )

        assert outcome == Failed(ApqErrorKind.PROVIDED_SHA_DOES_NOT_MATCH)

    @pytest.mark.asyncio
    async def test_store_refused_still_resolves(
        self, query: str, digest: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        resolver = ApqResolver(_make_provider(put_result=False))

        with caplog.at_level(logging.WARNING):
            outcome = await resolver.resolve(
                RequestContext(query=query, extensions=_extensions(digest))
            )

        assert outcome == Resolved(query)
        assert "did not store" in caplog.text

    @pytest.mark.asyncio
    async def test_store_error_still_resolves(
        self, query: str, digest: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        provider = _make_provider()
        provider.put = AsyncMock(side_effect=ConnectionError("down"))
        resolver = ApqResolver(provider)

        with caplog.at_level(logging.WARNING):
            outcome = await resolver.resolve(
                RequestContext(query=query, extensions=_extensions(digest))
            )

        assert outcome == Resolved(query)
        assert "failed to store" in caplog.text

    @pytest.mark.asyncio
    async def test_cache_options_forwarded(self, query: str, digest: str) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider, cache_options={"ttl": timedelta(hours=1)})

        await resolver.resolve(
            RequestContext(query=query, extensions=_extensions(digest))
        )

        provider.put.assert_awaited_once_with(digest, query, ttl=timedelta(hours=1))

    @pytest.mark.asyncio
    async def test_idempotent(self, query: str, digest: str) -> None:
        """Test sending the same query and hash twice resolves the same."""
        provider = InMemoryCacheProvider()
        resolver = ApqResolver(provider)
        context = RequestContext(query=query, extensions=_extensions(digest))

        first = await resolver.resolve(context)
        second = await resolver.resolve(context)

        assert first == second == Resolved(query)
        assert len(provider) == 1
        assert await provider.get(digest) == query


class TestFetch:
    """Requests carrying only the hash."""

    @pytest.mark.asyncio
    async def test_cache_hit(self, query: str, digest: str) -> None:
        provider = _make_provider(stored=query)
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(RequestContext(extensions=_extensions(digest)))

        assert outcome == Resolved(query)
        provider.get.assert_awaited_once_with(digest)
        provider.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cache_miss(self, digest: str) -> None:
        provider = _make_provider(stored=None)
        resolver = ApqResolver(provider)

        outcome = await resolver.resolve(RequestContext(extensions=_extensions(digest)))

        assert outcome == Failed(ApqErrorKind.PERSISTED_QUERY_NOT_FOUND)
        provider.get.assert_awaited_once_with(digest)

    @pytest.mark.asyncio
    async def test_provider_get_error_propagates(self, digest: str) -> None:
        provider = _make_provider()
        provider.get = AsyncMock(side_effect=ConnectionError("down"))
        resolver = ApqResolver(provider)

        with pytest.raises(ConnectionError):
            await resolver.resolve(RequestContext(extensions=_extensions(digest)))

    @pytest.mark.asyncio
    async def test_store_then_fetch(self, query: str, digest: str) -> None:
        """Test a stored query is returned verbatim for a hash-only request."""
        resolver = ApqResolver(InMemoryCacheProvider())

        await resolver.resolve(
            RequestContext(query=query, extensions=_extensions(digest))
        )
        outcome = await resolver.resolve(RequestContext(extensions=_extensions(digest)))

        assert outcome == Resolved(query)

    @pytest.mark.asyncio
    async def test_unknown_hash_after_other_store(self, query: str) -> None:
        resolver = ApqResolver(InMemoryCacheProvider())
        await resolver.resolve(
            RequestContext(query=query, extensions=_extensions(sha256_hexdigest(query)))
        )

        outcome = await resolver.resolve(
            RequestContext(extensions=_extensions(sha256_hexdigest("{ other }")))
        )

        assert outcome == Failed(ApqErrorKind.PERSISTED_QUERY_NOT_FOUND)


class TestJsonEncodedExtensions:
    """Extensions sent as a JSON string."""

    @pytest.mark.asyncio
    async def test_decoded_with_codec(self, query: str, digest: str) -> None:
        provider = _make_provider()
        resolver = ApqResolver(provider, json_codec=JsonCodec())
        extensions = json.dumps(_extensions(digest))

        outcome = await resolver.resolve(
            RequestContext(query=query, extensions=extensions)
        )

        assert outcome == Resolved(query)
        provider.put.assert_awaited_once_with(digest, query)

    @pytest.mark.asyncio
    async def test_missing_codec_raises(self, query: str, digest: str) -> None:
        resolver = ApqResolver(_make_provider())
        extensions = json.dumps(_extensions(digest))

        with pytest.raises(ApqConfigurationError):
            await resolver.resolve(RequestContext(query=query, extensions=extensions))
