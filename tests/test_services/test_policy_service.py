"""Tests for the policy query service."""

import random
import sys
from unittest.mock import AsyncMock

import pytest

sys.path.append("src")

from conftest import make_snapshot

from policy_admin.services.policy import PolicyService, SortMethod, resolve_sort_order


def _policy_snapshots(count, prefix="p"):
    return [
        make_snapshot(
            f"{prefix}{i}",
            {"Title": f"政策{i}", "SupportRate": 70, "NonSupportRate": 30},
        )
        for i in range(count)
    ]


class TestResolveSortOrder:
    """Test mapping of sort tags to query orderings."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("supportDesc", ("SupportRate", True)),
            ("supportAsc", ("SupportRate", False)),
            ("opposeDesc", ("NonSupportRate", True)),
        ],
    )
    def test_known_tags(self, tag, expected):
        assert resolve_sort_order(tag) == expected

    @pytest.mark.parametrize("tag", ["newest", "", None, "SUPPORTDESC"])
    def test_unknown_tags_fall_back_to_support_desc(self, tag):
        assert resolve_sort_order(tag) == ("SupportRate", True)

    def test_enum_values_are_accepted(self):
        assert resolve_sort_order(SortMethod.OPPOSE_DESC) == ("NonSupportRate", True)


class TestPolicyService:
    """Test PolicyService.fetch_policies."""

    @pytest.fixture
    def service(self, mock_policy_repository):
        return PolicyService(
            repository=mock_policy_repository, rng=random.Random(0)
        )

    @pytest.mark.asyncio
    async def test_passes_filters_and_sort_to_repository(
        self, service, mock_policy_repository
    ):
        """Test that filters, ordering and limit reach the query."""
        await service.fetch_policies(
            category_filter="子育て",
            party_filter="公明党",
            sort_method="supportAsc",
            limit_count=10,
        )

        mock_policy_repository.query_policies.assert_awaited_once_with(
            "子育て", "公明党", "SupportRate", False, 10, start_after=None
        )

    @pytest.mark.asyncio
    async def test_unknown_sort_uses_default(self, service, mock_policy_repository):
        await service.fetch_policies(sort_method="bogus")

        args = mock_policy_repository.query_policies.await_args.args
        assert args[2:4] == ("SupportRate", True)

    @pytest.mark.asyncio
    async def test_full_page_has_more(self, service, mock_policy_repository):
        """Test that a full page reports more results and the last id."""
        mock_policy_repository.query_policies.return_value = _policy_snapshots(5)

        result = await service.fetch_policies(limit_count=5)

        assert result.success is True
        assert len(result.data.policies) == 5
        assert result.data.has_more is True
        assert result.data.last_document_id == "p4"

    @pytest.mark.asyncio
    async def test_short_page_has_no_more(self, service, mock_policy_repository):
        mock_policy_repository.query_policies.return_value = _policy_snapshots(3)

        result = await service.fetch_policies(limit_count=5)

        assert result.data.has_more is False
        assert result.data.last_document_id == "p2"

    @pytest.mark.asyncio
    async def test_empty_page(self, service, mock_policy_repository):
        result = await service.fetch_policies(limit_count=5)

        assert result.success is True
        assert result.data.policies == []
        assert result.data.has_more is False
        assert result.data.last_document_id is None

    @pytest.mark.asyncio
    async def test_has_more_ignores_search_filtering(
        self, service, mock_policy_repository
    ):
        """Test that has_more follows the raw count, not the searched count."""
        snapshots = _policy_snapshots(4)
        snapshots[2].to_dict.return_value = {"Title": "特別な政策"}
        mock_policy_repository.query_policies.return_value = snapshots

        result = await service.fetch_policies(search_term="特別", limit_count=4)

        assert [p.id for p in result.data.policies] == ["p2"]
        assert result.data.has_more is True
        assert result.data.last_document_id == "p3"

    @pytest.mark.asyncio
    async def test_cursor_resolved_to_snapshot(self, service, mock_policy_repository):
        """Test that an existing cursor document becomes start_after."""
        cursor = make_snapshot("p9", {"Title": "前のページ"})
        mock_policy_repository.get_snapshot.return_value = cursor

        await service.fetch_policies(last_document_id="p9")

        mock_policy_repository.get_snapshot.assert_awaited_once_with("p9")
        kwargs = mock_policy_repository.query_policies.await_args.kwargs
        assert kwargs["start_after"] is cursor

    @pytest.mark.asyncio
    async def test_missing_cursor_is_ignored(self, service, mock_policy_repository):
        """Test that a vanished cursor document restarts from the first page."""
        result = await service.fetch_policies(last_document_id="gone")

        assert result.success is True
        kwargs = mock_policy_repository.query_policies.await_args.kwargs
        assert kwargs["start_after"] is None

    @pytest.mark.asyncio
    async def test_cursor_lookup_error_is_ignored(
        self, service, mock_policy_repository
    ):
        mock_policy_repository.get_snapshot.side_effect = RuntimeError("timeout")

        result = await service.fetch_policies(last_document_id="p1")

        assert result.success is True
        kwargs = mock_policy_repository.query_policies.await_args.kwargs
        assert kwargs["start_after"] is None

    @pytest.mark.asyncio
    async def test_no_cursor_skips_lookup(self, service, mock_policy_repository):
        await service.fetch_policies()

        mock_policy_repository.get_snapshot.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_failure_returns_failure_result(
        self, service, mock_policy_repository
    ):
        """Test that database errors are reported, not raised."""
        mock_policy_repository.query_policies = AsyncMock(
            side_effect=RuntimeError("permission denied")
        )

        result = await service.fetch_policies()

        assert result.success is False
        assert result.data is None
        assert "permission denied" in result.error

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit_count", [0, -1])
    async def test_invalid_limit_raises(self, service, limit_count):
        with pytest.raises(ValueError):
            await service.fetch_policies(limit_count=limit_count)

    @pytest.mark.asyncio
    async def test_documents_are_converted(self, service, mock_policy_repository):
        mock_policy_repository.query_policies.return_value = [
            make_snapshot("x", {}),
        ]

        result = await service.fetch_policies()

        policy = result.data.policies[0]
        assert policy.id == "x"
        assert policy.title == "不明なタイトル"

    @pytest.mark.asyncio
    async def test_drifted_party_entries_do_not_break_page(
        self, service, mock_policy_repository
    ):
        """Test that a document with string party entries still converts."""
        mock_policy_repository.query_policies.return_value = [
            make_snapshot("ok", {"Title": "fine"}),
            make_snapshot("drift", {"PoliticalParties": ["公明党"]}),
        ]

        result = await service.fetch_policies(limit_count=2)

        assert result.success is True
        assert [p.id for p in result.data.policies] == ["ok", "drift"]
        assert result.data.policies[1].political_parties == []

    @pytest.mark.asyncio
    async def test_conversion_error_returns_failure_result(
        self, service, mock_policy_repository
    ):
        """Test that an unconvertible document is reported, not raised."""
        mock_policy_repository.query_policies.return_value = [
            make_snapshot("bad", {"SupportRate": "70%", "NonSupportRate": 30}),
        ]

        result = await service.fetch_policies()

        assert result.success is False
        assert result.data is None
        assert result.error.startswith("Failed to fetch policies")
