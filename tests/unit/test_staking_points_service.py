"""Tests for staking points lookups."""

from decimal import Decimal

import aiohttp
import pytest

from app.config.constants import (
    LOOKUP_FAILED_MESSAGE,
    NO_STAKING_POINTS_MESSAGE,
    POINTS_NOT_FOUND_MESSAGE,
)
from app.models.types import LookupState
from app.services.staking_points_service import StakingPointsService


STAKING_URL = "https://prod.api.enkixyz.com/"


class TestFetchGlobalPoints:
    """Tests for StakingPointsService.fetch_global_points."""

    @pytest.mark.asyncio
    async def test_success(self, http_session_factory):
        """Global total is read from data.globalStakingPoints.points."""
        session = http_session_factory(
            {"data": {"globalStakingPoints": {"points": 2.5e27}}}
        )
        service = StakingPointsService(session=session, url=STAKING_URL)

        points = await service.fetch_global_points()

        assert points == Decimal("2.5e27")
        method, url = session.request.call_args.args
        payload = session.request.call_args.kwargs["json"]
        assert method == "POST"
        assert url == STAKING_URL
        assert "globalStakingPoints" in payload["query"]
        assert "variables" not in payload

    @pytest.mark.asyncio
    async def test_string_points(self, http_session_factory):
        """Big integers sent as strings are accepted."""
        session = http_session_factory(
            {"data": {"globalStakingPoints": {"points": "2680000000000000000000000000"}}}
        )
        service = StakingPointsService(session=session)

        assert await service.fetch_global_points() == Decimal("2.68e27")

    @pytest.mark.asyncio
    async def test_network_error(self, http_session_factory):
        """Network failure returns None."""
        session = http_session_factory(request_error=aiohttp.ClientError("boom"))
        service = StakingPointsService(session=session)

        assert await service.fetch_global_points() is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"data": None},
        {"errors": [{"message": "internal"}]},
        {"data": {"globalStakingPoints": None}},
        {"data": {"globalStakingPoints": {"points": 0}}},
        {"data": {"globalStakingPoints": {"points": "1e1000100"}}},
        {"data": {"globalStakingPoints": {"points": "1e-1000100"}}},
        ["unexpected"],
    ])
    async def test_unusable_response(self, http_session_factory, body):
        """Missing or non-positive totals return None."""
        service = StakingPointsService(session=http_session_factory(body))

        assert await service.fetch_global_points() is None


class TestFetchUserPoints:
    """Tests for StakingPointsService.fetch_user_points."""

    @pytest.mark.asyncio
    async def test_positive_points(self, http_session_factory, sample_wallet_address):
        """Positive points are a successful lookup."""
        session = http_session_factory(
            {"data": {"stakingPoints": {"points": 1500000000000000000000}}}
        )
        service = StakingPointsService(session=session)

        result = await service.fetch_user_points(sample_wallet_address)

        assert result.state == LookupState.SUCCESS
        assert result.is_success is True
        assert result.points == Decimal("1500000000000000000000")
        assert result.message is None
        payload = session.request.call_args.kwargs["json"]
        assert payload["variables"] == {"user": sample_wallet_address}
        assert "stakingPoints(user: $user)" in payload["query"]

    @pytest.mark.asyncio
    async def test_zero_points(self, http_session_factory, sample_wallet_address):
        """Explicit zero reports no staking points."""
        session = http_session_factory({"data": {"stakingPoints": {"points": 0}}})
        service = StakingPointsService(session=session)

        result = await service.fetch_user_points(sample_wallet_address)

        assert result.state == LookupState.NO_POINTS
        assert result.points is None
        assert result.message == NO_STAKING_POINTS_MESSAGE

    @pytest.mark.asyncio
    async def test_missing_points(self, http_session_factory, sample_wallet_address):
        """Response without stakingPoints is a failed lookup."""
        session = http_session_factory({"data": {"stakingPoints": None}})
        service = StakingPointsService(session=session)

        result = await service.fetch_user_points(sample_wallet_address)

        assert result.state == LookupState.ERROR
        assert result.message == POINTS_NOT_FOUND_MESSAGE

    @pytest.mark.asyncio
    async def test_out_of_range_points(self, http_session_factory, sample_wallet_address):
        """Points beyond the supported magnitude are an unusable answer."""
        session = http_session_factory({"data": {"stakingPoints": {"points": "1e1000100"}}})
        service = StakingPointsService(session=session)

        result = await service.fetch_user_points(sample_wallet_address)

        assert result.state == LookupState.ERROR
        assert result.message == POINTS_NOT_FOUND_MESSAGE
        assert result.points is None

    @pytest.mark.asyncio
    async def test_network_error(self, http_session_factory, sample_wallet_address):
        """Transport failure asks the user to retry."""
        session = http_session_factory(
            request_error=aiohttp.ClientConnectionError("connection reset")
        )
        service = StakingPointsService(session=session)

        result = await service.fetch_user_points(sample_wallet_address)

        assert result.state == LookupState.ERROR
        assert result.message == LOOKUP_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_server_error(self, http_session_factory, sample_wallet_address):
        """HTTP 500 asks the user to retry."""
        session = http_session_factory({}, status=500)
        service = StakingPointsService(session=session)

        result = await service.fetch_user_points(sample_wallet_address)

        assert result.state == LookupState.ERROR
        assert result.message == LOOKUP_FAILED_MESSAGE
