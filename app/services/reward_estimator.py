"""
Reward estimator session.

Holds the interdependent values of one estimator session (user points,
global total, boost, price) and the explicit form and lookup states.
The reward itself is never stored: it is derived on demand from the
current values.
"""

import asyncio
from decimal import Decimal

from loguru import logger

from app.config.constants import BOOST_INFO_URL, LOOKUP_FAILED_MESSAGE
from app.models.types import InputMethod, LookupState, UserPointsLookup
from app.services.global_points_store import GlobalPointsStore
from app.services.price_service import PriceService
from app.services.staking_points_service import StakingPointsService
from app.utils.exceptions import InvalidBoostError, InvalidInputMethodError
from app.utils.security import mask_address
from calculator import (
    BOOST_MULTIPLIERS,
    BoostMultiplier,
    RewardCalculator,
    RewardEstimate,
    format_breakdown,
    format_currency,
    format_points,
    format_pool,
    format_price,
    format_token,
    get_boost_multiplier,
)
from calculator.types import EstimateDict, EstimatorStateDict


class RewardEstimator:
    """
    Estimator session for a single user.

    Usage:
        estimator = RewardEstimator(PriceService(), StakingPointsService(), store)
        await estimator.startup()
        await estimator.submit_address("0x...")
        estimator.select_boost(2)
        estimator.snapshot()
    """

    def __init__(
        self,
        price_service: PriceService,
        staking_service: StakingPointsService,
        store: GlobalPointsStore,
        calculator: RewardCalculator | None = None,
    ) -> None:
        self.price_service = price_service
        self.staking_service = staking_service
        self.store = store
        self.calculator = calculator or RewardCalculator()

        self.input_method = InputMethod.ADDRESS
        self.lookup_state = LookupState.IDLE
        self.error: str | None = None

        # Pending values of both forms survive form switches
        self.user_address = ""
        self.manual_points = ""

        self.staking_points: Decimal | None = None
        self.price: Decimal | None = None
        self.boost = BoostMultiplier.NONE
        self.show_breakdown = False

        # Points behind the displayed estimate, None when nothing is computed
        self._estimate_points: Decimal | None = None

    # === Startup and best-effort refreshes ===

    async def startup(self) -> None:
        """Load persisted total, then fetch price and global total concurrently."""
        await self.store.load()
        await asyncio.gather(
            self.refresh_price(),
            self.refresh_global_points(),
        )

    async def refresh_price(self) -> Decimal | None:
        """Fetch current price; failures keep the previous value."""
        price = await self.price_service.fetch_price()
        if price is not None:
            self.price = price
        return self.price

    async def refresh_global_points(self) -> Decimal:
        """Fetch global total; failures keep the cached or default value."""
        points = await self.staking_service.fetch_global_points()
        if points is not None:
            await self.store.update(points)
        return self.store.value

    @property
    def global_points(self) -> Decimal:
        """Current global staking points total."""
        return self.store.value

    # === Derived reward ===

    @property
    def estimate(self) -> RewardEstimate | None:
        """Reward estimate derived from current values."""
        if self._estimate_points is None:
            return None
        return self.calculator.estimate(
            self._estimate_points,
            self.global_points,
            boost=self.boost,
            price=self.price,
        )

    def _start_calculation(self, points: Decimal | None) -> RewardEstimate | None:
        self.staking_points = points
        self._estimate_points = points
        if points is not None:
            self.boost = BoostMultiplier.NONE
        return self.estimate

    # === User actions ===

    def submit_manual_points(self, raw: str | int | float | Decimal | None) -> RewardEstimate | None:
        """
        Calculate reward for manually entered raw points.

        Non-numeric or non-positive input produces no result and no error.

        Args:
            raw: Points as typed by the user

        Returns:
            RewardEstimate or None
        """
        self.manual_points = "" if raw is None else str(raw)
        points = self.calculator.parse_points(raw)
        if points is None:
            logger.debug(f"Ignoring manual points input: {raw!r}")
        return self._start_calculation(points)

    async def submit_address(self, address: str | None) -> UserPointsLookup | None:
        """
        Look up staking points of an address and calculate reward.

        Blank addresses are ignored. A lookup result is applied only while
        the flow is still loading; rapid resubmissions are not cancelled and
        the last response to arrive wins.

        Args:
            address: Wallet address

        Returns:
            Lookup outcome, or None if the address was blank
        """
        address = (address or "").strip()
        if not address:
            return None

        self.user_address = address
        self.lookup_state = LookupState.LOADING
        self.error = None
        self._start_calculation(None)

        try:
            result = await self.staking_service.fetch_user_points(address)
        except Exception as e:
            logger.exception(f"Staking points lookup for {mask_address(address)} crashed: {e}")
            result = UserPointsLookup(LookupState.ERROR, message=LOOKUP_FAILED_MESSAGE)

        if self.lookup_state != LookupState.LOADING:
            logger.debug(f"Discarding lookup result for {mask_address(address)}: flow reset")
            return result

        self.lookup_state = result.state
        self.error = result.message
        if result.is_success:
            self._start_calculation(result.points)

        return result

    def select_boost(self, multiplier: int) -> RewardEstimate | None:
        """
        Select boost multiplier. Never refetches data.

        Raises:
            InvalidBoostError: If multiplier is not 1, 2, 5 or 10
        """
        boost = get_boost_multiplier(multiplier)
        if boost is None:
            raise InvalidBoostError(f"Unsupported boost multiplier: {multiplier}")
        self.boost = boost
        return self.estimate

    def toggle_breakdown(self) -> bool:
        """Show or hide the calculation breakdown."""
        self.show_breakdown = not self.show_breakdown
        return self.show_breakdown

    def switch_input_method(self, method: str) -> InputMethod:
        """
        Select the address or manual form.

        Switching to manual entry returns the address flow to IDLE.

        Raises:
            InvalidInputMethodError: If method is unknown
        """
        try:
            selected = InputMethod(method)
        except ValueError as e:
            raise InvalidInputMethodError(f"Unknown input method: {method}") from e

        self.input_method = selected
        if selected == InputMethod.MANUAL:
            self.lookup_state = LookupState.IDLE
            self.error = None
        return selected

    # === Presentation ===

    def _estimate_view(self, estimate: RewardEstimate) -> EstimateDict:
        usd = estimate.usd_value_boosted
        return {
            "boost": int(estimate.boost),
            "reward": format_token(estimate.boosted_reward),
            "reward_raw": str(estimate.boosted_reward),
            "usd_value": format_currency(usd) if usd is not None else None,
            "ath_value": (
                format_currency(estimate.ath_value_boosted) if usd is not None else None
            ),
        }

    def snapshot(self) -> EstimatorStateDict:
        """Serialisable view of everything displayed."""
        estimate = self.estimate
        breakdown = (
            format_breakdown(estimate)
            if self.show_breakdown and estimate is not None
            else []
        )
        return {
            "input_method": str(self.input_method),
            "lookup_state": str(self.lookup_state),
            "error": self.error,
            "staking_points": (
                format_points(self.staking_points)
                if self.staking_points is not None
                else None
            ),
            "total_staking_points": format_points(self.global_points),
            "total_airdrop": format_pool(self.calculator.pool_size),
            "price": format_price(self.price) if self.price is not None else None,
            "estimate": self._estimate_view(estimate) if estimate is not None else None,
            "boost_options": [int(m) for m in BOOST_MULTIPLIERS if m > BoostMultiplier.NONE],
            "show_breakdown": self.show_breakdown,
            "breakdown": breakdown,
            "boost_info_url": BOOST_INFO_URL,
        }

    async def close(self) -> None:
        """Release HTTP sessions."""
        await self.price_service.close()
        await self.staking_service.close()
