"""
Global staking points store.

Owns the last known global staking points total: defaults to a fallback
constant, is overwritten by successful fetches and is written through to
Redis on every change so the value survives restarts.
"""

from decimal import Decimal

import redis.asyncio as redis
from loguru import logger
from redis.exceptions import RedisError

from app.config.settings import settings
from app.services.base_service import to_decimal
from calculator.constants import DEFAULT_TOTAL_STAKING_POINTS, is_supported_magnitude


class GlobalPointsStore:
    """Single persisted cell holding the global staking points total."""

    def __init__(
        self,
        redis_client: redis.Redis | None,
        key: str | None = None,
        default: Decimal = DEFAULT_TOTAL_STAKING_POINTS,
    ) -> None:
        """
        Initialize store.

        Args:
            redis_client: Redis client, None keeps the value in memory only
            key: Storage key
            default: Fallback total used until a value is known
        """
        self.redis = redis_client
        self.key = key or settings.global_points_key
        self.default = default
        self._value = default

    @property
    def value(self) -> Decimal:
        """Current global total."""
        return self._value

    async def load(self) -> Decimal:
        """
        Read persisted total at startup.

        Missing, unparsable or non-positive values and Redis failures
        leave the default in place.

        Returns:
            Current global total
        """
        if self.redis is None:
            return self._value

        try:
            saved = await self.redis.get(self.key)
        except (RedisError, OSError) as e:
            logger.warning(f"Could not read {self.key} from Redis: {e}")
            return self._value

        if saved is None:
            logger.info(f"No saved {self.key}, using default {self.default}")
            return self._value

        points = to_decimal(saved)
        if points is None or points <= 0:
            logger.warning(f"Ignoring invalid saved {self.key}: {saved!r}")
            return self._value

        self._value = points
        logger.info(f"Loaded {self.key} from Redis: {points}")
        return self._value

    async def update(self, points: Decimal) -> None:
        """
        Set new total and write it through to Redis.

        Args:
            points: New positive global total

        Raises:
            ValueError: If points is not positive or out of range
        """
        if points <= 0:
            raise ValueError(f"Global staking points must be positive, got {points}")
        if not is_supported_magnitude(points):
            raise ValueError(f"Global staking points out of range: {points}")

        self._value = points
        await self._save()

    async def _save(self) -> None:
        """Persist current value as decimal string."""
        if self.redis is None:
            return
        try:
            await self.redis.set(self.key, str(self._value))
        except (RedisError, OSError) as e:
            logger.error(f"Could not save {self.key} to Redis: {e}")
