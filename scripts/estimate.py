#!/usr/bin/env python3
"""
Estimate ENKI airdrop reward from the command line.

Fetches the current price and global staking points, then computes the
reward for a wallet address or for manually entered raw points.

Usage:
    python scripts/estimate.py --address 0x1234...5678
    python scripts/estimate.py --points 1000000000000000000000 --boost 5 --breakdown
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from app.main import build_estimator
from app.utils.redis_utils import get_redis_client
from calculator import BOOST_MULTIPLIERS, format_estimate_report


# Configure logger
logger.remove()
logger.add(sys.stderr, level="WARNING", format="{time:HH:mm:ss} | {level} | {message}")


async def estimate(args: argparse.Namespace) -> int:
    """Run one estimate and print the report. Returns exit code."""
    redis_client = None if args.no_cache else get_redis_client()
    estimator = build_estimator(redis_client)
    try:
        await estimator.startup()

        if args.address:
            result = await estimator.submit_address(args.address)
            if result is None or not result.is_success:
                print(estimator.error or "Address is empty")
                return 1
        else:
            if estimator.submit_manual_points(args.points) is None:
                print(f"Invalid staking points: {args.points}")
                return 1

        result = estimator.select_boost(args.boost)
        print(format_estimate_report(result, show_breakdown=args.breakdown))
        return 0
    finally:
        await estimator.close()
        if redis_client is not None:
            await redis_client.aclose()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Estimate ENKI staking airdrop reward"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--address",
        help="MetisL2 wallet address to look up",
    )
    source.add_argument(
        "--points",
        help="Raw staking points (18-decimal fixed point)",
    )
    parser.add_argument(
        "--boost",
        type=int,
        default=1,
        choices=[int(m) for m in BOOST_MULTIPLIERS],
        help="Boost multiplier",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Show calculation breakdown",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Do not read or persist global staking points in Redis",
    )

    args = parser.parse_args()
    sys.exit(asyncio.run(estimate(args)))


if __name__ == "__main__":
    main()
