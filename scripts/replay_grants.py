"""
Replay a seeded sequence of powerup grants.

Two runs with the same seed print the same grants, which is what network
peers rely on when they replay item boxes.

Usage:
    python scripts/replay_grants.py --mode normal-race --seed 42 --grants 20
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.append(REPO_ROOT)

from kart_game.config import get_config  # noqa: E402
from kart_game.items import GrantLog, PowerupRegistry, RaceItemContext  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Replay seeded powerup grants.")
    parser.add_argument("--mode", default="normal-race", help="Game mode to select weights for.")
    parser.add_argument("--seed", type=int, default=0, help="Seed for distances and random values.")
    parser.add_argument("--grants", type=int, default=20, help="Number of item boxes to open.")
    parser.add_argument("--max-distance", type=float, default=200.0, help="Largest distance to the leader.")
    parser.add_argument("--xml", default=None, help="Powerup document to load instead of the configured one.")
    parser.add_argument("--debug", action="store_true", help="Log every grant.")
    args = parser.parse_args()

    log_grants = args.debug or bool(get_config("powerups.log_grants", False))
    logging.basicConfig(
        level=logging.DEBUG if log_grants else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    grant_log = GrantLog()
    context = RaceItemContext(PowerupRegistry(xml_path=args.xml), grant_log=grant_log)
    context.select_mode(args.mode)

    for _ in range(args.grants):
        distance = rng.uniform(0.0, args.max_distance)
        random_value = rng.getrandbits(64)
        kind, count = context.get_random_powerup(distance, random_value)
        print(f"tick {context.tick:4d}  distance {distance:7.2f}  ->  {kind.value} x{count}")
        context.advance()

    print("\nTotals:")
    for (kind, count), grants in sorted(grant_log.counts().items(), key=lambda item: -item[1]):
        print(f"  {kind.value:<12} x{count}  {grants}")

    edges = [0.0, 15.0, 40.0, 80.0, 150.0, max(args.max_distance, 150.0) + 1.0]
    histogram = grant_log.distance_histogram(edges)
    print("\nGrants per distance band:")
    for low, high, grants in zip(edges, edges[1:], histogram):
        print(f"  {low:6.1f} - {high:6.1f}: {int(grants)}")
    context.clear()


if __name__ == "__main__":
    main()
