"""
Print the powerup odds of every distance bucket for a game mode.

Usage:
    python scripts/item_distribution.py --mode normal-race
    python scripts/item_distribution.py --mode soccer --xml configs/powerup.xml
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure repo root is on sys.path when script is executed from anywhere
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.append(REPO_ROOT)

from kart_game.items import PowerupRegistry  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Show powerup odds per distance bucket.")
    parser.add_argument("--mode", default="normal-race", help="Game mode, e.g. normal-race, soccer, tutorial.")
    parser.add_argument("--xml", default=None, help="Powerup document to load instead of the configured one.")
    parser.add_argument("--verbose", action="store_true", help="Show loader log output.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    registry = PowerupRegistry(xml_path=args.xml)
    table = registry.table_for_mode(args.mode)

    print(f"Weight list '{table.mode_class}' ({len(table.buckets)} buckets)")
    for bucket in table.buckets:
        print(f"\nDistance >= {bucket.distance_threshold:g} (total weight {bucket.total})")
        if not bucket.is_samplable:
            print("  <empty bucket>")
            continue
        for (kind, count), probability in bucket.probabilities().items():
            print(f"  {kind.value:<12} x{count}  {probability:6.1%}")


if __name__ == "__main__":
    main()
