"""
Zero XP, attributes and rank for every user.

Usage:
    python examples/03_reset_xp.py --yes
"""
import argparse
import logging

from natron import UserStore

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Reset all user XP")
    parser.add_argument("--yes", action="store_true", help="Confirm the reset")
    parser.add_argument("--data-dir", default=None, help="Store directory (default: NATRON_DATA_DIR)")
    args = parser.parse_args()

    if not args.yes:
        parser.error("refusing to reset without --yes")

    count = UserStore(persist_dir=args.data_dir).reset_all_xp()
    print(f"Done: reset {count} users")
