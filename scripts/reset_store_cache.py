#!/usr/bin/env python3
"""
Inspect or clear the cached File Search store.

With no flags, prints the cached store name. --clear deletes the cache file so the
next run builds a fresh store; add --delete-remote to also delete the cached store
from the Gemini API (requires GEMINI_API_KEY).

Run from project root:

    python scripts/reset_store_cache.py
    python scripts/reset_store_cache.py --clear
    python scripts/reset_store_cache.py --clear --delete-remote
"""

import argparse
import sys
from pathlib import Path

# Project root on path so "file_search_qa" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from file_search_qa.core.config import CACHE_FILE
from file_search_qa.core.store_cache import clear_cached_store_name, read_cached_store_name
from file_search_qa.services.file_search_client import build_client


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or clear the cached File Search store.")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete the cache file so the next run re-creates and re-indexes the store.",
    )
    parser.add_argument(
        "--delete-remote",
        action="store_true",
        help="With --clear, also delete the cached store from the Gemini API.",
    )
    parser.add_argument(
        "--cache-file",
        type=Path,
        default=CACHE_FILE,
        help=f"Cache file to use (default: {CACHE_FILE}).",
    )
    args = parser.parse_args(argv)

    if args.delete_remote and not args.clear:
        parser.error("--delete-remote requires --clear")

    store_name = read_cached_store_name(args.cache_file)
    if not args.clear:
        print(f"Cached store: {store_name}" if store_name else "No cached store.")
        return 0

    if args.delete_remote and store_name:
        build_client().delete_store(store_name)
        print(f"  deleted remote store: {store_name}")

    if clear_cached_store_name(args.cache_file):
        print(f"Cleared {args.cache_file}.")
    else:
        print("No cache file to clear.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
