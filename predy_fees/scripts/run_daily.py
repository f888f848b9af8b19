"""
Run the Predy fee adapter for one day and print the results.

Usage:
    python -m predy_fees.scripts.run_daily
    python -m predy_fees.scripts.run_daily --date 2023-06-01 --version v320
    python -m predy_fees.scripts.run_daily --timestamp 1685577600 --json
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from typing import Optional

import requests

from predy_fees.config.settings import SECONDS_PER_DAY
from predy_fees.core.adapter import build_adapter
from predy_fees.core.dates import format_timestamp_as_date, parse_date
from predy_fees.core.errors import PredyFeesError


def default_timestamp() -> int:
    """00:00 UTC of yesterday, the latest fully indexed day."""
    now = int(datetime.now(timezone.utc).timestamp())
    return now - now % SECONDS_PER_DAY - SECONDS_PER_DAY


def run(timestamp: int, version: Optional[str] = None, chain: Optional[str] = None) -> list:
    """Fetch metrics for every matching deployment; returns list of result dicts."""
    adapter = build_adapter()
    results = []

    for label, chains in adapter["breakdown"].items():
        if version and label != version:
            continue
        for chain_name, fetcher in chains.items():
            if chain and chain_name != chain:
                continue

            if timestamp < fetcher.start():
                print(f"  ⏭️  {label}/{chain_name}: no data before {format_timestamp_as_date(fetcher.start())}", file=sys.stderr)
                continue

            print(f"  {label}/{chain_name}...", end=" ", flush=True, file=sys.stderr)
            metrics = fetcher.fetch(timestamp)
            print("✅", file=sys.stderr)

            results.append({
                "version": label,
                "chain": chain_name,
                **metrics.to_dict(),
            })

    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Fetch Predy Finance daily fees and revenue")
    when = parser.add_mutually_exclusive_group()
    when.add_argument("--date", help="Day to fetch (YYYY-MM-DD, UTC)")
    when.add_argument("--timestamp", type=int, help="Unix timestamp within the day to fetch")
    parser.add_argument("--version", choices=["v3", "v320"], help="Only this protocol version")
    parser.add_argument("--chain", help="Only this chain")
    parser.add_argument("--json", action="store_true", help="Skip the banner around the JSON summary")
    args = parser.parse_args(argv)

    if args.date:
        timestamp = parse_date(args.date)
    elif args.timestamp is not None:
        timestamp = args.timestamp
    else:
        timestamp = default_timestamp()

    if not args.json:
        print("\n" + "=" * 70)
        print(f"PREDY FINANCE DAILY FEES - {format_timestamp_as_date(timestamp)}")
        print("=" * 70)

    try:
        results = run(timestamp, version=args.version, chain=args.chain)
    except (PredyFeesError, requests.RequestException) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if not args.json:
        print("\n" + "=" * 70)
        print("JSON OUTPUT:")
        print("=" * 70)
    print(json.dumps(results, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
