#!/usr/bin/env python3
"""Quick live dry run against the configured feed and HubSpot portal.

Run:
  poetry run python scripts/dry_run_live.py          # first 5 outcomes
  poetry run python scripts/dry_run_live.py 20       # first 20 outcomes
"""

import sys

from agent_sync.config import SyncConfig
from agent_sync.pipeline import run_sync


def main() -> None:
    limit = int(sys.argv[1]) if len(sys.argv) > 1 else 5
    config = SyncConfig.from_env()
    print(f"Dry run: feed={config.feed_url} object_type={config.object_type_id}")

    status, body = run_sync(config, dry_run=True)
    if status != 200:
        print(f"\n⚠️ Dry run failed: {body['error']}")
        raise SystemExit(1)

    print(f"Got {body['count']} agents")
    for i, outcome in enumerate(body["results"][:limit], 1):
        print(f"  {i}. [{outcome['action']}] {outcome['name'] or 'N/A'}")
    print("\n✅ Feed fetch + CRM search succeeded (nothing written).")


if __name__ == "__main__":
    main()
