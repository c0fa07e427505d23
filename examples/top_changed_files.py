#!/usr/bin/env python3
"""
complexity-radar usage example.

Ranks the most frequently changed files of a repository, first with the
blocking client, then with the async client.

Run with: GITHUB_TOKEN=... python examples/top_changed_files.py octocat/Hello-World
"""

import asyncio
import logging
import sys

from complexity_radar import (
    AsyncRadarClient,
    RadarClient,
    RadarError,
    configure_logging,
)
from complexity_radar.report import print_report


def main() -> int:
    slug = sys.argv[1] if len(sys.argv) > 1 else "octocat/Hello-World"
    owner, repo = slug.split("/", 1)

    configure_logging(level=logging.INFO)

    # 1. Blocking client, one commit at a time
    print(f"=== Top changed files of {slug} (sync) ===")
    try:
        with RadarClient.from_env() as client:
            print_report(client.get_top_changed_files(5, owner, repo))
    except RadarError as e:
        print(f"Error: {e}")
        return 1

    # 2. Async client, commit details fetched concurrently
    async def run_async() -> None:
        async with AsyncRadarClient.from_env(max_concurrency=16) as client:
            print_report(await client.get_top_changed_files(5, owner, repo))

    print(f"\n=== Top changed files of {slug} (async) ===")
    try:
        asyncio.run(run_async())
    except RadarError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
