"""Lightweight REST client for the footstats API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a player dataset to the footstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("dataset", type=Path, nargs="?", help="JSON array of player records")
    parser.add_argument("--top", type=int, default=None, help="Length of every ranking")
    parser.add_argument("--output", type=Path, help="Write the returned results JSON here")
    parser.add_argument("--health", action="store_true", help="Check the service and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.health:
            resp = client.get("/health")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.dataset is None:
            raise SystemExit("a dataset file is required unless using --health")

        params = {"top": args.top} if args.top is not None else None
        resp = client.post(
            "/analyze",
            content=args.dataset.read_bytes(),
            headers={"Content-Type": "application/json"},
            params=params,
        )
        if resp.status_code == 400:
            raise SystemExit(f"dataset rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        payload = resp.json()

    stats = payload["statistics"]
    print(
        f"Parsed {stats['total_players_parsed']} entries, "
        f"{stats['total_players_valid']} valid, "
        f"{stats['parsing_errors']} parsing errors, "
        f"{stats['duplicates_removed']} duplicates removed"
    )
    if args.output:
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Results saved to {args.output}")
    else:
        print(json.dumps(payload["top_10_scorers"], indent=2))


if __name__ == "__main__":
    main()
