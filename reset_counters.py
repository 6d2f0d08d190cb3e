#!/usr/bin/env python3
"""
Trigger a bulk counter reset on a running Water Tracker API.

Intended to be run by cron (or any other scheduler): once a day with
``daily`` and once a week with ``week``.  The script only calls the
HTTP endpoint; it never touches the database directly.

Usage:
    python reset_counters.py daily --base-url https://water.example.com
    python reset_counters.py week

The base URL defaults to the ``WATER_TRACKER_URL`` environment
variable, or ``http://localhost:3000``.
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

import requests

logger = logging.getLogger(__name__)

RESET_PATHS = {
    "daily": "/reset-daily",
    "week": "/reset-week",
}


def trigger_reset(
    period: str,
    base_url: str,
    *,
    timeout: float = 15,
    session: Optional[requests.Session] = None,
) -> str:
    """POST to the reset endpoint for ``period`` and return the server message.

    Raises ``requests.RequestException`` on network errors and on
    non‑2xx responses.
    """
    url = f"{base_url.rstrip('/')}{RESET_PATHS[period]}"
    session = session or requests.Session()
    logger.debug("Sending POST request to %s", url)
    response = session.post(url, timeout=timeout)
    response.raise_for_status()
    return response.json().get("message", "")


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Reset daily or weekly water counters.")
    ap.add_argument("period", choices=sorted(RESET_PATHS), help="Which counter to reset")
    ap.add_argument(
        "--base-url",
        default=os.getenv("WATER_TRACKER_URL", "http://localhost:3000"),
        help="Base URL of the API",
    )
    ap.add_argument("--timeout", type=float, default=15, help="Request timeout in seconds")
    args = ap.parse_args(argv)

    try:
        message = trigger_reset(args.period, args.base_url, timeout=args.timeout)
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        detail = ""
        if exc.response is not None:
            try:
                detail = exc.response.json().get("error", "")
            except ValueError:
                detail = exc.response.text
        print(f"[!] Reset failed ({status}): {detail or exc}", file=sys.stderr)
        return 1
    except requests.RequestException as exc:
        print(f"[!] Reset failed: {exc}", file=sys.stderr)
        return 1

    print(f"[+] {message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
