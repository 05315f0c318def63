# (c) Copyright IBM Corp. 2025

"""
This module provides "python -m lsfinder" functionality: run one discovery and
print the endpoint that was found.

    python -m lsfinder --retries 3 --json
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from lsfinder.finder import ProcessFinder
from lsfinder.options import DiscoveryOptions
from lsfinder.util import mask_secret
from lsfinder.version import VERSION

TROUBLESHOOTING = """\
Language server not found.

Troubleshooting tips:
   1. Make sure Antigravity is running
   2. Check if the language_server process is running
   3. Try reloading the IDE
   4. Run again with --debug for details
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lsfinder",
        description="Find the running Antigravity language server and its API port.",
    )
    parser.add_argument("--retries", type=int, help="number of discovery attempts")
    parser.add_argument("--delay", type=float, help="seconds to wait between attempts")
    parser.add_argument("--timeout", type=float, help="seconds to wait for a port probe")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument(
        "--show-token",
        action="store_true",
        help="print the full CSRF token instead of a masked one",
    )
    parser.add_argument("--debug", action="store_true", help="log every discovery step")
    parser.add_argument("--version", action="version", version=f"lsfinder {VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.retries is not None:
        if args.retries < 1:
            print("--retries must be at least 1", file=sys.stderr)
            return 2
        overrides["max_retries"] = args.retries
    if args.delay is not None:
        overrides["retry_delay"] = max(args.delay, 0.0)
    if args.timeout is not None:
        if args.timeout <= 0:
            print("--timeout must be greater than 0", file=sys.stderr)
            return 2
        overrides["probe_timeout"] = args.timeout
    if args.debug:
        overrides["debug"] = True
        overrides["log_level"] = logging.DEBUG

    finder = ProcessFinder(options=DiscoveryOptions(**overrides))
    result = finder.detect()

    if result is None:
        print(TROUBLESHOOTING, file=sys.stderr)
        if args.debug:
            finder.diagnostics()
        return 1

    token = result.auth_token if args.show_token else mask_secret(result.auth_token)
    if args.json:
        payload = result.to_dict()
        payload["auth_token"] = token
        print(json.dumps(payload))
    else:
        print(f"extension_port: {result.extension_port}")
        print(f"connect_port:   {result.connect_port}")
        print(f"csrf_token:     {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
