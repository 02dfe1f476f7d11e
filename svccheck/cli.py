from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from svccheck.config import settings
from svccheck.prober import parse_endpoints, probe
from svccheck.registry import endpoints as registry_endpoints
from svccheck.registry import load_registry
from svccheck.reporting import report

logger = logging.getLogger(__name__)

USAGE_LINE = "Usage: svccheck --services=IP1:port1,IP2:port2,..."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svccheck",
        description="Check in parallel whether TCP services accept connections.",
    )
    parser.add_argument(
        "--services",
        "-services",
        default=settings.SVCCHECK_SERVICES,
        help=(
            "Comma-separated list of IP:port services to check "
            "(e.g., 192.168.1.1:80,10.0.0.1:443)"
        ),
    )
    parser.add_argument(
        "--timeout",
        "-timeout",
        type=int,
        default=None,
        help=f"Connection timeout in seconds (default {settings.SVCCHECK_TIMEOUT})",
    )
    parser.add_argument(
        "--registry",
        default=settings.SVCCHECK_REGISTRY_PATH,
        help="YAML file of targets to check in addition to --services",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=settings.SVCCHECK_LOG_LEVEL,
        help="Logging level (logs go to stderr)",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    endpoints = parse_endpoints(args.services)
    timeout_s = args.timeout

    if args.registry:
        try:
            reg = load_registry(Path(args.registry))
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Error: cannot load registry {args.registry}: {e}", file=sys.stderr)
            return 1
        endpoints.extend(registry_endpoints(reg))
        if timeout_s is None:
            timeout_s = reg.defaults.timeout_s

    if timeout_s is None:
        timeout_s = settings.SVCCHECK_TIMEOUT

    logger.debug("Resolved endpoints %s (timeout %ss)", endpoints, timeout_s)

    if not endpoints:
        print("Error: No services specified")
        print(USAGE_LINE)
        parser.print_help()
        return 1

    summary = report(probe(endpoints, timeout_s))
    return summary.exit_code


def entrypoint() -> None:
    sys.exit(main())
