"""
Shared helpers for the command-line clients.
"""

import argparse
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from core import ContainerError, bootstrap_container, get_settings, logger
from core.config import WIRING_MODES


def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "--wiring",
        choices=WIRING_MODES,
        default=None,
        help="How the container is populated (default: WIRING_MODE setting)",
    )
    return parser


def run_client(
    parser: argparse.ArgumentParser,
    body: Callable[[], None],
    argv: Optional[List[str]] = None,
) -> int:
    """
    Bootstrap the container and run a client body.

    Invalid settings and container failures are fatal: they are logged, a
    diagnostic naming the offending setting or type and qualifier goes to
    stderr, and 1 is returned.

    Returns:
        int: Process exit code
    """
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        fields = ", ".join(
            str(error["loc"][-1]).upper() for error in e.errors() if error["loc"]
        )
        logger.error(f"Invalid configuration: {e}")
        print(f"{parser.prog}: error: invalid configuration: {fields}", file=sys.stderr)
        return 1

    try:
        bootstrap_container(args.wiring, settings)
        body()
    except ContainerError as e:
        logger.error(f"Dependency resolution failed: {e}")
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    return 0
