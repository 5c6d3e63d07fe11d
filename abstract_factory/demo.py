"""
Abstract Factory Demo

Runs the same client code against both factory types.

Usage:
    abstract-factory-demo                  # Run the demo
    abstract-factory-demo --verbose        # Debug logging on stderr
    abstract-factory-demo --env-file .env  # Load settings from a .env file
    python -m abstract_factory             # Same, without the console script
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .client import client_code
from .config import AppConfig, load_environment, setup_logging
from .factories import ConcreteFactory1, ConcreteFactory2

logger = logging.getLogger(__name__)


def run_demo(out: Optional[TextIO] = None) -> None:
    """
    Run the client code with the first factory type, then with the second.

    Args:
        out: Output stream (defaults to sys.stdout)
    """
    if out is None:
        out = sys.stdout

    out.write("Client: Testing client code with the first factory type:\n")
    client_code(ConcreteFactory1(), out)

    out.write("\n")

    out.write("Client: Testing the same client code with the second factory type:\n")
    client_code(ConcreteFactory2(), out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abstract-factory-demo",
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the demo
  abstract-factory-demo

  # Verbose logging (written to stderr)
  abstract-factory-demo --verbose

  # Load LOG_LEVEL / LOG_FILE from a specific .env file
  abstract-factory-demo --env-file demo.env
        """
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with settings"
    )

    parser.add_argument(
        "--log-file",
        help="Also write log records to this file"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {AppConfig.APP_VERSION}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_environment(args.env_file)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        run_demo()
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        print(f"\n❌ Demo failed: {e}", file=sys.stderr)
        return 1

    return 0
