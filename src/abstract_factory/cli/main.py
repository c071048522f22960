"""
Main CLI module with argument parsing and command execution.

Without arguments the CLI runs the client code once with each of the two
demonstration factory types.
"""
import argparse
import os
import sys
from typing import List, Optional

from abstract_factory._package import DESCRIPTION, PACKAGE_NAME, __version__
from abstract_factory.domain.base.exceptions import DomainException
from abstract_factory.infrastructure.logging import get_logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else PACKAGE_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                         # Run the client with both factory types
  %(prog)s --factory 2             # Run the client with factory 2 only
  %(prog)s --list-factories        # List registered factories
  %(prog)s --log-level DEBUG       # Show product creation in the log
        """,
    )

    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, type=str.upper, help="Set logging level"
    )
    parser.add_argument("--factory", help="Run the client code with a single named factory")
    parser.add_argument(
        "--list-factories", action="store_true", help="List registered factory names"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    logger = get_logger(__name__)
    try:
        args = parse_args(argv)

        from abstract_factory.bootstrap import create_application

        try:
            app = create_application(args.config, args.log_level)

            if args.list_factories:
                for name in app.list_factories():
                    print(name)
            elif args.factory is not None:
                app.run_factory(args.factory)
            else:
                app.run_demo()

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            print(f"Error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
