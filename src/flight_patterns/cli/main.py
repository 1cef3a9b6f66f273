"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with application services
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional

from flight_patterns import __version__
from flight_patterns.cli.formatters import format_output
from flight_patterns.domain.core.exceptions import DomainException
from flight_patterns.infrastructure.logging.logger import get_logger

OUTPUT_FORMATS = ["json", "yaml", "table", "list"]


def build_parser() -> argparse.ArgumentParser:
    """Build the resource-action argument parser."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "flight-patterns",
        description="Flight Patterns - decorator, adapter, factory and singleton playground",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s passengers list                                   # Demo profiles
  %(prog)s passengers quote --wrap business --extra-kg 10    # Quote a business passenger
  %(prog)s passengers wraps                                  # Registered decorators
  %(prog)s friends add Burak Inner Male 39 --format table    # Add a friend
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Passengers resource
    passengers_parser = subparsers.add_parser('passengers', help='Passenger pricing profiles')
    passengers_subparsers = passengers_parser.add_subparsers(dest='action', help='Passenger actions')

    passengers_subparsers.add_parser('list', help='Show the demo standard, economic and business profiles')

    passengers_quote = passengers_subparsers.add_parser('quote', help='Quote a passenger')
    passengers_quote.add_argument('--wrap', dest='wraps', action='append', metavar='NAME',
                                  help='Decorator applied to the standard profile (repeatable, innermost first)')
    passengers_quote.add_argument('--extra-kg', type=float, help='Extra baggage weight in kilograms')
    passengers_quote.add_argument('--name', help='Passenger name')

    passengers_subparsers.add_parser('wraps', help='List registered decorators')

    # Friends resource
    friends_parser = subparsers.add_parser('friends', help='Singleton friends list')
    friends_subparsers = friends_parser.add_subparsers(dest='action', help='Friend actions')

    friends_subparsers.add_parser('list', help='List friends')

    friends_add = friends_subparsers.add_parser('add', help='Add a friend')
    friends_add.add_argument('name', help='First name')
    friends_add.add_argument('surname', help='Surname')
    friends_add.add_argument('genre', help='Genre')
    friends_add.add_argument('age', type=int, help='Age')

    friends_delete = friends_subparsers.add_parser('delete', help='Delete a friend by position')
    friends_delete.add_argument('index', type=int, help='Zero-based position in the list')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    # Import command handlers here to avoid circular imports
    from flight_patterns.interface.command_handlers import COMMAND_HANDLERS

    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValueError(f"Unknown command: {args.resource} {args.action}")

    handler = COMMAND_HANDLERS[handler_key](app)
    return handler.handle(args)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.")
            sys.exit(1)

        if not args.action:
            print(f"Error: No action specified for {args.resource}. Use --help for usage information.")
            sys.exit(1)

        # Initialize application
        try:
            from flight_patterns.bootstrap import create_application
            app = create_application(args.config, args.log_level)
        except DomainException as e:
            logger.error("Failed to initialize application", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)
            formatted_output = format_output(result, args.format)

            if args.output:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output)
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
