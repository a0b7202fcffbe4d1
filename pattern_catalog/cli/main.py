"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Exit code mapping for catalog errors
"""
import argparse
import os
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional

from pattern_catalog import __version__
from pattern_catalog._package import DESCRIPTION
from pattern_catalog.application.demo_runner import DemoRunner
from pattern_catalog.cli.formatters import format_output
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import LoggingConfig, OutputFormat
from pattern_catalog.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    NotFoundError,
)
from pattern_catalog.domain.principles import get_principle, list_principles
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry.pattern_registry import get_pattern_registry

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

FORMAT_CHOICES = [f.value for f in OutputFormat]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-catalog",
        description=f"Pattern Catalog - {DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                      # List all patterns in registration order
  %(prog)s run observer              # Run one demo
  %(prog)s run --all                 # Run every demo with a header per pattern
  %(prog)s show builder              # Describe one pattern
  %(prog)s --format table list       # Display patterns as a table
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', action='store_true', help='Show tracebacks for unexpected errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', metavar='command')
    subparsers.required = True

    subparsers.add_parser('list', help='List registered patterns')

    run_parser = subparsers.add_parser('run', help='Run one demo or all of them')
    run_target = run_parser.add_mutually_exclusive_group(required=True)
    run_target.add_argument('name', nargs='?', help='Pattern to run')
    run_target.add_argument('--all', action='store_true', help='Run every demo in registration order')

    show_parser = subparsers.add_parser('show', help='Describe one pattern')
    show_parser.add_argument('name', help='Pattern to describe')

    principles_parser = subparsers.add_parser('principles', help='List the SOLID principles')
    principles_parser.add_argument('key', nargs='?', help='Letter or name of a single principle')

    return parser.parse_args(argv)


def _normalize(name: str) -> str:
    return name.strip().lower()


def handle_list(args: argparse.Namespace, runner: DemoRunner) -> Dict[str, Any]:
    return {"patterns": [demo.summary() for demo in runner.registry.demos()]}


def handle_run(args: argparse.Namespace, runner: DemoRunner) -> Dict[str, Any]:
    if args.all:
        results = runner.run_all()
        rendered = runner.render(results)
    else:
        results = [runner.run_one(_normalize(args.name))]
        rendered = runner.concatenate(results)
    return {
        "results": [result.to_dict() for result in results],
        "_text": rendered,
    }


def handle_show(args: argparse.Namespace, runner: DemoRunner) -> Dict[str, Any]:
    return {"pattern": runner.registry.get(_normalize(args.name)).summary()}


def handle_principles(args: argparse.Namespace, runner: DemoRunner) -> Dict[str, Any]:
    if args.key:
        principles = [get_principle(args.key)]
    else:
        principles = list_principles()
    return {"principles": [principle.to_dict() for principle in principles]}


COMMAND_HANDLERS: Dict[str, Callable[[argparse.Namespace, DemoRunner], Dict[str, Any]]] = {
    'list': handle_list,
    'run': handle_run,
    'show': handle_show,
    'principles': handle_principles,
}


def execute_command(args: argparse.Namespace, runner: DemoRunner) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler = COMMAND_HANDLERS.get(args.command)
    if handler is None:
        raise ValueError(f"Unknown command: {args.command}")
    return handler(args, runner)


def _configure(args: argparse.Namespace) -> ConfigurationManager:
    config_manager = ConfigurationManager(args.config)
    logging_config = config_manager.logging
    if args.log_level:
        logging_config = LoggingConfig.model_validate(
            {**logging_config.model_dump(), "level": args.log_level}
        )
    setup_logging(logging_config)
    return config_manager


def _error(message: str, args: argparse.Namespace) -> None:
    if not args.quiet:
        print(f"Error: {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    args = parse_args(argv)

    try:
        try:
            config_manager = _configure(args)
        except ConfigurationError as e:
            _error(str(e), args)
            return EXIT_ERROR

        logger = get_logger(__name__)

        try:
            # Duplicate registrations surface here, before any demo runs
            runner = DemoRunner(get_pattern_registry(), config_manager.runner)
            result = execute_command(args, runner)
        except NotFoundError as e:
            logger.info(f"Not found: {e}")
            _error(str(e), args)
            return EXIT_NOT_FOUND
        except DomainException as e:
            logger.error(f"Domain error: {e}")
            _error(str(e), args)
            return EXIT_ERROR
        except Exception as e:
            logger.error(f"Unexpected error: {e}")
            if args.verbose:
                traceback.print_exc()
            _error(f"Unexpected error: {e}", args)
            return EXIT_ERROR

        output_format = args.format or config_manager.output.format.value
        formatted_output = format_output(result, output_format)

        if args.output:
            try:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(formatted_output + "\n")
            except OSError as e:
                logger.error(f"Cannot write output file: {e}")
                _error(f"Cannot write output file {args.output}: {e}", args)
                return EXIT_ERROR
            if not args.quiet:
                print(f"Output written to {args.output}", file=sys.stderr)
        else:
            print(formatted_output)

        return EXIT_OK

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return EXIT_INTERRUPTED


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
