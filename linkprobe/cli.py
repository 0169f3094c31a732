"""
Command-line interface for linkprobe.
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Optional

from rich.console import Console
from rich.markup import escape

from linkprobe import config as env
from linkprobe.container import Container
from linkprobe.domain.check_request import CheckRequest
from linkprobe.domain.config import CheckConfig
from linkprobe.exceptions import ConfigFileError, InvalidSkipPatternError, LocalServerError
from linkprobe.services.check_config_parser import CheckConfigParser, FORMATS
from linkprobe.services.config_file_store import ConfigFileStore
from linkprobe.services.report_formatter import ConsoleReporter, to_csv, to_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BROKEN = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkprobe",
        description="Check a URL or a local directory for broken links.",
        epilog=(
            "examples:\n"
            "  linkprobe docs/\n"
            "  linkprobe https://www.example.com\n"
            "  linkprobe . --recurse\n"
            "  linkprobe . --skip www.googleapis.com\n"
            "  linkprobe . --format CSV"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("location", help="Either the URL or the path on disk to check for broken links")
    parser.add_argument("--config", help="Path to the config file to use (default: linkprobe.config.json in the working directory)")
    parser.add_argument("-r", "--recurse", action="store_true", default=None, help="Recursively follow links on the same root domain")
    parser.add_argument(
        "-s",
        "--skip",
        action="append",
        help="Space separated regular expressions of URLs to not check (repeatable)",
    )
    parser.add_argument("-f", "--format", type=str.lower, choices=FORMATS, help="Print the results as JSON or CSV")
    parser.add_argument("--silent", action="store_true", default=None, help="Only output broken links")
    parser.add_argument("--port", type=int, help="Port for the local server when checking a path on disk")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_check_config(
    config_path: Optional[str],
    store: Optional[ConfigFileStore] = None,
    parser: Optional[CheckConfigParser] = None,
) -> CheckConfig:
    """Load the explicit config file, else the default one, else an empty config."""
    store = store or ConfigFileStore()
    parser = parser or CheckConfigParser()
    path = config_path or store.find_default()
    if path is None:
        return CheckConfig()
    logger.debug("Loading config from %s", path)
    return parser.parse(config_path=path, data=store.load_dict(path))


def _split_skip(values: list[str]) -> tuple[str, ...]:
    return tuple(x for value in values for x in value.split(" ") if x)


def build_request(args: argparse.Namespace, file_config: CheckConfig) -> CheckRequest:
    """Layer command line flags over config file values."""
    recurse = args.recurse if args.recurse is not None else bool(file_config.recurse)
    skip = _split_skip(args.skip) if args.skip else file_config.skip
    port = args.port if args.port is not None else file_config.port
    if port is None:
        port = env.default_port()
    return CheckRequest(target=args.location, recurse=recurse, links_to_skip=skip, port=port)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else env.log_level()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the linkprobe CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    console = Console(highlight=False)
    error_console = Console(stderr=True, highlight=False)

    try:
        file_config = load_check_config(args.config)
        request = build_request(args, file_config)
        container = Container()
        if args.timeout is not None:
            if args.timeout <= 0:
                raise ValueError(f"--timeout must be positive, got {args.timeout}")
            container.config.HTTP_TIMEOUT.from_value(args.timeout)
        checker = container.link_checker()
    except (ConfigFileError, ValueError) as e:
        error_console.print(f"[bold red]ERROR[/bold red]: {escape(str(e))}")
        return EXIT_FATAL

    fmt = args.format or file_config.format
    silent = args.silent if args.silent is not None else bool(file_config.silent)

    # machine-readable formats keep stdout free of progress lines
    reporter = ConsoleReporter(console, silent=silent)
    listener = None if fmt else reporter

    start = time.monotonic()
    if not fmt and not silent:
        console.print(f"Crawling {escape(request.target)}")
    try:
        report = checker.check(request, listener=listener)
    except (InvalidSkipPatternError, LocalServerError) as e:
        error_console.print(f"[bold red]ERROR[/bold red]: {escape(str(e))}")
        return EXIT_FATAL
    elapsed = time.monotonic() - start

    if fmt == "json":
        sys.stdout.write(to_json(report) + "\n")
    elif fmt == "csv":
        sys.stdout.write(to_csv(report))
    else:
        reporter.summary(report, elapsed, error_console)

    return EXIT_OK if report.passed else EXIT_BROKEN


if __name__ == "__main__":
    raise SystemExit(main())
