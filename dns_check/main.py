"""Main entry point for DNS Check."""

import argparse
import logging
import sys
import time
from typing import Sequence

from dns_check.config import Config
from dns_check.defaults import DEFAULT_DNS_SERVERS, DEFAULT_DOMAINS
from dns_check.services.list_loader import (
    load_dns_servers_from_file,
    load_domains_from_file,
)
from dns_check.services.logger import log_run_started, log_run_summary, setup_logging
from dns_check.services.orchestrator import run_dns_tests
from dns_check.services.report_renderer import (
    OUTPUT_FORMATS,
    ReportRenderer,
    write_output,
)


logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags. Unset flags fall back to the environment."""
    parser = argparse.ArgumentParser(
        prog="dns-check",
        description="Test DNS servers against a list of domains.",
        epilog=(
            "examples:\n"
            "  dns-check --list servers.txt --domains domains.txt --output results.json --format json\n"
            "  dns-check --output results.txt\n"
            "  dns-check  (uses built-in servers and domains)"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--list",
        dest="server_list",
        metavar="FILE",
        help="DNS server list file (IP per line, optional description after space)",
    )
    parser.add_argument(
        "--domains",
        dest="domain_list",
        metavar="FILE",
        help="Domain list file (domain per line, optional category after space)",
    )
    parser.add_argument(
        "--output",
        dest="output_file",
        metavar="FILE",
        help="Output file for results (default: stdout)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--timeout", type=float, help="Timeout for DNS queries in seconds (default: 15)"
    )
    parser.add_argument(
        "--workers", type=int, help="Number of concurrent workers (default: 50)"
    )
    parser.add_argument(
        "--no-progress",
        dest="show_progress",
        action="store_false",
        default=None,
        help="Do not draw the progress bar",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=None, help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 for success, 1 for fatal error).
    """
    args = parse_args(argv)
    start_time = time.time()

    try:
        config = Config.from_env().with_overrides(**vars(args))
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(config.verbose)
    logger.info("Starting DNS Check")

    try:
        if config.server_list:
            servers = load_dns_servers_from_file(config.server_list)
        else:
            servers = list(DEFAULT_DNS_SERVERS)
            logger.info("Using default DNS servers list")

        if config.domain_list:
            domains = load_domains_from_file(config.domain_list)
        else:
            domains = list(DEFAULT_DOMAINS)
            logger.info("Using default domains list")

        log_run_started(len(servers), len(domains), config.workers, config.timeout)

        report = run_dns_tests(
            servers,
            domains,
            timeout=config.timeout,
            workers=config.workers,
            show_progress=config.show_progress,
        )

        log_run_summary(report.summary, time.time() - start_time)

        write_output(
            ReportRenderer.render(report, config.output_format), config.output_file
        )
        if config.output_file:
            logger.info(f"Results written to {config.output_file}")
        return 0

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
