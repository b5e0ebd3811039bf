# digest_log/cli.py
import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .analyzers.summary import SummaryReporter
from .config import DEFAULT_ENCODING, SAMPLE_SIZE, TOP_ERRORS_DISPLAYED
from .core import LogReader, Severity, SourceUnreadableError
from .parsers import FormatDetector
from .pipeline import LogPipeline

logger = logging.getLogger("digest_log")


def parse_level(value: str) -> Severity:
    name = value.strip().upper()
    if name != "WARN" and name not in Severity.__members__:
        names = ", ".join(s.name for s in Severity)
        raise argparse.ArgumentTypeError(f"unknown level '{value}' (choose from {names})")
    return Severity.from_token(name)


def parse_date(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD[ HH:MM:SS]")


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Log error summary tool")
    parser.add_argument("log_path", type=Path, help="Path to the log file")
    parser.add_argument(
        "-l", "--level", type=parse_level, help="Only keep entries at this level and above"
    )
    parser.add_argument(
        "-p", "--pattern", help="Only keep entries whose message matches this regex"
    )
    parser.add_argument(
        "-s", "--start-date", type=parse_date, help="Only keep entries at or after this date/time"
    )
    parser.add_argument(
        "-e", "--end-date", type=parse_date, help="Only keep entries at or before this date/time"
    )
    parser.add_argument(
        "--sample-size",
        type=positive_int,
        default=SAMPLE_SIZE,
        help=f"Entries sampled for format detection (default: {SAMPLE_SIZE})",
    )
    parser.add_argument(
        "--top",
        type=positive_int,
        default=TOP_ERRORS_DISPLAYED,
        help=f"Number of error groups to show (default: {TOP_ERRORS_DISPLAYED})",
    )
    parser.add_argument(
        "--group-by-source",
        action="store_true",
        help="Count errors per source name instead of per hour",
    )
    parser.add_argument(
        "--encoding", default=DEFAULT_ENCODING, help=f"File encoding (default: {DEFAULT_ENCODING})"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def run_analysis(args: argparse.Namespace) -> None:
    """Run the pipeline on one file and report the result"""
    pipeline = LogPipeline(
        reader=LogReader(encoding=args.encoding),
        detector=FormatDetector(sample_size=args.sample_size),
        group_errors_by_source=args.group_by_source,
    )
    result = pipeline.run(
        args.log_path,
        min_severity=args.level,
        pattern=args.pattern,
        start=args.start_date,
        end=args.end_date,
    )

    if result.stats.dropped:
        logger.warning("%d entries dropped due to unreadable timestamps", result.stats.dropped)

    reporter = SummaryReporter()
    reporter.generate_report(result.analysis, top=args.top)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        run_analysis(args)
    except SourceUnreadableError as e:
        logger.error("%s", e)
        return 1
    except ValueError as e:
        logger.error("Error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Analysis stopped by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
