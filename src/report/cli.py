"""Command-line entry point for the README generator."""
import argparse
import sys
from typing import List, Optional

from src.shared.config import Config
from src.shared.logging import LoggingManager

from .exceptions import ReportError, ReportWriteError
from .runner import ReportRunner


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the benchmark README from the latest results")
    parser.add_argument("output", nargs="?", help="Path of the README to write (default: README.md)")
    parser.add_argument("--results-dir", help="Directory containing benchmark_*.json files")
    parser.add_argument("--csv", dest="csv_path", help="Also export the ranked comparison to this CSV file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    overrides = {}
    if args.results_dir:
        overrides["results_dir"] = args.results_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = Config(**overrides)

    LoggingManager.setup_logging(config.log_level)

    try:
        output_path = ReportRunner(config).run(args.output, args.csv_path)
    except ReportWriteError as e:
        print(f"Error writing README: {e}", file=sys.stderr)
        return 1
    except ReportError as e:
        print(f"Error loading results: {e}", file=sys.stderr)
        return 1

    print(f"README generated successfully: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
